# tests/test_logging_setup.py

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from logging_setup import setup_logging


@pytest.fixture()
def restore_root():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    for h in list(root.handlers):
        root.removeHandler(h)
        if h not in handlers:
            h.close()
    for h in handlers:
        root.addHandler(h)
    root.setLevel(level)


def test_console_only(restore_root: logging.Logger) -> None:
    setup_logging(console_level=logging.INFO)

    assert len(restore_root.handlers) == 1
    assert restore_root.handlers[0].level == logging.INFO
    assert restore_root.level == logging.INFO


def test_file_handler_receives_debug(restore_root: logging.Logger, tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "todo.log"
    setup_logging(console_level=logging.WARNING, log_file=log_file)

    logging.getLogger("storage").debug("hello %s", "file")
    for h in restore_root.handlers:
        h.flush()

    assert restore_root.level == logging.DEBUG
    assert "DEBUG storage: hello file" in log_file.read_text(encoding="utf-8")


def test_repeated_setup_replaces_handlers(restore_root: logging.Logger) -> None:
    setup_logging()
    setup_logging()
    assert len(restore_root.handlers) == 1
