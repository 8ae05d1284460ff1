"""Runtime settings for the to-do CLI.

Priority: explicit CLI option > TODO_* environment variable > default.
The defaults reproduce the base behavior: ./tasks.txt, loaded once at
start and written once on quit.
"""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_TASKS_FILE = 'tasks.txt'
DEFAULT_LOG_LEVEL = 'WARNING'


def _truthy_env(value: Optional[str], default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() not in {"0", "false", "no", "off", ""}


def parse_log_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f'Unknown log level: {value}')
    return level


@dataclass
class Settings:
    tasks_file: Path = Path(DEFAULT_TASKS_FILE)
    autosave: bool = False
    atomic_save: bool = False
    log_level: str = DEFAULT_LOG_LEVEL
    log_file: Optional[Path] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> 'Settings':
        """Build settings from `environ` (default os.environ); non-None overrides win."""
        env = os.environ if environ is None else environ
        log_file = env.get('TODO_LOG_FILE')
        settings = cls(
            tasks_file=Path(env.get('TODO_FILE') or DEFAULT_TASKS_FILE),
            autosave=_truthy_env(env.get('TODO_AUTOSAVE')),
            atomic_save=_truthy_env(env.get('TODO_ATOMIC_SAVE')),
            log_level=env.get('TODO_LOG_LEVEL') or DEFAULT_LOG_LEVEL,
            log_file=Path(log_file) if log_file else None,
        )
        for key, value in overrides.items():
            if value is None:
                continue
            if not hasattr(settings, key):
                raise TypeError(f'Unknown setting: {key}')
            if key in ('tasks_file', 'log_file'):
                value = Path(value)
            setattr(settings, key, value)
        return settings

    @property
    def level(self) -> int:
        return parse_log_level(self.log_level)
