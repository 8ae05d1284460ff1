"""Color & style helpers.

Decisions:
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Truecolor preferred; falls back to the 256-color cube if unsupported.
- Palette overrides via TODO_COLOR_* environment variables (hex codes).
"""
from __future__ import annotations
import os, sys

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    return f"\033[{part}m" if _ENABLE else ''

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    return f"\033[38;5;{16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)}m"

def _from_hex(hex_code: str) -> str:
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)

def _palette(env_key: str, default: str) -> str:
    """Resolve a palette entry: valid env override, else default."""
    value = os.environ.get(env_key, '').strip()
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return default

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

HEX_PRIMARY = _palette('TODO_COLOR_PRIMARY', '#476EAE')
HEX_PENDING = _palette('TODO_COLOR_PENDING', '#48B3AF')
HEX_DONE = _palette('TODO_COLOR_DONE', '#A7E399')
HEX_ERROR = _palette('TODO_COLOR_ERROR', '#E06C75')

PRIMARY = _from_hex(HEX_PRIMARY)

HEADER_COLOR = PRIMARY
INDEX_COLOR = PRIMARY + BOLD
PENDING_COLOR = _from_hex(HEX_PENDING)
DONE_COLOR = _from_hex(HEX_DONE)
ERROR_COLOR = _from_hex(HEX_ERROR)
EMPTY_COLOR = DIM + PRIMARY

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color', 'RESET', 'BOLD', 'DIM', 'HEADER_COLOR', 'INDEX_COLOR', 'PENDING_COLOR',
    'DONE_COLOR', 'ERROR_COLOR', 'EMPTY_COLOR', 'HEX_PRIMARY', 'HEX_PENDING', 'HEX_DONE',
    'HEX_ERROR', '_ENABLE',
]
