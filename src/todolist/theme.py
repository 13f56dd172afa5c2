"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR (and --no-color) for complete disable.
- Palette overrides via TODO_PRIMARY / TODO_PENDING / TODO_DONE (#RRGGBB).

configure() re-reads the environment; main.py calls it once settings
(and any .env file) have been loaded.
"""
from __future__ import annotations
import os
import re
import sys
from typing import Dict, Optional

ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"

# Default palette
HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#A7E399'

_ENABLE = False
_USE_TRUECOLOR = False

HEADER_COLOR = ''
ID_COLOR = ''
EMPTY_COLOR = ''
ERROR_COLOR = "\033[31m"
STATUS_COLOR: Dict[bool, str] = {False: '', True: ''}


def _truthy(value: Optional[str]) -> bool:
    return (value or "").strip().lower() in {"1", "true", "yes", "on"}


def _valid_hex(value: Optional[str]) -> Optional[str]:
    if not value:
        return None
    h = value.strip().lstrip('#')
    if len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h):
        return '#' + h
    return None


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    idx = 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)
    return f"\033[38;5;{idx}m"


def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI foreground sequence."""
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[38;2;{r};{g};{b}m"
    return _fg_256(r, g, b)


def _resolve(name: str, default: str) -> str:
    return _valid_hex(os.environ.get(name)) or default


def configure(enabled: Optional[bool] = None) -> None:
    """Recompute color support and palette from the environment.

    enabled=False forces colors off; None auto-detects.
    """
    global _ENABLE, _USE_TRUECOLOR, HEADER_COLOR, ID_COLOR, EMPTY_COLOR
    force = _truthy(os.environ.get("FORCE_COLOR"))
    no_color = os.environ.get("NO_COLOR") is not None
    auto = (force or sys.stdout.isatty()) and not no_color
    _ENABLE = auto if enabled is None else (enabled and auto)
    colorterm = os.environ.get("COLORTERM", "").lower()
    _USE_TRUECOLOR = any(tok in colorterm for tok in ("truecolor", "24bit"))

    primary = _from_hex(_resolve('TODO_PRIMARY', HEX_PRIMARY_DEFAULT))
    HEADER_COLOR = primary
    ID_COLOR = primary + BOLD
    EMPTY_COLOR = DIM + primary
    STATUS_COLOR[False] = _from_hex(_resolve('TODO_PENDING', HEX_PENDING_DEFAULT))
    STATUS_COLOR[True] = _from_hex(_resolve('TODO_DONE', HEX_DONE_DEFAULT))


def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE or not styles:
        return text
    return ''.join(styles) + text + RESET


def strip_ansi(text: str) -> str:
    return ANSI_RE.sub('', text)


configure()

__all__ = [
    'color', 'configure', 'strip_ansi', 'RESET', 'BOLD', 'DIM',
    'STATUS_COLOR', 'HEADER_COLOR', 'ID_COLOR', 'EMPTY_COLOR', 'ERROR_COLOR',
]
