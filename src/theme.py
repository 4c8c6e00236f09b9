"""Color & style helpers shared by the terminal and window front-ends.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides come from TODO_PRIMARY / TODO_PENDING / TODO_DONE,
  either in the environment or in a project .env file.
"""
from __future__ import annotations
import os, sys

import settings  # noqa: F401  (loads .env before the palette is read)

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def is_hex(value: str | None) -> bool:
    if not value:
        return False
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def _hex_setting(name: str, default: str) -> str:
    raw = os.environ.get(name)
    if not is_hex(raw):
        return default
    return '#' + raw.lstrip('#').upper()

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')

# Default palette (steel blue header, teal pending, forest green done)
HEX_PRIMARY_DEFAULT = '#4682B4'
HEX_PENDING_DEFAULT = '#48B3AF'
HEX_DONE_DEFAULT = '#228B22'
HEX_ACCENT = '#FF6347'
HEX_NEUTRAL = '#A9A9A9'
HEX_BACKGROUND = '#F0F8FF'

HEX_PRIMARY = _hex_setting('TODO_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_PENDING = _hex_setting('TODO_PENDING', HEX_PENDING_DEFAULT)
HEX_DONE = _hex_setting('TODO_DONE', HEX_DONE_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
C_PENDING = _from_hex(HEX_PENDING)
C_DONE = _from_hex(HEX_DONE)
C_WARNING = _from_hex(HEX_ACCENT)

HEADER_COLOR = PRIMARY
INDEX_COLOR = PRIMARY + BOLD
EMPTY_COLOR = DIM + PRIMARY

def lighter(hex_code: str, amount: float = 0.2) -> str:
    """Blend a hex color towards white by `amount` (0..1)."""
    r, g, b = _hex_to_rgb(hex_code)
    return '#' + ''.join(f"{min(255, int(c + (255 - c) * amount)):02x}" for c in (r, g, b))

def task_color(completed: bool) -> str:
    return C_DONE if completed else C_PENDING

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = [
    'color','task_color','is_hex','lighter','RESET','BOLD','DIM','HEADER_COLOR','INDEX_COLOR','EMPTY_COLOR',
    'C_WARNING','HEX_PRIMARY','HEX_PENDING','HEX_DONE','HEX_ACCENT','HEX_NEUTRAL','HEX_BACKGROUND',
]
