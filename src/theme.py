"""Color & style helpers.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Palette overrides via REMINDERS_PRIMARY / REMINDERS_ACCENT / REMINDERS_MUTED
  (environment or project .env file).
- Background swatches come from BackgroundColor hex values.
"""
from __future__ import annotations
import os, sys

from config import read_env_file

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _cube_index(r: int, g: int, b: int) -> int:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    return 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)

def _from_hex(hex_code: str, layer: int = 38) -> str:
    """ANSI sequence for a hex color; layer 38 = foreground, 48 = background."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return f"\033[{layer};2;{r};{g};{b}m"
    return f"\033[{layer};5;{_cube_index(r, g, b)}m"

def contrast_hex(hex_code: str) -> str:
    """Black or white text, whichever reads better on the given backdrop."""
    r, g, b = _hex_to_rgb(hex_code)
    luminance = 0.299 * r + 0.587 * g + 0.114 * b
    return '#000000' if luminance > 150 else '#FFFFFF'

RESET = _code('0')
BOLD = _code('1')
DIM = _code('2')
REVERSE = _code('7')

# Default palette
HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_ACCENT_DEFAULT = '#48B3AF'
HEX_MUTED_DEFAULT = '#8E8E93'

_ENV_OVERRIDES = {k: '#' + v.lstrip('#') for k, v in read_env_file().items()
                  if k in {'REMINDERS_PRIMARY', 'REMINDERS_ACCENT', 'REMINDERS_MUTED'} and _is_hex(v)}

def _resolve(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return _ENV_OVERRIDES.get(key, default)

HEX_PRIMARY = _resolve('REMINDERS_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_ACCENT = _resolve('REMINDERS_ACCENT', HEX_ACCENT_DEFAULT)
HEX_MUTED = _resolve('REMINDERS_MUTED', HEX_MUTED_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
ACCENT = _from_hex(HEX_ACCENT)

HEADER_COLOR = PRIMARY
INDEX_COLOR = PRIMARY + BOLD
SELECTED_COLOR = ACCENT + BOLD + REVERSE
EMPTY_COLOR = DIM + _from_hex(HEX_MUTED)

def background(hex_code: str) -> str:
    """Background fill plus readable foreground for a swatch."""
    return _from_hex(hex_code, 48) + _from_hex(contrast_hex(hex_code))

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

def enabled() -> bool:
    return _ENABLE

__all__ = [
    'color','background','contrast_hex','enabled','RESET','BOLD','DIM','REVERSE',
    'HEADER_COLOR','INDEX_COLOR','SELECTED_COLOR','EMPTY_COLOR',
    'HEX_PRIMARY','HEX_ACCENT','HEX_MUTED',
]
