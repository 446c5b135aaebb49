"""Color & style helpers for the curses board.

Decisions:
- Palette is given in hex; converted to the xterm 256-color cube, or to the
  8 basic curses colors on terminals that lack 256.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file
  (priority: real env var > .env override > default).
- Severity colors follow the usual log convention and are not configurable.
"""
from __future__ import annotations
import curses
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = not _NO_COLOR

# Default palette
HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_TODO_DEFAULT = '#48B3AF'
HEX_UPNEXT_DEFAULT = '#A7E399'
HEX_INPROGRESS_DEFAULT = '#F6FF99'
HEX_ACTIVE_DEFAULT = '#FFD75F'

PALETTE_KEYS = ('KANBAN_PRIMARY', 'KANBAN_TODO', 'KANBAN_UPNEXT', 'KANBAN_INPROGRESS', 'KANBAN_ACTIVE')


def _is_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)


def _hex_to_rgb(hex_code: str) -> tuple[int, int, int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def _to_256(hex_code: str) -> int:
    """Approximate RGB to xterm 256-color cube index."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r, g, b = _hex_to_rgb(hex_code)
    return 16 + 36 * to_6(r) + 6 * to_6(g) + to_6(b)


def _to_basic(hex_code: str) -> int:
    """Nearest of the 8 basic curses colors (bit 0 red, bit 1 green, bit 2 blue)."""
    r, g, b = _hex_to_rgb(hex_code)
    return (r > 127) * 1 + (g > 127) * 2 + (b > 127) * 4


def load_env_file(path: Path) -> dict[str, str]:
    """Read palette overrides from a KEY=VALUE file; invalid lines are skipped."""
    overrides: dict[str, str] = {}
    if not path.exists():
        return overrides
    try:
        text = path.read_text()
    except OSError as exc:
        logger.warning("could not read %s: %s", path, exc)
        return overrides
    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        k, v = line.split('=', 1)
        k = k.strip()
        v = v.strip()
        if k in PALETTE_KEYS and _is_hex(v):
            overrides[k] = '#' + v.lstrip('#')
    return overrides


_ENV_OVERRIDES = load_env_file(Path(__file__).resolve().parent.parent / '.env')


def _resolve(key: str, default: str) -> str:
    value = os.environ.get(key)
    if value and _is_hex(value):
        return '#' + value.lstrip('#')
    return _ENV_OVERRIDES.get(key, default)


HEX_PRIMARY = _resolve('KANBAN_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_TODO = _resolve('KANBAN_TODO', HEX_TODO_DEFAULT)
HEX_UPNEXT = _resolve('KANBAN_UPNEXT', HEX_UPNEXT_DEFAULT)
HEX_INPROGRESS = _resolve('KANBAN_INPROGRESS', HEX_INPROGRESS_DEFAULT)
HEX_ACTIVE = _resolve('KANBAN_ACTIVE', HEX_ACTIVE_DEFAULT)

# role -> curses pair number, filled by init_colors()
_PAIRS: dict[str, int] = {}


def init_colors() -> bool:
    """Register color pairs for every role. Must run after curses.initscr().

    Returns False (and leaves every role uncolored) when colors are disabled
    or unsupported.
    """
    _PAIRS.clear()
    if not _ENABLE or not curses.has_colors():
        return False
    curses.start_color()
    try:
        curses.use_default_colors()
        default_bg = -1
    except curses.error:
        default_bg = curses.COLOR_BLACK
    convert = _to_256 if curses.COLORS >= 256 else _to_basic
    active = convert(HEX_ACTIVE)
    roles = {
        'header': (convert(HEX_PRIMARY), default_bg),
        'todo': (convert(HEX_TODO), default_bg),
        'up-next': (convert(HEX_UPNEXT), default_bg),
        'in-progress': (convert(HEX_INPROGRESS), default_bg),
        'active': (curses.COLOR_BLACK, active),
        'highlight': (curses.COLOR_BLACK, active),
        'INFO': (curses.COLOR_BLUE, default_bg),
        'WARNING': (curses.COLOR_YELLOW, default_bg),
        'ERROR': (curses.COLOR_MAGENTA, default_bg),
        'CRITICAL': (curses.COLOR_RED, default_bg),
    }
    for number, (role, (fg, bg)) in enumerate(roles.items(), start=1):
        curses.init_pair(number, fg, bg)
        _PAIRS[role] = number
    logger.debug("initialised %d color pairs (%d colors)", len(_PAIRS), curses.COLORS)
    return True


def colored() -> bool:
    """True once init_colors() has registered pairs."""
    return bool(_PAIRS)


def attr(role: str, *extra: int) -> int:
    """Curses attribute for a role, OR-ed with any extra attributes."""
    value = curses.color_pair(_PAIRS[role]) if role in _PAIRS else 0
    for e in extra:
        value |= e
    return value


__all__ = [
    'attr', 'colored', 'init_colors', 'load_env_file',
    'HEX_PRIMARY', 'HEX_TODO', 'HEX_UPNEXT', 'HEX_INPROGRESS', 'HEX_ACTIVE', '_ENABLE'
]
