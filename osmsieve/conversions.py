"""Conversions of OSM tag values and edge costs."""

from __future__ import annotations

import logging
import math

_log = logging.getLogger(__name__)

_UINT32_MAX = 0xFFFFFFFF

_NAMED_COLORS = {
    "BLACK": 0x00000000,
    "SILVER": 0x00C0C0C0,
    "GRAY": 0x00808080,
    "WHITE": 0x00FFFFFF,
    "MAROON": 0x00800000,
    "RED": 0x00FF0000,
    "PURPLE": 0x00800080,
    "FUCHSIA": 0x00FF00FF,
    "GREEN": 0x00008000,
    "LIME": 0x0000FF00,
    "OLIVE": 0x00808000,
    "YELLOW": 0x00FFFF00,
    "NAVY": 0x00000080,
    "BLUE": 0x000000FF,
    "TEAL": 0x00008080,
    "AQUA": 0x0000FFFF,
}

_HEX_DIGITS = frozenset("0123456789ABCDEF")


def parse_hex_color(s: str) -> int | None:
    """Parse "#RRGGBB", "#RGB" or a basic HTML color name, case-insensitively.

    Returns None if a "#" form holds a character that is not a hex digit.
    Anything else that is not recognised yields 0.
    """
    s = s.upper()
    if s.startswith("#") and len(s) in (4, 7):
        digits = s[1:]
        if not all(ch in _HEX_DIGITS for ch in digits):
            return None
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        return int(digits, 16)
    return _NAMED_COLORS.get(s, 0)


def cost_to_int(c: float) -> int:
    """Convert a cost in seconds to tenths of seconds, rounding upwards.

    Rounding up keeps path costs from dropping below the routing
    heuristic, which rounds down. Values beyond 32 bits are capped.
    """
    scaled = c * 10
    if scaled > _UINT32_MAX:
        _log.debug(
            "Cost %s does not fit in unsigned 32 bit integer, defaulting to %d.",
            c,
            _UINT32_MAX,
        )
        return _UINT32_MAX
    return math.ceil(scaled)