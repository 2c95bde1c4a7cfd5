"""Axis-aligned boxes in longitude/latitude space and small helpers on them."""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass

_DEG_TO_RAD = 0.017453292519943295
_EARTH_RADIUS = 6378137.0


@dataclass(frozen=True)
class Box:
    """An axis-aligned box; x is longitude and y is latitude."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def lower_left(self) -> tuple[float, float]:
        return (self.min_x, self.min_y)

    @property
    def upper_right(self) -> tuple[float, float]:
        return (self.max_x, self.max_y)


def min_box() -> Box:
    """An inverted box that any real box extends into itself."""
    big = sys.float_info.max
    return Box(big, big, -big, -big)


def pad(box: Box, padding: float) -> Box:
    """The box grown by padding on every side."""
    return Box(
        box.min_x - padding,
        box.min_y - padding,
        box.max_x + padding,
        box.max_y + padding,
    )


def extend_box(a: Box, b: Box) -> Box:
    """The smallest box covering both a and b."""
    return Box(
        min(a.min_x, b.min_x),
        min(a.min_y, b.min_y),
        max(a.max_x, b.max_x),
        max(a.max_y, b.max_y),
    )


def common_area(a: Box, b: Box) -> float:
    """The area of the intersection of a and b, or 0 if they do not overlap."""
    left = max(a.min_x, b.min_x)
    right = min(a.max_x, b.max_x)
    bottom = max(a.min_y, b.min_y)
    top = min(a.max_y, b.max_y)
    if left > right or bottom > top:
        return 0.0
    return (right - left) * (top - bottom)


def box_contains(box: Box, x: float, y: float) -> bool:
    """Whether the point (x, y) lies in the box, borders included."""
    return box.min_x <= x <= box.max_x and box.min_y <= y <= box.max_y


def lat_lng_to_web_merc(lat: float, lng: float) -> tuple[float, float]:
    """Project a latitude/longitude pair to web mercator (x, y) in metres."""
    x = _EARTH_RADIUS * lng * _DEG_TO_RAD
    s = math.sin(lat * _DEG_TO_RAD)
    y = (_EARTH_RADIUS / 2) * math.log((1.0 + s) / (1.0 - s))
    return (x, y)