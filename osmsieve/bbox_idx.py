"""A small hierarchical index of bounding boxes."""

from __future__ import annotations

from dataclasses import dataclass, field

from osmsieve.geo import (
    Box,
    box_contains,
    common_area,
    extend_box,
    lat_lng_to_web_merc,
    min_box,
    pad,
)

_MAX_LVL = 5
_MIN_COM_AREA = 0.0
# Metres per degree used to turn the padding into degrees; roughly right
# around latitude 25, good enough away from the poles.
_METRES_PER_DEG = 83000


@dataclass
class _IdxNode:
    box: Box = field(default_factory=min_box)
    children: list[_IdxNode] = field(default_factory=list)


class BBoxIdx:
    """A poor man's R-tree over latitude/longitude boxes."""

    def __init__(self, padding: float) -> None:
        self._padding = padding
        self._size = 0
        self._root = _IdxNode()

    def add(self, box: Box) -> None:
        """Add a box, padded by the index's padding in metres."""
        padded = pad(box, self._padding / _METRES_PER_DEG)
        self._add_to_tree(padded)
        self._size += 1

    def __len__(self) -> int:
        return self._size

    def contains(self, x: float, y: float) -> bool:
        """Whether the point (x=longitude, y=latitude) lies in the index."""
        node = self._root
        while node.children:
            node = next(
                (child for child in node.children if box_contains(child.box, x, y)),
                None,
            )
            if node is None:
                return False
        return box_contains(node.box, x, y)

    def full_box(self) -> Box:
        """The total bounding box of everything added."""
        return self._root.box

    def full_web_merc_box(self) -> Box:
        """The total bounding box projected to web mercator."""
        box = self._root.box
        ll_x, ll_y = lat_lng_to_web_merc(box.min_y, box.min_x)
        ur_x, ur_y = lat_lng_to_web_merc(box.max_y, box.max_x)
        return Box(ll_x, ll_y, ur_x, ur_y)

    def leafs(self) -> list[Box]:
        """The boxes of all leaf nodes, depth first."""
        result: list[Box] = []
        stack = [self._root]
        while stack:
            node = stack.pop()
            if not node.children:
                result.append(node.box)
            else:
                stack.extend(reversed(node.children))
        return result

    def _add_to_tree(self, box: Box) -> None:
        node = self._root
        for lvl in range(_MAX_LVL + 1):
            node.box = extend_box(box, node.box)
            if lvl == _MAX_LVL:
                return
            best = None
            best_area = 0.0
            for child in node.children:
                area = common_area(box, child.box)
                if area > _MIN_COM_AREA and area > best_area:
                    best, best_area = child, area
            if best is None:
                best = _IdxNode(box)
                node.children.append(best)
            node = best