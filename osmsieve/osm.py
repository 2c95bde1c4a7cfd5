"""Plain records for OSM nodes, ways, relations and turn restrictions."""

from __future__ import annotations

from dataclasses import dataclass, field

OsmId = int
AttrMap = dict[str, str]
Attr = tuple[str, str]


@dataclass
class OsmRel:
    """An OSM relation with its kept tags and members."""

    id: OsmId = 0
    attrs: AttrMap = field(default_factory=dict)
    nodes: list[OsmId] = field(default_factory=list)
    ways: list[OsmId] = field(default_factory=list)
    node_roles: list[str] = field(default_factory=list)
    way_roles: list[str] = field(default_factory=list)
    keep_flags: int = 0
    drop_flags: int = 0


@dataclass
class OsmWay:
    """An OSM way with its kept tags and node references."""

    id: OsmId = 0
    attrs: AttrMap = field(default_factory=dict)
    nodes: list[OsmId] = field(default_factory=list)
    keep_flags: int = 0
    drop_flags: int = 0


@dataclass
class OsmNode:
    """An OSM node with position and kept tags."""

    id: OsmId = 0
    lat: float = 0.0
    lng: float = 0.0
    attrs: AttrMap = field(default_factory=dict)
    keep_flags: int = 0
    drop_flags: int = 0


@dataclass(frozen=True)
class Restriction:
    """A turn restriction from one way to another."""

    e_from: OsmId
    e_to: OsmId


@dataclass
class Restrictions:
    """Positive and negative turn restrictions keyed by the via node."""

    pos: dict[OsmId, list[Restriction]] = field(default_factory=dict)
    neg: dict[OsmId, list[Restriction]] = field(default_factory=dict)