"""Turn restrictions between graph edges at via nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Protocol

from osmsieve.osm import OsmId


class EdgeLike(Protocol):
    """A directed graph edge as seen by the restrictor."""

    from_node: Any
    to_node: Any


@dataclass(eq=False)
class _Rule:
    from_edge: EdgeLike | None
    to_edge: EdgeLike | None


class Restrictor:
    """Stores positive and negative turn restrictions between edges.

    Edges are compared by identity; they need ``from_node`` and
    ``to_node`` attributes. Nodes may be any hashable objects.
    """

    def __init__(self) -> None:
        self._pos: dict[Hashable, list[_Rule]] = {}
        self._neg: dict[Hashable, list[_Rule]] = {}
        self._rlx: dict[tuple[Hashable, OsmId], EdgeLike] = {}
        self._pos_dangling: dict[tuple[Hashable, OsmId], list[tuple[Hashable, int]]] = {}
        self._neg_dangling: dict[tuple[Hashable, OsmId], list[tuple[Hashable, int]]] = {}

    def relax(self, wid: OsmId, node: Hashable, edge: EdgeLike) -> None:
        """Bind the edge of way wid at node, resolving pending rules to it."""
        # Way ids are not unique per edge since ways are split; the pair
        # of via node and way id is.
        key = (node, wid)
        self._rlx[key] = edge
        for via, idx in self._pos_dangling.get(key, ()):
            self._pos[via][idx].to_edge = edge
        for via, idx in self._neg_dangling.get(key, ()):
            self._neg[via][idx].to_edge = edge

    def add(
        self, from_edge: EdgeLike, to_way: OsmId, via: Hashable, positive: bool
    ) -> None:
        """Add a rule from from_edge at via to the edge of way to_way."""
        key = (via, to_way)
        to_edge = self._rlx.get(key)
        rules, dangling = (
            (self._pos, self._pos_dangling) if positive else (self._neg, self._neg_dangling)
        )
        at_via = rules.setdefault(via, [])
        at_via.append(_Rule(from_edge, to_edge))
        if to_edge is None:
            dangling.setdefault(key, []).append((via, len(at_via) - 1))

    def may(self, from_edge: EdgeLike, to_edge: EdgeLike, via: Hashable) -> bool:
        """Whether turning from from_edge to to_edge at via is allowed."""
        for rule in self._pos.get(via, ()):
            if rule.from_edge is from_edge:
                if rule.to_edge is not None and rule.to_edge is not to_edge:
                    return False
                if rule.to_edge is to_edge:
                    return True
        return not any(
            rule.from_edge is from_edge and rule.to_edge is to_edge
            for rule in self._neg.get(via, ())
        )

    def replace_edge(self, old: EdgeLike, new_a: EdgeLike, new_b: EdgeLike) -> None:
        """Replace old, split into new_a and new_b, in all rules at its ends."""
        if old.from_node is new_a.from_node or old.from_node is new_a.to_node:
            new_from, new_to = new_a, new_b
        else:
            new_from, new_to = new_b, new_a
        self._replace_at(old, old.from_node, new_from)
        self._replace_at(old, old.to_node, new_to)

    def duplicate_edge(self, old: EdgeLike, new_edge: EdgeLike) -> None:
        """Let new_edge, the reverse of old, take old's place where it fits."""
        self._duplicate_at(old, old.from_node, new_edge)
        self._duplicate_at(old, old.to_node, new_edge)

    def _rules_at(self, via: Hashable) -> list[_Rule]:
        return [*self._pos.get(via, ()), *self._neg.get(via, ())]

    def _duplicate_at(self, old: EdgeLike, via: Hashable, new_edge: EdgeLike) -> None:
        for rule in self._rules_at(via):
            if rule.from_edge is old and old.to_node is not via:
                rule.from_edge = new_edge
            if rule.to_edge is old and old.from_node is not via:
                rule.to_edge = new_edge

    def _replace_at(self, old: EdgeLike, via: Hashable, new_edge: EdgeLike) -> None:
        for rule in self._rules_at(via):
            if rule.from_edge is old:
                rule.from_edge = new_edge
            if rule.to_edge is old:
                rule.to_edge = new_edge