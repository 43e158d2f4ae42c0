"""Value types shared by the kinship graph store and its queries."""
from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Any, Iterable, NamedTuple


class Outcome:
    """Falsy singleton returned when a lookup or query has no answer."""

    __slots__ = ("label",)

    def __init__(self, label: str) -> None:
        self.label = label

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return self.label


NOT_FOUND = Outcome("NotFound")
NO_COMMON_ANCESTOR = Outcome("NoCommonAncestor")
NO_PATH = Outcome("NoPath")
QUERY_TOO_LARGE = Outcome("QueryTooLarge")


class Edge(NamedTuple):
    """Directed parent -> child link."""

    source: int
    target: int


@dataclass(frozen=True)
class PersonNode:
    """A present person in the graph."""

    id: int
    name: str
    parents: tuple[int, ...] = ()
    children: tuple[int, ...] = ()


@dataclass(frozen=True)
class Subgraph:
    """Ordered, duplicate-free set of edges returned by a query.

    ``root_ids`` records the query nodes so a subgraph with no edges still
    knows which people it is about.
    """

    edges: tuple[Edge, ...] = ()
    root_ids: tuple[int, ...] = ()

    @classmethod
    def from_edges(cls, edges: Iterable[tuple[int, int]], root_ids: Iterable[int] = ()) -> "Subgraph":
        """Build a subgraph from ``edges``, keeping the first occurrence of each pair."""

        unique = dict.fromkeys(Edge(int(source), int(target)) for source, target in edges)
        return cls(edges=tuple(unique), root_ids=tuple(root_ids))

    @property
    def nodes(self) -> set[int]:
        """Every node touched by the subgraph, query roots included."""

        touched = set(self.root_ids)
        for source, target in self.edges:
            touched.add(source)
            touched.add(target)
        return touched

    @cached_property
    def _edge_lookup(self) -> frozenset[Edge]:
        return frozenset(self.edges)

    def edge_set(self) -> set[Edge]:
        return set(self._edge_lookup)

    def __len__(self) -> int:
        return len(self.edges)

    def __bool__(self) -> bool:
        # An edgeless subgraph is still an answer; only sentinels are falsy.
        return True

    def __iter__(self):
        return iter(self.edges)

    def __contains__(self, item: object) -> bool:
        try:
            return tuple(item) in self._edge_lookup
        except TypeError:
            return False

    def to_payload(self) -> list[dict[str, Any]]:
        """Return the ``{"source", "target"}`` list consumed by renderers."""

        return [{"source": edge.source, "target": edge.target} for edge in self.edges]


__all__ = [
    "Edge",
    "NOT_FOUND",
    "NO_COMMON_ANCESTOR",
    "NO_PATH",
    "Outcome",
    "PersonNode",
    "QUERY_TOO_LARGE",
    "Subgraph",
]
