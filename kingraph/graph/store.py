"""Immutable, array-backed storage for the kinship graph."""
from __future__ import annotations

import logging
import operator
from typing import Iterable, Iterator, Mapping, Optional, Sequence

import networkx as nx

from .model import NOT_FOUND, Edge, Outcome, PersonNode

LOGGER = logging.getLogger(__name__)


class InputError(ValueError):
    """Raised when the raw graph is structurally inconsistent.

    The store built from the consistent part of the input is attached as
    ``store`` so callers can keep working with it.
    """

    def __init__(
        self,
        message: str,
        *,
        store: Optional["GraphStore"] = None,
        dangling_edges: Sequence[Edge] = (),
    ) -> None:
        super().__init__(message)
        self.store = store
        self.dangling_edges = tuple(dangling_edges)


def _is_hole(name: Optional[str]) -> bool:
    return name is None or (isinstance(name, str) and not name.strip())


class GraphStore:
    """Read-only person graph indexed by integer id.

    Nodes live in a list sized to ``max(id) + 1``; gaps in the id space hold
    :data:`NOT_FOUND`. Every lookup is O(1) and returns the sentinel instead
    of raising for unknown ids.
    """

    __slots__ = ("_nodes", "_names", "_size", "dangling_edges")

    def __init__(
        self,
        nodes: Sequence[PersonNode | Outcome],
        *,
        dangling_edges: Sequence[Edge] = (),
    ) -> None:
        self._nodes = tuple(nodes)
        self._names: dict[str, int] = {}
        self._size = 0
        for node in self._nodes:
            if node is NOT_FOUND:
                continue
            self._size += 1
            self._names[node.name.strip()] = node.id
        self.dangling_edges = tuple(dangling_edges)

    @classmethod
    def build(
        cls,
        nodes: Mapping[int, Optional[str]],
        edges: Iterable[Sequence[int]],
        *,
        strict: bool = True,
    ) -> "GraphStore":
        """Construct a store from an id -> name mapping and ``(source, target)`` pairs.

        Entries with an empty or missing name are holes. Edges touching a hole
        or an undefined id are left out of the adjacency and reported: with
        ``strict`` an :class:`InputError` carrying the usable store is raised,
        otherwise they are only logged and kept on ``dangling_edges``.
        """

        present: dict[int, str] = {}
        max_id = -1
        for raw_id, name in nodes.items():
            node_id = int(raw_id)
            if node_id < 0:
                raise InputError(f"Node ids must be non-negative, got {node_id}")
            max_id = max(max_id, node_id)
            if not _is_hole(name):
                present[node_id] = str(name)

        parents: dict[int, dict[int, None]] = {node_id: {} for node_id in present}
        children: dict[int, dict[int, None]] = {node_id: {} for node_id in present}
        dangling: list[Edge] = []
        for pair in edges:
            source, target = (int(value) for value in pair)
            if source not in present or target not in present:
                dangling.append(Edge(source, target))
                continue
            # dict keys keep first-seen order and drop repeated edges
            children[source][target] = None
            parents[target][source] = None

        slots: list[PersonNode | Outcome] = [NOT_FOUND] * (max_id + 1)
        for node_id, name in present.items():
            slots[node_id] = PersonNode(
                id=node_id,
                name=name,
                parents=tuple(parents[node_id]),
                children=tuple(children[node_id]),
            )

        store = cls(slots, dangling_edges=dangling)
        LOGGER.debug("Built graph store with %d people over %d slots", len(store), len(slots))
        if dangling:
            LOGGER.warning(
                "Ignoring %d edge(s) that reference undefined people, first: %s",
                len(dangling),
                dangling[0],
            )
            if strict:
                raise InputError(
                    f"{len(dangling)} edge(s) reference undefined people, first: "
                    f"{dangling[0].source} -> {dangling[0].target}",
                    store=store,
                    dangling_edges=dangling,
                )
        return store

    # -- lookups ----------------------------------------------------------

    def get(self, node_id: int) -> PersonNode | Outcome:
        """Return the node for ``node_id`` or :data:`NOT_FOUND`."""

        if isinstance(node_id, bool):
            return NOT_FOUND
        try:
            node_id = operator.index(node_id)
        except TypeError:
            return NOT_FOUND
        if node_id < 0 or node_id >= len(self._nodes):
            return NOT_FOUND
        return self._nodes[node_id]

    def exists(self, node_id: int) -> bool:
        return self.get(node_id) is not NOT_FOUND

    def parents(self, node_id: int) -> tuple[int, ...]:
        node = self.get(node_id)
        return node.parents if node else ()

    def children(self, node_id: int) -> tuple[int, ...]:
        node = self.get(node_id)
        return node.children if node else ()

    def name(self, node_id: int) -> str | Outcome:
        node = self.get(node_id)
        return node.name if node else NOT_FOUND

    def find(self, name: str) -> int | Outcome:
        """Return the id registered for the exact display ``name``."""

        if not isinstance(name, str):
            return NOT_FOUND
        return self._names.get(name.strip(), NOT_FOUND)

    # -- iteration --------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __contains__(self, node_id: object) -> bool:
        return self.exists(node_id)

    def ids(self) -> Iterator[int]:
        """Iterate present ids in ascending order."""

        for node in self._nodes:
            if node is not NOT_FOUND:
                yield node.id

    def edges(self) -> Iterator[Edge]:
        """Iterate every stored parent -> child edge."""

        for node in self._nodes:
            if node is NOT_FOUND:
                continue
            for child in node.children:
                yield Edge(node.id, child)

    def to_networkx(self) -> nx.DiGraph:
        """Return a :class:`networkx.DiGraph` copy with ``name`` node attributes."""

        graph = nx.DiGraph()
        for node_id in self.ids():
            graph.add_node(node_id, name=self._nodes[node_id].name)
        graph.add_edges_from(self.edges())
        return graph


__all__ = ["GraphStore", "InputError"]
