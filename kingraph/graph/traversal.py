"""Bounded ancestor/descendant traversals over a :class:`GraphStore`.

All walks are breadth-first over an explicit queue with a per-call visited
set, so long lineages never hit the recursion limit and malformed cyclic
input still terminates.
"""
from __future__ import annotations

from collections import deque
from typing import Callable

from .model import Edge, Subgraph
from .store import GraphStore

Neighbours = Callable[[int], tuple[int, ...]]


def _walk(root_id: int, neighbours: Neighbours) -> tuple[dict[int, int], list[tuple[int, int]]]:
    """Return BFS depths and the ``(current, neighbour)`` pairs seen from ``root_id``."""

    depths = {root_id: 0}
    links: list[tuple[int, int]] = []
    queue = deque([root_id])
    while queue:
        current = queue.popleft()
        for neighbour in neighbours(current):
            if neighbour == current:
                continue
            links.append((current, neighbour))
            if neighbour not in depths:
                depths[neighbour] = depths[current] + 1
                queue.append(neighbour)
    return depths, links


def ancestor_edges(store: GraphStore, root_id: int) -> list[Edge]:
    _, links = _walk(root_id, store.parents)
    return [Edge(parent, child) for child, parent in links]


def descendant_edges(store: GraphStore, root_id: int) -> list[Edge]:
    _, links = _walk(root_id, store.children)
    return [Edge(parent, child) for parent, child in links]


def ancestor_depths(store: GraphStore, root_id: int) -> dict[int, int]:
    """Map every node in the ancestor cone of ``root_id`` (itself included) to its generation distance."""

    if not store.exists(root_id):
        return {}
    depths, _ = _walk(root_id, store.parents)
    return depths


def ancestry_subgraph(store: GraphStore, root_id: int, parents_only: bool) -> Subgraph:
    """Return the lineage of ``root_id``.

    The ancestor half is always present. When ``parents_only`` is false the
    descendant half is unioned in after it, giving a two-sided family view.
    """

    if not store.exists(root_id):
        return Subgraph(root_ids=(root_id,))
    edges = ancestor_edges(store, root_id)
    if not parents_only:
        edges.extend(descendant_edges(store, root_id))
    return Subgraph.from_edges(edges, root_ids=(root_id,))


def _count_exceeds(root_id: int, limit: int, neighbours: Neighbours) -> bool:
    seen = {root_id}
    count = 0
    queue = deque([root_id])
    while queue:
        current = queue.popleft()
        for neighbour in neighbours(current):
            if neighbour in seen:
                continue
            seen.add(neighbour)
            count += 1
            if count > limit:
                return True
            queue.append(neighbour)
    return False


def descendants_count_exceeds(store: GraphStore, root_id: int, limit: int) -> bool:
    """Return ``True`` as soon as ``root_id`` has more than ``limit`` distinct descendants."""

    if not store.exists(root_id):
        return False
    return _count_exceeds(root_id, limit, store.children)


def ancestors_count_exceeds(store: GraphStore, root_id: int, limit: int) -> bool:
    """Return ``True`` as soon as ``root_id`` has more than ``limit`` distinct ancestors."""

    if not store.exists(root_id):
        return False
    return _count_exceeds(root_id, limit, store.parents)


__all__ = [
    "ancestor_depths",
    "ancestor_edges",
    "ancestors_count_exceeds",
    "ancestry_subgraph",
    "descendant_edges",
    "descendants_count_exceeds",
]
