"""Kinship distance: shortest path ignoring edge direction."""
from __future__ import annotations

from collections import deque
from typing import Iterator, Optional

from .model import NO_PATH, Outcome
from .store import GraphStore


def kin(store: GraphStore, node_id: int) -> Iterator[int]:
    """Yield the relatives of ``node_id`` in expansion order.

    Parents come before children and each group is sorted by id, which fixes
    which of several equally short paths :func:`shortest_path` reports.
    """

    for relative in sorted(store.parents(node_id)):
        if relative != node_id:
            yield relative
    for relative in sorted(store.children(node_id)):
        if relative != node_id:
            yield relative


def shortest_path(store: GraphStore, id_a: int, id_b: int) -> list[int] | Outcome:
    """Return the fewest-links path from ``id_a`` to ``id_b`` inclusive, or :data:`NO_PATH`."""

    if not store.exists(id_a) or not store.exists(id_b):
        return NO_PATH
    if id_a == id_b:
        return [id_a]

    previous: dict[int, Optional[int]] = {id_a: None}
    queue = deque([id_a])
    while queue:
        current = queue.popleft()
        for relative in kin(store, current):
            if relative in previous:
                continue
            previous[relative] = current
            if relative == id_b:
                return _unwind(previous, id_b)
            queue.append(relative)
    return NO_PATH


def _unwind(previous: dict[int, Optional[int]], end: int) -> list[int]:
    path: list[int] = []
    node: Optional[int] = end
    while node is not None:
        path.append(node)
        node = previous[node]
    path.reverse()
    return path


__all__ = ["kin", "shortest_path"]
