"""Common ancestry between two people."""
from __future__ import annotations

import logging
from collections import defaultdict, deque
from typing import Iterable

from .model import NO_COMMON_ANCESTOR, Edge, Outcome, Subgraph
from .store import GraphStore
from .traversal import ancestor_edges, ancestor_depths

LOGGER = logging.getLogger(__name__)


def common_ancestors(store: GraphStore, id_a: int, id_b: int) -> dict[int, tuple[int, int]]:
    """Return each shared ancestor mapped to its ``(depth from a, depth from b)``.

    Each person counts as part of their own ancestor cone, so a direct
    ancestor of the other person is itself a common ancestor.
    """

    depths_a = ancestor_depths(store, id_a)
    depths_b = ancestor_depths(store, id_b)
    shared = depths_a.keys() & depths_b.keys()
    return {node_id: (depths_a[node_id], depths_b[node_id]) for node_id in sorted(shared)}


def _connected_edges(edges: Iterable[Edge], shared: Iterable[int]) -> list[Edge]:
    """Keep the edges that lie on a path leading down from a shared ancestor."""

    edges = list(edges)
    below: dict[int, list[int]] = defaultdict(list)
    for source, target in edges:
        below[source].append(target)

    reached = set(shared)
    queue = deque(reached)
    while queue:
        current = queue.popleft()
        for child in below.get(current, ()):
            if child not in reached:
                reached.add(child)
                queue.append(child)
    return [edge for edge in edges if edge.source in reached]


def common_ancestry_subgraph(store: GraphStore, id_a: int, id_b: int) -> Subgraph | Outcome:
    """Return the lineage joining ``id_a`` and ``id_b`` to all of their common ancestors.

    Branches of either cone that never reach a shared ancestor are pruned.
    Returns :data:`NO_COMMON_ANCESTOR` when the cones do not intersect.
    """

    shared = common_ancestors(store, id_a, id_b)
    if not shared:
        return NO_COMMON_ANCESTOR

    edges = _connected_edges(ancestor_edges(store, id_a), shared)
    edges.extend(_connected_edges(ancestor_edges(store, id_b), shared))
    subgraph = Subgraph.from_edges(edges, root_ids=(id_a, id_b))
    LOGGER.debug(
        "Common ancestry of %s and %s: %d shared ancestors, %d edges",
        id_a,
        id_b,
        len(shared),
        len(subgraph),
    )
    return subgraph


def closest_ancestor(store: GraphStore, id_a: int, id_b: int) -> int | Outcome:
    """Return the common ancestor with the smallest combined generation distance.

    Ties go to the ancestor nearer to ``id_a``, then to the smaller id.
    """

    shared = common_ancestors(store, id_a, id_b)
    if not shared:
        return NO_COMMON_ANCESTOR
    return min(
        shared,
        key=lambda node_id: (sum(shared[node_id]), shared[node_id][0], node_id),
    )


__all__ = ["closest_ancestor", "common_ancestors", "common_ancestry_subgraph"]
