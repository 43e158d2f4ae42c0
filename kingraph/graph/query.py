"""Guarded query shapes issued by the viewer against a :class:`GraphStore`."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kingraph.config import QueryLimits

from .common import closest_ancestor, common_ancestry_subgraph
from .model import NOT_FOUND, QUERY_TOO_LARGE, Outcome, Subgraph
from .path import shortest_path
from .store import GraphStore
from .traversal import ancestors_count_exceeds, ancestry_subgraph, descendants_count_exceeds

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class AncestryResult:
    """Single-person view together with the shape actually rendered."""

    root_id: int
    subgraph: Subgraph
    parents_only: bool


@dataclass
class QueryService:
    """Apply the size guards around the raw traversals."""

    store: GraphStore
    limits: QueryLimits = field(default_factory=QueryLimits)

    def lookup(self, name: str) -> int | Outcome:
        return self.store.find(name)

    def ancestry(self, node_id: int) -> AncestryResult | Outcome:
        """Return the family view of ``node_id``.

        The view is two-sided unless the person has more descendants than
        ``limits.descendant_limit``, in which case only ancestors are kept.
        """

        if not self.store.exists(node_id):
            return NOT_FOUND
        limit = self.limits.descendant_limit
        parents_only = limit is not None and descendants_count_exceeds(self.store, node_id, limit)
        if parents_only:
            LOGGER.info(
                "Person %s has more than %d descendants, showing ancestors only", node_id, limit
            )
        subgraph = ancestry_subgraph(self.store, node_id, parents_only)
        LOGGER.debug("Ancestry of %s: %d edges", node_id, len(subgraph))
        return AncestryResult(root_id=node_id, subgraph=subgraph, parents_only=parents_only)

    def common_ancestry(self, id_a: int, id_b: int) -> Subgraph | Outcome:
        """Return the shared lineage of two people, refusing oversized ancestor cones."""

        if not self.store.exists(id_a) or not self.store.exists(id_b):
            return NOT_FOUND
        if self._too_many_ancestors(id_a, id_b):
            return QUERY_TOO_LARGE
        return common_ancestry_subgraph(self.store, id_a, id_b)

    def closest_ancestor(self, id_a: int, id_b: int) -> int | Outcome:
        if not self.store.exists(id_a) or not self.store.exists(id_b):
            return NOT_FOUND
        if self._too_many_ancestors(id_a, id_b):
            return QUERY_TOO_LARGE
        return closest_ancestor(self.store, id_a, id_b)

    def shortest_path(self, id_a: int, id_b: int) -> list[int] | Outcome:
        if not self.store.exists(id_a) or not self.store.exists(id_b):
            return NOT_FOUND
        return shortest_path(self.store, id_a, id_b)

    def _too_many_ancestors(self, *node_ids: int) -> bool:
        limit = self.limits.ancestor_limit
        if limit is None:
            return False
        for node_id in node_ids:
            if ancestors_count_exceeds(self.store, node_id, limit):
                LOGGER.warning(
                    "Person %s has more than %d ancestors, refusing common ancestry query",
                    node_id,
                    limit,
                )
                return True
        return False


__all__ = ["AncestryResult", "QueryService"]
