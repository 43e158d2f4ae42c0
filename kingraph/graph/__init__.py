"""Graph subpackage: the person store and the queries run against it."""

from .common import closest_ancestor, common_ancestors, common_ancestry_subgraph
from .model import (
    NO_COMMON_ANCESTOR,
    NO_PATH,
    NOT_FOUND,
    QUERY_TOO_LARGE,
    Edge,
    PersonNode,
    Subgraph,
)
from .path import shortest_path
from .query import AncestryResult, QueryService
from .store import GraphStore, InputError
from .traversal import (
    ancestor_depths,
    ancestors_count_exceeds,
    ancestry_subgraph,
    descendants_count_exceeds,
)

__all__ = [
    "AncestryResult",
    "Edge",
    "GraphStore",
    "InputError",
    "NO_COMMON_ANCESTOR",
    "NO_PATH",
    "NOT_FOUND",
    "PersonNode",
    "QUERY_TOO_LARGE",
    "QueryService",
    "Subgraph",
    "ancestor_depths",
    "ancestors_count_exceeds",
    "ancestry_subgraph",
    "closest_ancestor",
    "common_ancestors",
    "common_ancestry_subgraph",
    "descendants_count_exceeds",
    "shortest_path",
]
