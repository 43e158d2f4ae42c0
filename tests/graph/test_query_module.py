"""Tests for :mod:`kingraph.graph.query`."""

from __future__ import annotations

from kingraph.config import QueryLimits
from kingraph.graph.model import NO_COMMON_ANCESTOR, NO_PATH, NOT_FOUND, QUERY_TOO_LARGE
from kingraph.graph.query import AncestryResult, QueryService
from kingraph.graph.store import GraphStore


def build_service(**limits) -> QueryService:
    nodes = {1: "Alice", 2: "Bob", 3: "Carol", 4: "Dan", 5: "Eve", 6: "Frank", 7: "Grace", 8: "Heidi", 9: "Ivan", 10: ""}
    edges = [(1, 3), (2, 3), (1, 4), (2, 4), (3, 6), (5, 6), (4, 8), (7, 8)]
    store = GraphStore.build(nodes, edges)
    return QueryService(store=store, limits=QueryLimits(**limits))


def test_ancestry_is_two_sided_below_descendant_limit():
    service = build_service(descendant_limit=10)
    result = service.ancestry(3)
    assert isinstance(result, AncestryResult)
    assert result.parents_only is False
    assert result.subgraph.edge_set() == {(1, 3), (2, 3), (3, 6)}


def test_ancestry_degrades_to_ancestors_only_past_descendant_limit(caplog):
    service = build_service(descendant_limit=2)
    with caplog.at_level("INFO", logger="kingraph.graph.query"):
        result = service.ancestry(1)
    # Alice has four descendants
    assert result.parents_only is True
    assert result.subgraph.edges == ()
    assert "ancestors only" in caplog.text


def test_ancestry_guard_can_be_disabled():
    service = build_service(descendant_limit=None)
    assert service.ancestry(1).parents_only is False


def test_ancestry_of_absent_person_is_not_found():
    service = build_service()
    assert service.ancestry(10) is NOT_FOUND
    assert service.ancestry(77) is NOT_FOUND


def test_common_ancestry_passes_through():
    service = build_service()
    assert service.common_ancestry(6, 8).edge_set() == {(1, 3), (2, 3), (3, 6), (1, 4), (2, 4), (4, 8)}
    assert service.common_ancestry(5, 7) is NO_COMMON_ANCESTOR
    assert service.common_ancestry(6, 10) is NOT_FOUND


def test_common_ancestry_refuses_oversized_cones():
    service = build_service(ancestor_limit=3)
    # Frank has four ancestors
    assert service.common_ancestry(6, 8) is QUERY_TOO_LARGE
    assert service.closest_ancestor(6, 8) is QUERY_TOO_LARGE
    assert service.common_ancestry(3, 4) is not QUERY_TOO_LARGE


def test_closest_ancestor_and_shortest_path():
    service = build_service()
    assert service.closest_ancestor(6, 8) == 1
    assert service.closest_ancestor(9, 9) == 9
    assert service.shortest_path(6, 8) == [6, 3, 1, 4, 8]
    assert service.shortest_path(6, 9) is NO_PATH
    assert service.shortest_path(6, 10) is NOT_FOUND


def test_lookup_uses_name_index():
    service = build_service()
    assert service.lookup("Heidi") == 8
    assert service.lookup("Mallory") is NOT_FOUND
