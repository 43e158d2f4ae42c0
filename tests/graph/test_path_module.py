"""Tests for :mod:`kingraph.graph.path`."""

from __future__ import annotations

import itertools
import random

import networkx as nx

from kingraph.graph.model import NO_PATH
from kingraph.graph.path import kin, shortest_path
from kingraph.graph.store import GraphStore


def build_cousins() -> GraphStore:
    nodes = {1: "Alice", 2: "Bob", 3: "Carol", 4: "Dan", 5: "Eve", 6: "Frank", 7: "Grace", 8: "Heidi", 9: "Ivan", 10: ""}
    edges = [(1, 3), (2, 3), (1, 4), (2, 4), (3, 6), (5, 6), (4, 8), (7, 8)]
    return GraphStore.build(nodes, edges)


def test_round_trip_chain():
    store = GraphStore.build({1: "A", 2: "B", 3: "C"}, [[1, 2], [2, 3]])
    assert shortest_path(store, 1, 3) == [1, 2, 3]
    assert shortest_path(store, 3, 1) == [3, 2, 1]


def test_kin_lists_parents_then_children_in_id_order():
    store = build_cousins()
    assert list(kin(store, 3)) == [1, 2, 6]
    assert list(kin(store, 1)) == [3, 4]


def test_kin_skips_self_loops():
    store = GraphStore.build({1: "A", 2: "B"}, [(1, 2), (2, 2)])
    assert list(kin(store, 2)) == [1]


def test_shortest_path_uses_fixed_expansion_order():
    store = build_cousins()
    # Alice and Bob both join the cousins in four steps; Alice has the smaller id
    assert shortest_path(store, 6, 8) == [6, 3, 1, 4, 8]


def test_shortest_path_to_self():
    store = build_cousins()
    assert shortest_path(store, 5, 5) == [5]


def test_unconnected_or_absent_people_have_no_path():
    store = build_cousins()
    assert shortest_path(store, 6, 9) is NO_PATH
    assert shortest_path(store, 6, 10) is NO_PATH
    assert shortest_path(store, 99, 99) is NO_PATH


def test_shortest_path_in_a_cycle_terminates():
    store = GraphStore.build({1: "A", 2: "B", 3: "C", 4: "D"}, [(1, 2), (2, 3), (3, 1)])
    assert shortest_path(store, 1, 3) == [1, 3]
    assert shortest_path(store, 1, 4) is NO_PATH


def test_shortest_paths_are_valid_and_minimal():
    rng = random.Random(11)
    nodes = {node_id: f"p{node_id}" for node_id in range(40)}
    edges = [(rng.randrange(40), rng.randrange(40)) for _ in range(45)]
    store = GraphStore.build(nodes, edges)
    undirected = store.to_networkx().to_undirected()

    for id_a, id_b in itertools.combinations(range(0, 40, 3), 2):
        path = shortest_path(store, id_a, id_b)
        if not nx.has_path(undirected, id_a, id_b):
            assert path is NO_PATH
            continue
        assert path[0] == id_a and path[-1] == id_b
        assert len(path) - 1 == nx.shortest_path_length(undirected, id_a, id_b)
        for here, there in zip(path, path[1:]):
            assert there in store.parents(here) or there in store.children(here)
