from __future__ import annotations

import pytest

from grafferous import (
    Graph,
    GraphStore,
    NotAcyclicError,
    PathEnumerator,
    UnknownNodeError,
    count_paths,
)


def test_count_paths_chain(chain_graph):
    for start in range(7):
        assert count_paths(chain_graph, start, 6) == 1
    for node_id in range(7):
        assert count_paths(chain_graph, node_id, node_id) == 1


def test_count_paths_against_direction_is_zero(chain_graph):
    assert count_paths(chain_graph, 6, 0) == 0
    assert count_paths(chain_graph, 3, 1) == 0


def test_count_paths_diamond(diamond_graph):
    assert count_paths(diamond_graph, 0, 3) == 2
    assert diamond_graph.count_paths(1, 3) == 1
    assert diamond_graph.count_paths(1, 2) == 0


def test_count_paths_on_ring_raises(ring_graph):
    with pytest.raises(NotAcyclicError):
        count_paths(ring_graph, 0, 6)


def test_not_acyclic_reports_cycle_members():
    graph = Graph.from_edges([(0, 1), (1, 2), (2, 0), (2, 3)])

    with pytest.raises(NotAcyclicError) as excinfo:
        graph.count_paths(0, 3)

    assert excinfo.value.cycle_members == [0, 1, 2]
    assert isinstance(excinfo.value, ValueError)


def test_count_paths_unknown_node_raises(diamond_graph):
    with pytest.raises(UnknownNodeError) as excinfo:
        count_paths(diamond_graph, 0, 42)
    assert excinfo.value.node_id == 42

    with pytest.raises(UnknownNodeError):
        count_paths(diamond_graph, "nope", 3)


def test_unknown_node_checked_before_acyclicity(ring_graph):
    with pytest.raises(UnknownNodeError):
        ring_graph.count_paths(0, 99)


def test_failed_count_leaves_graph_untouched(ring_graph):
    before = set(ring_graph.edge_tuples())
    nodes = ring_graph.nodes

    with pytest.raises(NotAcyclicError):
        ring_graph.count_paths(0, 3)
    with pytest.raises(UnknownNodeError):
        ring_graph.count_paths(0, 99)

    assert set(ring_graph.edge_tuples()) == before
    assert ring_graph.nodes == nodes


def test_memoized_count_matches_plain_count():
    # ladder of stacked diamonds: 2**k paths from bottom to top
    layers = 12
    graph = Graph()
    for layer in range(layers):
        top = 3 * (layer + 1)
        bottom = 3 * layer
        graph.add_directed_edge(bottom, bottom + 1)
        graph.add_directed_edge(bottom, bottom + 2)
        graph.add_directed_edge(bottom + 1, top)
        graph.add_directed_edge(bottom + 2, top)

    cache = {}
    assert graph.count_paths(0, 3 * layers, cache) == 2 ** layers
    assert graph.count_paths(0, 3 * layers) == 2 ** layers
    assert cache[3] == 2


def test_cache_contents_for_diamond(diamond_graph):
    cache = {}
    assert count_paths(diamond_graph, 0, 3, cache) == 2
    assert cache == {1: 1, 2: 1, 3: 2}


def test_count_paths_on_bare_store():
    store = GraphStore()
    store.add_edges_from([("a", "b"), ("b", "c"), ("a", "c")])

    assert count_paths(store, "a", "c") == 2
    assert PathEnumerator(store).count_paths("b", "c") == 1


def test_count_paths_on_long_chain():
    length = 2_500
    graph = Graph.from_edges([(i, i + 1) for i in range(length)])

    assert graph.count_paths(0, length) == 1

    cache = {}
    assert count_paths(graph, 0, length, cache) == 1
    assert len(cache) == length
    assert cache[length] == 1


def test_count_paths_on_long_diamond_ladder():
    layers = 600
    graph = Graph()
    for layer in range(layers):
        bottom = 3 * layer
        graph.add_directed_edge(bottom, bottom + 1)
        graph.add_directed_edge(bottom, bottom + 2)
        graph.add_directed_edge(bottom + 1, bottom + 3)
        graph.add_directed_edge(bottom + 2, bottom + 3)

    assert graph.count_paths(0, 3 * layers) == 2 ** layers


def test_count_paths_rejects_other_objects():
    with pytest.raises(TypeError):
        count_paths({0: [1]}, 0, 1)
