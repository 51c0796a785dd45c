from __future__ import annotations

import pytest

from grafferous import Graph


@pytest.fixture()
def chain_graph() -> Graph:
    graph = Graph(data_factory=int)
    for i in range(6):
        graph.add_directed_edge(i, i + 1)
    return graph


@pytest.fixture()
def diamond_graph() -> Graph:
    return Graph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])


@pytest.fixture()
def ring_graph() -> Graph:
    graph = Graph(data_factory=int)
    for i in range(6):
        graph.add_edge(i, i + 1)
    graph.add_edge(6, 0)
    return graph


@pytest.fixture()
def check_invariants():
    def _check(graph: Graph) -> None:
        nodes = graph.nodes
        assert len(nodes) == len(set(nodes))
        for node_id in nodes:
            graph.get_node_data(node_id)

        for node_id in nodes:
            successors = graph.neighbors(node_id)
            predecessors = graph.reverse_neighbors(node_id)
            assert len(successors) == len(set(successors))
            assert len(predecessors) == len(set(predecessors))
            for successor_id in successors:
                assert successor_id in nodes
                assert graph.reverse_neighbors(successor_id).count(node_id) == 1
            for predecessor_id in predecessors:
                assert graph.neighbors(predecessor_id).count(node_id) == 1

        assert len(graph.edge_tuples()) == graph.edge_count()

    return _check
