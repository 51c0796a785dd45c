from __future__ import annotations

import logging

import pytest

from grafferous import GraphBuilder


def test_directed_declarations():
    graph = (
        GraphBuilder()
        .directed_edge(0, 1)
        .directed_edge(1, 2)
        .directed_edge(2, 3)
        .directed_edge(3, 4)
        .directed_edge(4, 5)
        .directed_edge(5, 6)
        .build()
    )

    assert graph.node_count() == 7
    assert len(graph.edge_tuples()) == 6
    assert graph.is_directed_acyclic() is True


def test_undirected_declarations():
    graph = GraphBuilder().path(0, 1, 2, 3, 4, 5, 6, directed=False).build()

    assert graph.node_count() == 7
    assert len(graph.edge_tuples()) == 12
    assert graph.is_undirected() is True


def test_node_declarations_keep_first_payload(caplog):
    builder = GraphBuilder(data_factory=str).node("a", "first").node("a", "second").node("b")

    with caplog.at_level(logging.WARNING):
        graph = builder.build()

    assert graph.get_node_data("a") == "first"
    assert graph.get_node_data("b") == ""
    assert len(caplog.records) == 1


def test_adjacency_declarations():
    graph = GraphBuilder().adjacency({"root": ["l", "r"], "l": ["leaf"], "r": ["leaf"], "iso": []}).build()

    assert graph.nodes == ("root", "l", "r", "leaf", "iso")
    assert graph.count_paths("root", "leaf") == 2


def test_builds_are_independent():
    builder = GraphBuilder().edge(0, 1)
    first = builder.build()
    first.add_edge(1, 2)

    assert builder.build().node_count() == 2
    assert len(builder) == 1


def test_node_rejects_multiple_payloads():
    with pytest.raises(TypeError):
        GraphBuilder().node(0, "a", "b")
