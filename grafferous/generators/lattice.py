"""
Lattice graph generators.

Each generator computes the successor table of every node with numpy, one row
per node, then merges the rows into a Graph through its insertion methods.
Node IDs are integers numbered row-major: node = y * width + x.
"""

import logging
from typing import Optional

import numpy as np

from ..classes.types import DataFactory
from ..core.graph import Graph

logger = logging.getLogger(__name__)


def _check_dimension(name: str, value: int):
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")


def _merge_successor_table(graph: Graph, candidates: np.ndarray, valid: np.ndarray) -> Graph:
    """
    Insert nodes 0..N-1 and their valid successors, column order preserved.

    Args:
        graph: Empty graph to populate
        candidates: (N, k) array of candidate successor IDs per node
        valid: (N, k) boolean mask of candidates that exist

    Returns:
        The populated graph
    """
    node_count = candidates.shape[0]
    for node_id in range(node_count):
        graph.add_node(node_id)

    for node_id in range(node_count):
        for successor_id in candidates[node_id][valid[node_id]].tolist():
            graph.add_directed_edge(node_id, successor_id)

    return graph


def _grid_table(width: int, height: int):
    # width and height must be positive
    ids = np.arange(width * height)
    x = ids % width
    y = ids // width

    candidates = np.stack([ids - 1, ids + 1, ids - width, ids + width], axis=1)
    valid = np.stack([x > 0, x < width - 1, y > 0, y < height - 1], axis=1)
    return ids, x, y, candidates, valid


def generate_grid(width: int, height: int, data_factory: Optional[DataFactory] = None) -> Graph:
    """
    Generate a rectangular 4-neighbour grid.

    Successors are listed left, right, up, down. Every edge is mirrored, so the
    result is undirected with 2 * (2 * width * height - width - height) directed edges.

    Args:
        width: Number of columns
        height: Number of rows
        data_factory: Default payload factory for the nodes

    Returns:
        Populated Graph
    """
    _check_dimension('width', width)
    _check_dimension('height', height)

    if width == 0 or height == 0:
        return Graph(data_factory)

    _, _, _, candidates, valid = _grid_table(width, height)
    graph = _merge_successor_table(Graph(data_factory), candidates, valid)

    logger.debug(f"Generated {width}x{height} grid: {graph!r}")
    return graph


def generate_cycle(n: int, data_factory: Optional[DataFactory] = None) -> Graph:
    """
    Generate a ring of n nodes.

    Node i has successors (i + 1) % n then (i - 1) % n. For n < 3 both
    candidates coincide and are recorded once.

    Args:
        n: Number of nodes
        data_factory: Default payload factory for the nodes

    Returns:
        Populated Graph
    """
    _check_dimension('n', n)

    ids = np.arange(n)
    candidates = np.stack([(ids + 1) % max(n, 1), (ids - 1) % max(n, 1)], axis=1)
    valid = np.ones_like(candidates, dtype=bool)
    graph = _merge_successor_table(Graph(data_factory), candidates, valid)

    logger.debug(f"Generated cycle of {n} nodes: {graph!r}")
    return graph


def generate_hexagonal_grid(width: int, height: int,
                            data_factory: Optional[DataFactory] = None) -> Graph:
    """
    Generate a hexagonal lattice laid out as offset columns.

    Each node keeps its grid neighbours and gains two diagonal ones: nodes in
    even columns link to column x - 1, nodes in odd columns to column x + 1,
    in rows y - 1 and y + 1. Diagonals never wrap around a row end.

    Args:
        width: Number of columns
        height: Number of rows
        data_factory: Default payload factory for the nodes

    Returns:
        Populated Graph
    """
    _check_dimension('width', width)
    _check_dimension('height', height)

    if width == 0 or height == 0:
        return Graph(data_factory)

    ids, x, y, candidates, valid = _grid_table(width, height)

    even = x % 2 == 0
    dx = np.where(even, -1, 1)
    diagonal_column_ok = np.where(even, x > 0, x < width - 1)

    diagonals = np.stack([ids - width + dx, ids + width + dx], axis=1)
    diagonal_valid = np.stack([diagonal_column_ok & (y > 0),
                               diagonal_column_ok & (y < height - 1)], axis=1)

    graph = _merge_successor_table(
        Graph(data_factory),
        np.concatenate([candidates, diagonals], axis=1),
        np.concatenate([valid, diagonal_valid], axis=1),
    )

    logger.debug(f"Generated {width}x{height} hexagonal grid: {graph!r}")
    return graph
