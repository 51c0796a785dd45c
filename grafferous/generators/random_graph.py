"""
Random graph generator.

Builds Erdos-Renyi G(n, p) graphs: every unordered pair of distinct nodes is
joined by an undirected edge independently with probability p.
"""

import logging
from typing import Optional

import numpy as np

from ..classes.types import DataFactory
from ..core.graph import Graph

logger = logging.getLogger(__name__)


def generate_random(n: int, edge_probability: float, seed: Optional[int] = None,
                    data_factory: Optional[DataFactory] = None) -> Graph:
    """
    Generate a random undirected graph on nodes 0..n-1.

    Args:
        n: Number of nodes
        edge_probability: Probability of each pair being connected, in [0, 1]
        seed: Seed for numpy's default generator; equal seeds give equal graphs
        data_factory: Default payload factory for the nodes

    Returns:
        Populated Graph with exactly n nodes and no self-loops

    Raises:
        ValueError: If n is negative or edge_probability lies outside [0, 1]
    """
    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")
    if not 0.0 <= edge_probability <= 1.0:
        raise ValueError(f"edge_probability must be in [0, 1], got {edge_probability}")

    rng = np.random.default_rng(seed)
    graph = Graph(data_factory)
    for node_id in range(n):
        graph.add_node(node_id)

    # One trial per unordered pair, drawn row by row over the strict upper triangle
    for from_id in range(n - 1):
        hits = np.flatnonzero(rng.random(n - from_id - 1) < edge_probability) + from_id + 1
        for to_id in hits.tolist():
            graph.add_edge(from_id, to_id)

    logger.debug(f"Generated random graph n={n} p={edge_probability}: {graph!r}")
    return graph
