"""
Structural classification of graphs.

This module provides read-only predicates over a GraphStore: symmetry of the
edge relation and directed acyclicity.
"""

import logging
from typing import List, Set

from ..classes.types import NodeID
from ..core.store import GraphStore

logger = logging.getLogger(__name__)


class StructuralClassifier:
    """
    Classifies the shape of a graph.

    This class provides methods for:
    - Checking whether every edge is mirrored (undirected graphs)
    - Checking whether the graph is a directed acyclic graph
    - Listing nodes that lie on a directed cycle

    Results are computed on every call; nothing is cached, so the classifier
    stays valid while the store keeps growing.
    """

    def __init__(self, store: GraphStore):
        """
        Initialize the classifier.

        Args:
            store: GraphStore instance to classify
        """
        self.store = store

    def is_undirected(self) -> bool:
        """
        Check whether each recorded edge (u, v) has its reverse (v, u).

        An edgeless graph is vacuously undirected.
        """
        for from_id, to_id in self.store.edge_tuples():
            if not self.store.has_edge(to_id, from_id):
                return False
        return True

    def is_directed_acyclic(self) -> bool:
        """
        Check whether the graph is a directed acyclic graph.

        A graph whose edge relation is symmetric is never reported as a DAG,
        including the empty and the edgeless graph.

        Returns:
            True if the graph is asymmetric and no node can reach itself
        """
        if self.is_undirected():
            logger.debug("Graph is symmetric, not classified as a DAG")
            return False

        node_count = self.store.node_count()
        for node_id in self.store.nodes:
            if self._returns_to(node_id, node_count):
                logger.debug(f"Node {node_id!r} lies on a directed cycle")
                return False

        return True

    def find_cycle_members(self) -> List[NodeID]:
        """
        Find nodes that can reach themselves along directed edges.

        Unlike is_directed_acyclic, mirrored edges count as two-node cycles here
        and symmetric graphs are not short-circuited.

        Returns:
            Node IDs on some directed cycle, in directory order
        """
        node_count = self.store.node_count()
        return [node_id for node_id in self.store.nodes if self._returns_to(node_id, node_count)]

    def _returns_to(self, node_id: NodeID, max_hops: int) -> bool:
        """
        Expand a frontier from the direct successors of node_id, hop by hop.

        Args:
            node_id: Node to search for
            max_hops: Maximum number of expansions

        Returns:
            True if node_id reappears in a frontier
        """
        frontier: Set[NodeID] = set(self.store.neighbors(node_id))
        seen: Set[NodeID] = set(frontier)

        for _ in range(max_hops):
            if node_id in frontier:
                return True
            if not frontier:
                return False

            next_frontier: Set[NodeID] = set()
            for current_id in frontier:
                for neighbor_id in self.store.neighbors(current_id):
                    if neighbor_id not in seen:
                        seen.add(neighbor_id)
                        next_frontier.add(neighbor_id)
            frontier = next_frontier

        return node_id in frontier
