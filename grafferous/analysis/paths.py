"""
Path counting for directed acyclic graphs.

This module provides the path enumerator. Counting is only defined on graphs
accepted by StructuralClassifier.is_directed_acyclic.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple, Union

from ..classes.types import NodeID
from ..classes.errors import UnknownNodeError, NotAcyclicError
from ..core.store import GraphStore
from .classification import StructuralClassifier

if TYPE_CHECKING:
    from ..core.graph import Graph

logger = logging.getLogger(__name__)


class PathEnumerator:
    """
    Counts distinct directed paths between two nodes.

    The count is computed backwards from the end node: every predecessor either
    is the start node, contributing one path, or contributes the number of paths
    from the start node to itself.
    """

    def __init__(self, store: GraphStore, classifier: Optional[StructuralClassifier] = None):
        """
        Initialize the path enumerator.

        Args:
            store: GraphStore instance to traverse
            classifier: Classifier used for the acyclicity precondition
        """
        self.store = store
        self.classifier = classifier or StructuralClassifier(store)

    def count_paths(self, start: NodeID, end: NodeID,
                    cache: Optional[Dict[NodeID, int]] = None) -> int:
        """
        Count directed paths from start to end.

        The trivial path counts, so start == end yields 1.

        Args:
            start: First node of every path
            end: Last node of every path
            cache: Optional memo keyed by node ID, filled with the path count from
                start to every node visited. Only reuse it for the same graph and start.

        Returns:
            Number of distinct paths

        Raises:
            UnknownNodeError: If start or end is not in the graph
            NotAcyclicError: If the graph is not classified as a DAG
        """
        for node_id in (start, end):
            if not self.store.has_node(node_id):
                raise UnknownNodeError(node_id)

        if not self.classifier.is_directed_acyclic():
            cycle_members = self.classifier.find_cycle_members()
            logger.debug(f"Refusing to count paths {start!r} -> {end!r}: graph is not a DAG")
            raise NotAcyclicError(
                f"Cannot count paths from {start!r} to {end!r}: graph is not directed acyclic",
                cycle_members,
            )

        return self._count(start, end, {} if cache is None else cache)

    def _count(self, start: NodeID, end: NodeID, memo: Dict[NodeID, int]) -> int:
        """
        Sum predecessor counts in post-order using an explicit stack.

        Depth is bounded by memory rather than the interpreter recursion limit.
        """
        if start == end:
            return 1

        # (node, expanded): a node is summed once all its predecessors are known
        stack: List[Tuple[NodeID, bool]] = [(end, False)]
        while stack:
            node_id, expanded = stack.pop()
            if node_id in memo:
                continue

            predecessors = self.store.reverse_neighbors(node_id)
            if expanded:
                memo[node_id] = sum(
                    1 if predecessor_id == start else memo[predecessor_id]
                    for predecessor_id in predecessors
                )
                continue

            stack.append((node_id, True))
            for predecessor_id in predecessors:
                if predecessor_id != start and predecessor_id not in memo:
                    stack.append((predecessor_id, False))

        return memo[end]


def count_paths(graph: Union['Graph', GraphStore], start: NodeID, end: NodeID,
                cache: Optional[Dict[NodeID, int]] = None) -> int:
    """
    Count directed paths from start to end in a graph.

    Args:
        graph: Graph or GraphStore instance
        start: First node of every path
        end: Last node of every path
        cache: Optional memo keyed by node ID, see PathEnumerator.count_paths

    Returns:
        Number of distinct paths

    Raises:
        TypeError: If graph is neither a Graph nor a GraphStore
    """
    store = graph if isinstance(graph, GraphStore) else getattr(graph, 'store', None)
    if not isinstance(store, GraphStore):
        raise TypeError(f"Expected a Graph or GraphStore, got {type(graph).__name__}")
    return PathEnumerator(store).count_paths(start, end, cache)
