"""
Main facade class for graph construction and analysis.

This module provides the Graph class, which owns a GraphStore and delegates
structural queries to the analysis components.
"""

import logging
from typing import Dict, Generic, Iterable, List, Optional, Tuple

from ..classes.types import NodeID, NodeData, DataFactory
from ..analysis.classification import StructuralClassifier
from ..analysis.paths import PathEnumerator
from .store import GraphStore


class Graph(Generic[NodeID, NodeData]):
    """
    Generic in-memory graph with optional node payloads.

    Callers mutate the graph through the insertion methods, then query it:

    >>> g = Graph(data_factory=int)
    >>> g.add_directed_edge(0, 1)
    True
    >>> g.add_directed_edge(1, 2)
    True
    >>> g.count_paths(0, 2)
    1
    """

    def __init__(self, data_factory: Optional[DataFactory] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize an empty graph.

        Args:
            data_factory: Callable building the default payload of new nodes.
                Defaults to a factory returning None.
            logger: Logger receiving non-fatal diagnostics such as duplicate nodes
        """
        # Initialize core store
        self._store = GraphStore(data_factory, logger)

        # Initialize analysis components
        self._classifier = StructuralClassifier(self._store)
        self._pathfinder = PathEnumerator(self._store, self._classifier)

    @classmethod
    def from_edges(cls, pairs: Iterable[Tuple[NodeID, NodeID]],
                   data_factory: Optional[DataFactory] = None,
                   logger: Optional[logging.Logger] = None) -> 'Graph':
        """
        Build a graph from directed (from, to) pairs.

        Nodes are inserted in order of first reference.
        """
        graph = cls(data_factory, logger)
        graph.add_edges_from(pairs)
        return graph

    @property
    def store(self) -> GraphStore:
        """Underlying node and edge store."""
        return self._store

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_node(self, node_id: NodeID) -> bool:
        """Add a node with the default payload; duplicates are reported and ignored."""
        return self._store.add_node(node_id)

    def add_node_with_data(self, node_id: NodeID, data: NodeData) -> bool:
        """Add a node with a payload; an existing node keeps its payload."""
        return self._store.add_node_with_data(node_id, data)

    def add_directed_edge(self, from_id: NodeID, to_id: NodeID) -> bool:
        """Add a directed edge, creating unknown endpoints."""
        return self._store.add_directed_edge(from_id, to_id)

    def add_edge(self, from_id: NodeID, to_id: NodeID) -> bool:
        """Add an undirected edge as two directed edges."""
        return self._store.add_edge(from_id, to_id)

    def add_edges_from(self, pairs: Iterable[Tuple[NodeID, NodeID]]) -> int:
        """Add directed edges in sequence order."""
        return self._store.add_edges_from(pairs)

    def get_node_data(self, node_id: NodeID) -> NodeData:
        """Get the payload of a node."""
        return self._store.get_node_data(node_id)

    def set_node_data(self, node_id: NodeID, data: NodeData):
        """Replace the payload of an existing node."""
        self._store.set_node_data(node_id, data)

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def nodes(self) -> Tuple[NodeID, ...]:
        """Node directory in insertion order."""
        return self._store.nodes

    def has_node(self, node_id: NodeID) -> bool:
        return self._store.has_node(node_id)

    def has_edge(self, from_id: NodeID, to_id: NodeID) -> bool:
        return self._store.has_edge(from_id, to_id)

    def node_count(self) -> int:
        return self._store.node_count()

    def edge_count(self) -> int:
        return self._store.edge_count()

    def neighbors(self, node_id: NodeID) -> List[NodeID]:
        """Successors in insertion order, empty for unknown nodes."""
        return self._store.neighbors(node_id)

    def reverse_neighbors(self, node_id: NodeID) -> List[NodeID]:
        """Predecessors in insertion order, empty for unknown nodes."""
        return self._store.reverse_neighbors(node_id)

    def neighborhood(self, node_id: NodeID) -> List[NodeID]:
        """Successors followed by the node itself."""
        return self._store.neighborhood(node_id)

    def edge_tuples(self) -> List[Tuple[NodeID, NodeID]]:
        """All directed edges, in no particular order."""
        return self._store.edge_tuples()

    def successor_map(self) -> Dict[NodeID, List[NodeID]]:
        """Snapshot of the forward adjacency."""
        return self._store.successor_map()

    # ========================================================================
    # ANALYSIS
    # ========================================================================

    def is_undirected(self) -> bool:
        """Check whether every edge is mirrored."""
        return self._classifier.is_undirected()

    def is_directed_acyclic(self) -> bool:
        """Check whether the graph is an asymmetric directed acyclic graph."""
        return self._classifier.is_directed_acyclic()

    def find_cycle_members(self) -> List[NodeID]:
        """Find nodes lying on a directed cycle."""
        return self._classifier.find_cycle_members()

    def count_paths(self, start: NodeID, end: NodeID,
                    cache: Optional[Dict[NodeID, int]] = None) -> int:
        """Count directed paths from start to end."""
        return self._pathfinder.count_paths(start, end, cache)

    def __contains__(self, node_id) -> bool:
        return node_id in self._store

    def __len__(self) -> int:
        return len(self._store)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(nodes={self.node_count()}, edges={self.edge_count()})"
