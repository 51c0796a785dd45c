"""
Core node and edge store.

This module provides the fundamental graph state without any analysis. All
mutation of a graph goes through the insertion methods defined here.
"""

import logging
from typing import Dict, Generic, Iterable, List, Optional, Set, Tuple

from ..classes.types import NodeID, NodeData, DataFactory, default_data_factory
from ..classes.errors import UnknownNodeError

logger = logging.getLogger(__name__)


class GraphStore(Generic[NodeID, NodeData]):
    """
    Adjacency state for a generic graph.

    This class owns the graph representation and guarantees its invariants:
    - Node directory in insertion order, without duplicates
    - One payload per directory entry
    - Forward and reverse adjacency lists that mirror each other
    - Each directed edge recorded at most once
    """

    def __init__(self, data_factory: Optional[DataFactory] = None,
                 diagnostics: Optional[logging.Logger] = None):
        """
        Initialize an empty store.

        Args:
            data_factory: Callable building the default payload of new nodes
            diagnostics: Logger receiving non-fatal conditions such as duplicate nodes
        """
        self.data_factory = data_factory or default_data_factory
        self.diagnostics = diagnostics or logger

        # Node directory
        self._node_directory: List[NodeID] = []
        self._node_data: Dict[NodeID, NodeData] = {}

        # Adjacency
        self._forward_adjacency: Dict[NodeID, List[NodeID]] = {}
        self._reverse_adjacency: Dict[NodeID, List[NodeID]] = {}
        self._edge_set: Set[Tuple[NodeID, NodeID]] = set()

    # ========================================================================
    # NODE INSERTION
    # ========================================================================

    def add_node(self, node_id: NodeID) -> bool:
        """
        Add a node carrying the default payload.

        Args:
            node_id: Identifier of the new node

        Returns:
            True if the node was inserted, False if it already existed
        """
        if node_id in self._node_data:
            self.diagnostics.warning(f"Attempt to add node {node_id!r}, that already exists")
            return False

        self._insert_node(node_id, self.data_factory())
        return True

    def add_node_with_data(self, node_id: NodeID, data: NodeData) -> bool:
        """
        Add a node carrying the given payload.

        Existing nodes keep their payload; use set_node_data to replace it.

        Args:
            node_id: Identifier of the new node
            data: Payload stored verbatim

        Returns:
            True if the node was inserted, False if it already existed
        """
        if node_id in self._node_data:
            self.diagnostics.warning(f"Attempt to add node {node_id!r}, that already exists")
            return False

        self._insert_node(node_id, data)
        return True

    def _insert_node(self, node_id: NodeID, data: NodeData):
        self._node_directory.append(node_id)
        self._node_data[node_id] = data
        self._forward_adjacency.setdefault(node_id, [])
        self._reverse_adjacency.setdefault(node_id, [])

    # ========================================================================
    # EDGE INSERTION
    # ========================================================================

    def add_directed_edge(self, from_id: NodeID, to_id: NodeID) -> bool:
        """
        Add the directed edge from_id -> to_id.

        Unknown endpoints are created first with the default payload, source
        before target. Requesting an existing edge changes nothing.

        Args:
            from_id: Source node
            to_id: Target node

        Returns:
            True if a new edge was recorded
        """
        if from_id not in self._node_data:
            self.add_node(from_id)
        if to_id not in self._node_data:
            self.add_node(to_id)

        if (from_id, to_id) in self._edge_set:
            return False

        self._edge_set.add((from_id, to_id))
        self._forward_adjacency[from_id].append(to_id)
        self._reverse_adjacency[to_id].append(from_id)
        return True

    def add_edge(self, from_id: NodeID, to_id: NodeID) -> bool:
        """
        Add an undirected edge as a pair of directed edges.

        A self-loop is recorded once, the second directed insert being a no-op.

        Returns:
            True if at least one directed edge was recorded
        """
        forward = self.add_directed_edge(from_id, to_id)
        backward = self.add_directed_edge(to_id, from_id)
        return forward or backward

    def add_edges_from(self, pairs: Iterable[Tuple[NodeID, NodeID]]) -> int:
        """
        Add directed edges in sequence order.

        Args:
            pairs: Iterable of (from, to) pairs

        Returns:
            Number of edges actually recorded
        """
        added = 0
        for from_id, to_id in pairs:
            if self.add_directed_edge(from_id, to_id):
                added += 1
        return added

    # ========================================================================
    # PAYLOAD ACCESS
    # ========================================================================

    def get_node_data(self, node_id: NodeID) -> NodeData:
        """
        Get the payload of a node.

        Raises:
            UnknownNodeError: If the node is not in the directory
        """
        try:
            return self._node_data[node_id]
        except KeyError:
            raise UnknownNodeError(node_id) from None

    def set_node_data(self, node_id: NodeID, data: NodeData):
        """
        Replace the payload of an existing node.

        This is the only operation that overwrites a payload; it never creates nodes.

        Raises:
            UnknownNodeError: If the node is not in the directory
        """
        if node_id not in self._node_data:
            raise UnknownNodeError(node_id)
        self._node_data[node_id] = data

    # ========================================================================
    # QUERIES
    # ========================================================================

    @property
    def nodes(self) -> Tuple[NodeID, ...]:
        """Node directory in insertion order."""
        return tuple(self._node_directory)

    def has_node(self, node_id: NodeID) -> bool:
        return node_id in self._node_data

    def has_edge(self, from_id: NodeID, to_id: NodeID) -> bool:
        return (from_id, to_id) in self._edge_set

    def node_count(self) -> int:
        return len(self._node_directory)

    def edge_count(self) -> int:
        """Number of directed edges; an undirected edge counts twice, a self-loop once."""
        return len(self._edge_set)

    def neighbors(self, node_id: NodeID) -> List[NodeID]:
        """
        Get successors of a node in insertion order.

        Args:
            node_id: Node to look up

        Returns:
            List of successor IDs, empty for unknown nodes
        """
        return list(self._forward_adjacency.get(node_id, ()))

    def reverse_neighbors(self, node_id: NodeID) -> List[NodeID]:
        """
        Get predecessors of a node in insertion order.

        Args:
            node_id: Node to look up

        Returns:
            List of predecessor IDs, empty for unknown nodes
        """
        return list(self._reverse_adjacency.get(node_id, ()))

    def neighborhood(self, node_id: NodeID) -> List[NodeID]:
        """Successors of a node followed by the node itself."""
        neighborhood = self.neighbors(node_id)
        neighborhood.append(node_id)
        return neighborhood

    def edge_tuples(self) -> List[Tuple[NodeID, NodeID]]:
        """
        Get every recorded directed edge.

        The order of the result is not part of the contract; compare it as a set.
        """
        return [
            (from_id, to_id)
            for from_id, successors in self._forward_adjacency.items()
            for to_id in successors
        ]

    def successor_map(self) -> Dict[NodeID, List[NodeID]]:
        """Snapshot of the forward adjacency, one entry per known node."""
        return {node_id: list(successors) for node_id, successors in self._forward_adjacency.items()}

    def __contains__(self, node_id) -> bool:
        return node_id in self._node_data

    def __len__(self) -> int:
        return len(self._node_directory)
