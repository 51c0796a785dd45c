"""
Exception classes raised by grafferous.

Duplicate node insertion is deliberately absent: it is a non-fatal condition
reported through the graph's logger, never raised.
"""

from typing import Hashable, List, Optional


class GraphError(Exception):
    """Base class for all errors raised by the graph library."""


class UnknownNodeError(GraphError, KeyError):
    """
    Raised when an operation requires a node that is not in the directory.

    Adjacency lookups never raise this; they return empty results instead.
    """

    def __init__(self, node_id: Hashable, message: Optional[str] = None):
        self.node_id = node_id
        super().__init__(message or f"Unknown node: {node_id!r}")

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.args[0]


class NotAcyclicError(GraphError, ValueError):
    """
    Raised when an algorithm requires a directed acyclic graph.

    Attributes:
        cycle_members: Nodes found on a directed cycle. Empty when the graph was
            refused only because its edge relation is symmetric.
    """

    def __init__(self, message: str, cycle_members: Optional[List[Hashable]] = None):
        self.cycle_members = list(cycle_members or [])
        super().__init__(message)
