"""
Core graph data structures and management.

This module contains the node and edge store, the Graph facade and the
declarative GraphBuilder.
"""

from .store import GraphStore
from .graph import Graph
from .builder import GraphBuilder

__all__ = [
    'GraphStore',
    'Graph',
    'GraphBuilder',
]
