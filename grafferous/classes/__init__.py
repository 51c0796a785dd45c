"""
Core data classes for graph representation.

This module contains the identifier/payload typing model and the exception
classes used throughout the grafferous library.
"""

from .types import NodeID, NodeData, DataFactory, default_data_factory
from .errors import GraphError, UnknownNodeError, NotAcyclicError

__all__ = [
    'NodeID',
    'NodeData',
    'DataFactory',
    'default_data_factory',
    'GraphError',
    'UnknownNodeError',
    'NotAcyclicError',
]
