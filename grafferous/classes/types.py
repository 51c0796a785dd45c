"""
Identifier and payload model shared by every graph component.

Node identifiers are any hashable, equality-comparable value. Node payloads are
arbitrary objects; because Python has no notion of a "zero value", each graph
carries a factory that builds the default payload for nodes created without
explicit data.
"""

from typing import Callable, Hashable, TypeVar

NodeID = TypeVar('NodeID', bound=Hashable)
NodeData = TypeVar('NodeData')

DataFactory = Callable[[], NodeData]


def default_data_factory() -> None:
    """Default payload used when a graph is created without a data factory."""
    return None
