"""
Grafferous - Generic In-Memory Graph Library

A Python library for building graphs programmatically and running structural
queries on them. Nodes are identified by any hashable key and may carry
arbitrary payloads; edges are directed or undirected.

Main Classes:
    Graph: Graph facade (store plus analysis)
    GraphStore: Node and edge store enforcing adjacency invariants
    GraphBuilder: Declarative construction sugar
    StructuralClassifier: Undirected and DAG checks
    PathEnumerator: Path counting on DAGs

Example:
    >>> from grafferous import Graph
    >>> g = Graph.from_edges([(0, 1), (0, 2), (1, 3), (2, 3)])
    >>> g.is_directed_acyclic()
    True
    >>> g.count_paths(0, 3)
    2
"""

__version__ = "0.1.0"

from grafferous.classes.errors import GraphError, UnknownNodeError, NotAcyclicError
from grafferous.core.store import GraphStore
from grafferous.core.graph import Graph
from grafferous.core.builder import GraphBuilder
from grafferous.analysis.classification import StructuralClassifier
from grafferous.analysis.paths import PathEnumerator, count_paths
from grafferous.generators import (
    generate_grid,
    generate_cycle,
    generate_hexagonal_grid,
    generate_random,
)

__all__ = [
    'Graph',
    'GraphStore',
    'GraphBuilder',
    'StructuralClassifier',
    'PathEnumerator',
    'count_paths',
    'generate_grid',
    'generate_cycle',
    'generate_hexagonal_grid',
    'generate_random',
    'GraphError',
    'UnknownNodeError',
    'NotAcyclicError',
]
