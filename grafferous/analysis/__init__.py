"""
Structural analysis of graphs.

This module contains the classifier (undirected and DAG checks) and the path
enumerator built on top of it.
"""

from .classification import StructuralClassifier
from .paths import PathEnumerator, count_paths

__all__ = [
    'StructuralClassifier',
    'PathEnumerator',
    'count_paths',
]
