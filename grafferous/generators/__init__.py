"""
Parametric graph generators.

Every generator returns a fully populated Graph built only through the graph's
public insertion methods.
"""

from .lattice import generate_grid, generate_cycle, generate_hexagonal_grid
from .random_graph import generate_random

__all__ = [
    'generate_grid',
    'generate_cycle',
    'generate_hexagonal_grid',
    'generate_random',
]
