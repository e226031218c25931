"""
Reference mesh builders - return contract-compliant mesh dicts.

No operators dependency.
"""

from .polyhedra import (
    build_single_triangle,
    build_triangle_pair,
    build_tetrahedron,
    build_octahedron,
    build_triangulated_grid,
)
