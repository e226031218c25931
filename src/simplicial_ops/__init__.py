"""
SIMPLICIAL_OPS - Combinatorial operators on triangle meshes
===========================================================

NO geometry. NO plotting. Mesh coordinates are carried, never used.

Structure:
    builders/   - Reference meshes (triangle, tetrahedron, grid, ...)
    operators/  - Adjacency matrices A0/A1, indicator vectors, subset algebra
    spec/       - Constants, mesh contract, MeshSubset

Layering:
    builders → spec
    operators → spec

All builders return a MESH DICT with:
    - V, E, F, FE (coordinates, edges, faces, face-edge incidence)
    - n_V, n_E, n_F
    - name
"""

from . import builders
from . import operators
from . import spec

from .spec import MeshSubset, create_mesh
from .operators import SimplicialComplexOperators
