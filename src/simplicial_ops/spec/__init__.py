"""Mesh contract, MeshSubset and constants."""

from .constants import (
    DIM_VERTEX,
    DIM_EDGE,
    DIM_FACE,
    NOT_PURE,
    ENDPOINTS_PER_EDGE,
    EDGES_PER_FACE_VERTEX,
    TRIANGLE_DEGREE,
)
from .structures import (
    canonical_edge,
    enumerate_edges,
    validate_mesh,
    create_mesh,
    assign_element_indices,
    find_edge,
)
from .subset import MeshSubset
