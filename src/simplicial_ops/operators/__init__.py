"""Operators - adjacency matrices, indicator vectors, subset algebra."""

from .adjacency import (
    build_vertex_edge_adjacency,
    build_face_edge_adjacency,
    build_adjacency_matrices,
    build_adjacency_from_mesh,
    verify_faces_per_edge,
)

from .encoding import (
    build_vertex_vector,
    build_edge_vector,
    build_face_vector,
    subset_from_vectors,
)

from .subset_algebra import SimplicialComplexOperators
