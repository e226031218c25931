"""
Global constants for simplicial_ops
===================================

All magic numbers in ONE place.
"""

import numpy as np

# Simplex dimensions
DIM_VERTEX = 0
DIM_EDGE = 1
DIM_FACE = 2

# Returned by is_pure_complex() when the subset is not a pure complex
NOT_PURE = -1

# Combinatorial invariants (non-degenerate mesh)
ENDPOINTS_PER_EDGE = 2     # each row of A0 has exactly 2 nonzeros
EDGES_PER_FACE_VERTEX = 2  # each vertex of a face is touched by 2 of its edges
TRIANGLE_DEGREE = 3        # row of A1 for a triangle face
MIN_FACE_DEGREE = 3

# Storage
ADJACENCY_DTYPE = bool     # A0, A1 are boolean-valued
INDICATOR_DTYPE = np.int64 # indicator vectors (0/1), int so mat-vec gives counts

# =============================================================================
# ADJACENCY CONVENTIONS
# =============================================================================
#
#   A0: E × V   A0[e, v] = 1 iff v is an endpoint of e
#   A1: F × E   A1[f, e] = 1 iff e is incident to f
#
# These are the unsigned versions of the DEC operators d₀, d₁.
# The unsigned analogue of d₁d₀ = 0 is:
#
#   (A1 A0)[f, v] ∈ {0, 2}
#
# since a vertex of a face is the endpoint of exactly two of the face's edges.
#
# Column sums:
#   A0.sum(axis=0)[v] = vertex degree
#   A1.sum(axis=0)[e] = faces per edge (1 on boundary, 2 in interior of a manifold)
#
