"""
Unsigned Adjacency Matrices
===========================

Pure combinatorics - NO geometry.

DEFINITIONS:
    A0: E × V  vertex-edge adjacency   A0[e, v] = 1 iff v is an endpoint of e
    A1: F × E  edge-face adjacency     A1[f, e] = 1 iff e is incident to f

These are |d₀| and |d₁|: the DEC incidence operators with orientation signs
dropped. Stored as boolean scipy.sparse CSR arrays.

IDENTITIES (non-degenerate mesh):
    1. Each row of A0 has exactly 2 nonzeros
    2. Each row of A1 has deg(f) nonzeros (3 for a triangle mesh)
    3. (A1 A0)[f, v] ∈ {0, 2}   (unsigned analogue of d₁d₀ = 0)
       A face vertex is touched by exactly two of the face's edges.

FACES PER EDGE (column sums of A1):
    1 → boundary edge
    2 → interior edge of a 2-manifold
    >2 → non-manifold edge
"""

import logging
import warnings

import numpy as np
from scipy.sparse import csr_array
from typing import List, Tuple, Dict, Any

from ..spec.constants import ADJACENCY_DTYPE, EDGES_PER_FACE_VERTEX
from ..spec.structures import assign_element_indices

logger = logging.getLogger(__name__)


def _boolean_matrix(rows: List[int], cols: List[int], shape: Tuple[int, int]) -> csr_array:
    """Assemble a boolean CSR array with a single True at each (row, col) pair."""
    rows = np.asarray(rows, dtype=np.int64)
    cols = np.asarray(cols, dtype=np.int64)
    data = np.ones(len(rows), dtype=ADJACENCY_DTYPE)
    return csr_array((data, (rows, cols)), shape=shape, dtype=ADJACENCY_DTYPE)


def build_vertex_edge_adjacency(vertices,
                                edges: List[Tuple[int, int]]) -> csr_array:
    """
    Build vertex-edge adjacency A0.

    DEFINITION:
        A0[e, v1] = A0[e, v2] = 1 for edge e = (v1, v2)
        A0[e, v] = 0 otherwise

    Args:
        vertices: (V, 3) array (only used for V count)
        edges: list of E tuples (i, j)

    Returns:
        A0: (E, V) boolean sparse matrix

    DEGENERATE EDGE:
        An edge (v, v) sets A0[e, v] once (one nonzero in that row, not a
        double count) and emits a UserWarning.

    FAIL-FAST:
        Raises ValueError if an endpoint is outside [0, V).
    """
    V = len(vertices)
    E = len(edges)

    rows, cols = [], []
    for e_idx, (i, j) in enumerate(edges):
        if not (0 <= i < V and 0 <= j < V):
            raise ValueError(f"Edge {e_idx}: ({i},{j}) has endpoint out of bounds [0, {V-1}]")
        if i == j:
            warnings.warn(
                f"Degenerate edge {e_idx}: both endpoints are vertex {i}. "
                f"A0 row {e_idx} gets a single nonzero.",
                UserWarning
            )
            rows.append(e_idx)
            cols.append(i)
            continue
        rows.extend((e_idx, e_idx))
        cols.extend((i, j))

    return _boolean_matrix(rows, cols, (E, V))


def build_face_edge_adjacency(edges: List[Tuple[int, int]],
                              face_edges: List[List[int]]) -> csr_array:
    """
    Build edge-face adjacency A1.

    DEFINITION:
        A1[f, e] = 1 if edge e is on the boundary of face f
        A1[f, e] = 0 otherwise

    Args:
        edges: list of E tuples (i, j) (only used for E count)
        face_edges: list of F lists, face_edges[f] = incident edge indices

    Returns:
        A1: (F, E) boolean sparse matrix

    FAIL-FAST:
        Raises ValueError if a face references an edge outside [0, E) or
        lists the same edge twice (invalid face cycle).
    """
    E = len(edges)
    F = len(face_edges)

    rows, cols = [], []
    for f_idx, incident in enumerate(face_edges):
        if len(set(incident)) != len(incident):
            raise ValueError(f"Face {f_idx} uses an edge twice. "
                             f"This indicates an invalid face cycle. Face edges: {incident}")
        for e_idx in incident:
            if not 0 <= e_idx < E:
                raise ValueError(f"Face {f_idx} references edge {e_idx}, out of bounds [0, {E-1}]")
            rows.append(f_idx)
            cols.append(e_idx)

    return _boolean_matrix(rows, cols, (F, E))


def build_adjacency_matrices(mesh: dict, indices: Dict[str, np.ndarray] = None
                             ) -> Tuple[csr_array, csr_array]:
    """
    Build both adjacency matrices A0 and A1 for a contract-compliant mesh.

    IDENTITY:
        Every nonzero of A1 A0 equals 2.

    This is the unsigned shadow of d₁d₀ = 0: walking around face f, each of
    its vertices is entered by one edge and left by another.

    Args:
        mesh: contract-compliant mesh dict
        indices: result of assign_element_indices(mesh), if the caller already
            has it (the mesh is then not validated again)

    Returns:
        A0: (E, V) vertex-edge adjacency
        A1: (F, E) edge-face adjacency

    VERIFICATION:
        Raises ValueError if the identity fails (face cycle does not close).
    """
    if indices is None:
        assign_element_indices(mesh)

    A0 = build_vertex_edge_adjacency(mesh['V'], mesh['E'])
    A1 = build_face_edge_adjacency(mesh['E'], mesh['FE'])

    a1a0 = A1.astype(np.int64) @ A0.astype(np.int64)
    values = a1a0.data[a1a0.data != 0]
    if np.any(values != EDGES_PER_FACE_VERTEX):
        bad = sorted(set(int(x) for x in values) - {EDGES_PER_FACE_VERTEX})
        raise ValueError(f"Face cycles do not close: (A1 A0) has entries {bad}, expected only "
                         f"{EDGES_PER_FACE_VERTEX}")

    logger.debug("Built A0 %s (nnz=%d) and A1 %s (nnz=%d) for mesh %r",
                 A0.shape, A0.nnz, A1.shape, A1.nnz, mesh.get('name', 'mesh'))
    return A0, A1


# =============================================================================
# VERIFICATION HELPERS
# =============================================================================

def verify_faces_per_edge(A1: csr_array) -> Dict[str, Any]:
    """
    Count incident faces per edge.

    Args:
        A1: (F, E) edge-face adjacency

    Returns:
        dict with:
            'min': int - minimum faces per edge
            'max': int - maximum faces per edge
            'histogram': dict - {count: n_edges_with_that_count}
            'n_boundary_edges': int - edges with exactly one face
            'is_manifold': bool - no edge has more than two faces
    """
    faces_per_edge = np.asarray(A1.astype(np.int64).sum(axis=0)).ravel()

    if len(faces_per_edge) == 0:
        return {'min': 0, 'max': 0, 'histogram': {},
                'n_boundary_edges': 0, 'is_manifold': True}

    unique, counts = np.unique(faces_per_edge, return_counts=True)
    histogram = {int(u): int(c) for u, c in zip(unique, counts)}

    return {
        'min': int(np.min(faces_per_edge)),
        'max': int(np.max(faces_per_edge)),
        'histogram': histogram,
        'n_boundary_edges': histogram.get(1, 0),
        'is_manifold': bool(np.max(faces_per_edge) <= 2),
    }


# =============================================================================
# CONTRACT-AWARE WRAPPER
# =============================================================================

def build_adjacency_from_mesh(mesh: dict) -> dict:
    """
    Build adjacency matrices and their verification data from a mesh dict.

    Returns:
        dict with:
            A0, A1: adjacency matrices
            indices: element index ranges from assign_element_indices()
            faces_per_edge: verify_faces_per_edge() result
            vertex_degree: (V,) number of edges at each vertex
    """
    indices = assign_element_indices(mesh)
    A0, A1 = build_adjacency_matrices(mesh, indices)

    return {
        'A0': A0,
        'A1': A1,
        'indices': indices,
        'faces_per_edge': verify_faces_per_edge(A1),
        'vertex_degree': np.asarray(A0.astype(np.int64).sum(axis=0)).ravel(),
    }


# Self-test when run directly
# Run with: python -m simplicial_ops.operators.adjacency (from src/)
if __name__ == "__main__":
    from simplicial_ops.builders import build_tetrahedron, build_triangulated_grid

    print("=" * 60)
    print("ADJACENCY MATRICES - VERIFICATION")
    print("=" * 60)

    for mesh in (build_tetrahedron(), build_triangulated_grid(3, 2)):
        ops = build_adjacency_from_mesh(mesh)
        print(f"\nMesh: {mesh['name']}")
        print(f"V={mesh['n_V']}, E={mesh['n_E']}, F={mesh['n_F']}")
        print(f"  A0 shape {ops['A0'].shape}, nnz={ops['A0'].nnz} (expected 2E = {2*mesh['n_E']})")
        print(f"  A1 shape {ops['A1'].shape}, nnz={ops['A1'].nnz}")
        print(f"  faces per edge: {ops['faces_per_edge']['histogram']}")

    print("\n" + "=" * 60)
    print("Verification complete.")
    print("=" * 60)
