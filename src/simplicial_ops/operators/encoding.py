"""
Indicator vectors for MeshSubset components.

    x_V ∈ {0,1}^V, x_E ∈ {0,1}^E, x_F ∈ {0,1}^F

x[i] = 1 iff i is in the corresponding subset component. Stored as int64 so
that A @ x counts incidences instead of or-ing them.
"""

import numpy as np
from typing import Iterable

from ..spec.constants import INDICATOR_DTYPE
from ..spec.subset import MeshSubset


def _indicator(indices: Iterable[int], n: int, kind: str) -> np.ndarray:
    idx = np.fromiter(indices, dtype=np.int64)
    if idx.size and (idx.min() < 0 or idx.max() >= n):
        bad = idx[(idx < 0) | (idx >= n)]
        raise ValueError(f"MeshSubset {kind} index {int(bad[0])} out of range [0, {n})")
    x = np.zeros(n, dtype=INDICATOR_DTYPE)
    x[idx] = 1
    return x


def build_vertex_vector(subset: MeshSubset, n_vertices: int) -> np.ndarray:
    """(V,) 0/1 vector of the selected vertices."""
    return _indicator(subset.vertices, n_vertices, 'vertex')


def build_edge_vector(subset: MeshSubset, n_edges: int) -> np.ndarray:
    """(E,) 0/1 vector of the selected edges."""
    return _indicator(subset.edges, n_edges, 'edge')


def build_face_vector(subset: MeshSubset, n_faces: int) -> np.ndarray:
    """(F,) 0/1 vector of the selected faces."""
    return _indicator(subset.faces, n_faces, 'face')


def subset_from_vectors(x_V=None, x_E=None, x_F=None) -> MeshSubset:
    """
    Inverse of the build_*_vector functions.

    Any nonzero entry counts as selected, so count vectors (e.g. A0 @ x_V)
    can be passed directly. Missing components are empty.
    """
    def support(x):
        if x is None:
            return ()
        return np.flatnonzero(np.asarray(x)).tolist()

    return MeshSubset(support(x_V), support(x_E), support(x_F))
