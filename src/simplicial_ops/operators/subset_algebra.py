"""
Subset Algebra on a Simplicial Complex
======================================

Star, closure, link and boundary of arbitrary simplex subsets of a mesh,
computed with the adjacency matrices A0 (E × V) and A1 (F × E).

OPERATORS (S = vertices ∪ edges ∪ faces):

    St(S) = S ∪ {e : e ∋ v, v ∈ S}  ∪ {f : f ∋ e, e ∈ St_E(S)}     (upward)
    Cl(S) = S ∪ {e : e ⊂ f, f ∈ S}  ∪ {v : v ∈ e, e ∈ Cl_E(S)}     (downward)
    Lk(S) = Cl(St(S)) - St(Cl(S))

    In matrix form, with indicator vectors x_V, x_E, x_F:

        star:     x_E' = x_E ∨ (A0 x_V)      x_F' = x_F ∨ (A1 x_E')
        closure:  x_E' = x_E ∨ (A1ᵀ x_F)     x_V' = x_V ∨ (A0ᵀ x_E')

    Each pass feeds the next: edges added from vertices pull in their
    faces, edges pulled in from faces push down to their vertices.

PROPERTIES:
    Cl(Cl(S)) = Cl(S)             (idempotent)
    St(S) ⊆ St(St(S))             (containment only; equality is not
                                   part of the star contract)
    Lk(S) ∩ Cl(S) = ∅             (Cl(S) ⊆ St(Cl(S)))

PURITY:
    A complex is pure of degree d if every maximal simplex has dimension d.
    is_pure_complex() returns d ∈ {0, 1, 2}, or -1 if S is not a pure complex.

BOUNDARY (requires a pure complex of degree d):
    d = 2: Cl({e : exactly one face of S contains e})
    d = 1: {v : exactly one edge of S contains v}
    d = 0: ∅

REFERENCE: Crane, "Discrete Differential Geometry: An Applied Introduction",
           Ch. 2 (simplicial complexes)
"""

import logging

import numpy as np

from ..spec.constants import DIM_VERTEX, DIM_EDGE, DIM_FACE, NOT_PURE
from ..spec.structures import assign_element_indices
from ..spec.subset import MeshSubset
from .adjacency import build_adjacency_matrices
from .encoding import (
    build_vertex_vector,
    build_edge_vector,
    build_face_vector,
    subset_from_vectors,
)

logger = logging.getLogger(__name__)


class SimplicialComplexOperators:
    """
    Subset operators over one mesh.

    A0 and A1 are built once in __init__ and never modified afterwards, so
    one instance can serve any number of read-only calls. If the mesh
    topology changes, build a new instance.

    Attributes:
        mesh: the contract-compliant mesh dict
        indices: element index ranges (see assign_element_indices)
        A0: (E, V) boolean vertex-edge adjacency
        A1: (F, E) boolean edge-face adjacency
    """

    def __init__(self, mesh: dict):
        self.mesh = mesh
        self.indices = assign_element_indices(mesh)
        self.A0, self.A1 = build_adjacency_matrices(mesh, self.indices)

        # Integer copies so that mat-vec products count incidences
        self._A0 = self.A0.astype(np.int64)
        self._A1 = self.A1.astype(np.int64)
        self._A0T = self._A0.T.tocsr()
        self._A1T = self._A1.T.tocsr()

        logger.debug("SimplicialComplexOperators ready for mesh %r", mesh.get('name', 'mesh'))

    @property
    def n_V(self) -> int:
        return self.A0.shape[1]

    @property
    def n_E(self) -> int:
        return self.A0.shape[0]

    @property
    def n_F(self) -> int:
        return self.A1.shape[0]

    # =========================================================================
    # Indicator vectors
    # =========================================================================

    def build_vertex_vector(self, subset: MeshSubset) -> np.ndarray:
        return build_vertex_vector(subset, self.n_V)

    def build_edge_vector(self, subset: MeshSubset) -> np.ndarray:
        return build_edge_vector(subset, self.n_E)

    def build_face_vector(self, subset: MeshSubset) -> np.ndarray:
        return build_face_vector(subset, self.n_F)

    def _vectors(self, subset: MeshSubset):
        """Indicator vectors of all three components (validates indices)."""
        return (self.build_vertex_vector(subset),
                self.build_edge_vector(subset),
                self.build_face_vector(subset))

    # =========================================================================
    # Star / closure / link
    # =========================================================================

    def star(self, subset: MeshSubset) -> MeshSubset:
        """
        Simplicial star St(S): S plus every simplex having a simplex of S as a face.

        Vertices pull in their edges; all edges (given or added) pull in
        their faces. Faces are top-dimensional and add nothing.
        """
        x_V, x_E, x_F = self._vectors(subset)

        x_E = x_E + self._A0 @ x_V
        x_F = x_F + self._A1 @ (x_E > 0).astype(x_E.dtype)

        return subset_from_vectors(x_V, x_E, x_F)

    def closure(self, subset: MeshSubset) -> MeshSubset:
        """
        Closure Cl(S): the smallest simplicial complex containing S.

        Faces pull in their edges; all edges (given or added) pull in
        their endpoints.
        """
        x_V, x_E, x_F = self._vectors(subset)

        x_E = x_E + self._A1T @ x_F
        x_V = x_V + self._A0T @ (x_E > 0).astype(x_E.dtype)

        return subset_from_vectors(x_V, x_E, x_F)

    def link(self, subset: MeshSubset) -> MeshSubset:
        """Link Lk(S) = Cl(St(S)) - St(Cl(S))."""
        return self.closure(self.star(subset)) - self.star(self.closure(subset))

    # =========================================================================
    # Predicates
    # =========================================================================

    def is_complex(self, subset: MeshSubset) -> bool:
        """True if S is closed under taking faces, i.e. Cl(S) = S."""
        return self.closure(subset) == subset

    def is_pure_complex(self, subset: MeshSubset) -> int:
        """
        Degree of S if it is a pure simplicial complex, else -1.

        Returns:
            2 if S has faces and every edge/vertex of S lies on a face/edge of S
            1 if S has no faces and every vertex of S lies on an edge of S
            0 if S has only vertices (or is empty)
            -1 otherwise (including when S is not a complex)
        """
        if not self.is_complex(subset):
            return NOT_PURE

        x_V, x_E, x_F = self._vectors(subset)

        # Is every vertex of S an endpoint of some edge of S?
        vertices_covered = np.all((self._A0T @ x_E)[x_V > 0] > 0)

        if subset.faces:
            edges_covered = np.all((self._A1T @ x_F)[x_E > 0] > 0)
            return DIM_FACE if (edges_covered and vertices_covered) else NOT_PURE

        if subset.edges:
            return DIM_EDGE if vertices_covered else NOT_PURE

        return DIM_VERTEX

    # =========================================================================
    # Boundary
    # =========================================================================

    def boundary(self, subset: MeshSubset) -> MeshSubset:
        """
        Boundary ∂S of a pure complex.

        Degree 2: closure of the edges contained in exactly one face of S.
        Degree 1: vertices contained in exactly one edge of S.
        Degree 0: empty.

        Raises:
            ValueError: if S is not a pure complex (degree is undefined)
        """
        degree = self.is_pure_complex(subset)

        if degree == NOT_PURE:
            raise ValueError(f"boundary() requires a pure simplicial complex, got {subset!r}")

        if degree == DIM_FACE:
            faces_per_edge = self._A1T @ self.build_face_vector(subset)
            free_edges = subset_from_vectors(x_E=(faces_per_edge == 1))
            return self.closure(free_edges)

        if degree == DIM_EDGE:
            edges_per_vertex = self._A0T @ self.build_edge_vector(subset)
            return subset_from_vectors(x_V=(edges_per_vertex == 1))

        return MeshSubset()


# Self-test when run directly
# Run with: python -m simplicial_ops.operators.subset_algebra (from src/)
if __name__ == "__main__":
    from simplicial_ops.builders import build_octahedron

    print("=" * 60)
    print("SUBSET ALGEBRA - VERIFICATION")
    print("=" * 60)

    mesh = build_octahedron()
    ops = SimplicialComplexOperators(mesh)
    print(f"\nMesh: {mesh['name']}, V={mesh['n_V']}, E={mesh['n_E']}, F={mesh['n_F']}")

    v = MeshSubset(vertices=[0])
    print(f"\nSt(v0)  = {ops.star(v)}")
    print(f"Cl(St)  = {ops.closure(ops.star(v))}")
    print(f"Lk(v0)  = {ops.link(v)} (expected 4-cycle)")

    disk = ops.closure(ops.star(v))
    print(f"\nis_pure_complex(Cl(St(v0))) = {ops.is_pure_complex(disk)} (expected 2)")
    print(f"∂(Cl(St(v0)))               = {ops.boundary(disk)}")

    print("\n" + "=" * 60)
    print("Verification complete.")
    print("=" * 60)
