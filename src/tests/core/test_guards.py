"""
Guard and Edge Case Tests for simplicial_ops
============================================

Tests for input validation, precondition failures and degenerate inputs.
Separated from test_all.py to keep the main suite focused on invariants.

Run: python -m pytest tests/core/test_guards.py -v
"""

import pytest
import numpy as np

from simplicial_ops.builders import (
    build_single_triangle,
    build_triangle_pair,
    build_tetrahedron,
    build_triangulated_grid,
)
from simplicial_ops.operators import (
    SimplicialComplexOperators,
    build_vertex_edge_adjacency,
    build_face_edge_adjacency,
    build_vertex_vector,
    verify_faces_per_edge,
)
from simplicial_ops.spec import (
    MeshSubset,
    create_mesh,
    validate_mesh,
    assign_element_indices,
    enumerate_edges,
    find_edge,
)


# =============================================================================
# P1: CRITICAL - Out-of-range subsets are rejected
# =============================================================================

@pytest.mark.parametrize("subset", [
    MeshSubset(vertices=[3]),
    MeshSubset(vertices=[-1]),
    MeshSubset(edges=[3]),
    MeshSubset(faces=[1]),
])
def test_out_of_range_subset_raises(subset):
    """P1.1: Every operator rejects indices outside the mesh."""
    ops = SimplicialComplexOperators(build_single_triangle())

    for op in (ops.star, ops.closure, ops.link, ops.is_complex,
               ops.is_pure_complex, ops.boundary):
        with pytest.raises(ValueError, match="out of range"):
            op(subset)


def test_vector_builder_out_of_range():
    """P1.2: Encoder rejects the same way the engine does."""
    with pytest.raises(ValueError, match=r"vertex index 7 out of range \[0, 3\)"):
        build_vertex_vector(MeshSubset(vertices=[0, 7]), 3)


def test_boundary_requires_pure_complex():
    """P1.3: boundary() on a non-pure subset is a precondition failure."""
    mesh = build_tetrahedron()
    ops = SimplicialComplexOperators(mesh)

    with pytest.raises(ValueError, match="pure"):
        ops.boundary(MeshSubset(faces=[0]))  # not a complex

    apex = (set(range(4)) - set(mesh['F'][0])).pop()
    mixed = ops.closure(MeshSubset(vertices=[apex], faces=[0]))
    with pytest.raises(ValueError, match="pure"):
        ops.boundary(mixed)


# =============================================================================
# P2: Operators never modify their input
# =============================================================================

def test_operators_do_not_mutate_input():
    mesh = build_triangulated_grid(2, 2)
    ops = SimplicialComplexOperators(mesh)
    S = ops.closure(MeshSubset(faces=[0, 1, 2]))
    before = S.copy()

    results = [ops.star(S), ops.closure(S), ops.link(S), ops.boundary(S)]
    ops.is_complex(S)
    ops.is_pure_complex(S)

    assert S == before
    for result in results:
        assert result is not S


def test_closure_of_complex_is_new_object():
    ops = SimplicialComplexOperators(build_triangle_pair())
    S = ops.closure(MeshSubset(faces=[0]))

    cl = ops.closure(S)
    cl.add_vertex(3)
    assert 3 not in S.vertices


# =============================================================================
# P3: Adjacency builder guards
# =============================================================================

def test_degenerate_edge_warns_and_sets_once():
    """P3.1: Edge (v, v) → single nonzero in its row, plus a UserWarning."""
    vertices = np.zeros((3, 3))
    edges = [(0, 1), (2, 2)]

    with pytest.warns(UserWarning, match="Degenerate edge 1"):
        A0 = build_vertex_edge_adjacency(vertices, edges)

    dense = A0.toarray()
    assert dense[0].sum() == 2
    assert dense[1].sum() == 1
    assert dense[1, 2]


def test_edge_endpoint_out_of_bounds():
    with pytest.raises(ValueError, match="out of bounds"):
        build_vertex_edge_adjacency(np.zeros((2, 3)), [(0, 2)])


def test_face_uses_edge_twice():
    with pytest.raises(ValueError, match="twice"):
        build_face_edge_adjacency([(0, 1), (1, 2), (0, 2)], [[0, 1, 1]])


def test_face_edge_out_of_bounds():
    with pytest.raises(ValueError, match="out of bounds"):
        build_face_edge_adjacency([(0, 1), (1, 2), (0, 2)], [[0, 1, 3]])


def test_empty_adjacency():
    """No faces: A1 is 0×E and every edge has zero faces."""
    A1 = build_face_edge_adjacency([(0, 1), (1, 2)], [])

    assert A1.shape == (0, 2)
    result = verify_faces_per_edge(A1)
    assert result['histogram'] == {0: 2}
    assert result['n_boundary_edges'] == 0


# =============================================================================
# P4: Mesh contract
# =============================================================================

def test_enumerate_edges_first_appearance_order():
    edges, face_edges = enumerate_edges([[0, 1, 2], [0, 2, 3]])

    assert edges == [(0, 1), (1, 2), (0, 2), (2, 3), (0, 3)]
    assert face_edges == [[0, 1, 2], [2, 3, 4]]


def test_validate_mesh_missing_field():
    is_valid, errors = validate_mesh({'V': np.zeros((3, 3))}, strict=False)

    assert not is_valid
    assert any("FE" in err for err in errors)
    with pytest.raises(ValueError, match="Mesh contract violation"):
        validate_mesh({'V': np.zeros((3, 3))})


def test_create_mesh_rejects_bad_faces():
    V = np.zeros((4, 3))
    with pytest.raises(ValueError, match="repeated vertices"):
        create_mesh(V, [[0, 1, 1]])
    with pytest.raises(ValueError, match="< 3 vertices"):
        create_mesh(V, [[0, 1]])
    with pytest.raises(ValueError, match="out of bounds"):
        create_mesh(V, [[0, 1, 4]])


def test_inconsistent_face_edges_rejected():
    """P4.1: Index assignment fails fast on a corrupted FE table."""
    mesh = build_single_triangle()
    mesh['FE'] = [[0, 1, 1]]

    with pytest.raises(ValueError, match="FE"):
        assign_element_indices(mesh)
    with pytest.raises(ValueError):
        SimplicialComplexOperators(mesh)


def test_stale_counts_rejected():
    mesh = build_triangle_pair()
    mesh['n_E'] = 4

    with pytest.raises(ValueError, match="n_E=4"):
        assign_element_indices(mesh)


def test_find_edge():
    mesh = build_triangle_pair()

    assert find_edge(mesh, 2, 0) == find_edge(mesh, 0, 2) == 2
    with pytest.raises(KeyError):
        find_edge(mesh, 1, 3)


# =============================================================================
# P5: Wire edges and isolated vertices
# =============================================================================

def test_wire_edge_and_isolated_vertex():
    """Edges without faces and vertices without edges behave as 1- and 0-simplices."""
    V = np.zeros((5, 3))
    mesh = create_mesh(V, [[0, 1, 2]], E=[(2, 3)], name="triangle_with_tail")
    ops = SimplicialComplexOperators(mesh)

    tail = find_edge(mesh, 2, 3)
    assert tail == 3
    assert mesh['n_E'] == 4

    assert ops.star(MeshSubset(vertices=[3])) == MeshSubset(vertices=[3], edges=[tail])
    assert ops.star(MeshSubset(vertices=[4])) == MeshSubset(vertices=[4])
    assert ops.link(MeshSubset(vertices=[3])) == MeshSubset(vertices=[2])

    everything = ops.closure(MeshSubset(vertices=[4], edges=[tail], faces=[0]))
    assert ops.is_complex(everything)
    assert ops.is_pure_complex(everything) == -1
