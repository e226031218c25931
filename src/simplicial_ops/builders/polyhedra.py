"""
Reference Triangle Meshes
=========================

Small meshes with known combinatorics, used by the test suite and the
module self-tests.

MESHES INCLUDED:
    - Single triangle   (V=3, E=3, F=1)    disk, 3 boundary edges
    - Triangle pair     (V=4, E=5, F=2)    disk, 1 interior edge
    - Tetrahedron       (V=4, E=6, F=4)    closed, χ = 2
    - Octahedron        (V=6, E=12, F=8)   closed, χ = 2
    - Triangulated grid (nx × ny squares)  disk, χ = 1

All builders return contract-compliant mesh dicts (see spec.structures).
Faces are oriented consistently (outward for closed surfaces, CCW for
planar ones), although no operator depends on orientation.
"""

import numpy as np

from ..spec.structures import create_mesh


def _orient_outward(vertices: np.ndarray, faces: list) -> list:
    """Reorder each triangle so its normal points away from the origin."""
    oriented = []
    for face in faces:
        coords = vertices[face]
        normal = np.cross(coords[1] - coords[0], coords[2] - coords[0])
        if np.dot(normal, coords.mean(axis=0)) < 0:
            face = [face[0], face[2], face[1]]
        oriented.append(list(face))
    return oriented


def build_single_triangle() -> dict:
    """
    One triangle in the z=0 plane.

    TOPOLOGY:
        V = 3, E = 3, F = 1
        A0: 3×3, two ones per row
        A1: 1×3, all ones
    """
    V = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [0.0, 1.0, 0.0],
    ])
    F = [[0, 1, 2]]
    return create_mesh(V, F, name="single_triangle")


def build_triangle_pair() -> dict:
    """
    Unit square split along the diagonal (0, 2).

        3 ----- 2
        |     / |
        |   /   |
        | /     |
        0 ----- 1

    TOPOLOGY:
        V = 4, E = 5, F = 2
        Edge (0, 2) is shared; the other 4 edges are boundary edges.
    """
    V = np.array([
        [0.0, 0.0, 0.0],
        [1.0, 0.0, 0.0],
        [1.0, 1.0, 0.0],
        [0.0, 1.0, 0.0],
    ])
    F = [[0, 1, 2], [0, 2, 3]]
    return create_mesh(V, F, name="triangle_pair")


def build_tetrahedron() -> dict:
    """
    Regular tetrahedron centered at origin.

    TOPOLOGY:
        V = 4 vertices
        E = 6 edges (complete graph K4)
        F = 4 faces (triangles)
        χ = V - E + F = 4 - 6 + 4 = 2
    """
    # Alternating corners of the cube
    vertices = sorted([(1, 1, 1), (1, -1, -1), (-1, 1, -1), (-1, -1, 1)])
    V = np.array(vertices, dtype=float)

    faces = [[0, 1, 2], [0, 1, 3], [0, 2, 3], [1, 2, 3]]
    mesh = create_mesh(V, _orient_outward(V, faces), name="tetrahedron")

    if (mesh['n_V'], mesh['n_E'], mesh['n_F']) != (4, 6, 4):
        raise ValueError(f"Expected (V,E,F) = (4,6,4), got "
                         f"({mesh['n_V']},{mesh['n_E']},{mesh['n_F']})")
    return mesh


def build_octahedron() -> dict:
    """
    Regular octahedron centered at origin.

    TOPOLOGY:
        V = 6 vertices (on axes at ±1)
        E = 12 edges
        F = 8 faces (one per octant)
        χ = V - E + F = 6 - 12 + 8 = 2

    The link of every vertex is a 4-cycle.
    """
    vertices = sorted([
        (1, 0, 0), (-1, 0, 0),
        (0, 1, 0), (0, -1, 0),
        (0, 0, 1), (0, 0, -1),
    ])
    v_to_idx = {v: i for i, v in enumerate(vertices)}
    V = np.array(vertices, dtype=float)

    faces = []
    for sx in [-1, 1]:
        for sy in [-1, 1]:
            for sz in [-1, 1]:
                faces.append([v_to_idx[(sx, 0, 0)],
                              v_to_idx[(0, sy, 0)],
                              v_to_idx[(0, 0, sz)]])

    mesh = create_mesh(V, _orient_outward(V, faces), name="octahedron")

    if (mesh['n_V'], mesh['n_E'], mesh['n_F']) != (6, 12, 8):
        raise ValueError(f"Expected (V,E,F) = (6,12,8), got "
                         f"({mesh['n_V']},{mesh['n_E']},{mesh['n_F']})")
    return mesh


def build_triangulated_grid(nx: int, ny: int) -> dict:
    """
    Planar grid of nx × ny unit squares, each split into two triangles.

    Vertex (i, j) has index j * (nx + 1) + i.

    TOPOLOGY:
        V = (nx+1)(ny+1)
        E = nx(ny+1) + ny(nx+1) + nx·ny
        F = 2·nx·ny
        χ = 1 (disk)
        Boundary edges: 2(nx + ny)
    """
    if nx < 1 or ny < 1:
        raise ValueError(f"Grid needs nx >= 1 and ny >= 1, got nx={nx}, ny={ny}")

    V = np.array([[i, j, 0.0] for j in range(ny + 1) for i in range(nx + 1)], dtype=float)

    def vid(i, j):
        return j * (nx + 1) + i

    F = []
    for j in range(ny):
        for i in range(nx):
            a, b, c, d = vid(i, j), vid(i + 1, j), vid(i + 1, j + 1), vid(i, j + 1)
            F.append([a, b, c])
            F.append([a, c, d])

    return create_mesh(V, F, name=f"grid_{nx}x{ny}")
