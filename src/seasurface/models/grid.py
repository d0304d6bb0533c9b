"""Regular plane grid for the ocean surface.

Vertex layout follows the common WebGL plane primitive: rows run from
+height/2 down to -height/2, columns from -width/2 to +width/2, and vertex
(ix, iy) sits at index ``iy * (segments + 1) + ix``. Triangle winding gives
face normals along +z.
"""

from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class PlaneGrid:
    """Undisplaced plane coordinates and triangle connectivity.

    Arrays are stored in structure-of-arrays format and are read-only;
    the grid never changes after construction.
    """

    node_x: np.ndarray  # (N,) x coordinates
    node_y: np.ndarray  # (N,) y coordinates
    tri_nodes: np.ndarray  # (M, 3) vertex indices for each triangle

    width: float
    height: float
    segments_x: int
    segments_y: int

    @property
    def n_nodes(self) -> int:
        """Number of vertices in the grid."""
        return int(self.node_x.shape[0])

    @property
    def n_triangles(self) -> int:
        """Number of triangles in the grid."""
        return int(self.tri_nodes.shape[0])

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns) of vertices."""
        return self.segments_y + 1, self.segments_x + 1

    def positions(self) -> np.ndarray:
        """Flat (N, 3) float32 position buffer with z = 0."""
        positions = np.zeros((self.n_nodes, 3), dtype=np.float32)
        positions[:, 0] = self.node_x
        positions[:, 1] = self.node_y
        return positions


def create_plane_grid(
    width: float,
    height: float,
    segments_x: int,
    segments_y: int | None = None,
) -> PlaneGrid:
    """Create a flat grid of ``width`` x ``height`` centred on the origin.

    Args:
        width: Extent along x.
        height: Extent along y.
        segments_x: Subdivisions along x.
        segments_y: Subdivisions along y (defaults to ``segments_x``).

    Returns:
        PlaneGrid with (segments_x + 1) * (segments_y + 1) vertices.
    """
    if segments_y is None:
        segments_y = segments_x
    if segments_x < 1 or segments_y < 1:
        raise ValueError("Segment counts must be >= 1")
    if width <= 0 or height <= 0:
        raise ValueError("Grid width and height must be positive")

    cols = segments_x + 1
    rows = segments_y + 1

    xs = np.arange(cols, dtype=np.float32) * (width / segments_x) - width / 2
    ys = height / 2 - np.arange(rows, dtype=np.float32) * (height / segments_y)
    grid_x, grid_y = np.meshgrid(xs, ys)

    node_x = grid_x.ravel().astype(np.float32)
    node_y = grid_y.ravel().astype(np.float32)

    # Cell corners: a=(ix, iy), b=(ix, iy+1), c=(ix+1, iy+1), d=(ix+1, iy)
    ix, iy = np.meshgrid(np.arange(segments_x), np.arange(segments_y))
    a = (iy * cols + ix).ravel()
    b = ((iy + 1) * cols + ix).ravel()
    c = ((iy + 1) * cols + ix + 1).ravel()
    d = (iy * cols + ix + 1).ravel()

    tri_nodes = np.empty((2 * a.size, 3), dtype=np.int32)
    tri_nodes[0::2] = np.stack([a, b, d], axis=1)
    tri_nodes[1::2] = np.stack([b, c, d], axis=1)

    for arr in (node_x, node_y, tri_nodes):
        arr.setflags(write=False)

    return PlaneGrid(
        node_x=node_x,
        node_y=node_y,
        tri_nodes=tri_nodes,
        width=float(width),
        height=float(height),
        segments_x=segments_x,
        segments_y=segments_y,
    )


def compute_vertex_normals(positions: np.ndarray, tri_nodes: np.ndarray) -> np.ndarray:
    """Smooth per-vertex normals from an indexed triangle mesh.

    Each vertex accumulates the unnormalised cross products of its adjacent
    faces, so larger faces weigh more, then the sum is normalised.

    Args:
        positions: (N, 3) vertex positions.
        tri_nodes: (M, 3) vertex indices per triangle.

    Returns:
        (N, 3) float32 unit normals.
    """
    p0 = positions[tri_nodes[:, 0]]
    p1 = positions[tri_nodes[:, 1]]
    p2 = positions[tri_nodes[:, 2]]

    face_normals = np.cross(p2 - p1, p0 - p1)

    normals = np.zeros_like(positions, dtype=np.float32)
    for corner in range(3):
        np.add.at(normals, tri_nodes[:, corner], face_normals)

    lengths = np.linalg.norm(normals, axis=1, keepdims=True)
    np.divide(normals, lengths, out=normals, where=lengths > 0)

    return normals
