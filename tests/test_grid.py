"""Tests for plane grid construction and normals."""

import numpy as np
import pytest

from seasurface.models.grid import compute_vertex_normals, create_plane_grid


class TestPlaneGrid:
    """Tests for grid generation."""

    @pytest.mark.parametrize("segments", [1, 4, 16, 128])
    def test_vertex_count(self, segments):
        """Grid should have (N+1)² vertices and 2N² triangles."""
        grid = create_plane_grid(1000.0, 1000.0, segments)

        assert grid.n_nodes == (segments + 1) ** 2
        assert grid.n_triangles == 2 * segments**2
        assert grid.shape == (segments + 1, segments + 1)

    def test_vertex_ordering(self):
        """Rows run from +y to -y, columns from -x to +x."""
        grid = create_plane_grid(100.0, 50.0, 4, 2)

        assert (grid.node_x[0], grid.node_y[0]) == (-50.0, 25.0)
        assert (grid.node_x[4], grid.node_y[4]) == (50.0, 25.0)
        assert (grid.node_x[5], grid.node_y[5]) == (-50.0, 0.0)
        assert (grid.node_x[-1], grid.node_y[-1]) == (50.0, -25.0)

    def test_extent(self):
        """Grid should span the requested width and height."""
        grid = create_plane_grid(300.0, 120.0, 6, 3)

        assert grid.node_x.min() == pytest.approx(-150.0)
        assert grid.node_x.max() == pytest.approx(150.0)
        assert grid.node_y.min() == pytest.approx(-60.0)
        assert grid.node_y.max() == pytest.approx(60.0)

    def test_triangles_reference_valid_nodes(self):
        """All triangle indices should be in range."""
        grid = create_plane_grid(10.0, 10.0, 5)

        assert grid.tri_nodes.min() == 0
        assert grid.tri_nodes.max() == grid.n_nodes - 1

    def test_arrays_are_read_only(self):
        """Base coordinates must not be writable."""
        grid = create_plane_grid(10.0, 10.0, 2)

        with pytest.raises(ValueError):
            grid.node_x[0] = 1.0

    def test_positions_are_flat(self):
        """Initial position buffer lies in z=0."""
        grid = create_plane_grid(10.0, 10.0, 3)
        positions = grid.positions()

        assert positions.shape == (16, 3)
        assert positions.dtype == np.float32
        assert np.all(positions[:, 2] == 0)
        np.testing.assert_array_equal(positions[:, 0], grid.node_x)

    def test_invalid_segments(self):
        """Zero segments should be rejected."""
        with pytest.raises(ValueError):
            create_plane_grid(10.0, 10.0, 0)

    def test_invalid_extent(self):
        """Non-positive extent should be rejected."""
        with pytest.raises(ValueError):
            create_plane_grid(-1.0, 10.0, 2)


class TestVertexNormals:
    """Tests for normal computation."""

    def test_flat_grid_faces_up(self):
        """Flat grid normals should all be +z."""
        grid = create_plane_grid(20.0, 20.0, 4)
        normals = compute_vertex_normals(grid.positions(), grid.tri_nodes)

        np.testing.assert_allclose(normals, np.tile([0.0, 0.0, 1.0], (grid.n_nodes, 1)), atol=1e-6)

    def test_unit_length(self):
        """Normals of a displaced grid should be unit vectors."""
        grid = create_plane_grid(20.0, 20.0, 8)
        positions = grid.positions()
        positions[:, 2] = np.sin(positions[:, 0] * 0.3) * 2.0

        normals = compute_vertex_normals(positions, grid.tri_nodes)
        np.testing.assert_allclose(np.linalg.norm(normals, axis=1), 1.0, atol=1e-5)

    def test_tilted_plane(self):
        """A plane z = x should have normals along (-1, 0, 1)/sqrt(2)."""
        grid = create_plane_grid(10.0, 10.0, 3)
        positions = grid.positions()
        positions[:, 2] = positions[:, 0]

        normals = compute_vertex_normals(positions, grid.tri_nodes)
        expected = np.array([-1.0, 0.0, 1.0]) / np.sqrt(2)
        np.testing.assert_allclose(normals, np.tile(expected, (grid.n_nodes, 1)), atol=1e-5)
