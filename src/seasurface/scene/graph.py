"""In-memory scene graph primitives.

A minimal stand-in for a WebGL-style host: a scene, a subdivided plane
geometry with a mutable position buffer, a phong material and a mesh that
joins the two. Used by the command-line tools for headless runs and by
the test suite.
"""

from dataclasses import dataclass, field

import numpy as np

from seasurface.models.grid import PlaneGrid, compute_vertex_normals, create_plane_grid


@dataclass
class PlaneGeometry:
    """Indexed plane geometry with a mutable (N, 3) position buffer."""

    grid: PlaneGrid
    position: np.ndarray  # (N, 3) float32, z is the live height
    normal: np.ndarray  # (N, 3) float32
    needs_update: bool = False
    version: int = 0
    disposed: bool = False

    @classmethod
    def create(
        cls,
        width: float,
        height: float,
        segments_x: int,
        segments_y: int | None = None,
    ) -> "PlaneGeometry":
        """Create a flat plane facing +z."""
        grid = create_plane_grid(width, height, segments_x, segments_y)
        normal = np.zeros((grid.n_nodes, 3), dtype=np.float32)
        normal[:, 2] = 1.0
        return cls(grid=grid, position=grid.positions(), normal=normal)

    @property
    def index(self) -> np.ndarray:
        """(M, 3) triangle vertex indices."""
        return self.grid.tri_nodes

    @property
    def count(self) -> int:
        """Number of vertices in the position buffer."""
        return int(self.position.shape[0])

    def mark_dirty(self) -> None:
        """Flag the position buffer for re-upload."""
        self.needs_update = True
        self.version += 1

    def compute_vertex_normals(self) -> None:
        """Recompute smooth normals from the current positions."""
        self.normal = compute_vertex_normals(self.position, self.index)

    def dispose(self) -> None:
        self.disposed = True


@dataclass
class PhongMaterial:
    """Shiny, optionally transparent surface material."""

    color: int = 0xFFFFFF
    opacity: float = 1.0
    transparent: bool = False
    shininess: float = 30.0
    specular: int = 0x111111
    wireframe: bool = False
    double_sided: bool = False
    disposed: bool = False

    @property
    def color_rgb(self) -> tuple[float, float, float]:
        """Colour as normalised (r, g, b)."""
        return (
            ((self.color >> 16) & 0xFF) / 255.0,
            ((self.color >> 8) & 0xFF) / 255.0,
            (self.color & 0xFF) / 255.0,
        )

    def dispose(self) -> None:
        self.disposed = True


@dataclass(eq=False)
class Mesh:
    """Geometry plus material, placed in the scene."""

    geometry: PlaneGeometry
    material: PhongMaterial
    position: np.ndarray = field(default_factory=lambda: np.zeros(3))
    rotation: np.ndarray = field(default_factory=lambda: np.zeros(3))
    visible: bool = True
    name: str = ""


@dataclass
class Scene:
    """Root container of renderables."""

    children: list[Mesh] = field(default_factory=list)

    def add(self, obj: Mesh) -> None:
        if obj not in self.children:
            self.children.append(obj)

    def remove(self, obj: Mesh) -> None:
        if obj in self.children:
            self.children.remove(obj)

    def __contains__(self, obj: object) -> bool:
        return obj in self.children

    def __len__(self) -> int:
        return len(self.children)
