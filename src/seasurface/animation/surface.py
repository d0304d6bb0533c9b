"""Animated ocean surface.

Owns one plane mesh in a host scene and displaces its vertices every frame
with the layered height field from ``seasurface.models.heightfield``.

Typical render loop:

    surface = OceanSurface.create()
    surface.initialize(scene)
    clock = FrameClock()
    while running:
        surface.update(clock.get_delta())
        render(scene)

Ripples are added on top of whatever height the last ``update`` wrote, so
they must be injected after the frame's update and last only until the
next one.
"""

import logging
import math
import sys

import numpy as np

from seasurface.animation.patch import SurfacePatch
from seasurface.core.config import MaterialSettings, Settings, SurfaceSettings, get_settings
from seasurface.core.constants import PHASE_PERIOD, SURFACE_ROTATION_X
from seasurface.models.heightfield import ripple_offset, wave_height
from seasurface.models.weather import SeaState, resolve_weather
from seasurface.scene.graph import Mesh, PhongMaterial, PlaneGeometry
from seasurface.scene.protocols import SceneContainer

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


class MissingSceneError(ValueError):
    """Raised when a surface is initialised without a host container."""


class OceanSurface:
    """Height-field animator for a single ocean surface.

    Each instance owns its own mesh, base grid and clock, so several
    surfaces can live in one scene (or in separate scenes) independently.
    All operations other than ``initialize`` are silent no-ops until the
    surface is initialised and again after ``cleanup``.
    """

    def __init__(
        self,
        config: SurfaceSettings | None = None,
        material: MaterialSettings | None = None,
        log_fn=None,
    ):
        self.config = config if config is not None else SurfaceSettings()
        self.material_settings = material if material is not None else MaterialSettings()
        self.log = log_fn or logger.info

        self._container: SceneContainer | None = None
        self._mesh: Mesh | None = None
        self._base: np.ndarray | None = None  # (N, 2) undisplaced x, y
        self._clock = 0.0

    @classmethod
    def create(cls, settings: Settings | None = None) -> "OceanSurface":
        """Create a surface from environment settings."""
        if settings is None:
            settings = get_settings()
        return cls(config=settings.surface, material=settings.material)

    @property
    def is_initialized(self) -> bool:
        return self._mesh is not None

    @property
    def clock(self) -> float:
        """Accumulated animation time (elapsed seconds scaled by wave speed)."""
        return self._clock

    @property
    def mesh(self) -> Mesh | None:
        return self._mesh

    @property
    def base_positions(self) -> np.ndarray | None:
        """Read-only (N, 2) undisplaced plane coordinates."""
        return self._base

    @property
    def heights(self) -> np.ndarray | None:
        """Copy of the current per-vertex heights."""
        if self._mesh is None:
            return None
        return self._mesh.geometry.position[:, 2].copy()

    def initialize(self, container: SceneContainer | None) -> None:
        """Build the surface mesh and attach it to ``container``.

        Raises:
            MissingSceneError: If no container is given. The surface stays
                uninitialised.
        """
        if container is None:
            logger.error("A scene container must be provided to initialize the ocean surface")
            raise MissingSceneError("Scene container is required")

        if self.is_initialized:
            self.cleanup()

        cfg = self.config
        geometry = PlaneGeometry.create(cfg.width, cfg.height, cfg.segments)
        material = PhongMaterial(
            color=cfg.color,
            opacity=cfg.opacity,
            transparent=True,
            shininess=self.material_settings.shininess,
            specular=self.material_settings.specular,
            wireframe=cfg.wireframe,
            double_sided=self.material_settings.double_sided,
        )

        mesh = Mesh(geometry=geometry, material=material, name="ocean_surface")
        mesh.position[1] = cfg.surface_elevation
        mesh.rotation[0] = SURFACE_ROTATION_X

        base = np.column_stack([geometry.grid.node_x, geometry.grid.node_y])
        base.setflags(write=False)

        container.add(mesh)

        self._container = container
        self._mesh = mesh
        self._base = base
        self._clock = 0.0

        self.log(f"Ocean surface created with {geometry.count} vertices")

    def cleanup(self) -> None:
        """Detach the mesh, release its resources and reset all state."""
        if self._mesh is None:
            return

        if self._container is not None:
            self._container.remove(self._mesh)
        self._mesh.geometry.dispose()
        self._mesh.material.dispose()

        self._container = None
        self._mesh = None
        self._base = None
        self._clock = 0.0

        self.log("Ocean surface cleaned up")

    def update(self, elapsed_seconds: float) -> None:
        """Advance the clock and recompute every vertex height.

        Args:
            elapsed_seconds: Time since the previous frame.
        """
        if self._mesh is None:
            return
        if elapsed_seconds < 0:
            raise ValueError(f"Elapsed time must be non-negative, got {elapsed_seconds}")

        self._clock += elapsed_seconds * self.config.wave_speed

        heights = wave_height(
            self._base[:, 0],
            self._base[:, 1],
            self._phase(),
            self.config.wave_amplitude,
        )

        geometry = self._mesh.geometry
        geometry.position[:, 2] = np.asarray(heights)
        self._refresh(geometry)

    def create_ripple(self, x: float, z: float, intensity: float = 1.0) -> None:
        """Add a decaying ripple centred on (x, z) to the current heights.

        The ripple is transient: the next ``update`` rewrites every height.
        """
        if self._mesh is None:
            return

        offset = ripple_offset(
            self._base[:, 0],
            self._base[:, 1],
            x,
            z,
            self._phase(),
            intensity,
        )

        geometry = self._mesh.geometry
        geometry.position[:, 2] += np.asarray(offset)
        self._refresh(geometry)

    def _phase(self) -> float:
        # Kernels run in float32; reduce in float64 so long runs keep their resolution
        return math.fmod(self._clock, PHASE_PERIOD)

    def _refresh(self, geometry: PlaneGeometry) -> None:
        geometry.mark_dirty()
        geometry.compute_vertex_normals()

    def set_properties(self, patch: SurfacePatch | None = None, **fields) -> None:
        """Merge a partial update into the live material and configuration.

        Colour, opacity and wireframe take effect on the material at once.
        Wave amplitude and speed only affect later ``update`` calls.

        Args:
            patch: Fields to change. Keyword arguments are merged on top.

        Raises:
            pydantic.ValidationError: If a field value is out of range on an
                initialised surface.
        """
        if self._mesh is None:
            return

        if patch is None:
            patch = SurfacePatch(**fields)
        elif fields:
            patch = SurfacePatch(**{**patch.changes(), **fields})

        material = self._mesh.material
        changes = patch.changes()

        if "color" in changes:
            material.color = changes["color"]
            self.config.color = changes["color"]

        if "opacity" in changes:
            material.opacity = changes["opacity"]
            self.config.opacity = changes["opacity"]

        if "wave_amplitude" in changes:
            self.config.wave_amplitude = changes["wave_amplitude"]

        if "wave_speed" in changes:
            self.config.wave_speed = changes["wave_speed"]

        if "wireframe" in changes:
            material.wireframe = changes["wireframe"]
            self.config.wireframe = changes["wireframe"]

        self.log("Surface properties updated")

    def toggle_visibility(self, visible: bool) -> None:
        """Show or hide the surface."""
        if self._mesh is None:
            return
        self._mesh.visible = visible
        self.log(f"Ocean surface {'enabled' if visible else 'disabled'}")

    def apply_weather(self, name: str | SeaState) -> None:
        """Apply a named weather preset; unknown names reset to the default."""
        if self._mesh is None:
            return
        preset = resolve_weather(name)
        self.set_properties(**preset.as_patch_fields())
        self.log(f"Weather set to: {preset.state.value}")
