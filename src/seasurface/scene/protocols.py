"""Interfaces the rendering host must provide.

Any scene graph with these shapes can hold an ocean surface: the
in-memory graph in ``seasurface.scene.graph`` is one implementation,
a GPU-backed scene graph wrapper is another.
"""

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class Disposable(Protocol):
    """Owner of host-side resources (GPU buffers, programs)."""

    def dispose(self) -> None:
        """Release host-side resources."""
        ...


@runtime_checkable
class Renderable(Protocol):
    """Drawable object combining a geometry and a material."""

    geometry: Disposable
    material: Disposable
    position: np.ndarray  # (3,) translation
    rotation: np.ndarray  # (3,) Euler angles in radians
    visible: bool


@runtime_checkable
class SceneContainer(Protocol):
    """Scene graph node that renderables can be attached to."""

    def add(self, obj: Renderable) -> None:
        """Attach a renderable."""
        ...

    def remove(self, obj: Renderable) -> None:
        """Detach a renderable; unknown objects are ignored."""
        ...
