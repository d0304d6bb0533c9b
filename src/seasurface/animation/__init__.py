"""Surface animation: the height-field animator and its helpers."""

from seasurface.animation.clock import FrameClock
from seasurface.animation.patch import SurfacePatch
from seasurface.animation.surface import MissingSceneError, OceanSurface

__all__ = [
    "FrameClock",
    "MissingSceneError",
    "OceanSurface",
    "SurfacePatch",
]
