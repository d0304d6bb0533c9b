"""Core data structures and utilities."""

from seasurface.core.config import MaterialSettings, Settings, SurfaceSettings, get_settings
from seasurface.core.types import FloatArray, Scalar

__all__ = [
    "FloatArray",
    "MaterialSettings",
    "Scalar",
    "Settings",
    "SurfaceSettings",
    "get_settings",
]
