"""Height field, grid and weather models."""

from seasurface.models.grid import PlaneGrid, compute_vertex_normals, create_plane_grid
from seasurface.models.heightfield import ripple_offset, wave_height
from seasurface.models.weather import (
    DEFAULT_WEATHER,
    WEATHER_PRESETS,
    SeaState,
    WeatherPreset,
    resolve_weather,
)

__all__ = [
    "DEFAULT_WEATHER",
    "PlaneGrid",
    "SeaState",
    "WEATHER_PRESETS",
    "WeatherPreset",
    "compute_vertex_normals",
    "create_plane_grid",
    "resolve_weather",
    "ripple_offset",
    "wave_height",
]
