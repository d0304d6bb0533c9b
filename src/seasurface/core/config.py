"""Configuration and settings for the ocean surface."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from seasurface.core.constants import MAX_COLOR


class SurfaceSettings(BaseSettings):
    """Live surface configuration.

    The animator reads these values on every tick, so changes made here
    (directly or through ``OceanSurface.set_properties``) apply to the
    next frame.
    """

    model_config = SettingsConfigDict(env_prefix="SURFACE_")

    # Grid extent (length units)
    width: float = Field(default=1000.0, gt=0)
    height: float = Field(default=1000.0, gt=0)

    # Subdivisions along each axis; vertex count is (segments + 1)²
    segments: int = Field(default=128, ge=1)

    # Height of the surface above the ground plane
    surface_elevation: float = 70.0

    # Maximum wave height; a negative value inverts the wave phase
    wave_amplitude: float = 0.8

    # Clock multiplier for the wave animation
    wave_speed: float = Field(default=1.2, ge=0)

    # Packed RGB, deep ocean blue
    color: int = Field(default=0x006994, ge=0, le=MAX_COLOR)

    opacity: float = Field(default=0.7, ge=0, le=1)
    wireframe: bool = False  # True for debugging

    @property
    def vertex_count(self) -> int:
        """Number of vertices in the plane grid."""
        return (self.segments + 1) ** 2


class MaterialSettings(BaseSettings):
    """Fixed finish of the water material."""

    model_config = SettingsConfigDict(env_prefix="MATERIAL_")

    shininess: float = 100.0
    specular: int = Field(default=0x222222, ge=0, le=MAX_COLOR)

    double_sided: bool = True


class Settings(BaseSettings):
    """Master configuration aggregating all subsystems."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        extra="ignore",
    )

    surface: SurfaceSettings = Field(default_factory=SurfaceSettings)
    material: MaterialSettings = Field(default_factory=MaterialSettings)


def get_settings() -> Settings:
    """Load settings from environment and .env file."""
    return Settings()
