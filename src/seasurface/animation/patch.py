"""Partial surface property updates."""

from pydantic import BaseModel, ConfigDict, Field

from seasurface.core.constants import MAX_COLOR


class SurfacePatch(BaseModel):
    """Subset of surface properties to change.

    Absent or ``None`` fields leave the current value untouched.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    color: int | None = Field(default=None, ge=0, le=MAX_COLOR)
    opacity: float | None = Field(default=None, ge=0, le=1)
    wave_amplitude: float | None = None
    wave_speed: float | None = Field(default=None, ge=0)
    wireframe: bool | None = None

    def changes(self) -> dict[str, float | int | bool]:
        """Fields that carry a value, in declaration order."""
        return self.model_dump(exclude_none=True)

    def is_empty(self) -> bool:
        return not self.changes()
