"""Named sea-state presets.

Each preset bundles a wave amplitude, a wave speed and a water colour.
Unknown names resolve to the default preset rather than failing, so a
host can pass through user-supplied weather strings without validation.
"""

import logging
import sys
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)
if not logger.handlers:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


class SeaState(str, Enum):
    """Qualitative sea state selecting a weather preset."""

    CALM = "calm"
    CHOPPY = "choppy"
    STORMY = "stormy"
    DEFAULT = "default"  # Resets to the standard configuration


@dataclass(frozen=True)
class WeatherPreset:
    """Wave parameters and colour for one sea state."""

    state: SeaState
    wave_amplitude: float
    wave_speed: float
    color: int  # Packed RGB

    def as_patch_fields(self) -> dict[str, float | int]:
        """Fields in the form accepted by ``OceanSurface.set_properties``."""
        return {
            "wave_amplitude": self.wave_amplitude,
            "wave_speed": self.wave_speed,
            "color": self.color,
        }


WEATHER_PRESETS: dict[SeaState, WeatherPreset] = {
    SeaState.CALM: WeatherPreset(SeaState.CALM, 0.3, 0.5, 0x006994),
    SeaState.CHOPPY: WeatherPreset(SeaState.CHOPPY, 1.2, 2.0, 0x004466),
    SeaState.STORMY: WeatherPreset(SeaState.STORMY, 2.5, 3.5, 0x002233),
    SeaState.DEFAULT: WeatherPreset(SeaState.DEFAULT, 0.8, 1.2, 0x006994),
}

DEFAULT_WEATHER = WEATHER_PRESETS[SeaState.DEFAULT]


def resolve_weather(name: str | SeaState) -> WeatherPreset:
    """Look up a preset by name.

    Matching ignores case and surrounding whitespace. Any name that is not
    a known sea state falls back to ``DEFAULT_WEATHER``.
    """
    try:
        state = SeaState(name.strip().lower() if isinstance(name, str) else name)
    except ValueError:
        logger.warning(f"Unknown weather '{name}', using default preset")
        return DEFAULT_WEATHER
    return WEATHER_PRESETS[state]
