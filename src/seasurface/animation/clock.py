"""Frame timing for render loops."""

import time
from collections.abc import Callable
from dataclasses import dataclass, field


@dataclass
class FrameClock:
    """Reports elapsed seconds between successive frames.

    The first ``get_delta`` call measures from construction (or the last
    ``reset``).
    """

    time_source: Callable[[], float] = time.perf_counter
    _last: float = field(init=False, default=0.0)
    elapsed_total: float = field(init=False, default=0.0)

    def __post_init__(self):
        self._last = self.time_source()

    def get_delta(self) -> float:
        """Seconds since the previous call, never negative."""
        now = self.time_source()
        delta = max(0.0, now - self._last)
        self._last = now
        self.elapsed_total += delta
        return delta

    def reset(self) -> None:
        self._last = self.time_source()
        self.elapsed_total = 0.0
