"""Clock implementation for simulation timing."""

from __future__ import annotations

import time

from life_simulator.interfaces.clock import IClock
from life_simulator.utils.consts import is_valid_duration


class Clock(IClock):
    """Wall clock that blocks the calling thread with time.sleep()."""

    def __init__(self) -> None:
        self._elapsed = 0.0

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def _validate_seconds(self, seconds: float) -> None:
        if not is_valid_duration(seconds):
            raise ValueError("seconds must be a finite number >= 0")

    def sleep(self, seconds: float) -> None:
        self._validate_seconds(seconds)
        if seconds == 0:
            return

        time.sleep(seconds)
        self._elapsed += seconds

    def reset(self) -> None:
        self._elapsed = 0.0
