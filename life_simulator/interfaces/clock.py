"""Clock interface for pacing the simulation loop."""

from __future__ import annotations

from abc import ABC, abstractmethod


class IClock(ABC):
    """Clock interface used by the simulation engine to wait between frames."""

    @property
    @abstractmethod
    def elapsed(self) -> float:
        """Total number of seconds spent waiting."""
        ...

    @abstractmethod
    def sleep(self, seconds: float) -> None:
        """Block for the given number of seconds."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Reset elapsed time to zero."""
        ...
