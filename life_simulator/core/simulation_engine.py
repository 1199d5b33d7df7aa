"""Simulation engine for driving repeated render/step cycles."""

from __future__ import annotations

import itertools
from typing import TYPE_CHECKING, Optional

from life_simulator.utils.consts import is_valid_duration

if TYPE_CHECKING:
    from life_simulator.interfaces.board import Board
    from life_simulator.interfaces.clock import IClock
    from life_simulator.interfaces.renderer import Renderer


class SimulationEngine:
    """Minimal simulation engine.

    Each cycle renders the current generation, advances the board and then
    waits on the injected clock. There is no exit condition of its own: with
    ``generations=None`` the loop only ends when the process is stopped.
    """

    def __init__(self, clock: "IClock", interval: float = 1.0, startup_delay: float = 0.0):
        if not is_valid_duration(interval):
            raise ValueError("interval must be a finite number >= 0")
        if not is_valid_duration(startup_delay):
            raise ValueError("startup_delay must be a finite number >= 0")
        self.clock = clock
        self.interval = interval
        self.startup_delay = startup_delay

    def run(
        self,
        board: "Board",
        renderer: "Renderer",
        generations: Optional[int] = None,
    ) -> int:
        """Render and advance the board, forever or for a number of frames.

        Returns:
            Number of frames rendered.
        """
        if generations is not None and generations < 0:
            raise ValueError("generations must be >= 0")

        self.clock.sleep(self.startup_delay)

        frames = itertools.count() if generations is None else range(generations)
        rendered = 0
        for _ in frames:
            renderer.render(board)
            board.step()
            self.clock.sleep(self.interval)
            rendered += 1
        return rendered

    def step(self, board: "Board", generations: int = 1) -> None:
        """Advance the board without rendering."""
        if generations < 0:
            raise ValueError("generations must be >= 0")
        for _ in range(generations):
            board.step()

    def reset(self, board: "Board") -> None:
        """Reset the board."""
        board.reset()
