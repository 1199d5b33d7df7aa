"""Interface abstractions for the simulator.

Defines behavioral contracts that all implementations must satisfy:
- Board: grid of cells with a generation update (abstract base class)
- IClock: injectable wait between frames
- Renderer: anything that can draw a board
- CellState: cell enumeration (re-exported from core for convenience)
"""

from life_simulator.core.cell import CellState
from life_simulator.interfaces.board import Board
from life_simulator.interfaces.clock import IClock
from life_simulator.interfaces.renderer import Renderer

__all__ = [
    "Board",
    "CellState",
    "IClock",
    "Renderer",
]
