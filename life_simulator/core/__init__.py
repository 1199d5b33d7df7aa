"""Core modules for the simulator.

Core infrastructure:
- cell: cell state enumeration
- board: bounded grid with the generation update
- clock: wall clock used to pace frames
- simulation_engine: render/step/wait loop
- exceptions: error hierarchy
"""

from life_simulator.core.board import GridBoard, next_state
from life_simulator.core.cell import CellState
from life_simulator.core.clock import Clock
from life_simulator.core.exceptions import (
    BoardDimensionError,
    BoardFileNotFoundError,
    ConfigurationError,
    EmptyBoardError,
    InconsistentColumnCountError,
    InvalidCharacterError,
    LifeSimulatorError,
)
from life_simulator.core.simulation_engine import SimulationEngine

__all__ = [
    # Board
    "CellState",
    "GridBoard",
    "next_state",
    # Timing
    "Clock",
    "SimulationEngine",
    # Errors
    "LifeSimulatorError",
    "ConfigurationError",
    "EmptyBoardError",
    "InconsistentColumnCountError",
    "InvalidCharacterError",
    "BoardDimensionError",
    "BoardFileNotFoundError",
]
