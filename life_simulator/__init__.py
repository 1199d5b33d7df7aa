"""Conway's Game of Life terminal simulator.

This module provides a bounded Game of Life board loaded from a plain text
file, a render/step/wait simulation loop and a console renderer.

Architecture:
- Board file parsing and validation separate from the board model
- Hard-edged grid with synchronous generation updates
- Injected clock so the loop can run without real delays

Getting started:
    from life_simulator import GridBoard

    board = GridBoard.from_text(".#.\\n.#.\\n.#.\\n")
    board.step()
    print(board.to_text())
"""

# Core abstractions
from life_simulator.core.board import GridBoard
from life_simulator.core.cell import CellState
from life_simulator.core.clock import Clock
from life_simulator.core.exceptions import ConfigurationError, LifeSimulatorError
from life_simulator.core.simulation_engine import SimulationEngine
from life_simulator.interfaces.board import Board
from life_simulator.render.console import ConsoleRenderer
from life_simulator.utils.board_parser import ParsedBoard, load_board_file, parse_board
from life_simulator.utils.config_loader import SimulatorConfig, load_config

__all__ = [
    # Core
    "Board",
    "CellState",
    "Clock",
    "GridBoard",
    "SimulationEngine",
    # Parsing and settings
    "ParsedBoard",
    "parse_board",
    "load_board_file",
    "SimulatorConfig",
    "load_config",
    # Output
    "ConsoleRenderer",
    # Errors
    "LifeSimulatorError",
    "ConfigurationError",
]
