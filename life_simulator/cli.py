"""Command line entry point: load a board file and run it forever."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from life_simulator.core.board import GridBoard
from life_simulator.core.clock import Clock
from life_simulator.core.exceptions import LifeSimulatorError
from life_simulator.core.simulation_engine import SimulationEngine
from life_simulator.interfaces.clock import IClock
from life_simulator.render.console import ConsoleRenderer
from life_simulator.utils.board_parser import load_board_file
from life_simulator.utils.config_loader import load_config
from life_simulator.utils.consts import DEFAULT_BOARD_PATH, is_valid_duration

logger = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError("must be >= 0")
    return number


def _duration(value: str) -> float:
    number = float(value)
    if not is_valid_duration(number):
        raise argparse.ArgumentTypeError("must be a finite number >= 0")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="life-simulator",
        description="Run Conway's Game of Life on a board loaded from a text file.",
    )
    parser.add_argument(
        "-f",
        "--file",
        dest="board_file",
        default=None,
        help=f"Board configuration file (default: {DEFAULT_BOARD_PATH})",
    )
    parser.add_argument(
        "--settings",
        default=None,
        help="YAML settings file with markers, glyphs and timing",
    )
    parser.add_argument(
        "--generations",
        type=_non_negative_int,
        default=None,
        help="Stop after this many frames (default: run until interrupted)",
    )
    parser.add_argument(
        "--interval",
        type=_duration,
        default=None,
        help="Seconds between frames (overrides the settings file)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log every generation",
    )
    return parser


def run(
    argv: Optional[Sequence[str]] = None,
    clock: Optional[IClock] = None,
    renderer: Optional[ConsoleRenderer] = None,
) -> int:
    """Parse arguments, load the board and drive the simulation.

    Returns:
        Process exit status.
    """
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    if args.board_file is None:
        board_path = DEFAULT_BOARD_PATH
        logger.info(f'Using standard configuration file "{board_path}"')
    else:
        board_path = args.board_file
        logger.info(f"Using configuration file: {board_path}")

    try:
        cfg = load_config(args.settings)
        parsed = load_board_file(board_path, markers=cfg.markers)
        board = GridBoard.from_parsed(parsed)
    except LifeSimulatorError as exc:
        logger.error(str(exc))
        return 1

    interval = cfg.timing.interval if args.interval is None else args.interval
    engine = SimulationEngine(
        clock=clock or Clock(),
        interval=interval,
        startup_delay=cfg.timing.startup_delay,
    )
    renderer = renderer or ConsoleRenderer(glyphs=cfg.glyphs)

    try:
        renderer.banner()
        engine.run(board, renderer, generations=args.generations)
    except KeyboardInterrupt:
        logger.info(f"Stopped after generation {board.generation}")
    return 0


def main() -> None:
    sys.exit(run())


if __name__ == "__main__":
    main()
