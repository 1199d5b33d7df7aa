"""Parsing and validation of board configuration files.

A board file is plain text: one line per row, every line the same length,
each character either the alive marker or the dead marker. Lines are
separated by a single "\\n"; a trailing terminator after the last row is
optional.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, Union

from life_simulator.core.exceptions import (
    BoardDimensionError,
    BoardFileNotFoundError,
    EmptyBoardError,
    InconsistentColumnCountError,
    InvalidCharacterError,
)
from life_simulator.utils.config_loader import MarkerConfig, validate_markers
from life_simulator.utils.consts import ConstUtils, in_dimension_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedBoard:
    """Validated board dimensions and initial cell states (row-major)."""

    height: int
    width: int
    initial_cells: tuple[bool, ...]

    def rows(self) -> Iterator[tuple[bool, ...]]:
        for start in range(0, len(self.initial_cells), self.width):
            yield self.initial_cells[start : start + self.width]


def parse_board(
    raw_text: str,
    alive: str = ConstUtils.DEFAULT_ALIVE_MARKER,
    dead: str = ConstUtils.DEFAULT_DEAD_MARKER,
) -> ParsedBoard:
    """Validate and parse the textual description of a board.

    Args:
        raw_text: Complete board file contents.
        alive: Character marking a live cell.
        dead: Character marking a dead cell.

    Returns:
        ParsedBoard with height, width and row-major cell states.

    Raises:
        EmptyBoardError: raw_text has no characters.
        InvalidCharacterError: a character other than the markers or "\\n".
        InconsistentColumnCountError: a line length differs from the first line.
        BoardDimensionError: height or width outside 1..255.
        ConfigurationError: the marker pair itself is unusable.
    """
    validate_markers(MarkerConfig(alive=alive, dead=dead))

    if not raw_text:
        raise EmptyBoardError()

    terminator = ConstUtils.LINE_TERMINATOR
    expected_columns: Optional[int] = None
    current_columns = 0
    line = 1
    cells: list[bool] = []

    for char in raw_text:
        if char == terminator:
            if expected_columns is None:
                expected_columns = current_columns
            elif current_columns != expected_columns:
                raise InconsistentColumnCountError(expected_columns, current_columns, line)
            line += 1
            current_columns = 0
        elif char == alive or char == dead:
            current_columns += 1
            cells.append(char == alive)
        else:
            raise InvalidCharacterError(char, line, current_columns + 1)

    height = line - 1
    if current_columns or expected_columns is None:
        # Trailing row without a terminator is still a row
        if expected_columns is None:
            expected_columns = current_columns
        elif current_columns != expected_columns:
            raise InconsistentColumnCountError(expected_columns, current_columns, line)
        height += 1

    width = expected_columns
    if not (in_dimension_range(height) and in_dimension_range(width)):
        raise BoardDimensionError(height, width, ConstUtils.MAX_DIMENSION)

    return ParsedBoard(height=height, width=width, initial_cells=tuple(cells))


def _read_text(path: Path) -> str:
    try:
        with path.open("rb") as fh:
            data = fh.read()
    except FileNotFoundError as exc:
        raise BoardFileNotFoundError(str(path)) from exc
    except OSError as exc:
        raise BoardFileNotFoundError(str(path), reason=exc.strerror or str(exc)) from exc

    # Undecodable bytes survive as lone surrogates and fail the marker scan
    return data.decode("utf-8", errors="surrogateescape")


def load_board_file(
    path: Union[str, Path], markers: Optional[MarkerConfig] = None
) -> ParsedBoard:
    """Read a board file once and parse it.

    Args:
        path: Location of the board file.
        markers: Marker pair to parse with. Defaults to "#" alive, "." dead.

    Raises:
        BoardFileNotFoundError: the file cannot be opened.
        ConfigurationError: the contents are not a valid board.
    """
    markers = markers or MarkerConfig()
    parsed = parse_board(_read_text(Path(path)), alive=markers.alive, dead=markers.dead)
    logger.info(f"Rows = {parsed.height}, Columns = {parsed.width}")
    return parsed
