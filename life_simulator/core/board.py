"""Bounded Game of Life board.

Cells live in a single contiguous buffer indexed by ``row * width + column``.
The board has hard edges: neighbour positions outside the grid are not
counted, so corner cells have three candidates and edge cells five.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Optional

from life_simulator.core.cell import CellState
from life_simulator.core.exceptions import BoardDimensionError, ConfigurationError
from life_simulator.interfaces.board import Board
from life_simulator.utils.board_parser import ParsedBoard, parse_board
from life_simulator.utils.consts import NEIGHBOUR_OFFSETS, ConstUtils, in_dimension_range

logger = logging.getLogger(__name__)


def next_state(current: CellState, live_neighbours: int) -> CellState:
    """Apply the B3/S23 rule to a single cell."""
    if current == CellState.ALIVE and live_neighbours in (2, 3):
        return CellState.ALIVE
    if current == CellState.DEAD and live_neighbours == 3:
        return CellState.ALIVE
    return CellState.DEAD


class GridBoard(Board):
    """Fixed-size board with synchronous generation updates."""

    def __init__(self, height: int, width: int, cells: Optional[Iterable[bool]] = None):
        if not (in_dimension_range(height) and in_dimension_range(width)):
            raise BoardDimensionError(height, width, ConstUtils.MAX_DIMENSION)

        self._height = height
        self._width = width

        if cells is None:
            initial = bytearray(height * width)
        else:
            initial = bytearray(1 if alive else 0 for alive in cells)
            if len(initial) != height * width:
                raise ConfigurationError(
                    "board",
                    f"expected {height * width} cells for a {height}x{width} board, "
                    f"got {len(initial)}",
                )

        self._initial = bytes(initial)
        self._cells = initial
        self._generation = 0

    @classmethod
    def from_parsed(cls, parsed: ParsedBoard) -> "GridBoard":
        return cls(parsed.height, parsed.width, parsed.initial_cells)

    @classmethod
    def from_text(
        cls,
        text: str,
        alive: str = ConstUtils.DEFAULT_ALIVE_MARKER,
        dead: str = ConstUtils.DEFAULT_DEAD_MARKER,
    ) -> "GridBoard":
        return cls.from_parsed(parse_board(text, alive=alive, dead=dead))

    @property
    def height(self) -> int:
        return self._height

    @property
    def width(self) -> int:
        return self._width

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> int:
        """Number of live cells in the current generation."""
        return sum(self._cells)

    def _index(self, row: int, column: int) -> int:
        if not (0 <= row < self._height and 0 <= column < self._width):
            raise IndexError(
                f"cell ({row}, {column}) outside {self._height}x{self._width} board"
            )
        return row * self._width + column

    def cell(self, row: int, column: int) -> CellState:
        return CellState(self._cells[self._index(row, column)])

    def is_alive(self, row: int, column: int) -> bool:
        return self.cell(row, column) == CellState.ALIVE

    def live_neighbours(self, row: int, column: int) -> int:
        """Count live cells around (row, column), ignoring off-grid positions."""
        self._index(row, column)
        return self._count_neighbours(self._cells, row, column)

    def _count_neighbours(self, cells: bytearray, row: int, column: int) -> int:
        count = 0
        for d_row, d_column in NEIGHBOUR_OFFSETS:
            r = row + d_row
            c = column + d_column
            if 0 <= r < self._height and 0 <= c < self._width:
                count += cells[r * self._width + c]
        return count

    def step(self) -> None:
        current = self._cells
        # Every next state is computed from `current` before any is committed
        upcoming = bytearray(len(current))
        for row in range(self._height):
            for column in range(self._width):
                index = row * self._width + column
                state = next_state(
                    CellState(current[index]),
                    self._count_neighbours(current, row, column),
                )
                upcoming[index] = state

        self._cells = upcoming
        self._generation += 1
        logger.debug(f"Generation {self._generation}: population {self.population}")

    def reset(self) -> None:
        self._cells = bytearray(self._initial)
        self._generation = 0

    def rows(self) -> Iterator[tuple[CellState, ...]]:
        for start in range(0, len(self._cells), self._width):
            yield tuple(CellState(v) for v in self._cells[start : start + self._width])

    def to_text(
        self,
        alive: str = ConstUtils.DEFAULT_ALIVE_MARKER,
        dead: str = ConstUtils.DEFAULT_DEAD_MARKER,
    ) -> str:
        """Serialize the current generation in board file format."""
        return "".join(
            "".join(alive if state else dead for state in row) + ConstUtils.LINE_TERMINATOR
            for row in self.rows()
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GridBoard):
            return NotImplemented
        return (
            self._height == other._height
            and self._width == other._width
            and self._cells == other._cells
        )

    def __repr__(self) -> str:
        return (
            f"GridBoard(height={self._height}, width={self._width}, "
            f"generation={self._generation}, population={self.population})"
        )
