"""Board abstraction - behavioral contract.

A Board holds one generation of cells and knows how to compute the next.
Renderers and the simulation engine only depend on this interface.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterator

from life_simulator.core.cell import CellState


class Board(ABC):
    """Base class for Game of Life boards.

    A board has exactly one state, "holds a valid generation", and one
    transition, step(), which is always enabled and never fails.
    """

    @property
    @abstractmethod
    def height(self) -> int:
        """Number of rows."""
        ...

    @property
    @abstractmethod
    def width(self) -> int:
        """Number of columns."""
        ...

    @property
    @abstractmethod
    def generation(self) -> int:
        """Number of steps taken since construction or the last reset."""
        ...

    @abstractmethod
    def cell(self, row: int, column: int) -> CellState:
        """State of the cell at (row, column) in the current generation."""
        ...

    @abstractmethod
    def step(self) -> None:
        """Replace every cell with its next-generation state, simultaneously."""
        ...

    @abstractmethod
    def reset(self) -> None:
        """Restore the initial generation."""
        ...

    def rows(self) -> Iterator[tuple[CellState, ...]]:
        """Yield the current generation one row at a time."""
        for row in range(self.height):
            yield tuple(self.cell(row, column) for column in range(self.width))
