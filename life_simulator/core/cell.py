"""Cell state enumeration."""

from enum import IntEnum


class CellState(IntEnum):
    """State of a single board cell.

    A cell has no identity beyond its grid position; only its state is stored.
    """

    DEAD = 0
    """Cell is empty in the current generation."""

    ALIVE = 1
    """Cell is populated in the current generation."""
