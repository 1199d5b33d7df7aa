"""Constants and utility values for the simulator."""

import math


class ConstUtils:
    """Board file format and rendering constants."""

    # Board file format
    MAX_DIMENSION = 255
    """Largest supported row or column count."""

    LINE_TERMINATOR = "\n"
    """Single-byte separator between board rows."""

    DEFAULT_ALIVE_MARKER = "#"
    """Board file character for a live cell."""

    DEFAULT_DEAD_MARKER = "."
    """Board file character for a dead cell."""

    # Console glyphs
    DEFAULT_ALIVE_GLYPH = "■"
    DEFAULT_DEAD_GLYPH = "·"

    # Timing
    DEFAULT_INTERVAL = 1.0
    """Seconds between two rendered generations."""

    DEFAULT_STARTUP_DELAY = 1.0
    """Seconds to wait before the first frame."""


DEFAULT_BOARD_PATH = "default.txt"

# Row/column offsets of the eight Moore neighbours
NEIGHBOUR_OFFSETS = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)


def in_dimension_range(value: int) -> bool:
    """Return True if value is a valid row or column count."""
    return 1 <= value <= ConstUtils.MAX_DIMENSION


def is_valid_duration(seconds: float) -> bool:
    """Return True if seconds is a finite, non-negative wait."""
    return math.isfinite(seconds) and seconds >= 0
