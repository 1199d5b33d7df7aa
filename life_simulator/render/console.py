"""Console renderer drawing each generation inside a box-drawing frame."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Optional, TextIO

from life_simulator.core.cell import CellState
from life_simulator.utils.config_loader import GlyphConfig

if TYPE_CHECKING:
    from life_simulator.interfaces.board import Board

BANNER = "============ GOL - Game Of Life ============"


class ConsoleRenderer:
    """Writes one bordered text block per generation to a stream.

    Frame layout for a board with two rows and three columns::

        Step: 0
        ╔═══╗
        ║·■·║
        ║·■·║
        ╚═══╝
    """

    def __init__(self, stream: Optional[TextIO] = None, glyphs: Optional[GlyphConfig] = None):
        self.stream = stream if stream is not None else sys.stdout
        self.glyphs = glyphs or GlyphConfig()

    def _glyph(self, state: CellState) -> str:
        return self.glyphs.alive if state == CellState.ALIVE else self.glyphs.dead

    def format_board(self, board: "Board") -> str:
        horizontal = "═" * board.width
        lines = [f"╔{horizontal}╗"]
        for row in board.rows():
            lines.append("║" + "".join(self._glyph(state) for state in row) + "║")
        lines.append(f"╚{horizontal}╝")
        return "\n".join(lines) + "\n"

    def banner(self) -> None:
        self.stream.write(f"\n{BANNER}\n")
        self.stream.flush()

    def render(self, board: "Board") -> None:
        self.stream.write(f"Step: {board.generation}\n")
        self.stream.write(self.format_board(board))
        self.stream.flush()
