"""Renderer protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from life_simulator.interfaces.board import Board


class Renderer(Protocol):
    """Anything that can draw the current generation of a board."""

    def render(self, board: "Board") -> None:
        """Draw one frame."""
        ...
