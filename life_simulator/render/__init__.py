"""Renderers that draw boards for a human to watch."""

from life_simulator.render.console import ConsoleRenderer

__all__ = ["ConsoleRenderer"]
