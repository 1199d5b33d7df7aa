"""Helpers for loading and validating simulator settings."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

import yaml  # type: ignore[import-untyped]

from life_simulator.core.exceptions import ConfigurationError
from life_simulator.utils.consts import ConstUtils, is_valid_duration


@dataclass(frozen=True)
class MarkerConfig:
    alive: str = ConstUtils.DEFAULT_ALIVE_MARKER
    dead: str = ConstUtils.DEFAULT_DEAD_MARKER


@dataclass(frozen=True)
class GlyphConfig:
    alive: str = ConstUtils.DEFAULT_ALIVE_GLYPH
    dead: str = ConstUtils.DEFAULT_DEAD_GLYPH


@dataclass(frozen=True)
class TimingConfig:
    interval: float = ConstUtils.DEFAULT_INTERVAL
    startup_delay: float = ConstUtils.DEFAULT_STARTUP_DELAY


@dataclass(frozen=True)
class SimulatorConfig:
    markers: MarkerConfig = field(default_factory=MarkerConfig)
    glyphs: GlyphConfig = field(default_factory=GlyphConfig)
    timing: TimingConfig = field(default_factory=TimingConfig)


def _get_config_path(path: Optional[str] = None) -> str:
    if path is None:
        # Bundled defaults live next to the package: life_simulator/config.yaml
        base = Path(__file__).parent.parent / "config.yaml"
        path = str(base)

    return path


def _load_yaml_file(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
    except Exception as exc:
        raise ConfigurationError(f"Failed to parse config: {exc}") from exc

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ConfigurationError("settings file must contain a mapping")
    return raw


def _section(raw: dict[str, Any], name: str) -> dict[str, Any]:
    value = raw.get(name) or {}
    if not isinstance(value, dict):
        raise ConfigurationError(name, "section must be a mapping")
    return value


def _parse_simulator_cfg_from_dict(raw: dict[str, Any]) -> SimulatorConfig:
    try:
        cfg = SimulatorConfig(
            markers=MarkerConfig(**{k: str(v) for k, v in _section(raw, "markers").items()}),
            glyphs=GlyphConfig(**{k: str(v) for k, v in _section(raw, "glyphs").items()}),
            timing=TimingConfig(
                **{k: float(v) for k, v in _section(raw, "timing").items()}
            ),
        )
    except TypeError as exc:
        raise ConfigurationError(f"Invalid config schema: {exc}") from exc
    except ValueError as exc:
        raise ConfigurationError("timing", f"values must be numbers: {exc}") from exc

    validate_markers(cfg.markers)
    _validate_glyphs(cfg.glyphs)
    _validate_timing(cfg.timing)
    return cfg


def validate_markers(markers: MarkerConfig) -> None:
    """Fail fast on marker pairs the board parser cannot tell apart."""
    for name, marker in (("alive", markers.alive), ("dead", markers.dead)):
        if len(marker) != 1:
            raise ConfigurationError(f"markers.{name}", "must be a single character")
        if marker == ConstUtils.LINE_TERMINATOR:
            raise ConfigurationError(f"markers.{name}", "must not be the line terminator")

    if markers.alive == markers.dead:
        raise ConfigurationError("markers", "alive and dead markers must differ")


def _validate_glyphs(glyphs: GlyphConfig) -> None:
    # Each glyph occupies one console column so the border lines up
    for name, glyph in (("alive", glyphs.alive), ("dead", glyphs.dead)):
        if len(glyph) != 1:
            raise ConfigurationError(f"glyphs.{name}", "must be a single character")


def _validate_timing(timing: TimingConfig) -> None:
    if not is_valid_duration(timing.interval):
        raise ConfigurationError("timing.interval", "must be a finite number >= 0")
    if not is_valid_duration(timing.startup_delay):
        raise ConfigurationError("timing.startup_delay", "must be a finite number >= 0")


def load_config(path: Optional[str] = None) -> SimulatorConfig:
    """Load and validate settings from a YAML file.

    Args:
        path: Optional path to YAML settings. If None, load the bundled
            life_simulator/config.yaml. Sections and keys that are left out
            fall back to their defaults.

    Returns:
        SimulatorConfig instance

    Raises:
        ConfigurationError: on parse or validation errors
    """

    p = Path(_get_config_path(path=path))
    raw = _load_yaml_file(p)

    return _parse_simulator_cfg_from_dict(raw=raw)
