"""
Pytest configuration and shared fixtures for the life_simulator test suite.
"""

import sys
import tempfile
from pathlib import Path

import pytest
import yaml

# Ensure project root is on PYTHONPATH so 'life_simulator' can be imported
PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


BLINKER_VERTICAL = ".#.\n.#.\n.#.\n"
BLINKER_HORIZONTAL = "...\n###\n...\n"

GLIDER = (
    ".#...\n"
    "..#..\n"
    "###..\n"
    ".....\n"
    ".....\n"
)


class RecordingClock:
    """IClock stand-in that records waits instead of sleeping."""

    def __init__(self):
        self.sleeps = []

    @property
    def elapsed(self) -> float:
        return sum(self.sleeps)

    def sleep(self, seconds: float) -> None:
        self.sleeps.append(seconds)

    def reset(self) -> None:
        self.sleeps.clear()


@pytest.fixture
def recording_clock():
    return RecordingClock()


def _temp_file(suffix: str):
    with tempfile.NamedTemporaryFile(
        mode="w",
        suffix=suffix,
        delete=False,
    ) as f:
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def temp_yaml_file():
    """
    Fixture that provides a temporary YAML file.

    Yields:
        Path: Path to the temporary YAML file
    """
    yield from _temp_file(".yaml")


@pytest.fixture
def temp_board_file():
    """
    Fixture that provides a temporary, empty board file.

    Yields:
        Path: Path to the temporary board file
    """
    yield from _temp_file(".txt")


@pytest.fixture
def glider_board_file(temp_board_file):
    temp_board_file.write_text(GLIDER, encoding="utf-8")
    yield temp_board_file


@pytest.fixture
def valid_settings_dict():
    """
    Fixture providing a complete valid settings dictionary.
    """
    return {
        "markers": {"alive": "O", "dead": "-"},
        "glyphs": {"alive": "@", "dead": " "},
        "timing": {"interval": 0.25, "startup_delay": 0},
    }


@pytest.fixture
def temp_settings_yaml_file(temp_yaml_file, valid_settings_dict):
    """
    Fixture that creates a temporary YAML file with valid settings.
    """
    with open(temp_yaml_file, "w", encoding="utf-8") as f:
        yaml.dump(valid_settings_dict, f)

    yield temp_yaml_file
