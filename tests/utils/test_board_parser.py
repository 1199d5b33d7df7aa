import logging

import pytest

from life_simulator.core.exceptions import (
    BoardDimensionError,
    BoardFileNotFoundError,
    ConfigurationError,
    EmptyBoardError,
    InconsistentColumnCountError,
    InvalidCharacterError,
)
from life_simulator.utils.board_parser import ParsedBoard, load_board_file, parse_board
from life_simulator.utils.config_loader import MarkerConfig


class TestParseBoard:
    def test_center_cell_example(self):
        parsed = parse_board("...\n.#.\n...\n")

        assert isinstance(parsed, ParsedBoard)
        assert parsed.height == 3
        assert parsed.width == 3
        assert parsed.initial_cells == (
            False, False, False,
            False, True, False,
            False, False, False,
        )

    def test_final_line_without_terminator(self):
        parsed = parse_board("...\n.#.\n...")

        assert (parsed.height, parsed.width) == (3, 3)

    def test_cells_follow_source_characters(self):
        text = "#..#\n.##.\n#.#.\n"
        parsed = parse_board(text)

        assert (parsed.height, parsed.width) == (3, 4)
        for r, line in enumerate(text.splitlines()):
            for c, char in enumerate(line):
                assert parsed.initial_cells[r * 4 + c] == (char == "#")

    def test_rows(self):
        parsed = parse_board("#.\n.#\n")

        assert list(parsed.rows()) == [(True, False), (False, True)]

    def test_single_cell(self):
        parsed = parse_board("#")

        assert (parsed.height, parsed.width, parsed.initial_cells) == (1, 1, (True,))

    def test_custom_markers(self):
        parsed = parse_board("O-\n-O\n", alive="O", dead="-")

        assert parsed.initial_cells == (True, False, False, True)

    def test_inconsistent_columns(self):
        with pytest.raises(InconsistentColumnCountError) as excinfo:
            parse_board("##\n#\n")

        assert excinfo.value.expected == 2
        assert excinfo.value.actual == 1
        assert excinfo.value.line == 2

    def test_inconsistent_unterminated_last_line(self):
        with pytest.raises(InconsistentColumnCountError) as excinfo:
            parse_board("###\n###\n##")

        assert excinfo.value.line == 3

    def test_blank_line_is_inconsistent(self):
        with pytest.raises(InconsistentColumnCountError):
            parse_board("##\n\n##\n")

    def test_invalid_character(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            parse_board("#x\n.#\n")

        assert excinfo.value.character == "x"
        assert (excinfo.value.line, excinfo.value.column) == (1, 2)

    def test_carriage_return_is_invalid(self):
        with pytest.raises(InvalidCharacterError) as excinfo:
            parse_board("#.\r\n.#\r\n")

        assert excinfo.value.character == "\r"

    def test_default_markers_rejected_when_custom_ones_used(self):
        with pytest.raises(InvalidCharacterError):
            parse_board("#.\n", alive="O", dead="-")

    def test_empty_input(self):
        with pytest.raises(EmptyBoardError):
            parse_board("")

    def test_terminator_only_has_no_columns(self):
        with pytest.raises(BoardDimensionError):
            parse_board("\n")

    def test_too_many_columns(self):
        with pytest.raises(BoardDimensionError):
            parse_board("." * 256 + "\n")

    def test_too_many_rows(self):
        with pytest.raises(BoardDimensionError):
            parse_board(".\n" * 256)

    def test_largest_board(self):
        parsed = parse_board(("." * 255 + "\n") * 255)

        assert (parsed.height, parsed.width) == (255, 255)

    @pytest.mark.parametrize(
        "alive,dead",
        [("#", "#"), ("##", "."), ("#", ""), ("\n", ".")],
    )
    def test_unusable_markers(self, alive, dead):
        with pytest.raises(ConfigurationError):
            parse_board("#.\n", alive=alive, dead=dead)


class TestLoadBoardFile:
    def test_load_board_file(self, glider_board_file, caplog):
        with caplog.at_level(logging.INFO):
            parsed = load_board_file(glider_board_file)

        assert (parsed.height, parsed.width) == (5, 5)
        assert sum(parsed.initial_cells) == 5
        assert "Rows = 5, Columns = 5" in caplog.text

    def test_load_board_file_custom_markers(self, temp_board_file):
        temp_board_file.write_text("O-\n-O\n", encoding="utf-8")

        parsed = load_board_file(str(temp_board_file), markers=MarkerConfig("O", "-"))

        assert parsed.initial_cells == (True, False, False, True)

    def test_missing_file(self, tmp_path):
        missing = tmp_path / "missing.txt"

        with pytest.raises(BoardFileNotFoundError) as excinfo:
            load_board_file(missing)

        assert excinfo.value.path == str(missing)

    def test_directory_is_not_a_board_file(self, tmp_path):
        with pytest.raises(BoardFileNotFoundError) as excinfo:
            load_board_file(tmp_path)

        assert excinfo.value.reason is not None
        assert "cannot be opened" in str(excinfo.value)
        assert "does not exist" not in str(excinfo.value)

    def test_missing_file_message(self, tmp_path):
        with pytest.raises(BoardFileNotFoundError) as excinfo:
            load_board_file(tmp_path / "missing.txt")

        assert excinfo.value.reason is None
        assert "does not exist!" in str(excinfo.value)

    def test_empty_file(self, temp_board_file):
        with pytest.raises(EmptyBoardError):
            load_board_file(temp_board_file)

    def test_undecodable_byte_is_invalid_character(self, temp_board_file):
        temp_board_file.write_bytes(b"#\xff\n.#\n")

        with pytest.raises(InvalidCharacterError) as excinfo:
            load_board_file(temp_board_file)

        assert (excinfo.value.line, excinfo.value.column) == (1, 2)
        assert excinfo.value.details["character"] == "\\xff"
        assert 'invalid char "\\xff"' in str(excinfo.value)

    def test_column_error_reported_before_later_bad_byte(self, temp_board_file):
        temp_board_file.write_bytes(b"##\n#\n\xff")

        with pytest.raises(InconsistentColumnCountError) as excinfo:
            load_board_file(temp_board_file)

        assert excinfo.value.line == 2

    def test_non_ascii_markers_still_decode(self, temp_board_file):
        temp_board_file.write_bytes("■·\n·■\n".encode("utf-8"))

        parsed = load_board_file(temp_board_file, markers=MarkerConfig("■", "·"))

        assert parsed.initial_cells == (True, False, False, True)
