"""
Tests for the scene text-format parser and SceneStore construction
"""

import pytest

from engine.scene_parser import SceneParser
from engine.scene_store import SceneStore
from models.errors import FormatError, ReadOnlyFrameError


def parse(text, nodes=4, channels=9):
    return SceneStore.from_text(text, nodes, channels)


class TestSceneParsing:

    def test_single_committed_frame(self):
        scene = parse("0 10 20 30\nshow\n")
        assert scene.frame_count() == 1
        assert scene.frame(0).get_node(0) == [10, 20, 30, 0, 0, 0, 0, 0, 0]

    def test_frame_without_show_is_discarded(self):
        scene = parse("0 10 20 30\n")
        assert scene.frame_count() == 0
        assert scene.is_empty()

    def test_two_frames_in_order(self):
        scene = parse("0 5\nshow\n0 9\nshow\n")
        assert scene.frame_count() == 2
        assert scene.frame(0).get_node(0)[0] == 5
        assert scene.frame(1).get_node(0)[0] == 9

    def test_show_starts_blank_frame(self):
        scene = parse("1 255 255\nshow\nshow\n")
        assert scene.frame_count() == 2
        assert scene.frame(1).is_blank()

    def test_trailing_frame_dropped_after_committed_ones(self):
        scene = parse("0 1\nshow\n0 2\n")
        assert scene.frame_count() == 1
        assert scene.frame(0).get_node(0)[0] == 1

    def test_comments_and_blank_lines_ignored(self):
        text = "# header\n\n0 7\n#0 99\n   \nshow\n"
        scene = parse(text)
        assert scene.frame_count() == 1
        assert scene.frame(0).get_node(0)[0] == 7

    def test_partial_update_keeps_prior_channels(self):
        scene = parse("2 1 2 3 4 5\n2 9\nshow\n")
        assert scene.frame(0).get_node(2) == [9, 2, 3, 4, 5, 0, 0, 0, 0]

    def test_index_only_line_keeps_node(self):
        scene = parse("3 4 4\n3\nshow\n")
        assert scene.frame(0).get_node(3)[:2] == [4, 4]

    def test_full_vector_and_extra_whitespace(self):
        scene = parse("1\t1  2 3 4 5 6 7 8 9\r\nshow\r\n")
        assert scene.frame(0).get_node(1) == [1, 2, 3, 4, 5, 6, 7, 8, 9]

    def test_committed_frames_are_read_only(self):
        scene = parse("0 1\nshow\n")
        with pytest.raises(ReadOnlyFrameError):
            scene.frame(0).set_node(0, [0] * 9)

    def test_parser_accepts_any_iterable(self):
        lines = iter(["0 3\n", "show\n"])
        scene = SceneParser(4, 9).parse(lines)
        assert scene.frame_count() == 1

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "scene.txt"
        path.write_text("# two frames\n0 10\nshow\n1 20\nshow\n", encoding="utf-8")
        scene = SceneStore.load(path, 4, 9)
        assert scene.frame_count() == 2
        assert scene.frame(1).get_node(1)[0] == 20


class TestSceneParsingErrors:

    @pytest.mark.parametrize("text, token", [
        ("x 10\nshow\n", "x"),
        ("-1 10\nshow\n", "-1"),
        ("0 ten\nshow\n", "ten"),
        ("0 256\nshow\n", "256"),
        ("0 1.5\nshow\n", "1.5"),
        ("4 1\nshow\n", "4"),
    ])
    def test_bad_token_fails_whole_parse(self, text, token):
        with pytest.raises(FormatError) as exc:
            parse(text)
        assert exc.value.token == token
        assert exc.value.line_number == 1

    def test_error_reports_line_number(self):
        with pytest.raises(FormatError) as exc:
            parse("0 1\nshow\n# comment\n1 2 300\nshow\n")
        assert exc.value.line_number == 4
        assert exc.value.line == "1 2 300"
        assert "300" in str(exc.value)

    def test_too_many_channel_values(self):
        with pytest.raises(FormatError):
            parse("0 1 2 3 4\nshow\n", channels=3)

    def test_show_with_trailing_text_is_not_a_commit(self):
        with pytest.raises(FormatError):
            parse("0 1\nshow now\n")

    def test_format_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse("zero 1\nshow\n")
