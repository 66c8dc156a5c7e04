"""
Tests for PlaybackCursor - saturating navigation over a SceneStore
"""

import pytest

from engine.playback_cursor import PlaybackCursor
from engine.scene_store import SceneStore
from models.errors import EmptySceneError, NodeIndexError


def scene_with(frame_count, nodes=3, channels=3):
    text = "".join(f"0 {i}\nshow\n" for i in range(frame_count))
    return SceneStore.from_text(text, nodes, channels)


class TestPlaybackNavigation:

    def test_starts_at_first_frame(self):
        cursor = PlaybackCursor(scene_with(3))
        assert cursor.index == 0
        assert cursor.current_node(0) == [0, 0, 0]

    @pytest.mark.parametrize("frame_count", [1, 2, 5])
    def test_advance_saturates_at_last_frame(self, frame_count):
        cursor = PlaybackCursor(scene_with(frame_count))
        for _ in range(frame_count):
            cursor.advance()
        assert cursor.index == frame_count - 1
        assert cursor.advance() is False
        assert cursor.index == frame_count - 1

    def test_retreat_never_below_zero(self):
        cursor = PlaybackCursor(scene_with(4))
        cursor.advance()
        cursor.advance()
        for _ in range(10):
            cursor.retreat()
        assert cursor.index == 0

    def test_current_node_follows_cursor(self):
        cursor = PlaybackCursor(scene_with(3))
        cursor.advance()
        cursor.advance()
        assert cursor.current_node(0) == [2, 0, 0]
        cursor.retreat()
        assert cursor.current_node(0) == [1, 0, 0]

    def test_cursor_borrows_scene(self):
        scene = scene_with(2)
        cursor = PlaybackCursor(scene)
        assert cursor.scene is scene
        assert cursor.current_frame() is scene.frame(0)

    def test_position_label(self):
        cursor = PlaybackCursor(scene_with(3))
        cursor.advance()
        assert cursor.position_label() == "Frame 2 of 3"

    def test_node_index_checked(self):
        cursor = PlaybackCursor(scene_with(1))
        with pytest.raises(NodeIndexError):
            cursor.current_node(3)


class TestEmptyScene:

    def test_navigation_is_safe(self):
        cursor = PlaybackCursor(scene_with(0))
        assert cursor.advance() is False
        assert cursor.retreat() is False
        assert cursor.index == 0
        assert cursor.position_label() == "Frame 0 of 0"

    @pytest.mark.parametrize("moves", ["", "a", "r", "aarra"])
    def test_current_node_always_raises(self, moves):
        cursor = PlaybackCursor(scene_with(0))
        for move in moves:
            cursor.advance() if move == "a" else cursor.retreat()
        with pytest.raises(EmptySceneError):
            cursor.current_node(0)
        with pytest.raises(EmptySceneError):
            cursor.current_frame()
