"""
Tests for animation playback ticking.
"""
import pytest

from spritegrid.services.playback import Playback


class TestPlayback:

    def test_interval_from_config(self, editor4):
        assert Playback(editor4).interval == pytest.approx(0.125)

    def test_explicit_fps(self, editor4):
        assert Playback(editor4, fps=4).interval == pytest.approx(0.25)

    def test_fps_must_be_positive(self, editor4):
        with pytest.raises(ValueError):
            Playback(editor4, fps=0)

    def test_tick_without_start_does_nothing(self, editor4):
        editor4.add_frame()
        active = editor4.animation.active_id
        assert Playback(editor4).tick() == active

    def test_tick_cycles_and_wraps(self, editor4):
        editor4.add_frame()
        editor4.add_frame()
        ids = [f.id for f in editor4.animation.frames]
        playback = Playback(editor4)
        playback.start()
        assert playback.tick() == ids[0]
        assert playback.tick() == ids[1]
        assert playback.tick() == ids[2]
        assert playback.tick() == ids[0]

    def test_single_frame_stays(self, editor4):
        playback = Playback(editor4)
        playback.start()
        assert playback.tick() == editor4.animation.active_id

    def test_start_commits_selection_and_blocks_editing(self, l_shape):
        l_shape.select_cells([0])
        l_shape.nudge_selection(1, 0)
        playback = Playback(l_shape)
        playback.start()
        assert playback.is_playing()
        assert not l_shape.floating.active
        assert l_shape.active_buffer.get(1) is not None
        assert not l_shape.paint_cell(15)

    def test_stop_and_toggle(self, editor4):
        playback = Playback(editor4)
        assert playback.toggle()
        assert not playback.toggle()
        playback.start()
        playback.stop()
        assert not editor4.playing


class TestEditingWhilePlaying:

    def test_selection_refused(self, l_shape):
        Playback(l_shape).start()
        assert l_shape.select_cells([0]) == frozenset()
        assert l_shape.lasso_select([0, 1, 2, 3]) == frozenset()
        assert not l_shape.floating.active

    def test_undo_and_redo_refused(self, l_shape):
        Playback(l_shape).start()
        assert not l_shape.undo()
        assert not l_shape.redo()
        assert set(l_shape.active_buffer.painted_indices()) == {0, 4, 8, 9}

    def test_frame_changes_refused(self, editor4):
        editor4.add_frame()
        ids = [f.id for f in editor4.animation.frames]
        Playback(editor4).start()
        assert editor4.add_frame() is None
        assert editor4.duplicate_frame() is None
        assert not editor4.delete_frame()
        editor4.move_frame(0, 1)
        editor4.select_frame(ids[0])
        assert [f.id for f in editor4.animation.frames] == ids
        assert editor4.animation.active_id == ids[1]
