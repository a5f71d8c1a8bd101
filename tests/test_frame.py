"""
Tests for Frame and AnimationSet.
"""
import pytest

from spritegrid.errors import FrameLimitError, FrameNotFoundError
from spritegrid.models.color import Color
from spritegrid.models.frame import AnimationSet, Frame
from spritegrid.models.grid import LayerKind


RED = Color.from_hex('#FF0000')


class TestFrame:

    def test_layers_are_independent(self):
        frame = Frame(4, "Frame 0")
        frame.buffer(LayerKind.BASE).set(0, RED)
        assert frame.buffer(LayerKind.OVERLAY).get(0) is None

    def test_histories_are_independent(self):
        frame = Frame(4, "Frame 0")
        frame.base.set(0, RED)
        frame.commit(LayerKind.BASE, "paint")
        assert frame.history(LayerKind.BASE).can_undo()
        assert not frame.history(LayerKind.OVERLAY).can_undo()

    def test_unknown_layer_rejected(self):
        with pytest.raises(ValueError):
            Frame(4, "Frame 0").buffer('base')

    def test_is_blank_checks_both_layers(self):
        frame = Frame(4, "Frame 0")
        assert frame.is_blank()
        frame.overlay.set(3, RED)
        assert not frame.is_blank()

    def test_copy_has_new_id_and_fresh_history(self):
        frame = Frame(4, "Frame 0")
        frame.base.set(0, RED)
        frame.commit(LayerKind.BASE, "paint")
        dup = frame.copy("Frame 0 (Copy)")
        assert dup.id != frame.id
        assert dup.base == frame.base
        assert not dup.history(LayerKind.BASE).can_undo()


class TestAnimationSet:

    @pytest.fixture
    def anim(self):
        return AnimationSet(4)

    def test_starts_with_one_active_frame(self, anim):
        assert len(anim) == 1
        assert anim.active_frame.name == "Frame 0"
        assert anim.active_index == 0

    def test_append_activates_new_frame(self, anim):
        frame = anim.append_frame()
        assert frame.name == "Frame 1"
        assert anim.active_id == frame.id
        assert anim.active_index == 1

    def test_append_at_cap_raises(self):
        anim = AnimationSet(4, max_frames=2)
        anim.append_frame()
        assert anim.is_full()
        with pytest.raises(FrameLimitError):
            anim.append_frame()
        assert len(anim) == 2

    def test_duplicate_inserts_after_source(self, anim):
        first = anim.active_frame
        anim.append_frame()
        first.base.set(0, RED)
        dup = anim.duplicate_frame(first.id)
        assert anim.frames[1] is dup
        assert dup.name == "Frame 0 (Copy)"
        assert dup.base.get(0) == RED
        assert anim.active_id == dup.id

    def test_duplicate_is_deep(self, anim):
        first = anim.active_frame
        dup = anim.duplicate_frame()
        dup.base.set(0, RED)
        assert first.base.get(0) is None

    def test_duplicate_at_cap_raises(self):
        anim = AnimationSet(4, max_frames=1)
        with pytest.raises(FrameLimitError):
            anim.duplicate_frame()

    def test_cannot_delete_last_frame(self, anim):
        assert not anim.delete_frame()
        assert len(anim) == 1

    def test_delete_active_activates_predecessor(self, anim):
        first = anim.active_frame
        second = anim.append_frame()
        anim.append_frame()
        anim.set_active(second.id)
        assert anim.delete_frame()
        assert anim.active_id == first.id

    def test_delete_first_activates_new_first(self, anim):
        first = anim.active_frame
        second = anim.append_frame()
        anim.set_active(first.id)
        anim.delete_frame(first.id)
        assert anim.active_id == second.id

    def test_delete_inactive_keeps_active(self, anim):
        first = anim.active_frame
        second = anim.append_frame()
        anim.delete_frame(first.id)
        assert anim.active_id == second.id
        assert len(anim) == 1

    def test_move_frame_keeps_active(self, anim):
        first = anim.active_frame
        second = anim.append_frame()
        anim.move_frame(1, 0)
        assert anim.frames == [second, first]
        assert anim.active_id == second.id
        assert anim.active_index == 0

    def test_move_frame_out_of_range(self, anim):
        with pytest.raises(IndexError):
            anim.move_frame(0, 3)

    def test_unknown_id(self, anim):
        with pytest.raises(FrameNotFoundError):
            anim.get_frame('missing')
        with pytest.raises(KeyError):
            anim.set_active('missing')

    def test_advance_wraps(self, anim):
        first = anim.active_frame
        anim.append_frame()
        assert anim.advance() == first.id

    def test_previous_frame(self, anim):
        first = anim.active_frame
        assert anim.previous_frame() is None
        anim.append_frame()
        assert anim.previous_frame() is first
