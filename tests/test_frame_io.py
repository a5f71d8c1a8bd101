"""
Tests for frame serialization: export, validation, single and batch import.
"""
import json

import pytest

from spritegrid.config import EditorConfig
from spritegrid.errors import PixelValidationError
from spritegrid.models.color import Color
from spritegrid.models.editor import EditorState
from spritegrid.services.frame_io import (
    export_frame, frame_name_from_file, import_frame, import_frame_files,
    import_frames, parse_payload, save_frame_to_file, validate_pixels,
)


RED = Color.from_hex('#FF0000')


def make_payload(size=4, painted=None):
    pixels = [None] * (size * size)
    for index, token in (painted or {}).items():
        pixels[index] = token
    return {"width": size, "height": size, "pixels": pixels}


# ══════════════════════════════════════════════════════════════════════════
# Export
# ══════════════════════════════════════════════════════════════════════════

class TestExport:

    def test_export_format(self, l_shape):
        payload = export_frame(l_shape)
        assert payload["width"] == 4
        assert payload["height"] == 4
        assert len(payload["pixels"]) == 16
        assert payload["pixels"][0] == '#FF0000'
        assert payload["pixels"][1] is None

    def test_export_is_json_serializable(self, l_shape):
        text = json.dumps(export_frame(l_shape))
        assert json.loads(text)["pixels"][9] == '#FF0000'

    def test_export_includes_floating_selection(self, l_shape):
        l_shape.select_cells([0])
        l_shape.nudge_selection(1, 0)
        pixels = export_frame(l_shape)["pixels"]
        assert pixels[0] is None
        assert pixels[1] == '#FF0000'

    def test_export_inactive_frame(self, l_shape):
        first_id = l_shape.animation.active_id
        l_shape.add_frame()
        assert export_frame(l_shape, first_id)["pixels"][0] == '#FF0000'
        assert export_frame(l_shape)["pixels"][0] is None


# ══════════════════════════════════════════════════════════════════════════
# Validation
# ══════════════════════════════════════════════════════════════════════════

class TestValidation:

    def test_missing_pixels(self):
        with pytest.raises(PixelValidationError) as exc:
            parse_payload({"width": 4, "height": 4}, 4)
        assert str(exc.value) == "Invalid format: missing pixels array"

    def test_pixels_not_a_list(self):
        with pytest.raises(PixelValidationError):
            validate_pixels("#FF0000", 16)

    def test_payload_not_an_object(self):
        with pytest.raises(PixelValidationError):
            parse_payload([None] * 16, 4)

    def test_wrong_pixel_count(self):
        with pytest.raises(PixelValidationError) as exc:
            validate_pixels([None] * 3, 16)
        assert str(exc.value) == "Invalid pixel count: expected 16, got 3"

    def test_invalid_token_reports_index(self):
        payload = make_payload(painted={2: 'red'})
        with pytest.raises(PixelValidationError) as exc:
            parse_payload(payload, 4)
        assert str(exc.value) == "Invalid pixel at index 2: red"
        assert exc.value.index == 2
        assert exc.value.value == 'red'

    @pytest.mark.parametrize('token', ['#FFF', 'FF0000', '#GG0000', 0])
    def test_rejected_tokens(self, token):
        with pytest.raises(PixelValidationError):
            parse_payload(make_payload(painted={0: token}), 4)

    def test_lowercase_accepted(self):
        cells = parse_payload(make_payload(painted={0: '#ff0000'}), 4)
        assert cells[0] == RED
        assert cells[1] is None

    def test_dimension_mismatch(self):
        payload = make_payload()
        payload["width"] = 8
        with pytest.raises(PixelValidationError):
            parse_payload(payload, 4)

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            validate_pixels(None, 16)


# ══════════════════════════════════════════════════════════════════════════
# Single import
# ══════════════════════════════════════════════════════════════════════════

class TestImport:

    def test_round_trip(self, l_shape):
        original = l_shape.active_buffer.snapshot()
        payload = json.loads(json.dumps(export_frame(l_shape)))
        l_shape.add_frame()
        assert import_frame(l_shape, payload)
        assert l_shape.active_buffer.snapshot() == original

    def test_import_commits_one_step(self, editor4):
        import_frame(editor4, make_payload(painted={0: '#FF0000'}))
        assert editor4.active_history.get_current_description() == "Import"
        editor4.undo()
        assert editor4.active_buffer.is_blank()

    def test_invalid_import_changes_nothing(self, l_shape, notices):
        before = l_shape.active_buffer.snapshot()
        depth = len(l_shape.active_history)
        with pytest.raises(PixelValidationError):
            import_frame(l_shape, {"pixels": [None] * 3})
        assert l_shape.active_buffer.snapshot() == before
        assert len(l_shape.active_history) == depth
        assert notices[-1] == ("Import", "Import failed: Invalid pixel count: expected 16, got 3")

    def test_import_commits_floating_selection_first(self, l_shape):
        l_shape.select_cells([0])
        import_frame(l_shape, make_payload(painted={15: '#00FF00'}))
        assert not l_shape.floating.active
        assert l_shape.active_buffer.painted_indices() == [15]


# ══════════════════════════════════════════════════════════════════════════
# Batch import
# ══════════════════════════════════════════════════════════════════════════

class TestBatchImport:

    def test_blank_active_frame_is_replaced(self, editor4):
        report = import_frames(editor4, [
            ("walk_1.json", make_payload(painted={0: '#FF0000'})),
            ("walk_2.json", make_payload(painted={1: '#FF0000'})),
        ])
        frames = editor4.animation.frames
        assert report.replaced
        assert len(frames) == 2
        assert [f.name for f in frames] == ["walk_1", "walk_2"]
        assert frames[0].base.get(0) == RED
        assert editor4.animation.active_id == report.imported[-1] == frames[1].id

    def test_non_blank_active_frame_is_kept(self, l_shape):
        first = l_shape.active_frame
        report = import_frames(l_shape, [
            ("a.json", make_payload()),
            ("b.json", make_payload()),
        ])
        assert not report.replaced
        assert len(l_shape.animation) == 3
        assert first.base.get(0) == RED

    def test_invalid_file_skipped(self, editor4, notices):
        report = import_frames(editor4, [
            ("a.json", make_payload()),
            ("bad.json", {"pixels": []}),
            ("c.json", make_payload()),
        ])
        assert len(report.imported) == 2
        assert report.errors == [("bad", "Invalid pixel count: expected 16, got 0")]
        assert any(title == "Import" for title, _ in notices)

    def test_frame_cap_stops_import(self, notices):
        editor = EditorState(EditorConfig(grid_size=4, max_frames=3))
        report = import_frames(editor, [(f"f{i}.json", make_payload()) for i in range(5)])
        assert len(editor.animation) == 3
        assert len(report.imported) == 3
        assert report.skipped == 2
        assert "2 file(s) not imported" in notices[-1][1]

    def test_frame_name_from_file(self):
        assert frame_name_from_file("sprites/Run.JSON") == "Run"
        assert frame_name_from_file("idle") == "idle"


class TestFrameFiles:

    def test_save_and_import_file(self, l_shape, tmp_path):
        path = tmp_path / "hero.json"
        save_frame_to_file(l_shape, str(path))

        editor = EditorState(EditorConfig(grid_size=4))
        report = import_frame_files(editor, [str(path)])
        assert report.replaced
        assert editor.active_frame.name == "hero"
        assert editor.active_buffer.snapshot() == l_shape.active_buffer.snapshot()

    def test_unreadable_file_reported(self, editor4, tmp_path, notices):
        good = tmp_path / "good.json"
        good.write_text(json.dumps(make_payload()), encoding='utf-8')
        broken = tmp_path / "broken.json"
        broken.write_text("not json", encoding='utf-8')

        report = import_frame_files(editor4, [str(broken), str(good)])
        assert len(report.imported) == 1
        assert report.errors[0][0] == "broken"
