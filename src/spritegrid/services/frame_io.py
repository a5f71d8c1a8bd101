"""
Sprite Grid Editor - Frame Import/Export Service

Serialization of single frames to and from the JSON frame format:

    {"width": N, "height": N, "pixels": ["#RRGGBB" | null, ... N*N entries]}

Payloads are validated completely before any buffer is written, so a
rejected import leaves the editor untouched. Only the base layer is
serialized.
"""

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from spritegrid.constants import FRAME_FILE_EXTENSION
from spritegrid.errors import PixelValidationError
from spritegrid.models.color import Color
from spritegrid.models.grid import LayerKind
from spritegrid.utils.logger import loggerRaise, notify

logger = logging.getLogger(__name__)


# ========================================
# Validation
# ========================================

def validate_pixels(pixels, total: int):
    """Check a pixels array without converting it

    Args:
        pixels: Candidate pixels value from a payload
        total: Expected number of cells (N*N)

    Raises:
        PixelValidationError: On a missing array, a wrong length or the first
            element that is neither None nor a #RRGGBB string
    """
    if not isinstance(pixels, list):
        raise PixelValidationError("Invalid format: missing pixels array")
    if len(pixels) != total:
        raise PixelValidationError(
            f"Invalid pixel count: expected {total}, got {len(pixels)}")
    for i, value in enumerate(pixels):
        if value is not None and not Color.is_hex(value):
            raise PixelValidationError(f"Invalid pixel at index {i}: {value}", index=i, value=value)


def parse_payload(payload, size: int) -> List[Optional[Color]]:
    """Validate a frame payload and convert it to cell colors

    Args:
        payload: Decoded JSON object
        size: Grid cells per side of the receiving editor

    Returns:
        N*N list of Color or None

    Raises:
        PixelValidationError: If the payload is malformed
    """
    if not isinstance(payload, dict):
        raise PixelValidationError("Invalid format: missing pixels array")

    width = payload.get('width', size)
    height = payload.get('height', size)
    if width != size or height != size:
        raise PixelValidationError(
            f"Invalid dimensions: expected {size}x{size}, got {width}x{height}")

    pixels = payload.get('pixels')
    validate_pixels(pixels, size * size)
    return [None if value is None else Color.from_hex(value) for value in pixels]


# ========================================
# Export
# ========================================

def frame_to_payload(cells: Sequence[Optional[Color]], size: int) -> dict:
    """Build the JSON frame structure for a sequence of cells"""
    return {
        "width": size,
        "height": size,
        "pixels": [None if color is None else color.to_hex() for color in cells],
    }


def export_frame(editor, frame_id: Optional[str] = None) -> dict:
    """Serialize the base layer of a frame (default: active)

    The active frame is exported as displayed, with a floating selection on
    the base layer merged in.
    """
    animation = editor.animation
    frame = animation.get_frame(frame_id or animation.active_id)
    if frame.id == animation.active_id:
        cells = editor.layer_cells(LayerKind.BASE)
    else:
        cells = list(frame.base)
    return frame_to_payload(cells, editor.size)


def save_frame_to_file(editor, filename: str, frame_id: Optional[str] = None):
    """Write a frame as JSON

    Raises:
        OSError: If the file cannot be written
    """
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(export_frame(editor, frame_id), f)
    logger.debug(f"Frame saved to {filename}")


# ========================================
# Import
# ========================================

def import_frame(editor, payload) -> bool:
    """Replace the active frame's base layer with a payload and commit

    Any floating selection is committed first.

    Returns:
        True if a history step was recorded

    Raises:
        PixelValidationError: If the payload is malformed (nothing is changed)
    """
    try:
        cells = parse_payload(payload, editor.size)
    except PixelValidationError as e:
        loggerRaise(e, f"Import failed: {e}", "Import")

    editor.clear_selection()
    frame = editor.active_frame
    frame.base.restore(cells)
    history = frame.history(LayerKind.BASE)
    if history.current == frame.base.snapshot():
        return False
    frame.commit(LayerKind.BASE, "Import")
    return True


@dataclass
class ImportReport:
    """Outcome of a batch import

    Attributes:
        imported: Ids of frames that received data, in file order
        replaced: True if the first file went into the blank active frame
        skipped: Files not attempted because the frame cap was reached
        errors: (file name, message) for each rejected file
    """
    imported: List[str] = field(default_factory=list)
    replaced: bool = False
    skipped: int = 0
    errors: List[Tuple[str, str]] = field(default_factory=list)


def frame_name_from_file(filename: str) -> str:
    """Display name for a frame imported from filename"""
    name = os.path.basename(filename)
    if name.lower().endswith(FRAME_FILE_EXTENSION):
        name = name[:-len(FRAME_FILE_EXTENSION)]
    return name


def import_frames(editor, files: Iterable[Tuple[str, object]]) -> ImportReport:
    """Import several payloads as frames

    If the active frame is blank, the first valid payload replaces it in
    place; every other payload is appended as a new frame. Invalid payloads
    are skipped without aborting the batch. Reaching the frame cap stops
    the import. The last imported frame becomes active.

    Args:
        editor: EditorState receiving the frames
        files: (file name, decoded payload) pairs

    Returns:
        ImportReport
    """
    files = list(files)
    report = ImportReport()
    animation = editor.animation

    editor.clear_selection()
    target = editor.active_frame if editor.active_frame.is_blank() else None

    for position, (filename, payload) in enumerate(files):
        name = frame_name_from_file(filename)
        try:
            cells = parse_payload(payload, editor.size)
        except PixelValidationError as e:
            logger.warning(f"Skipping {filename}: {e}")
            report.errors.append((name, str(e)))
            continue

        if target is not None:
            target.base.restore(cells)
            target.name = name
            target.commit(LayerKind.BASE, "Import")
            frame = target
            target = None
            report.replaced = True
        elif animation.is_full():
            report.skipped = len(files) - position
            break
        else:
            frame = animation.append_frame(name, cells)
        report.imported.append(frame.id)

    if report.imported:
        animation.set_active(report.imported[-1])

    if report.errors:
        names = ', '.join(name for name, _ in report.errors)
        notify(f"Skipped {len(report.errors)} invalid file(s): {names}", "Import")
    if report.skipped:
        notify(f"Frame limit of {animation.max_frames} reached, "
               f"{report.skipped} file(s) not imported", "Import")

    logger.debug(f"Imported {len(report.imported)} frame(s), skipped {report.skipped}, "
                 f"rejected {len(report.errors)}")
    return report


def load_frame_file(filename: str):
    """Read a frame file and decode its JSON

    Raises:
        OSError: If the file cannot be read
        ValueError: If the file is not valid JSON
    """
    with open(filename, 'r', encoding='utf-8') as f:
        return json.load(f)


def import_frame_files(editor, filenames: Iterable[str]) -> ImportReport:
    """Batch import from frame files on disk

    Unreadable files are reported like invalid payloads.
    """
    files = []
    unreadable = []
    for filename in filenames:
        try:
            files.append((filename, load_frame_file(filename)))
        except (OSError, ValueError) as e:
            logger.warning(f"Cannot read {filename}: {e}")
            unreadable.append((frame_name_from_file(filename), f"Cannot read file: {e}"))

    report = import_frames(editor, files)
    if unreadable:
        report.errors = unreadable + report.errors
        notify(f"Could not read {len(unreadable)} file(s)", "Import")
    return report
