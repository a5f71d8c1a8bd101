"""
Sprite Grid Editor engine

Pixel-grid sprite and animation editing: painting, flood fill, lasso
selection with a floating layer, per-frame undo/redo and JSON frame
import/export. UI-independent; a front end drives it through EditorState,
the gesture controller and the services.
"""

from .config import EditorConfig
from .errors import FrameLimitError, FrameNotFoundError, PixelValidationError, SpriteGridError
from .models import (
    AnimationSet, Color, EditorState, FloatingLayer, Frame, GridBuffer,
    HistoryStack, LayerKind, MaskConstraint, SelectionModel, Tool,
)

__version__ = '0.1.0'

__all__ = [
    'AnimationSet',
    'Color',
    'EditorConfig',
    'EditorState',
    'FloatingLayer',
    'Frame',
    'FrameLimitError',
    'FrameNotFoundError',
    'GridBuffer',
    'HistoryStack',
    'LayerKind',
    'MaskConstraint',
    'PixelValidationError',
    'SelectionModel',
    'SpriteGridError',
    'Tool',
]
