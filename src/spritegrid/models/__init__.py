"""
Sprite Grid Editor - Data Models

Public API: EditorState and Tool from models.editor; the building blocks
(GridBuffer, SelectionModel, FloatingLayer, HistoryStack, Frame,
AnimationSet, Color) from their own modules.
"""

from .color import Color
from .grid import GridBuffer, LayerKind
from .selection import BoundingBox, MaskConstraint, SelectionModel
from .floating import FloatingLayer
from .history import HistoryStack
from .frame import AnimationSet, Frame
from .editor import EditorState, Tool

__all__ = [
    'AnimationSet',
    'BoundingBox',
    'Color',
    'EditorState',
    'FloatingLayer',
    'Frame',
    'GridBuffer',
    'HistoryStack',
    'LayerKind',
    'MaskConstraint',
    'SelectionModel',
    'Tool',
]
