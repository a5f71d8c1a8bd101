"""EditorState model and its mixins"""

from .tools import Tool
from .paint_mixin import EditorPaintMixin
from .selection_mixin import EditorSelectionMixin
from .history_mixin import EditorHistoryMixin
from .frame_mixin import EditorFrameMixin
from .core import EditorState

__all__ = [
    'EditorState',
    'Tool',
    'EditorPaintMixin',
    'EditorSelectionMixin',
    'EditorHistoryMixin',
    'EditorFrameMixin',
]
