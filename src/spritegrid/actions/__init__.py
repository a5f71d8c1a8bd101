"""Pointer gesture handling for the editor"""

from .gestures import (
    GestureController, GestureState, LassoGesture,
    MoveSelectionGesture, StrokeGesture,
)

__all__ = [
    'GestureController',
    'GestureState',
    'LassoGesture',
    'MoveSelectionGesture',
    'StrokeGesture',
]
