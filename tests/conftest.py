"""
Shared fixtures for sprite grid engine tests.

Provides fresh editors at the two working sizes and a painted L-shape.
"""
import sys
import os
import pytest

# Ensure src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from spritegrid.config import EditorConfig
from spritegrid.models.color import Color
from spritegrid.models.editor import EditorState


RED = Color.from_hex('#FF0000')

L_SHAPE = (0, 4, 8, 9)


@pytest.fixture
def editor4():
    """4x4 editor, brush tool, red current color"""
    editor = EditorState(EditorConfig(grid_size=4))
    editor.set_current_color(RED)
    return editor


@pytest.fixture
def editor16():
    """Default 16x16 editor"""
    return EditorState()


@pytest.fixture
def l_shape(editor4):
    """4x4 editor with red cells {0, 4, 8, 9} committed as one step"""
    for index in L_SHAPE:
        editor4.paint_cell(index, RED)
    editor4.commit("Paint L")
    return editor4


@pytest.fixture
def notices():
    """Collect (title, message) pairs sent to the notice handler"""
    from spritegrid.utils.logger import set_notice_handler
    received = []
    set_notice_handler(lambda title, message: received.append((title, message)))
    yield received
    set_notice_handler(None)
