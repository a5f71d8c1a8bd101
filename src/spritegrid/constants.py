"""
Sprite Grid Editor - Constants and Configuration

This module contains all constant values used throughout the engine:
- Grid dimensions
- History, frame and recent-color capacities
- Default palette
- Playback timing
- Serialization format
"""

import re

# ======================================================================
# GRID
# ======================================================================

# Cells per side (16 and 32 in practice). A grid is never resized
DEFAULT_GRID_SIZE = 16
MIN_GRID_SIZE = 2

# ======================================================================
# HISTORY MANAGEMENT
# ======================================================================

# Maximum snapshots kept per undo stack (the initial blank state included)
MAX_HISTORY_ENTRIES = 20

# ======================================================================
# FRAMES
# ======================================================================

MAX_FRAMES = 64
DEFAULT_FRAME_NAME = 'Frame'
DUPLICATE_SUFFIX = ' (Copy)'

# ======================================================================
# COLORS
# ======================================================================

# Recent colors shown next to the permanent "clear" swatch
MAX_RECENT_COLORS = 7

# Default palette - 32 colors
PRESET_COLORS = [
    '#be4a2f', '#d77643', '#ead4aa', '#e4a672',
    '#b86f50', '#733e39', '#3e2731', '#a22633',
    '#e43b44', '#f77622', '#feae34', '#fee761',
    '#63c74d', '#3e8948', '#265c42', '#193c3e',
    '#124e89', '#0099db', '#2ce8f5', '#ffffff',
    '#c0cbdc', '#8b9bb4', '#5a6988', '#3a4466',
    '#262b44', '#181425', '#ff0044', '#68386c',
    '#b55088', '#f6757a', '#e8b796', '#c28569',
]

DEFAULT_COLOR = PRESET_COLORS[0]

# ======================================================================
# ANIMATION
# ======================================================================

PLAYBACK_FPS = 8

# ======================================================================
# FILE FORMATS
# ======================================================================

# Pixel token in the frame payload: #RRGGBB, hex digits in either case
HEX_COLOR_PATTERN = re.compile(r'^#[0-9A-Fa-f]{6}$')

FRAME_FILE_EXTENSION = '.json'
