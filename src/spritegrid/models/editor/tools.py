"""Editing tools"""
from enum import Enum


class Tool(Enum):
    BRUSH = 'brush'
    ERASER = 'eraser'
    FILL = 'fill'
    SELECT = 'select'
