"""Editor configuration: defaults from constants, optional JSON overrides"""

import json
import logging
import os
from dataclasses import asdict, dataclass, fields

from spritegrid.constants import (
    DEFAULT_GRID_SIZE, MAX_FRAMES, MAX_HISTORY_ENTRIES,
    MAX_RECENT_COLORS, MIN_GRID_SIZE, PLAYBACK_FPS,
)

logger = logging.getLogger(__name__)


@dataclass
class EditorConfig:
    """Tunables for one editor instance

    grid_size is fixed for the lifetime of the editor built from it.
    """
    grid_size: int = DEFAULT_GRID_SIZE
    max_history: int = MAX_HISTORY_ENTRIES
    max_frames: int = MAX_FRAMES
    max_recent_colors: int = MAX_RECENT_COLORS
    fps: int = PLAYBACK_FPS

    def __post_init__(self):
        self.validate()

    def validate(self):
        """
        Raises:
            ValueError: If any value is out of range
        """
        for f in fields(self):
            value = getattr(self, f.name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{f.name} must be an integer, got {value!r}")
        if self.grid_size < MIN_GRID_SIZE:
            raise ValueError(f"grid_size must be at least {MIN_GRID_SIZE}, got {self.grid_size}")
        if self.max_history < 1:
            raise ValueError(f"max_history must be at least 1, got {self.max_history}")
        if self.max_frames < 1:
            raise ValueError(f"max_frames must be at least 1, got {self.max_frames}")
        if self.max_recent_colors < 0:
            raise ValueError(f"max_recent_colors cannot be negative, got {self.max_recent_colors}")
        if self.fps < 1:
            raise ValueError(f"fps must be at least 1, got {self.fps}")

    @classmethod
    def from_dict(cls, data: dict) -> 'EditorConfig':
        """Build from a mapping; unknown keys are ignored, missing keys use defaults"""
        known = {f.name for f in fields(cls)}
        ignored = set(data) - known
        if ignored:
            logger.warning(f"Ignoring unknown config keys: {sorted(ignored)}")
        return cls(**{k: v for k, v in data.items() if k in known})

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def load(cls, config_file: str) -> 'EditorConfig':
        """Load from a JSON file; a missing file yields the defaults

        Raises:
            ValueError: If the file is not a JSON object or holds invalid values
        """
        if not os.path.exists(config_file):
            logger.debug(f"No config at {config_file}, using defaults")
            return cls()

        with open(config_file, 'r', encoding='utf-8') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {config_file} must hold a JSON object")
        return cls.from_dict(data)

    def save(self, config_file: str):
        """Write to a JSON file, creating the directory if needed"""
        config_dir = os.path.dirname(config_file)
        if config_dir:
            os.makedirs(config_dir, exist_ok=True)
        with open(config_file, 'w', encoding='utf-8') as f:
            json.dump(self.to_dict(), f, indent=2)
