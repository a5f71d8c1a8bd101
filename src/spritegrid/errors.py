"""Exception types raised by the sprite grid engine"""


class SpriteGridError(Exception):
    """Base class for all engine errors"""


class PixelValidationError(SpriteGridError, ValueError):
    """Malformed frame payload

    Attributes:
        index: Offending pixel index, or None when the payload shape is wrong
        value: Offending value (if any)
    """

    def __init__(self, message: str, index=None, value=None):
        super().__init__(message)
        self.index = index
        self.value = value


class FrameLimitError(SpriteGridError):
    """Frame count is already at the configured cap"""


class FrameNotFoundError(SpriteGridError, KeyError):
    """No frame with the requested id"""

    def __str__(self):
        return str(self.args[0]) if self.args else ''
