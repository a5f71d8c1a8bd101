"""
Sprite Grid Editor - Color Domain Model

Canonical cell color representation for the entire engine.
A cell holds either a Color or None (empty / transparent).
"""

from typing import Optional, Tuple, Union

from spritegrid.constants import HEX_COLOR_PATTERN


class Color:
    """Immutable RGB color with uint8 storage.

    Equality and hashing are by value, so two Colors parsed from '#ff0000'
    and '#FF0000' are the same color.
    Internal storage: _r, _g, _b (uint8 0-255)
    """

    __slots__ = ('_r', '_g', '_b')

    def __init__(self, r: int, g: int, b: int):
        """Direct construction from RGB uint8 values (0-255).

        Args:
            r: Red component (0-255)
            g: Green component (0-255)
            b: Blue component (0-255)
        """
        # Clamp to valid uint8 range
        self._r = max(0, min(255, int(r)))
        self._g = max(0, min(255, int(g)))
        self._b = max(0, min(255, int(b)))

    @property
    def r(self) -> int:
        """Red component (0-255) - READ ONLY"""
        return self._r

    @property
    def g(self) -> int:
        """Green component (0-255) - READ ONLY"""
        return self._g

    @property
    def b(self) -> int:
        """Blue component (0-255) - READ ONLY"""
        return self._b

    # ========================================
    # Output Methods
    # ========================================

    def to_hex(self) -> str:
        """Convert to hex color string: #RRGGBB (upper-case digits)."""
        return f"#{self._r:02X}{self._g:02X}{self._b:02X}"

    def to_rgba255(self) -> Tuple[int, int, int, int]:
        """Convert to opaque RGBA uint8 tuple for rendering."""
        return (self._r, self._g, self._b, 255)

    # ========================================
    # Static Factory Methods
    # ========================================

    @staticmethod
    def is_hex(token) -> bool:
        """Check whether a value is a valid #RRGGBB token (case-insensitive)."""
        return isinstance(token, str) and HEX_COLOR_PATTERN.fullmatch(token) is not None

    @staticmethod
    def from_hex(hex_string: str) -> Optional['Color']:
        """Create Color from hex string: #RRGGBB or RRGGBB.

        Args:
            hex_string: Hex color string with or without leading #

        Returns:
            Color object if parse succeeds, None otherwise
        """
        if not isinstance(hex_string, str):
            return None

        # At most one leading #
        if not hex_string.startswith('#'):
            hex_string = '#' + hex_string
        if not Color.is_hex(hex_string):
            return None

        r = int(hex_string[1:3], 16)
        g = int(hex_string[3:5], 16)
        b = int(hex_string[5:7], 16)
        return Color(r, g, b)

    @staticmethod
    def coerce(value: Union['Color', str, None]) -> Optional['Color']:
        """Normalize a caller-supplied color to Color or None.

        Accepts a Color, a hex string, or None (empty).

        Raises:
            ValueError: If a string is not a valid hex color
            TypeError: For any other type
        """
        if value is None or isinstance(value, Color):
            return value
        if isinstance(value, str):
            color = Color.from_hex(value)
            if color is None:
                raise ValueError(f"Invalid color: {value!r}")
            return color
        raise TypeError(f"Expected Color, hex string or None, got {type(value).__name__}")

    # ========================================
    # Equality and Hashing
    # ========================================

    def __eq__(self, other) -> bool:
        """Test equality based on RGB values."""
        if not isinstance(other, Color):
            return False
        return self._r == other._r and self._g == other._g and self._b == other._b

    def __hash__(self) -> int:
        """Hash based on RGB values for use in dicts/sets."""
        return hash((self._r, self._g, self._b))

    def __repr__(self) -> str:
        """Debug representation."""
        return f"Color({self._r}, {self._g}, {self._b})"

    def __str__(self) -> str:
        """String representation - uses hex format."""
        return self.to_hex()
