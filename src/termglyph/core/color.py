"""Foreground colors for the terminal surface."""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class ColorMode(Enum):
    """How a color is encoded in an SGR sequence."""
    STANDARD_16 = "16"      # SGR 30-37, 90-97
    TRUE_COLOR = "rgb"      # SGR 38;2;r;g;b


@dataclass(frozen=True)
class Color:
    """
    A foreground color the surface can switch to.

    Named colors use the 16-color palette; anything else is 24-bit RGB.
    """
    mode: ColorMode
    value: int | tuple[int, int, int]

    WHITE: ClassVar["Color"]
    RED: ClassVar["Color"]

    @classmethod
    def from_index(cls, index: int) -> "Color":
        """Create a Color from a 16-color palette index."""
        if not 0 <= index <= 15:
            raise ValueError(f"Palette index must be 0-15, got {index}")
        return cls(ColorMode.STANDARD_16, index)

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        """Create a Color from RGB values."""
        if not all(0 <= c <= 255 for c in (r, g, b)):
            raise ValueError(f"RGB values must be 0-255, got ({r}, {g}, {b})")
        return cls(ColorMode.TRUE_COLOR, (r, g, b))

    def to_sgr_fg(self) -> str:
        """Return SGR parameters for this foreground color."""
        if self.mode == ColorMode.STANDARD_16:
            assert isinstance(self.value, int)
            if self.value < 8:
                return str(30 + self.value)
            return str(90 + self.value - 8)
        assert isinstance(self.value, tuple)
        r, g, b = self.value
        return f"38;2;{r};{g};{b}"

    def escape(self) -> str:
        """Full escape sequence selecting this foreground color."""
        return f"\x1b[{self.to_sgr_fg()}m"


Color.WHITE = Color(ColorMode.STANDARD_16, 7)
Color.RED = Color(ColorMode.STANDARD_16, 1)
