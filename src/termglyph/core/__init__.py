"""Core data structures: colors and world state."""

from termglyph.core.color import Color, ColorMode
from termglyph.core.world import WorldBounds, WorldState

__all__ = ["Color", "ColorMode", "WorldBounds", "WorldState"]
