"""Packed RGB colors, multi-stop gradients and the built-in palette table."""

from __future__ import annotations

import math
import string
from dataclasses import dataclass

from sortreel import defaults


def _round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


@dataclass(frozen=True, order=True)
class Color:
    """24-bit color packed as 0xRRGGBB."""

    value: int

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        return cls((r << 16) | (g << 8) | b)

    @classmethod
    def from_hex(cls, hex_color: str) -> "Color":
        """Parse a hex color string (with or without '#' prefix).

        Example:
            >>> Color.from_hex("#70af00").to_rgb()
            (112, 175, 0)
        """
        digits = hex_color.strip().lstrip('#')
        if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
            raise ValueError(f"Expected 6 hex digits, got {hex_color!r}")
        return cls(int(digits, 16))

    @property
    def hex(self) -> str:
        return f"#{self.value:06x}"

    def to_rgb(self) -> tuple[int, int, int]:
        """Split into (r, g, b) channels, 0-255 each."""
        return (self.value >> 16) & 0xFF, (self.value >> 8) & 0xFF, self.value & 0xFF

    def lerp(self, other: "Color", f: float) -> "Color":
        """Blend channel-wise toward ``other`` by factor ``f``.

        ``f`` is not clamped. Values outside [0, 1] extrapolate, and a
        channel that leaves 0-255 spills into its neighbours when packed.
        """
        r1, g1, b1 = self.to_rgb()
        r2, g2, b2 = other.to_rgb()
        return Color.from_rgb(
            _round_half_up(r1 * (1.0 - f) + r2 * f),
            _round_half_up(g1 * (1.0 - f) + g2 * f),
            _round_half_up(b1 * (1.0 - f) + b2 * f),
        )

    def __repr__(self) -> str:
        return f"Color({self.value:#08x})"


WHITE = Color(0xFFFFFF)


@dataclass(frozen=True)
class Gradient:
    """Piecewise-linear gradient over evenly spaced color stops.

    Stop order matters: the first stop maps to 0.0, the last to 1.0.
    """

    stops: tuple[Color, ...]

    def __post_init__(self):
        if not self.stops:
            raise ValueError("Gradient needs at least one color stop")
        # Accept any sequence but store an immutable tuple
        object.__setattr__(self, "stops", tuple(self.stops))

    @classmethod
    def from_hex(cls, hex_colors: list[str] | tuple[str, ...]) -> "Gradient":
        return cls(tuple(Color.from_hex(c) for c in hex_colors))

    def sample(self, v: float) -> Color:
        """Color at position ``v``; clamps below 0 and at/above 1."""
        if v < 0.0:
            return self.stops[0]
        if v >= 1.0:
            return self.stops[-1]

        idx = (len(self.stops) - 1) * v
        lo = math.floor(idx)
        hi = math.ceil(idx)
        return self.stops[lo].lerp(self.stops[hi], idx - lo)


COLOR_PALETTES: dict[str, tuple[int, ...]] = {
    "Classic": (0x0000FF, 0x70AF00, 0xFF0000),  # blue -> green -> red
    "Ember Ash": (0x1A0D05, 0x4D1F0A, 0x994214, 0xBF8C59, 0xE0E3E6),
    "Deep Ocean": (0x0D0D33, 0x1A2666, 0x33529E, 0x4780C7, 0x73B3E0, 0xADD1F0, 0xE6F5FF),
    "Coolwarm": (0x3B4CC0, 0x9BAAEC, 0xEEEEEE, 0xEE927D, 0xB40426),
    "Mono": (0x404040, 0xF0F0F0),
}


def list_color_palettes() -> tuple[str, ...]:
    return tuple(COLOR_PALETTES.keys())


def get_palette(name: str) -> Gradient:
    """Build the gradient for a named palette.

    Raises:
        ValueError: If no palette has that name
    """
    try:
        packed = COLOR_PALETTES[name]
    except KeyError:
        known = ", ".join(list_color_palettes())
        raise ValueError(f"Unknown palette {name!r} (available: {known})") from None
    return Gradient(tuple(Color(v) for v in packed))


def default_gradient() -> Gradient:
    return get_palette(defaults.DEFAULT_PALETTE)
