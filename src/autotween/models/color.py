"""
Color model - RGBA color used by color properties

Channels are stored as floats in 0.0-1.0. Interpolation is per channel with
the blend factor clamped, so overshoot curves never push a channel out of range.
"""

from dataclasses import dataclass
from typing import Tuple

from autotween.utils.mathf import clamp01, lerp


@dataclass(frozen=True)
class Color:
    """
    Immutable RGBA color

    Examples:
        red = Color.from_rgb(255, 0, 0)
        half = Color.lerp(Color.black(), Color.white(), 0.5)
        r, g, b = half.to_rgb()      # (127, 127, 127)
        faded = red.with_alpha(0.0)
    """

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    # === CONSTRUCTORS ===

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int, a: int = 255) -> 'Color':
        """
        Create from 0-255 channel values

        Args:
            r, g, b, a: Channel values (0-255)

        Returns:
            Color with channels normalized to 0.0-1.0
        """
        return cls(r / 255.0, g / 255.0, b / 255.0, a / 255.0)

    @classmethod
    def from_dict(cls, data: dict) -> 'Color':
        return cls(data["r"], data["g"], data["b"], data.get("a", 1.0))

    # === CONVERSIONS ===

    def to_rgb(self) -> Tuple[int, int, int]:
        """Get 0-255 RGB for rendering (alpha dropped)"""
        return (int(self.r * 255), int(self.g * 255), int(self.b * 255))

    def to_tuple(self) -> Tuple[float, float, float, float]:
        return (self.r, self.g, self.b, self.a)

    def to_dict(self) -> dict:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    def with_alpha(self, alpha: float) -> 'Color':
        """Return a copy with a different alpha"""
        return Color(self.r, self.g, self.b, alpha)

    # === INTERPOLATION ===

    @staticmethod
    def lerp(c0: 'Color', c1: 'Color', t: float) -> 'Color':
        """
        Per-channel interpolation with t clamped to [0, 1]

        Args:
            c0: Color at t=0
            c1: Color at t=1
            t: Blend factor (clamped)

        Returns:
            Blended color
        """
        t = clamp01(t)
        return Color(
            lerp(c0.r, c1.r, t),
            lerp(c0.g, c1.g, t),
            lerp(c0.b, c1.b, t),
            lerp(c0.a, c1.a, t),
        )

    @staticmethod
    def black() -> 'Color':
        return Color(0.0, 0.0, 0.0, 1.0)

    @staticmethod
    def white() -> 'Color':
        return Color(1.0, 1.0, 1.0, 1.0)

    @staticmethod
    def clear() -> 'Color':
        return Color(0.0, 0.0, 0.0, 0.0)

    def __str__(self) -> str:
        return f"Color(r={self.r:.3f}, g={self.g:.3f}, b={self.b:.3f}, a={self.a:.3f})"
