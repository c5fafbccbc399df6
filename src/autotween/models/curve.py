"""
Curve Models

Easing functions and keyframed curves that reshape an animation's normalized
time before it is applied to properties.

A curve is any callable (t: float) -> float. Inputs are 0.0-1.0; outputs may
leave that range (overshoot), which float properties extrapolate.
"""

from bisect import bisect_right
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence, Union

from autotween.models.enums import CurveID
from autotween.utils.mathf import smoothstep

Curve = Callable[[float], float]


# === Easing Functions ===

def ease_linear(t: float) -> float:
    """
    Linear easing (constant speed)

    Args:
        t: Progress (0.0 = start, 1.0 = end)

    Returns:
        Eased progress
    """
    return t


def ease_smoothstep(t: float) -> float:
    """Cubic Hermite (slow start, slow end). Default when no curve is given."""
    return smoothstep(t)


def ease_in_quad(t: float) -> float:
    """Quadratic ease-in (slow start → fast end)"""
    return t * t


def ease_out_quad(t: float) -> float:
    """Quadratic ease-out (fast start → slow end)"""
    return 1 - (1 - t) * (1 - t)


def ease_in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def ease_in_cubic(t: float) -> float:
    return t * t * t


def ease_out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def ease_in_out_cubic(t: float) -> float:
    return 4 * t ** 3 if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def ease_out_back(t: float) -> float:
    """Overshoots to ~1.1 then settles at 1.0"""
    c1 = 1.70158
    c3 = c1 + 1
    return 1 + c3 * (t - 1) ** 3 + c1 * (t - 1) ** 2


def ease_bounce_out(t: float) -> float:
    n1, d1 = 7.5625, 2.75
    if t < 1 / d1:
        return n1 * t * t
    elif t < 2 / d1:
        t -= 1.5 / d1
        return n1 * t * t + 0.75
    elif t < 2.5 / d1:
        t -= 2.25 / d1
        return n1 * t * t + 0.9375
    t -= 2.625 / d1
    return n1 * t * t + 0.984375


CURVES: Dict[CurveID, Curve] = {
    CurveID.LINEAR: ease_linear,
    CurveID.SMOOTHSTEP: ease_smoothstep,
    CurveID.EASE_IN_QUAD: ease_in_quad,
    CurveID.EASE_OUT_QUAD: ease_out_quad,
    CurveID.EASE_IN_OUT_QUAD: ease_in_out_quad,
    CurveID.EASE_IN_CUBIC: ease_in_cubic,
    CurveID.EASE_OUT_CUBIC: ease_out_cubic,
    CurveID.EASE_IN_OUT_CUBIC: ease_in_out_cubic,
    CurveID.EASE_OUT_BACK: ease_out_back,
    CurveID.BOUNCE_OUT: ease_bounce_out,
}


def get_curve(curve: Union[CurveID, Curve, None]) -> Curve:
    """
    Resolve a curve reference to a callable

    Args:
        curve: CurveID, any callable, or None (smoothstep)

    Returns:
        Callable (t) -> eased t
    """
    if curve is None:
        return ease_smoothstep
    if isinstance(curve, CurveID):
        return CURVES[curve]
    if callable(curve):
        return curve
    raise TypeError(f"Expected CurveID or callable, got {type(curve).__name__}")


# === Keyframed Curves ===

@dataclass(frozen=True)
class Keyframe:
    """
    Single curve key

    Attributes:
        time: Position on the curve's time axis
        value: Curve value at that time
        in_tangent: Slope arriving at this key
        out_tangent: Slope leaving this key
    """
    time: float
    value: float
    in_tangent: float = 0.0
    out_tangent: float = 0.0


class AnimationCurve:
    """
    Keyframed curve evaluated with cubic Hermite segments

    Instances are callable, so they can be passed anywhere a curve is expected.
    Outside the first/last key the curve holds the end values.

    Example:
        # Parabola: rises to 1 at the midpoint and comes back down
        parabola = AnimationCurve([
            Keyframe(0.0, 0.0, 0.0, 4.0),
            Keyframe(0.5, 1.0, 0.0, 0.0),
            Keyframe(1.0, 0.0, -4.0, 0.0),
        ])
        parabola(0.5)   # 1.0
    """

    def __init__(self, keys: Sequence[Keyframe]):
        if not keys:
            raise ValueError("AnimationCurve needs at least one keyframe")
        self.keys: List[Keyframe] = sorted(keys, key=lambda k: k.time)
        self._times = [k.time for k in self.keys]

    @classmethod
    def linear(cls, start_time: float = 0.0, start_value: float = 0.0,
               end_time: float = 1.0, end_value: float = 1.0) -> 'AnimationCurve':
        """Straight line between two keys"""
        slope = (end_value - start_value) / (end_time - start_time)
        return cls([
            Keyframe(start_time, start_value, slope, slope),
            Keyframe(end_time, end_value, slope, slope),
        ])

    @classmethod
    def ease_in_out(cls, start_time: float = 0.0, start_value: float = 0.0,
                    end_time: float = 1.0, end_value: float = 1.0) -> 'AnimationCurve':
        """Flat tangents at both ends"""
        return cls([
            Keyframe(start_time, start_value),
            Keyframe(end_time, end_value),
        ])

    @classmethod
    def from_points(cls, points: Sequence[Sequence[float]]) -> 'AnimationCurve':
        """
        Build from [time, value] or [time, value, in_tangent, out_tangent] rows

        Used for curves defined in YAML config.
        """
        return cls([Keyframe(*[float(v) for v in p]) for p in points])

    def evaluate(self, t: float) -> float:
        keys = self.keys
        if t <= keys[0].time:
            return keys[0].value
        if t >= keys[-1].time:
            return keys[-1].value

        i = bisect_right(self._times, t) - 1
        k0, k1 = keys[i], keys[i + 1]
        span = k1.time - k0.time
        if span <= 0:
            return k1.value

        s = (t - k0.time) / span
        s2 = s * s
        s3 = s2 * s
        h00 = 2 * s3 - 3 * s2 + 1
        h10 = s3 - 2 * s2 + s
        h01 = -2 * s3 + 3 * s2
        h11 = s3 - s2
        return (h00 * k0.value + h10 * span * k0.out_tangent
                + h01 * k1.value + h11 * span * k1.in_tangent)

    def __call__(self, t: float) -> float:
        return self.evaluate(t)

    def __len__(self) -> int:
        return len(self.keys)

    def __repr__(self) -> str:
        return f"AnimationCurve({len(self.keys)} keys)"
