"""
Scalar math helpers

Pure functions shared by properties, curves and the animation update.
"""


def clamp01(value: float) -> float:
    """Clamp value to the [0, 1] range"""
    if value < 0.0:
        return 0.0
    if value > 1.0:
        return 1.0
    return value


def lerp(a: float, b: float, t: float) -> float:
    """
    Unclamped linear interpolation

    t outside [0, 1] extrapolates, which overshoot curves rely on.
    Exact at both ends: lerp(a, b, 1.0) == b.
    """
    return a * (1.0 - t) + b * t


def smoothstep(t: float) -> float:
    """Cubic Hermite 3t² - 2t³ over a clamped t"""
    t = clamp01(t)
    return t * t * (3.0 - 2.0 * t)


def repeat(t: float, length: float) -> float:
    """Wrap t into [0, length)"""
    return t - (t // length) * length


def delta_angle(current: float, target: float) -> float:
    """
    Shortest signed difference between two angles in degrees

    Returns:
        Value in (-180, 180]

    Example:
        delta_angle(350, 10)   # 20
        delta_angle(10, 350)   # -20
    """
    delta = repeat(target - current, 360.0)
    if delta > 180.0:
        delta -= 360.0
    return delta


def lerp_angle(a: float, b: float, t: float) -> float:
    """Interpolate angles in degrees along the shortest arc"""
    return a + delta_angle(a, b) * t
