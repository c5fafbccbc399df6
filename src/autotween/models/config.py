"""
Animator configuration model

Loaded from config/animator.yaml by ConfigManager.
"""

from dataclasses import dataclass, field
from typing import Dict

from autotween.models.curve import AnimationCurve
from autotween.models.enums import CurveID, LogLevel

# Per-tick delta cap: a stalled frame never advances animations by more than this
DEFAULT_MAX_DELTA = 1.0 / 15.0


@dataclass
class AnimatorConfig:
    """
    Engine-wide settings

    Attributes:
        max_delta: Largest per-tick time step in seconds (stall protection)
        fps: Target rate of the frame loop (1-240)
        default_curve: Curve used when an animation doesn't supply one
        log_level: Minimum level for the category logger
        use_colors: ANSI colors in log output
        pool_prewarm: Records allocated per value type when a pool is created
        curves: Named keyframed curves defined in config
    """
    max_delta: float = DEFAULT_MAX_DELTA
    fps: int = 60
    default_curve: CurveID = CurveID.SMOOTHSTEP
    log_level: LogLevel = LogLevel.INFO
    use_colors: bool = True
    pool_prewarm: int = 0
    curves: Dict[str, AnimationCurve] = field(default_factory=dict)

    def __repr__(self):
        return (f"AnimatorConfig(max_delta={self.max_delta:.4f}, fps={self.fps}, "
                f"curve={self.default_curve.name}, log={self.log_level.name})")
