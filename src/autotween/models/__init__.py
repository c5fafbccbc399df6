"""
Models package - Data models for the animation engine
"""

from .enums import CurveID, LogLevel, LogCategory
from .color import Color
from .curve import AnimationCurve, Keyframe, get_curve
from .config import AnimatorConfig
from .errors import AnimationError, ContextCorruptedError, ConfigError

__all__ = [
    'CurveID',
    'LogLevel',
    'LogCategory',
    'Color',
    'AnimationCurve',
    'Keyframe',
    'get_curve',
    'AnimatorConfig',
    'AnimationError',
    'ContextCorruptedError',
    'ConfigError',
]
