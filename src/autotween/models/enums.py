"""
Enums for the animation engine
"""

from enum import Enum, auto


class CurveID(Enum):
    """Named easing curves (selectable from config by name)"""
    LINEAR = auto()
    SMOOTHSTEP = auto()       # Cubic Hermite 3x² - 2x³ (default)
    EASE_IN_QUAD = auto()
    EASE_OUT_QUAD = auto()
    EASE_IN_OUT_QUAD = auto()
    EASE_IN_CUBIC = auto()
    EASE_OUT_CUBIC = auto()
    EASE_IN_OUT_CUBIC = auto()
    EASE_OUT_BACK = auto()    # Overshoots past 1.0 before settling
    BOUNCE_OUT = auto()


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    PROPERTY = auto()    # Tweenable property capture
    ANIMATION = auto()   # Animation lifecycle (capture, rewind, completion)
    SCHEDULER = auto()   # Live set bookkeeping, per-frame ticks
    CONTEXT = auto()     # Definition context push/pop
    LOOP = auto()        # Frame loop start/stop/errors
    ELEMENT = auto()     # Reference UI element
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
