"""Engine layer: properties, records, animations and the scheduler"""

from .context import DefinitionContext, get_definition_context
from .property import TweenableProperty, FloatProperty, AngleProperty, VectorProperty, ColorProperty
from .records import AnimatedRecord, PropertyRecord, CustomRecord, RecordPool
from .animation import Animation
from .scheduler import AnimationScheduler

__all__ = [
    "DefinitionContext",
    "get_definition_context",
    "TweenableProperty",
    "FloatProperty",
    "AngleProperty",
    "VectorProperty",
    "ColorProperty",
    "AnimatedRecord",
    "PropertyRecord",
    "CustomRecord",
    "RecordPool",
    "Animation",
    "AnimationScheduler",
]
