"""
autotween - implicit property animation

Open an animation, assign properties as if setting them immediately, and the
engine animates from the old values to the new ones on later frame ticks.

Example:
    from autotween import AnimationScheduler, LayoutElement

    scheduler = AnimationScheduler()
    card = LayoutElement(scheduler, name="card")

    card.animate(0.4, lambda: setattr(card, "x", 120.0))
    scheduler.tick(1 / 60)
"""

from .models import AnimationCurve, AnimatorConfig, Color, CurveID, Keyframe
from .engine import (
    Animation,
    AnimationScheduler,
    AngleProperty,
    ColorProperty,
    DefinitionContext,
    FloatProperty,
    RecordPool,
    TweenableProperty,
    VectorProperty,
)
from .components import LayoutElement
from .services import AnimationLoop
from .services.animator import (
    add_custom_animation,
    add_delay,
    add_duration,
    after,
    begin_animation,
    cancel_animations,
    capture_if_recording,
    complete_animations,
    get_scheduler,
    is_animating,
    tick,
)

__version__ = "1.0.0"

__all__ = [
    "Animation",
    "AnimationCurve",
    "AnimationLoop",
    "AnimationScheduler",
    "AnimatorConfig",
    "AngleProperty",
    "Color",
    "ColorProperty",
    "CurveID",
    "DefinitionContext",
    "FloatProperty",
    "Keyframe",
    "LayoutElement",
    "RecordPool",
    "TweenableProperty",
    "VectorProperty",
    "add_custom_animation",
    "add_delay",
    "add_duration",
    "after",
    "begin_animation",
    "cancel_animations",
    "capture_if_recording",
    "complete_animations",
    "get_scheduler",
    "is_animating",
    "tick",
]
