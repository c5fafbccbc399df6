"""Services layer"""

from .animation_loop import AnimationLoop

__all__ = [
    "AnimationLoop",
]
