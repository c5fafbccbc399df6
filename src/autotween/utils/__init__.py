"""
Utility functions for the animation engine
"""

from .mathf import (
    clamp01,
    lerp,
    smoothstep,
    delta_angle,
    lerp_angle,
)

__all__ = [
    'clamp01',
    'lerp',
    'smoothstep',
    'delta_angle',
    'lerp_angle',
]
