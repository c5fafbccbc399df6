"""
Animator - module-level entry points over a default scheduler

Thin convenience layer for the UI-element side: the first call creates an
AnimationScheduler from the loaded config, later calls reuse it. Code that
wants explicit wiring (tests, multiple UIs) constructs AnimationScheduler
directly and can install it with set_scheduler().

Example:
    from autotween.services import animator

    animator.begin_animation(0.5, definition=lambda: panel.x.set(200.0), owner=panel)

    # Once per frame
    animator.tick(dt)
"""

from typing import Any, Callable, Optional, Union

from autotween.engine.animation import Animation
from autotween.engine.property import TweenableProperty
from autotween.engine.scheduler import AnimationScheduler
from autotween.managers.config_manager import ConfigManager
from autotween.models.curve import Curve
from autotween.models.enums import CurveID, LogCategory
from autotween.utils.logger import configure_logger, get_category_logger

log = get_category_logger(LogCategory.SYSTEM)

_scheduler: Optional[AnimationScheduler] = None


def get_scheduler() -> AnimationScheduler:
    """Default scheduler, created from config on first use"""
    global _scheduler
    if _scheduler is None:
        config = ConfigManager().load()
        configure_logger(config.log_level, config.use_colors)
        _scheduler = AnimationScheduler(config=config)
        log.info("Default scheduler created", fps=config.fps)
    return _scheduler


def set_scheduler(scheduler: Optional[AnimationScheduler]) -> None:
    global _scheduler
    _scheduler = scheduler


def reset_scheduler() -> None:
    """Cancel everything on the default scheduler and drop it"""
    global _scheduler
    if _scheduler is not None:
        _scheduler.clear()
    _scheduler = None


def begin_animation(
    duration: float,
    delay: float = 0.0,
    curve: Union[CurveID, Curve, str, None] = None,
    definition: Optional[Callable[[], None]] = None,
    on_complete: Optional[Callable[[], None]] = None,
    owner: Any = None
) -> Animation:
    return get_scheduler().animate(duration, delay, definition, on_complete, curve, owner)


def capture_if_recording(prop: TweenableProperty) -> None:
    """Capture prop into the animation under definition, if any"""
    prop.register_capture()


def add_delay(extra_delay: float) -> None:
    get_scheduler().add_delay(extra_delay)


def add_duration(extra_duration: float) -> None:
    get_scheduler().add_duration(extra_duration)


def add_custom_animation(callback: Callable[[float], None]) -> None:
    get_scheduler().add_custom_animation(callback)


def after(delay: float, callback: Callable[[], None], owner: Any = None) -> Animation:
    return get_scheduler().after(delay, callback, owner)


def cancel_animations(owner: Any) -> int:
    return get_scheduler().cancel_animations(owner)


def complete_animations(owner: Any) -> int:
    return get_scheduler().complete_animations(owner)


def is_animating(owner: Any) -> bool:
    return get_scheduler().is_animating(owner)


def tick(dt: float) -> None:
    get_scheduler().tick(dt)
