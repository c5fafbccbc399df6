"""
LayoutElement - reference UI element built on tweenable properties

A plain property owner: it stores position/size/rotation/scale/alpha/color
and exposes each one through a lazily created TweenableProperty, so ordinary
attribute assignment inside an animate() definition gets animated.

No coordinate conversion, parenting or rendering happens here; hosts read
the attribute values and draw however they like.
"""

from typing import Any, Callable, Dict, Optional, Tuple, Type, Union

from autotween.engine.animation import Animation
from autotween.engine.property import (
    AngleProperty, ColorProperty, FloatProperty, TweenableProperty,
)
from autotween.engine.scheduler import AnimationScheduler
from autotween.models.color import Color
from autotween.models.curve import Curve
from autotween.models.enums import CurveID, LogCategory
from autotween.utils.logger import get_category_logger

log = get_category_logger(LogCategory.ELEMENT)


class Tweenable:
    """
    Descriptor exposing one element attribute through its TweenableProperty

    element.x reads the live value; element.x = v goes through capture.
    """

    def __init__(self, prop_class: Type[TweenableProperty], default: Any):
        self.prop_class = prop_class
        self.default = default
        self.name = ""

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, element, owner=None):
        if element is None:
            return self
        return element.prop(self.name).get()

    def __set__(self, element, value):
        element.prop(self.name).set(value)


class LayoutElement:
    """
    Animatable UI element

    Example:
        panel = LayoutElement(scheduler, name="panel", width=200.0)

        panel.animate(0.3, lambda: setattr(panel, "x", 150.0))
        panel.x           # still 0.0 (rewound)
        panel.target_x    # 150.0

        # Staggered children
        def layout():
            for i, child in enumerate(children):
                child.y = i * 40.0
                panel.add_delay(0.05)
        panel.animate(0.5, layout)
    """

    x = Tweenable(FloatProperty, 0.0)
    y = Tweenable(FloatProperty, 0.0)
    width = Tweenable(FloatProperty, 0.0)
    height = Tweenable(FloatProperty, 0.0)
    rotation = Tweenable(AngleProperty, 0.0)
    scale = Tweenable(FloatProperty, 1.0)
    alpha = Tweenable(FloatProperty, 1.0)
    color = Tweenable(ColorProperty, Color.white())

    def __init__(self, scheduler: Optional[AnimationScheduler] = None, name: str = "", **values):
        if scheduler is None:
            from autotween.services.animator import get_scheduler
            scheduler = get_scheduler()
        self.scheduler = scheduler
        self.name = name
        self.alive = True

        self._values: Dict[str, Any] = {}
        self._props: Dict[str, TweenableProperty] = {}

        for attr, value in values.items():
            if not isinstance(getattr(type(self), attr, None), Tweenable):
                raise AttributeError(f"{type(self).__name__} has no tweenable attribute '{attr}'")
            self._values[attr] = value

    # === Properties ===

    def prop(self, name: str) -> TweenableProperty:
        """TweenableProperty for attribute name, created on first access"""
        prop = self._props.get(name)
        if prop is None:
            descriptor = getattr(type(self), name, None)
            if not isinstance(descriptor, Tweenable):
                raise AttributeError(f"{type(self).__name__} has no tweenable attribute '{name}'")
            self._values.setdefault(name, descriptor.default)
            prop = descriptor.prop_class(
                lambda: self._values[name],
                lambda v: self._values.__setitem__(name, v),
                context=self.scheduler.context,
            )
            self._props[name] = prop
        return prop

    def target(self, name: str) -> Any:
        """End value of attribute name if animating, else its live value"""
        return self.prop(name).target

    @property
    def target_x(self) -> float: return self.target("x")

    @property
    def target_y(self) -> float: return self.target("y")

    @property
    def target_width(self) -> float: return self.target("width")

    @property
    def target_height(self) -> float: return self.target("height")

    @property
    def target_rotation(self) -> float: return self.target("rotation")

    @property
    def target_scale(self) -> float: return self.target("scale")

    @property
    def target_alpha(self) -> float: return self.target("alpha")

    @property
    def target_color(self) -> Color: return self.target("color")

    @property
    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @position.setter
    def position(self, value: Tuple[float, float]) -> None:
        self.x, self.y = value

    @property
    def size(self) -> Tuple[float, float]:
        return (self.width, self.height)

    @size.setter
    def size(self, value: Tuple[float, float]) -> None:
        self.width, self.height = value

    # === Animation API ===

    def animate(
        self,
        duration: float,
        definition: Optional[Callable[[], None]],
        on_complete: Optional[Callable[[], None]] = None,
        delay: float = 0.0,
        curve: Union[CurveID, Curve, str, None] = None
    ) -> Animation:
        return self.scheduler.animate(duration, delay, definition, on_complete, curve, owner=self)

    def after(self, delay: float, callback: Callable[[], None]) -> Animation:
        return self.scheduler.after(delay, callback, owner=self)

    def animate_custom(
        self,
        duration: float,
        callback: Callable[[float], None],
        on_complete: Optional[Callable[[], None]] = None,
        delay: float = 0.0
    ) -> Animation:
        return self.scheduler.animate_custom(duration, callback, delay, on_complete, owner=self)

    def add_delay(self, extra_delay: float) -> None:
        self.scheduler.add_delay(extra_delay)

    def add_duration(self, extra_duration: float) -> None:
        self.scheduler.add_duration(extra_duration)

    def animatable(self, callback: Callable[[float], None]) -> None:
        self.scheduler.add_custom_animation(callback)

    @property
    def is_animating(self) -> bool:
        return self.scheduler.is_animating(self)

    def cancel_animations(self) -> int:
        return self.scheduler.cancel_animations(self)

    def complete_animations(self) -> int:
        return self.scheduler.complete_animations(self)

    def destroy(self, complete: bool = False) -> None:
        """
        Tear the element down

        Args:
            complete: Jump running animations to their end state first.
                Otherwise they are dropped on the next tick without touching
                this element again.
        """
        if complete:
            self.complete_animations()
        self.alive = False
        log.debug("Element destroyed", name=self.name)

    def __repr__(self) -> str:
        return f"LayoutElement({self.name!r}, x={self.x}, y={self.y}, w={self.width}, h={self.height})"
