"""
Tweenable Properties

Wraps a getter/setter pair for one attribute of a UI element (x, width,
rotation, color...) so that assignments made during an animation definition
are noticed and turned into animated records.

Each subclass defines how two values of its type are interpolated.
"""

from typing import Callable, Generic, Optional, Tuple, TypeVar, TYPE_CHECKING

from autotween.engine.context import DefinitionContext, get_definition_context
from autotween.models.color import Color
from autotween.utils.mathf import lerp, lerp_angle

if TYPE_CHECKING:
    from autotween.engine.records import PropertyRecord

T = TypeVar("T")


class TweenableProperty(Generic[T]):
    """
    Base class for an animatable attribute

    get() always returns the live underlying value. set() first notifies the
    animation under definition (if any) so it can capture the current value,
    then writes through to the underlying setter.

    A property carries at most one live record at a time; a second animation
    touching it steals the record from the first.

    Example:
        state = {"x": 0.0}
        x = FloatProperty(lambda: state["x"], lambda v: state.__setitem__("x", v))

        scheduler.animate(0.5, definition=lambda: x.set(100.0))
        x.get()      # 0.0 (rewound, animates toward 100 on later ticks)
        x.target     # 100.0
    """

    value_type: type = object

    def __init__(
        self,
        getter: Callable[[], T],
        setter: Callable[[T], None],
        context: Optional[DefinitionContext] = None
    ):
        self.getter = getter
        self.setter = setter
        self.animated_record: Optional['PropertyRecord'] = None
        self._context = context or get_definition_context()

    def get(self) -> T:
        return self.getter()

    def set(self, value: T) -> None:
        self.register_capture()
        self.setter(value)

    @property
    def value(self) -> T:
        return self.getter()

    @value.setter
    def value(self, value: T) -> None:
        self.set(value)

    def register_capture(self) -> None:
        """Let the animation under definition (if any) capture this property"""
        animation = self._context.current()
        if animation is not None:
            animation.setup_capture(self)

    def lerp(self, v0: T, v1: T, t: float) -> T:
        raise NotImplementedError

    @property
    def is_animating(self) -> bool:
        return self.animated_record is not None

    @property
    def target(self) -> T:
        """Value the property is heading to: the record's end value while animating"""
        record = self.animated_record
        if record is not None and record.has_end:
            return record.end_value
        return self.getter()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(value={self.getter()!r}, animating={self.is_animating})"


class FloatProperty(TweenableProperty[float]):
    """Plain scalar, unclamped so overshoot curves extrapolate"""

    value_type = float

    def lerp(self, v0: float, v1: float, t: float) -> float:
        return lerp(v0, v1, t)


class AngleProperty(TweenableProperty[float]):
    """Rotation in degrees, interpolated along the shortest arc"""

    value_type = float

    def lerp(self, v0: float, v1: float, t: float) -> float:
        # Land on the written end value, not an equivalent angle (350 vs -10)
        if t == 1.0:
            return v1
        return lerp_angle(v0, v1, t)


class VectorProperty(TweenableProperty[Tuple[float, ...]]):
    """Fixed-length tuple (position, size), unclamped per component"""

    value_type = tuple

    def lerp(self, v0: Tuple[float, ...], v1: Tuple[float, ...], t: float) -> Tuple[float, ...]:
        return tuple(lerp(a, b, t) for a, b in zip(v0, v1))


class ColorProperty(TweenableProperty[Color]):
    """RGBA color, per-channel with t clamped to [0, 1]"""

    value_type = Color

    def lerp(self, v0: Color, v1: Color, t: float) -> Color:
        return Color.lerp(v0, v1, t)
