"""
Animated Records

One record per moving part of an animation:
- PropertyRecord: start/end values of a captured TweenableProperty
- CustomRecord: arbitrary per-frame callback receiving eased time

Property records are pooled per value type through RecordPool, since
layout-heavy code creates and discards many of them every animation.
"""

from collections import defaultdict
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

from autotween.models.enums import LogCategory
from autotween.utils.logger import get_category_logger

if TYPE_CHECKING:
    from autotween.engine.animation import Animation
    from autotween.engine.property import TweenableProperty

log = get_category_logger(LogCategory.ANIMATION)


class AnimatedRecord:
    """
    Base record: timing plus the three lifecycle hooks

    Attributes:
        delay: Seconds after animation start before this record moves
        duration: Seconds this record takes once its delay has elapsed
        animation: Owning Animation
    """

    def __init__(self):
        self.delay: float = 0.0
        self.duration: float = 0.0
        self.animation: Optional['Animation'] = None

    def capture_end(self) -> None:
        """Read the target state written by the definition callback"""

    def start(self) -> None:
        """Rewind to the start state after the definition callback ran"""

    def remove(self) -> None:
        """Detach from the owning animation (and property, if any)"""

    def animate(self, t: float) -> None:
        raise NotImplementedError


class PropertyRecord(AnimatedRecord):
    """
    Captured start/end values for one property

    start_value is read when the property is captured. end_value is read back
    from the property at rewind time: the definition callback has already
    written it, so whatever the last write was becomes the target.
    """

    def __init__(self, pool: Optional['RecordPool'] = None):
        super().__init__()
        self.prop: Optional['TweenableProperty'] = None
        self.start_value: Any = None
        self.end_value: Any = None
        self.has_end = False
        self._pool = pool

    def capture_end(self) -> None:
        self.end_value = self.prop.getter()
        self.has_end = True

    def start(self) -> None:
        self.capture_end()
        # Raw setter: must not re-enter capture
        self.prop.setter(self.start_value)

    def animate(self, t: float) -> None:
        self.prop.setter(self.prop.lerp(self.start_value, self.end_value, t))

    def remove(self) -> None:
        if self.prop is not None and self.prop.animated_record is self:
            self.prop.animated_record = None
        kind = self.prop.value_type if self.prop is not None else None
        self.prop = None
        self.animation = None
        self.start_value = None
        self.end_value = None
        self.has_end = False
        self.delay = 0.0
        self.duration = 0.0
        if self._pool is not None and kind is not None:
            self._pool.release(kind, self)

    def __repr__(self) -> str:
        return (f"PropertyRecord(start={self.start_value!r}, end={self.end_value!r}, "
                f"delay={self.delay}, duration={self.duration})")


class CustomRecord(AnimatedRecord):
    """
    Per-frame callback driven by an animation's timing

    Created fresh for each use. Never pooled and never stolen.
    """

    def __init__(self, callback: Callable[[float], None], duration: float, delay: float,
                 animation: Optional['Animation'] = None):
        super().__init__()
        self.callback = callback
        self.duration = duration
        self.delay = delay
        self.animation = animation

    def animate(self, t: float) -> None:
        if self.callback is not None:
            self.callback(t)

    def remove(self) -> None:
        self.callback = None
        self.animation = None

    def __repr__(self) -> str:
        return f"CustomRecord(delay={self.delay}, duration={self.duration})"


class RecordPool:
    """
    Free lists of PropertyRecords keyed by property value type

    Passed explicitly to the scheduler/animations, so each test (or each
    independent UI) can have its own arena.

    Example:
        pool = RecordPool()
        record = pool.acquire(x_prop, animation, duration=0.5, delay=0.0)
        ...
        record.remove()          # unlinks and returns to pool
        pool.size(float)         # 1
    """

    def __init__(self):
        self._free: Dict[type, List[PropertyRecord]] = defaultdict(list)
        self.created = 0

    def acquire(self, prop: 'TweenableProperty', animation: 'Animation',
                duration: float, delay: float) -> PropertyRecord:
        """
        Take a record for prop (reused if available), stamp timing, link both ways
        """
        free = self._free[prop.value_type]
        if free:
            record = free.pop()
        else:
            record = PropertyRecord(self)
            self.created += 1

        record.duration = duration
        record.delay = delay
        record.animation = animation

        # Link and back-link
        record.prop = prop
        prop.animated_record = record
        return record

    def release(self, kind: type, record: PropertyRecord) -> None:
        self._free[kind].append(record)

    def prewarm(self, kind: type, count: int) -> None:
        """Allocate count records of the given value type up front"""
        free = self._free[kind]
        for _ in range(count):
            free.append(PropertyRecord(self))
        self.created += count
        log.debug("Record pool prewarmed", kind=kind.__name__, count=count)

    def size(self, kind: type) -> int:
        return len(self._free.get(kind, ()))

    def clear(self) -> None:
        self._free.clear()

    def __len__(self) -> int:
        return sum(len(free) for free in self._free.values())

    def __repr__(self) -> str:
        return f"RecordPool(free={len(self)}, created={self.created})"
