"""
Animation

One definition scope's worth of captured records. The constructor runs the
definition callback once, synchronously, while the animation sits on top of
the definition context. Every property assignment made in that callback is
captured, so when the callback returns the properties hold their end state;
the animation then rewinds them to their start state and moves them forward
on each update().

Delay/duration cursors can be moved mid-definition (add_delay/add_duration)
to stagger properties captured later in the same callback.
"""

import weakref
from typing import Any, Callable, List, Optional, TYPE_CHECKING, Union

from autotween.engine.context import DefinitionContext, get_definition_context
from autotween.engine.records import AnimatedRecord, CustomRecord, PropertyRecord, RecordPool
from autotween.models.config import DEFAULT_MAX_DELTA
from autotween.models.curve import Curve, get_curve
from autotween.models.enums import CurveID, LogCategory
from autotween.utils.mathf import clamp01
from autotween.utils.logger import get_category_logger

if TYPE_CHECKING:
    from autotween.engine.property import TweenableProperty

log = get_category_logger(LogCategory.ANIMATION)


class Animation:
    """
    Captured set of property/custom records with shared timing

    Lifecycle:
    1. __init__ runs the definition callback (captures), rewinds, pops context
    2. Instant animations (max delay + max duration == 0) finish right away
    3. update(dt) moves records forward until elapsed >= max_delay + max_duration
    4. Completion applies every record at t=1.0, releases records and
       calls on_complete exactly once

    cancel() releases records where they stand, without completion.

    Example:
        anim = Animation(
            duration=0.5,
            delay=0.0,
            definition=lambda: x.set(100.0),
            on_complete=lambda: print("done"),
            pool=pool,
            context=context,
        )
        anim.update(0.25)
    """

    def __init__(
        self,
        duration: float,
        delay: float = 0.0,
        definition: Optional[Callable[[], None]] = None,
        on_complete: Optional[Callable[[], None]] = None,
        curve: Union[CurveID, Curve, None] = None,
        owner: Any = None,
        *,
        context: Optional[DefinitionContext] = None,
        pool: Optional[RecordPool] = None,
        max_delta: float = DEFAULT_MAX_DELTA
    ):
        if duration < 0:
            raise ValueError(f"duration must be >= 0, got {duration}")
        if delay < 0:
            raise ValueError(f"delay must be >= 0, got {delay}")

        self._context = context or get_definition_context()
        self._pool = pool if pool is not None else RecordPool()
        self.max_delta = max_delta

        self._elapsed = 0.0
        self._duration = self._max_duration = duration
        self._delay = self._max_delay = delay
        self._curve = get_curve(curve)
        self._on_complete = on_complete
        self._owner_ref = weakref.ref(owner) if owner is not None else None
        self._records: List[AnimatedRecord] = []
        self._captured = False
        self._completed = False
        self._cancelled = False

        with self._context.defining(self):
            if definition is not None:
                definition()

                # Rewind to the beginning, unless there's nothing to play
                if not self.is_instant:
                    for record in self._records:
                        record.start()

        if self.is_instant:
            for record in self._records:
                record.capture_end()
            self._done()

        log.debug(
            "Animation defined",
            duration=duration,
            delay=delay,
            records=len(self._records),
            instant=self.is_instant,
        )

    # === Capture ===

    def setup_capture(self, prop: 'TweenableProperty') -> None:
        """
        Attach prop to this animation before its setter runs

        - Already captured here: reuse the record, the last write becomes the end value
        - Owned by another animation: steal (remove from that animation)
        - Otherwise: take a record stamped with the current cursors
        """
        record = prop.animated_record

        if record is not None and record.animation is not self:
            other = record.animation
            if other is not None:
                other.remove_record(record)
                log.debug("Property stolen from running animation", remaining=len(other._records))
            else:
                record.remove()
            record = None

        if record is None:
            record = self._pool.acquire(prop, self, self._duration, self._delay)
            self._records.append(record)
            self._captured = True

        # Value before this assignment, on every capture
        record.start_value = prop.getter()

    def remove_record(self, record: AnimatedRecord) -> None:
        if record in self._records:
            self._records.remove(record)
        record.remove()

    # === Cursors ===

    def add_delay(self, extra_delay: float) -> None:
        self._delay += extra_delay
        self._max_delay = max(self._delay, self._max_delay)

    def add_duration(self, extra_duration: float) -> None:
        self._duration += extra_duration
        self._max_duration = max(self._duration, self._max_duration)

    def add_custom(self, callback: Callable[[float], None]) -> CustomRecord:
        """Add a per-frame callback stamped with the current cursors"""
        record = CustomRecord(callback, self._duration, self._delay, self)
        self._records.append(record)
        self._captured = True
        return record

    # === State ===

    @property
    def owner(self) -> Any:
        return self._owner_ref() if self._owner_ref is not None else None

    @property
    def records(self) -> List[AnimatedRecord]:
        return list(self._records)

    @property
    def property_records(self) -> List[PropertyRecord]:
        return [r for r in self._records if isinstance(r, PropertyRecord)]

    @property
    def elapsed(self) -> float:
        return self._elapsed

    @property
    def duration(self) -> float:
        """Current duration cursor"""
        return self._duration

    @property
    def delay(self) -> float:
        """Current delay cursor"""
        return self._delay

    @property
    def max_duration(self) -> float:
        return self._max_duration

    @property
    def max_delay(self) -> float:
        return self._max_delay

    @property
    def total_duration(self) -> float:
        return self._max_delay + self._max_duration

    @property
    def is_instant(self) -> bool:
        # Cursors may move during definition, so use the high-water marks
        return self._max_delay == 0.0 and self._max_duration == 0.0

    @property
    def is_complete(self) -> bool:
        return self._completed

    @property
    def is_cancelled(self) -> bool:
        return self._cancelled

    @property
    def time_is_up(self) -> bool:
        return self._elapsed >= self._max_delay + self._max_duration

    @property
    def can_animate(self) -> bool:
        """
        False once cancelled, once the owner is gone/invalid, or once every
        record was stolen away. Never-captured animations (after()) stay
        animatable until their time is up.
        """
        if self._cancelled:
            return False
        if self._owner_ref is not None:
            owner = self._owner_ref()
            if owner is None or getattr(owner, "alive", True) is False:
                return False
        if self._captured and not self._records:
            return False
        return True

    # === Playback ===

    def update(self, dt: float) -> None:
        """
        Advance by dt seconds (capped at max_delta) and apply records

        Records whose delay hasn't elapsed keep their start value.
        """
        self._elapsed += min(dt, self.max_delta)

        if self._completed or self._cancelled:
            return

        for record in tuple(self._records):
            if record.animation is not self:
                continue
            if self._elapsed > record.delay:
                if record.duration > 0:
                    t = clamp01((self._elapsed - record.delay) / record.duration)
                else:
                    t = 1.0
                record.animate(self._curve(t))

        if self.time_is_up:
            self._done()

    def complete_immediate(self) -> None:
        """Jump to the end state and run the normal completion path"""
        if self._completed or self._cancelled:
            return
        self._done()

    def cancel(self) -> None:
        """Release all records where they stand; on_complete is never called afterwards"""
        self._cancelled = True
        self._remove_all_records()
        log.debug("Animation cancelled")

    def _done(self) -> None:
        if self._completed or self._cancelled:
            return
        self._completed = True

        # Force exact end state regardless of float error or curve shape
        for record in tuple(self._records):
            if record.animation is self:
                record.animate(1.0)

        self._remove_all_records()

        if self._on_complete is not None:
            self._on_complete()

    def _remove_all_records(self) -> None:
        records, self._records = self._records, []
        for record in records:
            record.remove()

    def __repr__(self) -> str:
        state = "complete" if self._completed else f"{self._elapsed:.3f}/{self.total_duration:.3f}s"
        return f"Animation({state}, records={len(self._records)})"
