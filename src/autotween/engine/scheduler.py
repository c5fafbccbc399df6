"""
Animation Scheduler

Owns the live list of playing animations and advances each of them once per
frame tick. Elements stay lightweight: they never tick themselves, the
scheduler does it for every animation in one pass.

Ordering rules:
- Each live animation is advanced at most once per tick
- Animations registered during a tick (typically from a completion callback)
  are first advanced on the next tick. The loop is bounded by the count
  taken before the tick, so a callback that keeps re-triggering itself
  can't recurse within one frame
- Animations whose owner died, or whose records were all stolen, are
  dropped without being touched
"""

from typing import Any, Callable, List, Optional, Set, Union

from autotween.engine.animation import Animation
from autotween.engine.context import DefinitionContext, get_definition_context
from autotween.engine.records import RecordPool
from autotween.models.color import Color
from autotween.models.config import AnimatorConfig
from autotween.models.curve import Curve
from autotween.models.enums import CurveID, LogCategory
from autotween.utils.mathf import lerp
from autotween.utils.logger import get_category_logger

log = get_category_logger(LogCategory.SCHEDULER)


class AnimationScheduler:
    """
    Per-frame driver for many concurrent animations

    Dependencies (definition context, record pool, config) are injected so
    independent schedulers don't share state.

    Example:
        scheduler = AnimationScheduler()
        scheduler.animate(0.5, definition=lambda: element.x.set(100.0), owner=element)

        # host frame loop
        scheduler.tick(1 / 60)
    """

    def __init__(
        self,
        context: Optional[DefinitionContext] = None,
        pool: Optional[RecordPool] = None,
        config: Optional[AnimatorConfig] = None
    ):
        self.context = context or get_definition_context()
        self.pool = pool if pool is not None else RecordPool()
        self.config = config or AnimatorConfig()

        self._animations: List[Animation] = []
        self._to_remove: Set[Animation] = set()
        self._ticking = False
        self.ticks = 0

        if self.config.pool_prewarm > 0:
            for kind in (float, tuple, Color):
                self.pool.prewarm(kind, self.config.pool_prewarm)

        log.debug("AnimationScheduler created", max_delta=f"{self.config.max_delta:.4f}")

    # === Registration ===

    def animate(
        self,
        duration: float,
        delay: float = 0.0,
        definition: Optional[Callable[[], None]] = None,
        on_complete: Optional[Callable[[], None]] = None,
        curve: Union[CurveID, Curve, str, None] = None,
        owner: Any = None
    ) -> Animation:
        """
        Define and start an animation

        The definition callback runs synchronously inside the constructor.
        The animation is only registered if it isn't already complete
        (instant animations finish before this returns).

        Args:
            duration: Seconds each captured property takes to move
            delay: Seconds before captured properties start moving
            definition: Callback making ordinary property assignments
            on_complete: Called once when the animation finishes
            curve: CurveID, callable or curve name; config default when None
            owner: Element the animation belongs to (held weakly)

        Returns:
            The Animation (complete already if it was instant)
        """
        animation = Animation(
            duration,
            delay,
            definition,
            on_complete,
            self.resolve_curve(curve),
            owner,
            context=self.context,
            pool=self.pool,
            max_delta=self.config.max_delta,
        )

        if not animation.is_complete:
            self._animations.append(animation)

        return animation

    def resolve_curve(self, curve: Union[CurveID, Curve, str, None]) -> Union[CurveID, Curve]:
        """
        Map a curve reference to a CurveID or callable

        Strings name a keyframed curve from config (curves:) first, then a
        CurveID member (case-insensitive). None means the config default.

        Raises:
            ValueError: if a name matches neither
        """
        if curve is None:
            return self.config.default_curve
        if isinstance(curve, str):
            named = self.config.curves.get(curve)
            if named is not None:
                return named
            try:
                return CurveID[curve.upper()]
            except KeyError:
                raise ValueError(f"Unknown curve '{curve}'") from None
        return curve

    def after(self, delay: float, callback: Callable[[], None], owner: Any = None) -> Animation:
        """Call callback once delay seconds have passed"""
        return self.animate(0.0, delay, None, callback, owner=owner)

    def animate_custom(
        self,
        duration: float,
        callback: Callable[[float], None],
        delay: float = 0.0,
        on_complete: Optional[Callable[[], None]] = None,
        curve: Union[CurveID, Curve, str, None] = None,
        owner: Any = None
    ) -> Animation:
        """Animation whose only moving part is callback(eased_t)"""
        return self.animate(
            duration, delay, lambda: self.add_custom_animation(callback), on_complete, curve, owner
        )

    # === Definition helpers (act on the animation under definition) ===

    def current_definition(self) -> Optional[Animation]:
        return self.context.current()

    def add_delay(self, extra_delay: float) -> None:
        """Delay properties captured after this call. No-op outside a definition."""
        animation = self.context.current()
        if animation is not None:
            animation.add_delay(extra_delay)

    def add_duration(self, extra_duration: float) -> None:
        animation = self.context.current()
        if animation is not None:
            animation.add_duration(extra_duration)

    def add_custom_animation(self, callback: Callable[[float], None]) -> None:
        """
        Drive callback from the animation under definition

        Outside a definition there's nothing to animate with, so the callback
        is applied straight at its end state (t=1.0).
        """
        animation = self.context.current()
        if animation is not None:
            animation.add_custom(callback)
        else:
            callback(1.0)

    def animatable_value(self, initial: float, target: float, setter: Callable[[float], None]) -> None:
        """Animate an arbitrary float via setter (unclamped)"""
        self.add_custom_animation(lambda t: setter(lerp(initial, target, t)))

    def animatable_color(self, initial: Color, target: Color, setter: Callable[[Color], None]) -> None:
        self.add_custom_animation(lambda t: setter(Color.lerp(initial, target, t)))

    # === Per-frame update ===

    def tick(self, dt: float) -> None:
        """
        Advance every live animation by dt

        Args:
            dt: Seconds since the previous tick (each animation caps it)
        """
        if not self._animations:
            return

        self.ticks += 1
        self._ticking = True
        try:
            initial_count = len(self._animations)
            i = 0
            while i < min(len(self._animations), initial_count):
                animation = self._animations[i]
                i += 1

                if animation in self._to_remove:
                    continue

                # Owner gone or nothing left to move: drop without touching properties
                if not animation.can_animate:
                    self._to_remove.add(animation)
                    log.debug("Dropping animation that can no longer animate", animation=animation)
                    continue

                try:
                    animation.update(dt)
                finally:
                    # Completed even if on_complete raised
                    if animation.is_complete:
                        self._to_remove.add(animation)
        finally:
            self._ticking = False
            self._flush_removals()

    def _flush_removals(self) -> None:
        if not self._to_remove:
            return
        self._animations = [a for a in self._animations if a not in self._to_remove]
        self._to_remove.clear()

    def _discard(self, animation: Animation) -> None:
        # Mid-tick removal would shift indices under the loop
        if self._ticking:
            self._to_remove.add(animation)
        elif animation in self._animations:
            self._animations.remove(animation)

    # === Queries / control by owner ===

    def is_animating(self, owner: Any) -> bool:
        """True if owner has a live animation with something left to do"""
        for animation in self._animations:
            if animation.owner is not owner or animation in self._to_remove:
                continue
            if not animation.is_complete and animation.can_animate:
                return True
        return False

    def animations_for(self, owner: Any) -> List[Animation]:
        return [a for a in self._animations if a.owner is owner]

    def cancel_animations(self, owner: Any) -> int:
        """
        Cancel every live animation owned by owner

        Properties keep their last applied values; completion callbacks are
        not called.

        Returns:
            Number of animations cancelled
        """
        cancelled = 0
        for animation in self.animations_for(owner):
            if animation in self._to_remove:
                continue
            animation.cancel()
            self._discard(animation)
            cancelled += 1
        if cancelled:
            log.debug("Cancelled animations", owner=owner, count=cancelled)
        return cancelled

    def complete_animations(self, owner: Any) -> int:
        """
        Jump every live animation owned by owner to its end state

        Completion callbacks run; any animation they start is kept.

        Returns:
            Number of animations completed
        """
        completed = 0
        for animation in self.animations_for(owner):
            if animation.is_complete:
                continue
            animation.complete_immediate()
            self._discard(animation)
            completed += 1
        return completed

    def clear(self) -> None:
        """Cancel everything (e.g. on shutdown)"""
        for animation in list(self._animations):
            animation.cancel()
        self._animations.clear()
        self._to_remove.clear()

    @property
    def animations(self) -> List[Animation]:
        return list(self._animations)

    def __len__(self) -> int:
        return len(self._animations)

    def __contains__(self, animation: Animation) -> bool:
        return animation in self._animations

    def __repr__(self) -> str:
        return f"AnimationScheduler(live={len(self._animations)}, ticks={self.ticks})"
