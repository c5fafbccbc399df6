"""
Definition Context

Stack of animations currently running their definition callback. The top
of the stack is the animation that property setters register captures with.
Nested definitions (an animation started from inside another animation's
definition) push on top and pop back when they finish.
"""

from contextlib import contextmanager
from typing import Iterator, List, Optional, TYPE_CHECKING

from autotween.models.enums import LogCategory
from autotween.models.errors import ContextCorruptedError
from autotween.utils.logger import get_category_logger

if TYPE_CHECKING:
    from autotween.engine.animation import Animation

log = get_category_logger(LogCategory.CONTEXT)


class DefinitionContext:
    """
    Scoped stack of animations under definition

    Push/pop only happens through defining(), which releases in a finally
    block so an exception inside a definition callback can't leave a stale
    animation on the stack.

    Example:
        context = DefinitionContext()
        with context.defining(animation):
            prop.value = 10      # captured by `animation`
        context.current()        # None
    """

    def __init__(self):
        self._stack: List['Animation'] = []

    def current(self) -> Optional['Animation']:
        """Animation accepting captures, or None outside any definition"""
        return self._stack[-1] if self._stack else None

    @property
    def depth(self) -> int:
        return len(self._stack)

    @property
    def is_defining(self) -> bool:
        return bool(self._stack)

    @contextmanager
    def defining(self, animation: 'Animation') -> Iterator['Animation']:
        self._stack.append(animation)
        try:
            yield animation
        finally:
            top = self._stack.pop() if self._stack else None
            if top is not animation:
                log.error("Definition stack corrupted", expected=animation, actual=top)
                raise ContextCorruptedError(animation, top)

    def __repr__(self) -> str:
        return f"DefinitionContext(depth={len(self._stack)})"


# === Process-wide default slot ===
_context = DefinitionContext()

def get_definition_context() -> DefinitionContext:
    return _context
