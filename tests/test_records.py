"""
Tests for PropertyRecord, CustomRecord and RecordPool.
"""

from unittest.mock import MagicMock

from autotween.engine.animation import Animation
from autotween.engine.records import CustomRecord, PropertyRecord, RecordPool
from autotween.models.color import Color


class TestRecordPool:

    def test_acquire_links_both_ways(self, pool, x):
        animation = object()
        record = pool.acquire(x, animation, duration=0.5, delay=0.25)

        assert record.prop is x
        assert x.animated_record is record
        assert record.animation is animation
        assert record.duration == 0.5
        assert record.delay == 0.25
        assert pool.created == 1

    def test_remove_returns_record_to_pool(self, pool, x):
        record = pool.acquire(x, None, 1.0, 0.0)
        record.remove()

        assert x.animated_record is None
        assert record.prop is None
        assert record.animation is None
        assert pool.size(float) == 1

    def test_reuses_released_record(self, pool, x, y):
        first = pool.acquire(x, None, 1.0, 0.0)
        first.remove()
        second = pool.acquire(y, None, 1.0, 0.0)

        assert second is first
        assert second.prop is y
        assert pool.created == 1
        assert pool.size(float) == 0

    def test_pools_are_separate_per_value_type(self, pool, x, color, vector):
        for prop in (x, color, vector):
            pool.acquire(prop, None, 1.0, 0.0).remove()

        assert pool.size(float) == 1
        assert pool.size(Color) == 1
        assert pool.size(tuple) == 1
        assert len(pool) == 3

    def test_prewarm(self):
        pool = RecordPool()
        pool.prewarm(float, 3)
        assert pool.size(float) == 3
        assert pool.created == 3

    def test_independent_pools(self, x):
        a, b = RecordPool(), RecordPool()
        a.acquire(x, None, 1.0, 0.0).remove()
        assert a.size(float) == 1
        assert b.size(float) == 0

    def test_clear(self, pool, x):
        pool.acquire(x, None, 1.0, 0.0).remove()
        pool.clear()
        assert len(pool) == 0


class TestPropertyRecord:

    def test_start_captures_end_and_rewinds(self, make_prop):
        prop, slot = make_prop()
        record = PropertyRecord()
        record.prop = prop
        record.start_value = 1.0
        slot.value = 5.0

        record.start()

        assert record.end_value == 5.0
        assert record.has_end
        assert slot.value == 1.0

    def test_start_does_not_recapture(self, context, pool, x):
        anim = Animation(1.0, definition=lambda: x.set(2.0), context=context, pool=pool)
        assert len(anim.records) == 1

    def test_animate_writes_interpolated_value(self, make_prop):
        prop, slot = make_prop()
        record = PropertyRecord()
        record.prop = prop
        record.start_value = 0.0
        record.end_value = 8.0

        record.animate(0.25)
        assert slot.value == 2.0

    def test_remove_without_pool(self, x):
        record = PropertyRecord()
        record.prop = x
        x.animated_record = record
        record.remove()
        assert x.animated_record is None


class TestCustomRecord:

    def test_animate_calls_callback(self):
        callback = MagicMock()
        record = CustomRecord(callback, duration=1.0, delay=0.0)
        record.animate(0.3)
        callback.assert_called_once_with(0.3)

    def test_removed_record_is_inert(self):
        callback = MagicMock()
        record = CustomRecord(callback, duration=1.0, delay=0.0)
        record.remove()
        record.animate(1.0)
        callback.assert_not_called()
