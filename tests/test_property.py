"""
Tests for tweenable properties and their interpolation.
"""

import pytest

from autotween.engine.animation import Animation
from autotween.engine.property import AngleProperty, FloatProperty, TweenableProperty
from autotween.models.color import Color


class TestGetSet:

    def test_set_outside_definition_writes_through(self, make_prop):
        prop, slot = make_prop(FloatProperty, 1.0)
        prop.set(4.0)

        assert slot.value == 4.0
        assert slot.writes == 1
        assert not prop.is_animating

    def test_value_property_aliases_get_set(self, make_prop):
        prop, slot = make_prop(FloatProperty, 1.0)
        prop.value = 2.5
        assert prop.value == 2.5
        assert slot.value == 2.5

    def test_target_without_animation_is_live_value(self, x):
        x.set(3.0)
        assert x.target == 3.0

    def test_target_while_animating(self, context, pool, x):
        Animation(1.0, definition=lambda: x.set(9.0), context=context, pool=pool)
        assert x.get() == 0.0
        assert x.target == 9.0

    def test_capture_happens_before_write(self, context, pool, make_prop):
        prop, slot = make_prop(FloatProperty, 1.0)
        seen = []

        def definition():
            prop.set(5.0)
            seen.append(prop.animated_record.start_value)

        Animation(1.0, definition=definition, context=context, pool=pool)
        assert seen == [1.0]

    def test_base_lerp_not_implemented(self, make_prop):
        prop, _ = make_prop(TweenableProperty, 0)
        with pytest.raises(NotImplementedError):
            prop.lerp(0, 1, 0.5)


class TestInterpolation:

    def test_float_unclamped(self, x):
        assert x.lerp(0.0, 10.0, 1.2) == pytest.approx(12.0)
        assert x.lerp(0.0, 10.0, -0.5) == pytest.approx(-5.0)

    def test_float_exact_at_end(self, x):
        assert x.lerp(0.1, 0.7, 1.0) == 0.7

    @pytest.mark.parametrize("v0,v1,t,expected", [
        (350.0, 10.0, 0.5, 360.0),
        (10.0, 350.0, 0.5, 0.0),
        (0.0, 90.0, 0.5, 45.0),
        (0.0, 180.0, 0.5, 90.0),
    ])
    def test_angle_shortest_arc(self, angle, v0, v1, t, expected):
        assert angle.lerp(v0, v1, t) == pytest.approx(expected)

    def test_angle_lands_on_written_value(self, angle):
        assert angle.lerp(350.0, -10.0, 1.0) == -10.0

    def test_angle_animation_wraps(self, context, pool, make_prop):
        prop, slot = make_prop(AngleProperty, 350.0)
        anim = Animation(1.0, definition=lambda: prop.set(10.0), context=context, pool=pool,
                         curve=lambda t: t)
        for _ in range(8):
            anim.update(0.0625)
        assert slot.value == pytest.approx(360.0)

        anim.complete_immediate()
        assert slot.value == 10.0

    def test_vector_per_component(self, vector):
        assert vector.lerp((0.0, 10.0), (10.0, 20.0), 0.5) == pytest.approx((5.0, 15.0))

    def test_color_clamps_t(self, color):
        assert color.lerp(Color.black(), Color.white(), 1.5) == Color.white()
        assert color.lerp(Color.black(), Color.white(), -1.0) == Color.black()

    def test_color_midpoint(self, color):
        mid = color.lerp(Color.black(), Color.white(), 0.5)
        assert (mid.r, mid.g, mid.b, mid.a) == pytest.approx((0.5, 0.5, 0.5, 1.0))
