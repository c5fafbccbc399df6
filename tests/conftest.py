import pytest

from autotween.engine.context import DefinitionContext
from autotween.engine.property import AngleProperty, ColorProperty, FloatProperty, VectorProperty
from autotween.engine.records import RecordPool
from autotween.engine.scheduler import AnimationScheduler
from autotween.models.color import Color
from autotween.models.enums import LogLevel
from autotween.utils.logger import configure_logger

# 1/16 s: below the 1/15 s delta cap and exact in binary, so elapsed sums stay exact
STEP = 0.0625


class Slot:
    """Plain value holder standing in for a UI element attribute"""

    def __init__(self, value):
        self.value = value
        self.writes = 0

    def get(self):
        return self.value

    def set(self, value):
        self.value = value
        self.writes += 1


class Owner:
    """Minimal animation owner with a liveness flag"""

    def __init__(self, name="owner"):
        self.name = name
        self.alive = True


@pytest.fixture(autouse=True)
def quiet_logger():
    configure_logger(min_level=LogLevel.WARN, use_colors=False)
    yield
    configure_logger(min_level=LogLevel.INFO, use_colors=True)


@pytest.fixture
def context():
    return DefinitionContext()


@pytest.fixture
def pool():
    return RecordPool()


@pytest.fixture
def scheduler(context, pool):
    return AnimationScheduler(context=context, pool=pool)


@pytest.fixture
def make_prop(context):
    """Factory: make_prop(FloatProperty, 0.0) -> (prop, slot)"""
    def factory(prop_class=FloatProperty, initial=0.0):
        slot = Slot(initial)
        return prop_class(slot.get, slot.set, context=context), slot
    return factory


@pytest.fixture
def x(make_prop):
    prop, _ = make_prop(FloatProperty, 0.0)
    return prop


@pytest.fixture
def y(make_prop):
    prop, _ = make_prop(FloatProperty, 0.0)
    return prop


@pytest.fixture
def angle(make_prop):
    prop, _ = make_prop(AngleProperty, 0.0)
    return prop


@pytest.fixture
def color(make_prop):
    prop, _ = make_prop(ColorProperty, Color.black())
    return prop


@pytest.fixture
def vector(make_prop):
    prop, _ = make_prop(VectorProperty, (0.0, 0.0))
    return prop


@pytest.fixture
def owner():
    return Owner()


@pytest.fixture
def advance(scheduler):
    """advance(seconds): tick the scheduler in STEP increments"""
    def run(seconds, step=STEP):
        for _ in range(int(round(seconds / step))):
            scheduler.tick(step)
    return run
