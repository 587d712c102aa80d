import random

import pytest

from dollhouse.core.logger import SimLogger
from dollhouse.engine.context import create_context
from dollhouse.engine.loop import SimulationEngine


class ScriptedRandom(random.Random):
    """random() returns the scripted values in order, then `default` forever."""

    def __init__(self, values=(), default=0.99):
        super().__init__(0)
        self.values = list(values)
        self.default = default

    def random(self):
        if self.values:
            return self.values.pop(0)
        return self.default


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test gets its own SimLogger with no file attached."""
    yield
    SimLogger().close()
    SimLogger._instance = None


@pytest.fixture
def ctx():
    return create_context(seed=7)


@pytest.fixture
def engine(ctx):
    return SimulationEngine(ctx)


@pytest.fixture
def scripted():
    return ScriptedRandom
