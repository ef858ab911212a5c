import os
import random

import pytest

# Set test environment variables
os.environ["TEST_MODE"] = "true"
os.environ["LOG_LEVEL"] = "WARNING"

from core.repository import ItemRepository
from core.schemas import Item
from core.storage import KeyValueStore, create_store_engine
from core.timer import CountdownTimer


class ManualTimers:
    """
    Timer factory that hands out unstarted timers; tests call tick() directly.
    """

    def __init__(self):
        self.created: list[CountdownTimer] = []

    def __call__(self, duration, on_tick, on_expire):
        timer = CountdownTimer(duration, on_tick=on_tick, on_expire=on_expire)
        self.created.append(timer)
        return timer

    @property
    def last(self) -> CountdownTimer:
        return self.created[-1]


@pytest.fixture
def store(tmp_path):
    """Key-value store backed by a temporary SQLite file."""
    engine = create_store_engine(f"sqlite:///{tmp_path / 'store.db'}")
    yield KeyValueStore(engine)
    engine.dispose()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def sample_items():
    return [
        Item(prompt="A", answer="1"),
        Item(prompt="B", answer="2"),
        Item(prompt="C", answer="3"),
        Item(prompt="D", answer="4"),
    ]


@pytest.fixture
def repository(sample_items):
    return ItemRepository(sample_items)


@pytest.fixture
def manual_timers():
    return ManualTimers()


@pytest.fixture
def in_order():
    """Sampler that keeps repository order (no shuffling)."""
    return lambda entries: list(entries)
