import random

import pytest

from core.quiz import InMemoryKeyValueStore, MasteryStore
from core.quiz.database import get_engine, get_session_factory, init_db
from core.schemas import CatalogItem


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def catalog():
    return [
        CatalogItem(id=1, prompt="日", answer="day, sun"),
        CatalogItem(id=2, prompt="月", answer="month, moon"),
        CatalogItem(id=3, prompt="火", answer="fire"),
        CatalogItem(id=4, prompt="水", answer="water"),
        CatalogItem(id=5, prompt="木", answer="tree"),
    ]


@pytest.fixture
def kv():
    return InMemoryKeyValueStore()


@pytest.fixture
def store(kv):
    return MasteryStore(kv)


@pytest.fixture
def sql_session_factory():
    engine = get_engine("sqlite://")
    init_db(engine)
    yield get_session_factory(engine)
    engine.dispose()


class BrokenKeyValueStore:
    """Backend that fails on every call."""

    def get(self, key):
        raise OSError("storage unavailable")

    def set(self, key, value):
        raise OSError("storage unavailable")

    def remove(self, key):
        raise OSError("storage unavailable")


@pytest.fixture
def broken_store():
    return MasteryStore(BrokenKeyValueStore())
