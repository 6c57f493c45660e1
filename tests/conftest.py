"""
Shared pytest fixtures for gibberish tests.
"""
from typing import List

import pytest

from gibberish.api.routers import gibberish_router


class ScriptedRandom:
    """Random stand-in returning scripted values; the last value repeats."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[min(self.calls, len(self.values) - 1)]
        self.calls += 1
        return value


@pytest.fixture
def scripted_random():
    """Factory for ScriptedRandom instances."""
    return ScriptedRandom


@pytest.fixture
def sample_corpus() -> List[str]:
    """Sample text corpus for transition models."""
    return [
        "Hello friend how are you today",
        "The universe is full of amazing wonders",
        "I love exploring new planets and stars",
        "Would you like to play a game together",
        "The stars are beautiful tonight",
        "I feel happy when we talk together",
        "This is a wonderful adventure we share",
    ]


@pytest.fixture
def tiny_corpus() -> List[str]:
    """The four-word example: a -> {b, c}, b -> {a}, c -> {a}."""
    return ["a b a c"]


@pytest.fixture(autouse=True)
def clear_model_cache():
    """Keep the router's in-memory models from leaking between tests."""
    gibberish_router.MODEL_CACHE.clear()
    yield
    gibberish_router.MODEL_CACHE.clear()
