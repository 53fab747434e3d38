import random

import pytest

from scriptbot.pipeline import ResponsePipeline
from scriptbot.search import SimulatedSearchProvider


class FixedRandom:
    """random.Random stand-in: constant random(), first-item choice()."""

    def __init__(self, value: float):
        self.value = value

    def random(self) -> float:
        return self.value

    def choice(self, seq):
        return seq[0]


@pytest.fixture
def fixed_random():
    return FixedRandom


@pytest.fixture
def pipeline():
    return ResponsePipeline(
        rng=random.Random(1234),
        search_provider=SimulatedSearchProvider(delay=0),
    )
