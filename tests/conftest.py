import random

import pytest


class CountingRandom(random.Random):
    """Random source that records how many uniform draws were taken."""

    def __init__(self, seed=None):
        super().__init__(seed)
        self.draws = 0

    def random(self):
        self.draws += 1
        return super().random()


@pytest.fixture
def counting_rng() -> CountingRandom:
    return CountingRandom(1234)


@pytest.fixture
def square_points() -> list[tuple[float, float]]:
    return [(0.0, 0.0), (0.0, 10.0), (10.0, 10.0), (10.0, 0.0)]


@pytest.fixture
def scattered_points() -> list[tuple[float, float]]:
    rng = random.Random(99)
    return [(rng.uniform(0, 100), rng.uniform(0, 100)) for _ in range(25)]
