"""Rice/curry split generation."""

from __future__ import annotations

from currygen.core.interfaces import RandomSource
from currygen.core.seeding import system_random_source

MIN_PERCENT = 0
MAX_PERCENT = 100


class UniformRatioGenerator:
    """Draw the rice percentage uniformly from [0, 100]."""

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self.random_source = random_source or system_random_source()

    def generate(self) -> int:
        return self.random_source.randint(MIN_PERCENT, MAX_PERCENT)


def curry_percent_for(rice_percent: int) -> int:
    return MAX_PERCENT - rice_percent
