"""Random sources for plate generation."""

from __future__ import annotations

import random

from currygen.core.interfaces import RandomSource

MAX_SEED_VALUE = 2**32 - 1


def system_random_source() -> RandomSource:
    """OS entropy; two plates generated this way are never linked."""
    return random.SystemRandom()


def resolve_seed(seed: int | None) -> tuple[int, random.Random]:
    """Pick the generation seed for a CLI run.

    `currygen generate --seed N` replays plate N exactly. Without `--seed` a
    seed is drawn from OS entropy and printed alongside the plate, so any
    plate can be regenerated later.
    """
    chosen = random.SystemRandom().randint(0, MAX_SEED_VALUE) if seed is None else int(seed)
    return chosen, random.Random(chosen)
