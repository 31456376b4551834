"""Seeded icon layout on the curry plate."""

from __future__ import annotations

import logging
import math
from typing import Sequence

from currygen.core.models import Canvas, CurryResult, IconPlacement, IngredientAmount

_logger = logging.getLogger(__name__)

LCG_MULTIPLIER = 9301
LCG_INCREMENT = 49297
LCG_MODULUS = 233280

MAX_ICONS_PER_INGREDIENT = 8
ICON_STEPS = 6
MAX_ATTEMPTS = 20

SPAWN_RADIUS_FACTOR = 0.85
RIM_MARGIN_FACTOR = 0.9
CURRY_DOMINANT_SLACK = 0.8

MIN_ICON_SIZE = 8.0
ICON_SIZE_SPREAD = 10.0


class SeededRandom:
    """Linear congruential stream; each instance owns its state."""

    def __init__(self, seed: int) -> None:
        self.state = int(seed)

    def next(self) -> float:
        """Advance the state and return a draw in [0, 1)."""
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) % LCG_MODULUS
        return self.state / LCG_MODULUS


def icon_count(amount: float, max_amount: float) -> int:
    """
    Number of icons for an ingredient: ceil(amount / (max_amount / 6)), capped at 8.

    Raises:
        ValueError: If max_amount is not positive
    """
    if max_amount <= 0:
        raise ValueError(f"max_amount must be positive, got {max_amount}")
    return min(math.ceil(amount / (max_amount / ICON_STEPS)), MAX_ICONS_PER_INGREDIENT)


def in_curry_region(u: float, curry_fraction: float) -> bool:
    """
    Region gate for a candidate at normalized horizontal position `u`.

    When curry covers more than half the plate, anything right of
    80 % of the rice share is accepted. Otherwise the candidate only has to be
    left of the rice/curry split line.
    """
    if curry_fraction > 0.5:
        return u >= (1 - curry_fraction) * CURRY_DOMINANT_SLACK
    return u < (1 - curry_fraction)


def normalized_x(x: float, canvas: Canvas) -> float:
    return (x - (canvas.cx - canvas.radius)) / (canvas.radius * 2)


def derive_seed(result: CurryResult) -> int:
    """Stable seed for a result so re-rendering it reproduces the layout."""
    return result.rice_percent * 1000 + len(result.ingredients) * 7


class IconLayoutEngine:
    """
    Place ingredient icons on the plate by bounded rejection sampling.

    Radii are drawn linearly, not area-uniform, so icons cluster toward the
    center. After MAX_ATTEMPTS rejections the last candidate is kept, so
    every icon is always placed.
    """

    def __init__(self, canvas: Canvas | None = None) -> None:
        self.canvas = canvas or Canvas()

    def layout(
        self,
        ingredients: Sequence[IngredientAmount],
        curry_fraction: float,
        seed: int,
    ) -> list[IconPlacement]:
        rand = SeededRandom(seed)
        icons: list[IconPlacement] = []

        for selection in ingredients:
            ingredient = selection.ingredient
            for _ in range(icon_count(selection.amount, ingredient.max_amount)):
                x, y = self._sample_position(rand, curry_fraction)
                size = MIN_ICON_SIZE + rand.next() * ICON_SIZE_SPREAD
                icons.append(
                    IconPlacement(
                        x=x,
                        y=y,
                        size=size,
                        color=ingredient.color,
                        shape=ingredient.shape,
                        label=ingredient.name,
                    )
                )
        return icons

    def _sample_position(self, rand: SeededRandom, curry_fraction: float) -> tuple[float, float]:
        canvas = self.canvas
        x, y = canvas.cx, canvas.cy
        for _ in range(MAX_ATTEMPTS):
            angle = rand.next() * math.pi * 2
            r = rand.next() * canvas.radius * SPAWN_RADIUS_FACTOR
            x = canvas.cx + r * math.cos(angle)
            y = canvas.cy + r * math.sin(angle)

            if math.hypot(x - canvas.cx, y - canvas.cy) > canvas.radius * RIM_MARGIN_FACTOR:
                continue
            if in_curry_region(normalized_x(x, canvas), curry_fraction):
                return x, y

        _logger.debug(
            "No candidate passed the region gate after %d attempts (curry_fraction=%.2f)",
            MAX_ATTEMPTS,
            curry_fraction,
        )
        return x, y


def layout_icons(
    result: CurryResult,
    seed: int | None = None,
    canvas: Canvas | None = None,
) -> list[IconPlacement]:
    """Lay out the icons for a generated result; seed defaults to derive_seed(result)."""
    if seed is None:
        seed = derive_seed(result)
    return IconLayoutEngine(canvas).layout(result.ingredients, result.curry_fraction, seed)
