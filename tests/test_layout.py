"""Tests for the seeded icon layout engine."""

import math

import pytest

from currygen.core import layout
from currygen.core.layout import (
    IconLayoutEngine,
    SeededRandom,
    derive_seed,
    icon_count,
    in_curry_region,
    layout_icons,
    normalized_x,
)
from currygen.core.models import (
    Canvas,
    Category,
    CurryResult,
    Ingredient,
    IngredientAmount,
    Shape,
    Unit,
)


def _ingredient(
    ingredient_id: str = "cheese",
    unit: Unit = Unit.GRAMS,
    max_amount: int = 60,
) -> Ingredient:
    return Ingredient(
        ingredient_id=ingredient_id,
        category=Category.TOPPING,
        name=ingredient_id.title(),
        unit=unit,
        max_amount=max_amount,
        color="#FFD700",
        shape=Shape.STAR,
    )


def _selections() -> list[IngredientAmount]:
    return [
        IngredientAmount(_ingredient("cheese", Unit.GRAMS, 60), 45),
        IngredientAmount(_ingredient("egg", Unit.COUNT, 2), 2),
        IngredientAmount(_ingredient("beef", Unit.GRAMS, 150), 10),
    ]


def test_seeded_random_sequence() -> None:
    rand = SeededRandom(0)
    assert rand.next() == 49297 / 233280
    assert rand.next() == 165494 / 233280


def test_seeded_random_instances_are_independent() -> None:
    a = SeededRandom(42)
    b = SeededRandom(42)
    first = [a.next() for _ in range(5)]
    assert [b.next() for _ in range(5)] == first
    assert all(0.0 <= value < 1.0 for value in first)


def test_icon_count_bounds_and_monotonic() -> None:
    previous = 0
    for amount in range(1, 61):
        count = icon_count(amount, 60)
        assert 1 <= count <= 8
        assert count >= previous
        previous = count
    assert icon_count(60, 60) == 6
    assert icon_count(1, 150) == 1


def test_icon_count_capped() -> None:
    assert icon_count(500, 60) == 8


def test_icon_count_requires_positive_max() -> None:
    with pytest.raises(ValueError):
        icon_count(5, 0)


def test_region_gate_curry_dominant() -> None:
    assert in_curry_region(0.08, 0.9)
    assert not in_curry_region(0.079, 0.9)
    assert in_curry_region(0.95, 0.9)


def test_region_gate_rice_dominant() -> None:
    assert in_curry_region(0.0, 0.1)
    assert in_curry_region(0.899, 0.1)
    assert not in_curry_region(0.9, 0.1)


def test_region_gate_half_uses_split_line() -> None:
    assert in_curry_region(0.49, 0.5)
    assert not in_curry_region(0.5, 0.5)


def test_layout_deterministic() -> None:
    engine = IconLayoutEngine()
    first = engine.layout(_selections(), 0.6, 12345)
    second = engine.layout(_selections(), 0.6, 12345)
    assert first == second
    assert engine.layout(_selections(), 0.6, 54321) != first


def test_layout_never_drops_icons() -> None:
    selections = _selections()
    icons = IconLayoutEngine().layout(selections, 0.3, 7)
    expected = sum(icon_count(s.amount, s.ingredient.max_amount) for s in selections)
    assert len(icons) == expected


def test_layout_geometry_and_attributes() -> None:
    canvas = Canvas()
    icons = IconLayoutEngine(canvas).layout(_selections(), 0.5, 99)
    assert icons
    for icon in icons:
        distance = math.hypot(icon.x - canvas.cx, icon.y - canvas.cy)
        assert distance <= canvas.radius * 0.85 + 1e-9
        assert 8.0 <= icon.size < 18.0
        assert icon.color == "#FFD700"
        assert icon.shape == Shape.STAR
    assert [icon.label for icon in icons[:5]] == ["Cheese"] * 5


@pytest.mark.parametrize("seed", [0, 1, 17, 4242, 99999])
def test_layout_respects_region_gate(seed: int) -> None:
    canvas = Canvas()
    engine = IconLayoutEngine(canvas)

    for icon in engine.layout(_selections(), 0.9, seed):
        assert normalized_x(icon.x, canvas) >= 0.08
    for icon in engine.layout(_selections(), 0.1, seed):
        assert normalized_x(icon.x, canvas) < 0.9


def test_forced_max_amount_yields_six_icons() -> None:
    selection = IngredientAmount(_ingredient("cheese", Unit.GRAMS, 60), 60)
    icons = IconLayoutEngine().layout([selection], 0.5, 1)
    assert len(icons) == 6


def test_derive_seed_and_layout_icons() -> None:
    result = CurryResult(
        rice_percent=40,
        curry_percent=60,
        ingredients=tuple(_selections()),
    )
    assert derive_seed(result) == 40 * 1000 + 3 * 7
    assert layout_icons(result) == IconLayoutEngine().layout(
        result.ingredients, 0.6, derive_seed(result)
    )
    assert layout_icons(result) == layout_icons(result)


def test_layout_empty() -> None:
    assert IconLayoutEngine().layout([], 0.5, 1) == []


def test_rejected_candidates_fall_back_to_last_attempt(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(layout, "in_curry_region", lambda u, fraction: False)
    canvas = Canvas()
    selections = _selections()
    seed = 31

    icons = IconLayoutEngine(canvas).layout(selections, 0.6, seed)

    expected_count = sum(icon_count(s.amount, s.ingredient.max_amount) for s in selections)
    assert len(icons) == expected_count

    rand = SeededRandom(seed)
    for icon in icons:
        for _ in range(layout.MAX_ATTEMPTS - 1):
            rand.next()
            rand.next()
        angle = rand.next() * math.pi * 2
        r = rand.next() * canvas.radius * 0.85
        size = 8.0 + rand.next() * 10.0
        assert icon.x == pytest.approx(canvas.cx + r * math.cos(angle))
        assert icon.y == pytest.approx(canvas.cy + r * math.sin(angle))
        assert icon.size == pytest.approx(size)
        assert (icon.x, icon.y) != (canvas.cx, canvas.cy)
