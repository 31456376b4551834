"""End-to-end tests for curry generation."""

import random

from currygen.core.catalog import Catalog, load_default_catalog
from currygen.core.comments import ReactionCommentSelector
from currygen.core.generator import CurryGenerator, generate_curry
from currygen.core.layout import layout_icons
from currygen.core.models import Category, Ingredient, Unit


class FixedRandom:
    """RandomSource returning a fixed sequence."""

    def __init__(self, values: list[int]) -> None:
        self.values = list(values)

    def randint(self, a: int, b: int) -> int:
        value = self.values.pop(0)
        assert a <= value <= b
        return value


def test_empty_selection_end_to_end() -> None:
    generator = CurryGenerator(random_source=FixedRandom([40, 0]))

    result = generator.generate(set())

    assert result.rice_percent == 40
    assert result.curry_percent == 60
    assert result.ingredients == ()
    assert result.nutrition.kcal == 814
    assert result.comment == ReactionCommentSelector(random.Random()).buckets[4][0]


def test_draw_order_ratio_comment_amounts() -> None:
    catalog = Catalog(
        [Ingredient("cheese", Category.TOPPING, "Cheese", Unit.GRAMS, 60, kcal=356.0)]
    )
    generator = CurryGenerator(catalog=catalog, random_source=FixedRandom([55, 2, 60]))

    result = generator.generate({"cheese"})

    assert result.rice_percent == 55
    assert result.comment == ReactionCommentSelector(random.Random()).buckets[6][2]
    assert [(s.ingredient.ingredient_id, s.amount) for s in result.ingredients] == [("cheese", 60)]
    assert len(layout_icons(result)) == 6


def test_generated_results_hold_invariants() -> None:
    generator = CurryGenerator(random_source=random.Random(2024))
    catalog = generator.catalog
    for _ in range(100):
        result = generator.generate(set(catalog.ids()))
        assert result.rice_percent + result.curry_percent == 100
        assert [s.ingredient.ingredient_id for s in result.ingredients] == catalog.ids()
        for selection in result.ingredients:
            ingredient = selection.ingredient
            assert ingredient.min_amount <= selection.amount <= ingredient.max_amount
        assert result.nutrition.kcal > 0


def test_seeded_generation_reproducible() -> None:
    enabled = load_default_catalog().default_enabled_ids()
    first = CurryGenerator(random_source=random.Random(5)).generate(enabled)
    second = CurryGenerator(random_source=random.Random(5)).generate(enabled)
    assert first == second
    assert layout_icons(first) == layout_icons(second)


def test_unknown_ids_ignored() -> None:
    result = generate_curry({"beef", "unicorn"}, random_source=random.Random(8))
    assert [s.ingredient.ingredient_id for s in result.ingredients] == ["beef"]


def test_default_enabled_ids() -> None:
    generator = CurryGenerator(random_source=random.Random(1))
    assert generator.default_enabled_ids() == load_default_catalog().default_enabled_ids()
