"""Curry generation: wires ratio, comment, selection and nutrition together."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from currygen.core.catalog import Catalog, load_catalog, load_default_catalog
from currygen.core.comments import ReactionCommentSelector
from currygen.core.interfaces import (
    CommentSelector,
    IngredientSelector,
    NutritionAggregator,
    RandomSource,
    RatioGenerator,
)
from currygen.core.models import CurryResult
from currygen.core.nutrition import BaseNutritionAggregator
from currygen.core.ratio import UniformRatioGenerator, curry_percent_for
from currygen.core.seeding import system_random_source
from currygen.core.selection import CatalogIngredientSelector

_logger = logging.getLogger(__name__)


class CurryGenerator:
    """
    Produce a CurryResult from a set of enabled ingredient ids.

    All stages are injected, so implementations can be swapped at runtime.
    Stages that are not given are built from the packaged templates and share
    one random source, drawn in this order: ratio, comment, then one amount
    per enabled ingredient in catalog order.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        random_source: Optional[RandomSource] = None,
        ratio_generator: Optional[RatioGenerator] = None,
        selector: Optional[IngredientSelector] = None,
        comment_selector: Optional[CommentSelector] = None,
        aggregator: Optional[NutritionAggregator] = None,
        templates_path: str | Path | None = None,
    ) -> None:
        if catalog is None:
            catalog = load_catalog(templates_path) if templates_path else load_default_catalog()
        self.catalog = catalog
        self.random_source = random_source or system_random_source()
        self.ratio_generator = ratio_generator or UniformRatioGenerator(self.random_source)
        self.comment_selector = comment_selector or ReactionCommentSelector(
            self.random_source, templates_path=templates_path
        )
        self.selector = selector or CatalogIngredientSelector(catalog, self.random_source)
        self.aggregator = aggregator or BaseNutritionAggregator(templates_path=templates_path)

    def generate(self, enabled_ids: Iterable[str]) -> CurryResult:
        rice_percent = self.ratio_generator.generate()
        curry_percent = curry_percent_for(rice_percent)
        comment = self.comment_selector.select(rice_percent)
        ingredients = self.selector.select(enabled_ids)
        nutrition = self.aggregator.aggregate(rice_percent, curry_percent, ingredients)

        _logger.debug(
            "Generated curry rice=%d%% curry=%d%% ingredients=%d kcal=%d",
            rice_percent,
            curry_percent,
            len(ingredients),
            nutrition.kcal,
        )
        return CurryResult(
            rice_percent=rice_percent,
            curry_percent=curry_percent,
            ingredients=ingredients,
            comment=comment,
            nutrition=nutrition,
        )

    def default_enabled_ids(self) -> set[str]:
        return self.catalog.default_enabled_ids()


def generate_curry(enabled_ids: Iterable[str], random_source: RandomSource | None = None) -> CurryResult:
    """One-shot generation with the packaged catalog and templates."""
    return CurryGenerator(random_source=random_source).generate(enabled_ids)
