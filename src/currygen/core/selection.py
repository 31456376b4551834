"""Random amount selection for enabled catalog ingredients."""

from __future__ import annotations

import logging
from typing import Iterable

from currygen.core.catalog import Catalog, load_default_catalog
from currygen.core.interfaces import RandomSource
from currygen.core.models import IngredientAmount
from currygen.core.seeding import system_random_source

_logger = logging.getLogger(__name__)


class CatalogIngredientSelector:
    """
    Draw a random amount for every enabled ingredient.

    - Output follows catalog order, never the order of `enabled_ids`.
    - Ids that are not in the catalog are skipped.
    - Amounts are uniform over [min_amount, max_amount], inclusive.
    """

    def __init__(
        self,
        catalog: Catalog | None = None,
        random_source: RandomSource | None = None,
    ) -> None:
        self.catalog = catalog or load_default_catalog()
        self.random_source = random_source or system_random_source()

    def select(self, enabled_ids: Iterable[str]) -> tuple[IngredientAmount, ...]:
        enabled = set(enabled_ids)
        unknown = enabled.difference(self.catalog.ids())
        if unknown:
            _logger.debug("Ignoring ids not in catalog: %s", sorted(unknown))

        selections: list[IngredientAmount] = []
        for ingredient in self.catalog:
            if ingredient.ingredient_id not in enabled:
                continue
            amount = self.random_source.randint(ingredient.min_amount, ingredient.max_amount)
            selections.append(IngredientAmount(ingredient=ingredient, amount=amount))
        return tuple(selections)
