"""Static ingredient catalog: loading, validation and lookup."""

from __future__ import annotations

import logging
import math
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Iterator

from rapidfuzz import fuzz, utils

from currygen.core.models import Category, Ingredient, Shape, Unit
from currygen.core.templates import TemplateError, as_path, load_yaml

_logger = logging.getLogger(__name__)

NUTRIENT_FIELDS = ("kcal", "protein", "fat", "carbs", "sodium", "fiber")

GRAM_MIN_AMOUNT = 10


class CatalogError(TemplateError):
    """Raised when a catalog entry violates the catalog invariants."""


class Catalog:
    """
    Read-only, ordered collection of ingredients.

    Order is the order of the catalog file and is the order every generated
    result follows.
    """

    def __init__(self, entries: Iterable[Ingredient], match_threshold: int = 85) -> None:
        self._entries = tuple(entries)
        self._by_id: dict[str, Ingredient] = {}
        for entry in self._entries:
            if entry.ingredient_id in self._by_id:
                raise CatalogError(f"Duplicate ingredient id: '{entry.ingredient_id}'")
            _validate_entry(entry)
            self._by_id[entry.ingredient_id] = entry
        self.match_threshold = match_threshold

    @property
    def entries(self) -> tuple[Ingredient, ...]:
        return self._entries

    def __iter__(self) -> Iterator[Ingredient]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, ingredient_id: object) -> bool:
        return ingredient_id in self._by_id

    def get(self, ingredient_id: str) -> Ingredient | None:
        return self._by_id.get(ingredient_id)

    def ids(self) -> list[str]:
        return [entry.ingredient_id for entry in self._entries]

    def in_category(self, category: Category | str) -> list[Ingredient]:
        category = Category(category)
        return [entry for entry in self._entries if entry.category == category]

    def ids_in_category(self, category: Category | str) -> set[str]:
        """Ids to toggle on or off together when a whole category is selected."""
        return {entry.ingredient_id for entry in self.in_category(category)}

    def default_enabled_ids(self) -> set[str]:
        return {entry.ingredient_id for entry in self._entries if entry.default_enabled}

    def find(self, name: str) -> Ingredient | None:
        """
        Resolve a user-typed name to an ingredient.

        Exact ids win; otherwise names and aliases are fuzzy matched and the
        best score at or above `match_threshold` is returned.

        Args:
            name: Ingredient id, name or alias (typos tolerated)

        Returns:
            The matching ingredient, or None if nothing scores high enough
        """
        if not name:
            return None
        exact = self._by_id.get(name.strip().lower())
        if exact:
            return exact

        best: tuple[Ingredient, float] | None = None
        for entry in self._entries:
            for candidate in (entry.name, *entry.aliases):
                score = fuzz.WRatio(name, candidate, processor=utils.default_process)
                if best is None or score > best[1]:
                    best = (entry, score)
        if best and best[1] >= self.match_threshold:
            return best[0]
        return None


def _validate_entry(entry: Ingredient) -> None:
    if entry.max_amount <= 0:
        raise CatalogError(
            f"Ingredient '{entry.ingredient_id}' must have a positive max_amount, "
            f"got {entry.max_amount}"
        )
    if entry.unit == Unit.GRAMS and entry.max_amount < GRAM_MIN_AMOUNT:
        raise CatalogError(
            f"Ingredient '{entry.ingredient_id}' is measured in grams and needs "
            f"max_amount >= {GRAM_MIN_AMOUNT}, got {entry.max_amount}"
        )
    for nutrient in NUTRIENT_FIELDS:
        if getattr(entry, nutrient) < 0:
            raise CatalogError(
                f"Ingredient '{entry.ingredient_id}' has negative {nutrient}"
            )


def _parse_entry(payload: dict[str, Any]) -> Ingredient:
    ingredient_id = payload.get("id")
    if not ingredient_id:
        raise CatalogError(f"Catalog entry without id: {payload}")
    try:
        category = Category(payload.get("category"))
        unit = Unit(payload.get("unit"))
        shape = Shape(payload.get("shape", Shape.CIRCLE.value))
    except ValueError as exc:
        raise CatalogError(f"Ingredient '{ingredient_id}': {exc}") from exc

    nutrients = payload.get("per_100g") or {}
    if not isinstance(nutrients, dict):
        raise CatalogError(f"Ingredient '{ingredient_id}': per_100g must be a mapping")

    raw_max = payload.get("max_amount", 0)
    if isinstance(raw_max, bool) or not isinstance(raw_max, (int, float)):
        raise CatalogError(f"Ingredient '{ingredient_id}': max_amount must be a number")
    if not math.isfinite(raw_max) or raw_max != int(raw_max):
        raise CatalogError(
            f"Ingredient '{ingredient_id}': max_amount must be a whole number, got {raw_max}"
        )
    max_amount = int(raw_max)

    try:
        values = {key: float(nutrients.get(key, 0.0)) for key in NUTRIENT_FIELDS}
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Ingredient '{ingredient_id}': {exc}") from exc

    return Ingredient(
        ingredient_id=str(ingredient_id),
        category=category,
        name=str(payload.get("name", ingredient_id)),
        unit=unit,
        max_amount=max_amount,
        color=str(payload.get("color", "#999999")),
        shape=shape,
        default_enabled=bool(payload.get("default_enabled", False)),
        aliases=tuple(str(a) for a in payload.get("aliases", []) or [] if a),
        **values,
    )


def load_catalog(templates_path: str | Path | None = None) -> Catalog:
    """
    Load and validate `catalog.yaml`.

    Args:
        templates_path: Directory overriding the packaged templates

    Returns:
        A validated Catalog

    Raises:
        CatalogError: If any entry is malformed or violates an invariant
    """
    data = load_yaml(as_path(templates_path), "catalog.yaml")
    entries = data.get("ingredients", []) or []
    if not isinstance(entries, list):
        raise CatalogError("catalog.yaml: 'ingredients' must be a list")
    for position, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise CatalogError(f"catalog.yaml: entry {position} must be a mapping")
    catalog = Catalog(_parse_entry(entry) for entry in entries)
    _logger.debug("Loaded catalog with %d ingredients", len(catalog))
    return catalog


@lru_cache(maxsize=1)
def load_default_catalog() -> Catalog:
    """Packaged catalog, loaded once per process."""
    return load_catalog()
