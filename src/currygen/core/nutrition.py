"""Nutrition aggregation for rice, curry roux and selected ingredients."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import Any, Sequence

from currygen.core.catalog import NUTRIENT_FIELDS
from currygen.core.models import IngredientAmount, NutritionInfo, Unit
from currygen.core.templates import TemplateError, as_path, load_yaml


@dataclass(frozen=True)
class BaseComponent:
    """Rice or curry roux: a reference mass at 100 % and a per-100g profile."""

    name: str
    reference_grams: float
    nutrients_per_100g: dict[str, float]

    def contribution(self, percent: float) -> dict[str, float]:
        grams = (percent / 100) * self.reference_grams
        factor = grams / 100
        return {key: self.nutrients_per_100g.get(key, 0.0) * factor for key in NUTRIENT_FIELDS}


def round_half_up(value: float, digits: int = 0) -> float:
    """Round with ties away from zero for the non-negative values used here."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def _parse_component(name: str, payload: Any) -> BaseComponent:
    if not isinstance(payload, dict):
        raise TemplateError(f"base_components.yaml: '{name}' must be a mapping")
    profile = payload.get("per_100g") or {}
    try:
        return BaseComponent(
            name=name,
            reference_grams=float(payload["reference_grams"]),
            nutrients_per_100g={key: float(profile.get(key, 0.0)) for key in NUTRIENT_FIELDS},
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise TemplateError(f"base_components.yaml: invalid '{name}': {exc}") from exc


class BaseNutritionAggregator:
    """
    Sum rice, curry roux and ingredient nutrition into one NutritionInfo.

    Rice and roux scale their reference mass by their percentage. Ingredients
    convert `amount` to grams through the unit weight table. kcal and sodium
    are rounded to integers, the other fields to one decimal.
    """

    def __init__(
        self,
        templates_path: str | Path | None = None,
        rice: BaseComponent | None = None,
        curry: BaseComponent | None = None,
        unit_grams: dict[Unit, float] | None = None,
    ) -> None:
        data: dict[str, Any] = {}
        if rice is None or curry is None or unit_grams is None:
            data = load_yaml(as_path(templates_path), "base_components.yaml")
        self.rice = rice or _parse_component("rice", data.get("rice"))
        self.curry = curry or _parse_component("curry", data.get("curry"))
        self.unit_grams = unit_grams or self._parse_unit_grams(data.get("unit_grams"))

    @staticmethod
    def _parse_unit_grams(payload: Any) -> dict[Unit, float]:
        if not isinstance(payload, dict):
            raise TemplateError("base_components.yaml: 'unit_grams' must be a mapping")
        try:
            table = {Unit(key): float(value) for key, value in payload.items()}
        except (TypeError, ValueError) as exc:
            raise TemplateError(f"base_components.yaml: invalid unit_grams: {exc}") from exc
        missing = [unit.value for unit in Unit if unit not in table]
        if missing:
            raise TemplateError(f"base_components.yaml: unit_grams missing {missing}")
        return table

    def aggregate(
        self,
        rice_percent: int,
        curry_percent: int,
        ingredients: Sequence[IngredientAmount],
    ) -> NutritionInfo:
        totals = {key: 0.0 for key in NUTRIENT_FIELDS}
        for source in (
            self.rice.contribution(rice_percent),
            self.curry.contribution(curry_percent),
        ):
            for key, value in source.items():
                totals[key] += value

        for selection in ingredients:
            ingredient = selection.ingredient
            grams = selection.amount * self.unit_grams[ingredient.unit]
            factor = grams / 100
            for key in NUTRIENT_FIELDS:
                totals[key] += getattr(ingredient, key) * factor

        return NutritionInfo(
            kcal=int(round_half_up(totals["kcal"])),
            protein=round_half_up(totals["protein"], 1),
            fat=round_half_up(totals["fat"], 1),
            carbs=round_half_up(totals["carbs"], 1),
            sodium=int(round_half_up(totals["sodium"])),
            fiber=round_half_up(totals["fiber"], 1),
        )
