"""CLI helpers for currygen."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from currygen.app_logging import configure_logging
from currygen.core.catalog import Catalog, load_catalog
from currygen.core.generator import CurryGenerator
from currygen.core.layout import derive_seed, layout_icons
from currygen.core.models import Category, CurryResult, IngredientAmount, NutritionInfo
from currygen.core.seeding import resolve_seed

_logger = logging.getLogger(__name__)

CATEGORY_CHOICES = [c.value for c in Category]


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="currygen")
    parser.add_argument("--templates", default=None, help="Directory overriding packaged templates")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    catalog_cmd = subparsers.add_parser("catalog", help="List catalog ingredients as JSONL")
    catalog_cmd.add_argument("--category", choices=CATEGORY_CHOICES)

    generate_cmd = subparsers.add_parser("generate", help="Generate a random curry plate")
    generate_cmd.add_argument(
        "--with", dest="with_names", action="append", default=[], metavar="NAME",
        help="Enable an ingredient by id or (fuzzy) name",
    )
    generate_cmd.add_argument(
        "--category", dest="categories", action="append", default=[], choices=CATEGORY_CHOICES,
        help="Enable every ingredient in a category",
    )
    toggles = generate_cmd.add_mutually_exclusive_group()
    toggles.add_argument("--all", action="store_true", help="Enable the whole catalog")
    toggles.add_argument("--none", action="store_true", help="Start from an empty selection")
    generate_cmd.add_argument("--seed", type=int, default=None)
    generate_cmd.add_argument("--layout", action="store_true", help="Include icon placements")
    generate_cmd.add_argument("--out", default=None)

    layout_cmd = subparsers.add_parser("layout", help="Lay out icons for a generated result")
    layout_cmd.add_argument("file")
    layout_cmd.add_argument("--seed", type=int, default=None)

    args = parser.parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        catalog = load_catalog(args.templates)

        if args.command == "catalog":
            entries = catalog.in_category(args.category) if args.category else list(catalog)
            for entry in entries:
                print(json.dumps(dataclass_to_dict(entry), ensure_ascii=False))
            return 0

        if args.command == "generate":
            enabled = _enabled_ids(catalog, args)
            seed, rng = resolve_seed(args.seed)
            generator = CurryGenerator(
                catalog=catalog, random_source=rng, templates_path=args.templates
            )
            result = generator.generate(enabled)
            record: dict[str, Any] = {"seed": seed, "result": dataclass_to_dict(result)}
            if args.layout:
                layout_seed = derive_seed(result)
                record["layout_seed"] = layout_seed
                record["icons"] = dataclass_to_dict(layout_icons(result, layout_seed))
            _emit(record, args.out)
            return 0

        if args.command == "layout":
            data = json.loads(Path(args.file).read_text(encoding="utf-8"))
            result = parse_curry_result(data.get("result", data), catalog)
            seed = args.seed if args.seed is not None else derive_seed(result)
            icons = layout_icons(result, seed)
            _emit({"layout_seed": seed, "icons": dataclass_to_dict(icons)}, None)
            return 0
    except (ValueError, OSError) as exc:
        parser.error(str(exc))

    return 1


def _enabled_ids(catalog: Catalog, args: argparse.Namespace) -> set[str]:
    if args.all:
        enabled = set(catalog.ids())
    elif args.none:
        enabled = set()
    else:
        enabled = catalog.default_enabled_ids()

    for category in args.categories:
        enabled |= catalog.ids_in_category(category)
    for name in args.with_names:
        ingredient = catalog.find(name)
        if ingredient is None:
            raise ValueError(f"Unknown ingredient: {name}")
        _logger.debug("Resolved '%s' to '%s'", name, ingredient.ingredient_id)
        enabled.add(ingredient.ingredient_id)
    return enabled


def _emit(record: dict[str, Any], out: str | None) -> None:
    text = json.dumps(record, ensure_ascii=False, indent=2)
    if out:
        Path(out).write_text(text + "\n", encoding="utf-8")
    else:
        sys.stdout.write(text + "\n")


def dataclass_to_dict(obj: Any) -> Any:
    if obj is None:
        return None
    if isinstance(obj, Enum):
        return obj.value
    if is_dataclass(obj) and not isinstance(obj, type):
        data = asdict(obj)
        return {key: dataclass_to_dict(value) for key, value in data.items()}
    if isinstance(obj, (list, tuple)):
        return [dataclass_to_dict(value) for value in obj]
    if isinstance(obj, dict):
        return {key: dataclass_to_dict(value) for key, value in obj.items()}
    return obj


def parse_curry_result(data: dict[str, Any], catalog: Catalog) -> CurryResult:
    """
    Rebuild a CurryResult from its JSON form.

    Ingredients are resolved against the catalog by id; the catalog entry,
    not the serialized copy, is what ends up in the result.
    """
    ingredients: list[IngredientAmount] = []
    for entry in data.get("ingredients", []) or []:
        payload = entry.get("ingredient") or {}
        ingredient_id = payload.get("ingredient_id") or entry.get("ingredient_id")
        ingredient = catalog.get(str(ingredient_id))
        if ingredient is None:
            raise ValueError(f"Unknown ingredient in result: {ingredient_id}")
        amount = entry.get("amount")
        if amount is None:
            raise ValueError(f"Missing amount for ingredient: {ingredient_id}")
        ingredients.append(IngredientAmount(ingredient=ingredient, amount=int(amount)))

    nutrition = data.get("nutrition") or {}
    rice_percent = int(data.get("rice_percent", 0))
    return CurryResult(
        rice_percent=rice_percent,
        curry_percent=int(data.get("curry_percent", 100 - rice_percent)),
        ingredients=tuple(ingredients),
        comment=str(data.get("comment", "")),
        nutrition=NutritionInfo(
            kcal=int(nutrition.get("kcal", 0)),
            protein=float(nutrition.get("protein", 0.0)),
            fat=float(nutrition.get("fat", 0.0)),
            carbs=float(nutrition.get("carbs", 0.0)),
            sodium=int(nutrition.get("sodium", 0)),
            fiber=float(nutrition.get("fiber", 0.0)),
        ),
    )


if __name__ == "__main__":
    raise SystemExit(main())
