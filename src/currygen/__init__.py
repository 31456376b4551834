"""currygen: random curry rice generator with nutrition estimates and icon layout."""

__version__ = "0.1.0"

# Core exports
from currygen.core.models import (
    Category,
    Unit,
    Shape,
    CATEGORY_LABELS,
    Ingredient,
    IngredientAmount,
    NutritionInfo,
    CurryResult,
    Canvas,
    IconPlacement,
)
from currygen.core.interfaces import (
    RandomSource,
    RatioGenerator,
    IngredientSelector,
    CommentSelector,
    NutritionAggregator,
)
from currygen.core.catalog import Catalog, CatalogError, load_catalog, load_default_catalog
from currygen.core.templates import TemplateError
from currygen.core.ratio import UniformRatioGenerator
from currygen.core.selection import CatalogIngredientSelector
from currygen.core.comments import ReactionCommentSelector, bucket_index
from currygen.core.nutrition import BaseNutritionAggregator
from currygen.core.layout import (
    IconLayoutEngine,
    SeededRandom,
    derive_seed,
    icon_count,
    in_curry_region,
    layout_icons,
)
from currygen.core.generator import CurryGenerator, generate_curry

__all__ = [
    "Category",
    "Unit",
    "Shape",
    "CATEGORY_LABELS",
    "Ingredient",
    "IngredientAmount",
    "NutritionInfo",
    "CurryResult",
    "Canvas",
    "IconPlacement",
    "RandomSource",
    "RatioGenerator",
    "IngredientSelector",
    "CommentSelector",
    "NutritionAggregator",
    "Catalog",
    "CatalogError",
    "load_catalog",
    "load_default_catalog",
    "TemplateError",
    "UniformRatioGenerator",
    "CatalogIngredientSelector",
    "ReactionCommentSelector",
    "bucket_index",
    "BaseNutritionAggregator",
    "IconLayoutEngine",
    "SeededRandom",
    "derive_seed",
    "icon_count",
    "in_curry_region",
    "layout_icons",
    "CurryGenerator",
    "generate_curry",
]
