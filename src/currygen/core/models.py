"""Core immutable data models for curry generation and icon layout."""

from dataclasses import dataclass, field
from enum import Enum


class Category(str, Enum):
    """Ingredient category used to group the catalog."""

    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    TOPPING = "topping"
    EXTRA = "extra"


class Unit(str, Enum):
    """How an ingredient amount is measured."""

    COUNT = "count"
    GRAMS = "g"


class Shape(str, Enum):
    """Icon shape drawn for an ingredient."""

    CIRCLE = "circle"
    RECT = "rect"
    OVAL = "oval"
    TRIANGLE = "triangle"
    STAR = "star"


CATEGORY_LABELS: dict[Category, str] = {
    Category.PROTEIN: "Meat & Seafood",
    Category.VEGETABLE: "Vegetables",
    Category.TOPPING: "Toppings",
    Category.EXTRA: "Secret Ingredients",
}
"""Display labels for a presentation layer; generation never reads these."""


@dataclass(frozen=True)
class Ingredient:
    """
    Immutable catalog entry.

    Nutrient fields are per 100 g of the ingredient. Count-based ingredients
    are converted to grams through the unit weight table before aggregation.
    """

    ingredient_id: str
    category: Category
    name: str
    unit: Unit
    max_amount: int
    """Upper bound (inclusive) for a random draw. Always > 0."""

    kcal: float = 0.0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    sodium: float = 0.0
    """Milligrams per 100 g."""

    fiber: float = 0.0
    color: str = "#999999"
    shape: Shape = Shape.CIRCLE
    default_enabled: bool = False
    aliases: tuple[str, ...] = ()
    """Alternative names used for fuzzy lookup."""

    @property
    def min_amount(self) -> int:
        """Lower bound (inclusive) for a random draw."""
        return 10 if self.unit == Unit.GRAMS else 1


@dataclass(frozen=True)
class IngredientAmount:
    """An enabled ingredient together with its randomly drawn amount."""

    ingredient: Ingredient
    amount: int


@dataclass(frozen=True)
class NutritionInfo:
    """Aggregated nutrition estimate for one plate."""

    kcal: int = 0
    protein: float = 0.0
    fat: float = 0.0
    carbs: float = 0.0
    sodium: int = 0
    fiber: float = 0.0


@dataclass(frozen=True)
class CurryResult:
    """
    Result of a single generation call.

    Never mutated after creation. `ingredients` follows catalog order.
    """

    rice_percent: int
    curry_percent: int
    ingredients: tuple[IngredientAmount, ...] = ()
    comment: str = ""
    nutrition: NutritionInfo = field(default_factory=NutritionInfo)

    def __post_init__(self) -> None:
        if not 0 <= self.rice_percent <= 100 or not 0 <= self.curry_percent <= 100:
            raise ValueError(
                f"Percentages must lie in [0, 100]: rice={self.rice_percent}, "
                f"curry={self.curry_percent}"
            )
        if self.rice_percent + self.curry_percent != 100:
            raise ValueError(
                f"rice_percent + curry_percent must equal 100, got "
                f"{self.rice_percent} + {self.curry_percent}"
            )

    @property
    def curry_fraction(self) -> float:
        """Share of the plate covered by curry, in [0, 1]."""
        return self.curry_percent / 100


@dataclass(frozen=True)
class Canvas:
    """Circular plate the icons are placed on."""

    cx: float = 200.0
    cy: float = 200.0
    radius: float = 145.0


@dataclass(frozen=True)
class IconPlacement:
    """A single ingredient icon to draw on the plate."""

    x: float
    y: float
    size: float
    color: str
    shape: Shape
    label: str
