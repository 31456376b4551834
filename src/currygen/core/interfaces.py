"""Protocol definitions for the random source and generation stages."""

from typing import Iterable, Protocol, Sequence, runtime_checkable

from currygen.core.models import IngredientAmount, NutritionInfo


@runtime_checkable
class RandomSource(Protocol):
    """
    Injectable source of integer draws.

    `random.Random` and `random.SystemRandom` both satisfy this protocol, so
    production code passes one of those and tests pass a fixed sequence.
    """

    def randint(self, a: int, b: int) -> int:
        """
        Return a uniformly distributed integer N with a <= N <= b.

        Args:
            a: Inclusive lower bound
            b: Inclusive upper bound

        Returns:
            The drawn integer
        """
        ...


@runtime_checkable
class RatioGenerator(Protocol):
    """RatioGenerator protocol: pick the rice share of the plate."""

    def generate(self) -> int:
        """
        Draw the rice percentage.

        Returns:
            Integer in [0, 100]; the curry share is 100 minus this value
        """
        ...


@runtime_checkable
class IngredientSelector(Protocol):
    """IngredientSelector protocol: draw an amount for every enabled ingredient."""

    def select(self, enabled_ids: Iterable[str]) -> tuple[IngredientAmount, ...]:
        """
        Draw amounts for the enabled ingredients.

        Args:
            enabled_ids: Ingredient ids toggled on by the caller

        Returns:
            One IngredientAmount per enabled catalog entry, in catalog order
        """
        ...


@runtime_checkable
class CommentSelector(Protocol):
    """CommentSelector protocol: react to the rice/curry ratio."""

    def select(self, rice_percent: int) -> str:
        """
        Pick a canned reaction for the given ratio.

        Args:
            rice_percent: Rice share in [0, 100]

        Returns:
            One comment string from the matching bucket
        """
        ...


@runtime_checkable
class NutritionAggregator(Protocol):
    """NutritionAggregator protocol: sum base and ingredient nutrition."""

    def aggregate(
        self,
        rice_percent: int,
        curry_percent: int,
        ingredients: Sequence[IngredientAmount],
    ) -> NutritionInfo:
        """
        Combine rice, curry roux and ingredient contributions.

        Args:
            rice_percent: Rice share in [0, 100]
            curry_percent: Curry share in [0, 100]
            ingredients: Selected ingredients with their amounts

        Returns:
            Rounded NutritionInfo for the whole plate
        """
        ...
