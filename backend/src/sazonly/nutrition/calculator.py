"""Per-serving nutrition for a recipe's free-text ingredient list."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from sazonly.models.recipes import Recipe, RecipeNutrition
from sazonly.utils.nutrition import NutrientTotals, per_serving, sum_totals, totals_for_grams

from .amounts import ParsedAmount, parse_amount
from .cache import NutrientCache
from .conversions import convert_to_grams
from .fooddata import FoodDataIndex
from .matching import NutrientMatcher
from .store import NutritionStore

logger = logging.getLogger(__name__)


class NutritionError(Exception):
    pass


class InvalidRecipeError(NutritionError):
    """The recipe itself is malformed (None, no ingredient list, bad fields)."""


def coerce_recipe(recipe: Union[Recipe, Mapping[str, Any], None]) -> Recipe:
    if recipe is None:
        raise InvalidRecipeError("recipe is required")
    if isinstance(recipe, Recipe):
        return recipe
    if isinstance(recipe, Mapping):
        try:
            return Recipe.model_validate(recipe)
        except ValidationError as exc:
            raise InvalidRecipeError(str(exc)) from exc
    raise InvalidRecipeError(f"unsupported recipe type: {type(recipe).__name__}")


class NutritionCalculator:
    def __init__(
        self,
        store: Optional[NutritionStore],
        fooddata: Optional[FoodDataIndex] = None,
        cache: Optional[NutrientCache] = None,
    ):
        self.store = store
        self.fooddata = fooddata
        if cache is None:
            cache = NutrientCache(store.get_all_records if store is not None else list)
        self.cache = cache
        self.matcher = NutrientMatcher(store, fooddata)

    def invalidate_cache(self) -> None:
        self.cache.invalidate()

    def resolve_grams(self, parsed: ParsedAmount, ingredient_name: str) -> Optional[float]:
        if parsed.is_unknown:
            return None
        if parsed.grams is not None:
            return parsed.grams
        lookup = self.store.get_unit_conversion if self.store is not None else None
        return convert_to_grams(parsed.quantity, parsed.unit, ingredient_name, lookup=lookup)

    async def calculate(self, recipe: Union[Recipe, Mapping[str, Any], None]) -> RecipeNutrition:
        recipe = coerce_recipe(recipe)
        self.cache.load()

        scaled: List[NutrientTotals] = []
        missing: List[str] = []

        for ingredient in recipe.ingredients:
            parsed = parse_amount(ingredient.amount)
            if parsed.is_variable:
                logger.debug("skipping %r (%r)", ingredient.item, ingredient.amount)
                continue

            grams = self.resolve_grams(parsed, ingredient.item)
            if not grams:
                logger.warning("could not resolve grams for %r (%r)", ingredient.item, ingredient.amount)
                missing.append(ingredient.item)
                continue

            record = await self.matcher.find_best_match(ingredient.item, self.cache)
            if record is None:
                missing.append(ingredient.item)
                continue

            part = totals_for_grams(record, grams)
            scaled.append(part)
            logger.debug("%s: %.1fg -> %.0f kcal", ingredient.item, grams, part.calories)

        servings = recipe.servings or 1
        result = RecipeNutrition(
            **_rename_calories(per_serving(sum_totals(scaled), servings)),
            servings=servings,
            missing_ingredients=missing or None,
        )
        logger.info(
            "nutrition for %r: %s kcal/serving (%d servings, %d missing)",
            recipe.title,
            result.calories_per_serving,
            servings,
            len(missing),
        )
        return result


def _rename_calories(values: dict) -> dict:
    out = dict(values)
    out["calories_per_serving"] = out.pop("calories")
    return out


@lru_cache
def get_calculator() -> NutritionCalculator:
    """Process-wide calculator bound to the configured database and dataset."""
    from sazonly.core.config import get_settings
    from sazonly.core.database import engine

    settings = get_settings()
    return NutritionCalculator(NutritionStore(engine), FoodDataIndex(settings.fooddata_path))


async def calculate_recipe_nutrition(
    recipe: Union[Recipe, Mapping[str, Any], None],
    calculator: Optional[NutritionCalculator] = None,
) -> RecipeNutrition:
    return await (calculator or get_calculator()).calculate(recipe)


def invalidate_nutrient_cache(calculator: Optional[NutritionCalculator] = None) -> None:
    (calculator or get_calculator()).invalidate_cache()
