"""Nutrition estimation engine.

Public entry points: ``parse_amount``, ``convert_to_grams``,
``translate_to_english``, ``find_best_match``, ``calculate_recipe_nutrition``
and ``invalidate_nutrient_cache``.
"""

from .amounts import ParsedAmount, parse_amount, scale_amount, scale_recipe
from .cache import NutrientCache
from .calculator import (
    InvalidRecipeError,
    NutritionCalculator,
    NutritionError,
    calculate_recipe_nutrition,
    get_calculator,
    invalidate_nutrient_cache,
)
from .conversions import convert_to_grams, infer_category
from .fooddata import FoodDataIndex
from .matching import NutrientMatcher, find_best_match
from .store import NutritionStore
from .translate import translate_to_english

__all__ = [
    "FoodDataIndex",
    "InvalidRecipeError",
    "NutrientCache",
    "NutrientMatcher",
    "NutritionCalculator",
    "NutritionError",
    "NutritionStore",
    "ParsedAmount",
    "calculate_recipe_nutrition",
    "convert_to_grams",
    "find_best_match",
    "get_calculator",
    "infer_category",
    "invalidate_nutrient_cache",
    "parse_amount",
    "scale_amount",
    "scale_recipe",
    "translate_to_english",
]
