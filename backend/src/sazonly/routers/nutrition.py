from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from pydantic import BaseModel

from sazonly.models.recipes import Recipe, RecipeNutrition
from sazonly.nutrition.amounts import parse_amount, scale_recipe
from sazonly.nutrition.calculator import InvalidRecipeError, NutritionCalculator, get_calculator
from sazonly.nutrition.conversions import convert_to_grams, infer_category
from sazonly.nutrition.translate import translate_to_english

router = APIRouter(prefix="/nutrition", tags=["nutrition"])


class ParsedAmountOut(BaseModel):
    amount: str
    quantity: float
    unit: str
    grams: Optional[float] = None


class ConversionOut(BaseModel):
    quantity: float
    unit: str
    ingredient: str
    category: str
    grams: float


class TranslationOut(BaseModel):
    name: str
    english: str


class NutrientRecordOut(BaseModel):
    ingredient_name: str
    spanish_name: Optional[str] = None
    category: Optional[str] = None
    serving_size_g: float
    calories: float
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    sugar_g: float
    sodium_mg: float
    vitamin_a_dv: float
    vitamin_c_dv: float
    calcium_dv: float
    iron_dv: float


@router.post("/recipe", response_model=RecipeNutrition, summary="Nutrition per serving for a recipe")
async def recipe_nutrition(
    recipe: Recipe,
    servings: Optional[int] = Query(default=None, ge=1, le=100, description="Rescale amounts to this many servings first"),
    calculator: NutritionCalculator = Depends(get_calculator),
):
    if servings is not None and servings != recipe.servings:
        recipe = scale_recipe(recipe, servings)
    try:
        return await calculator.calculate(recipe)
    except InvalidRecipeError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/parse", response_model=ParsedAmountOut, summary="Parse a free-text amount")
def parse(amount: str = Query(..., min_length=1)):
    parsed = parse_amount(amount)
    return ParsedAmountOut(amount=amount, quantity=parsed.quantity, unit=parsed.unit, grams=parsed.grams)


@router.get("/convert", response_model=ConversionOut, summary="Convert an amount to grams")
def convert(
    quantity: float = Query(..., gt=0),
    unit: str = Query(..., min_length=1),
    ingredient: str = Query(..., min_length=1),
    category: Optional[str] = None,
    calculator: NutritionCalculator = Depends(get_calculator),
):
    lookup = calculator.store.get_unit_conversion if calculator.store is not None else None
    grams = convert_to_grams(quantity, unit, ingredient, category=category, lookup=lookup)
    if grams is None:
        raise HTTPException(404, f"No conversion for {quantity} {unit} of {ingredient!r}")
    return ConversionOut(
        quantity=quantity,
        unit=unit,
        ingredient=ingredient,
        category=category or infer_category(ingredient),
        grams=grams,
    )


@router.get("/translate", response_model=TranslationOut, summary="Spanish ingredient name to English")
def translate(name: str = Query(..., min_length=1)):
    return TranslationOut(name=name, english=translate_to_english(name))


@router.get("/match", response_model=NutrientRecordOut, summary="Nutrient record for an ingredient")
async def match(
    name: str = Query(..., min_length=1),
    calculator: NutritionCalculator = Depends(get_calculator),
):
    record = await calculator.matcher.find_best_match(name, calculator.cache)
    if record is None:
        raise HTTPException(404, f"No nutrient data for {name!r}")
    return NutrientRecordOut.model_validate(record, from_attributes=True)


@router.post("/cache/invalidate", status_code=204, summary="Reload nutrient records on next use")
def invalidate_cache(calculator: NutritionCalculator = Depends(get_calculator)):
    calculator.invalidate_cache()
    return Response(status_code=204)
