from typing import List, Optional

from pydantic import BaseModel, Field, computed_field


class RecipeIngredient(BaseModel):
    item: str = Field(..., min_length=1, description="Ingredient name, e.g. 'harina'")
    amount: str = Field("", description="Free-text amount, e.g. '2 tazas' or 'al gusto'")
    notes: Optional[str] = None


class Recipe(BaseModel):
    id: Optional[int] = None
    title: str = ""
    servings: Optional[int] = Field(default=1, ge=0)
    ingredients: List[RecipeIngredient]


class RecipeNutrition(BaseModel):
    calories_per_serving: int
    protein_g: float
    carbs_g: float
    fat_g: float
    fiber_g: float
    sugar_g: float
    sodium_mg: int
    vitamin_a_dv: int
    vitamin_c_dv: int
    calcium_dv: int
    iron_dv: int
    servings: int
    missing_ingredients: Optional[List[str]] = None

    @computed_field  # type: ignore[misc]
    @property
    def is_approximate(self) -> bool:
        return bool(self.missing_ingredients)
