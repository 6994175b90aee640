from datetime import datetime
from typing import Optional

from sqlalchemy import UniqueConstraint
from sqlmodel import Field, SQLModel


class NutrientValues(SQLModel):
    """Nutrient amounts per 100 g; vitamins and minerals as % daily value."""

    calories: float = Field(default=0.0, ge=0)
    protein_g: float = Field(default=0.0, ge=0)
    carbs_g: float = Field(default=0.0, ge=0)
    fat_g: float = Field(default=0.0, ge=0)
    fiber_g: float = Field(default=0.0, ge=0)
    sugar_g: float = Field(default=0.0, ge=0)
    sodium_mg: float = Field(default=0.0, ge=0)
    vitamin_a_dv: float = Field(default=0.0, ge=0)
    vitamin_c_dv: float = Field(default=0.0, ge=0)
    calcium_dv: float = Field(default=0.0, ge=0)
    iron_dv: float = Field(default=0.0, ge=0)


class NutrientRecord(NutrientValues, table=True):
    __tablename__ = "nutrient_record"

    id: Optional[int] = Field(default=None, primary_key=True)
    ingredient_name: str = Field(index=True, unique=True)
    spanish_name: Optional[str] = Field(default=None, index=True)
    serving_size_g: float = 100.0
    category: Optional[str] = Field(default=None, index=True)
    created_at: datetime = Field(default_factory=datetime.utcnow)


class UnitConversion(SQLModel, table=True):
    __tablename__ = "unit_conversion"
    __table_args__ = (UniqueConstraint("unit_name", "ingredient_category"),)

    id: Optional[int] = Field(default=None, primary_key=True)
    unit_name: str = Field(index=True)
    ingredient_category: Optional[str] = Field(default=None, index=True)  # None | "any" = universal
    grams_per_unit: float = Field(gt=0)
    notes: Optional[str] = None
