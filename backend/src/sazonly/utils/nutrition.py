from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Any, Dict, Iterable


@dataclass
class NutrientTotals:
    calories: float = 0.0
    protein_g: float = 0.0
    carbs_g: float = 0.0
    fat_g: float = 0.0
    fiber_g: float = 0.0
    sugar_g: float = 0.0
    sodium_mg: float = 0.0
    vitamin_a_dv: float = 0.0
    vitamin_c_dv: float = 0.0
    calcium_dv: float = 0.0
    iron_dv: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {f.name: float(getattr(self, f.name)) for f in fields(self)}


NUTRIENT_NAMES = tuple(f.name for f in fields(NutrientTotals))

# Shown as whole numbers; everything else gets one decimal.
WHOLE_NUMBER_FIELDS = frozenset(
    {"calories", "sodium_mg", "vitamin_a_dv", "vitamin_c_dv", "calcium_dv", "iron_dv"}
)


def totals_for_grams(per_100g: Any, grams: float) -> NutrientTotals:
    """Scale a per-100 g record (any object with the nutrient attributes) to ``grams``.

    - Treat None or NaN as 0.0
    - Negative grams are clamped to 0
    """
    g = max(0.0, float(grams or 0.0))
    factor = g / 100.0

    def f(x) -> float:
        try:
            v = float(x or 0.0)
        except (TypeError, ValueError):
            return 0.0
        return 0.0 if math.isnan(v) else v

    return NutrientTotals(**{name: f(getattr(per_100g, name, 0.0)) * factor for name in NUTRIENT_NAMES})


def sum_totals(items: Iterable[NutrientTotals]) -> NutrientTotals:
    total = NutrientTotals()
    for it in items:
        for name in NUTRIENT_NAMES:
            setattr(total, name, getattr(total, name) + (getattr(it, name, 0.0) or 0.0))
    return total


def round_half_up(x: float, ndigits: int = 0) -> float:
    scale = 10 ** ndigits
    return math.floor(x * scale + 0.5) / scale


def per_serving(total: NutrientTotals, servings: int) -> Dict[str, float]:
    """Divide by ``servings`` and round for display (whole numbers or one decimal)."""
    servings = max(1, int(servings or 1))
    out: Dict[str, float] = {}
    for name in NUTRIENT_NAMES:
        value = getattr(total, name) / servings
        if name in WHOLE_NUMBER_FIELDS:
            out[name] = int(round_half_up(value))
        else:
            out[name] = round_half_up(value, 1)
    return out
