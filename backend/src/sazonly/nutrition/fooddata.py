"""Bundled USDA FoodData Central "Foundation Foods" dataset.

The JSON layout is the one published by FDC::

    {"FoundationFoods": [{"description": "...",
                          "foodNutrients": [{"nutrient": {"id": 1008}, "amount": 52.0}, ...]}]}

Only ``description`` and the nutrient id/amount pairs are used.
"""

from __future__ import annotations

import json
import logging
import re
import threading
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from sazonly.models.nutrition import NutrientRecord
from sazonly.utils.nutrition import round_half_up
from sazonly.utils.validators import safe_float

from .translate import normalize_name

logger = logging.getLogger(__name__)

BULK_CATEGORY = "usda_foundation"

# FDC nutrient ids
ENERGY_KCAL = 1008
PROTEIN = 1003
CARBOHYDRATE = 1005
FAT = 1004
FIBER = 1079
SUGARS_TOTAL = 2000
SUGARS_TOTAL_NLEA = 1063
SODIUM = 1093
VITAMIN_A_RAE = 1106
VITAMIN_C = 1162
CALCIUM = 1087
IRON = 1089

# Reference daily intakes (FDA): vitamin A µg RAE, vitamin C mg, calcium mg, iron mg.
DAILY_VALUES = {
    VITAMIN_A_RAE: 900.0,
    VITAMIN_C: 90.0,
    CALCIUM: 1300.0,
    IRON: 18.0,
}

Food = Dict[str, Any]
FoodSearch = Callable[[Sequence[Food], str], Optional[Food]]


def _description(food: Food) -> str:
    return str(food.get("description") or "").lower().strip()


def _words(text: str) -> List[str]:
    return re.findall(r"[a-z0-9]+", text)


def _search_exact(foods: Sequence[Food], query: str) -> Optional[Food]:
    return next((f for f in foods if _description(f) == query), None)


def _search_partial(foods: Sequence[Food], query: str) -> Optional[Food]:
    return next((f for f in foods if query in _description(f)), None)


def _search_reverse_partial(foods: Sequence[Food], query: str) -> Optional[Food]:
    for food in foods:
        desc = _description(food)
        if len(desc) > 3 and desc in query:
            return food
    return None


def _search_word_overlap(foods: Sequence[Food], query: str) -> Optional[Food]:
    query_words = [w for w in _words(query) if len(w) > 2]
    if not query_words:
        return None
    for food in foods:
        desc_words = _words(_description(food))
        if any(qw in dw or dw in qw for qw in query_words for dw in desc_words if len(dw) > 2):
            return food
    return None


SEARCH_STRATEGIES: List[Tuple[str, FoodSearch]] = [
    ("exact", _search_exact),
    ("partial", _search_partial),
    ("reverse_partial", _search_reverse_partial),
    ("word_overlap", _search_word_overlap),
]


class FoodDataIndex:
    """Lazy, process-lifetime view over the bulk dataset."""

    def __init__(self, path: Optional[Path] = None, foods: Optional[List[Food]] = None):
        self.path = Path(path) if path is not None else None
        self._foods: Optional[List[Food]] = list(foods) if foods is not None else None
        self._lock = threading.Lock()

    def load(self) -> List[Food]:
        if self._foods is not None:
            return self._foods
        with self._lock:
            if self._foods is None:
                self._foods = self._read()
        return self._foods

    def _read(self) -> List[Food]:
        if self.path is None:
            return []
        try:
            with self.path.open(encoding="utf-8") as fh:
                data = json.load(fh)
        except (OSError, ValueError) as exc:
            logger.error("could not load food dataset %s: %s", self.path, exc)
            return []
        foods = data.get("FoundationFoods") if isinstance(data, dict) else None
        if not isinstance(foods, list):
            logger.error("food dataset %s has no FoundationFoods list", self.path)
            return []
        logger.info("loaded %d foods from %s", len(foods), self.path)
        return foods

    def __len__(self) -> int:
        return len(self.load())

    def search(self, english_query: str) -> Optional[Food]:
        """exact -> partial -> reverse partial -> word overlap over descriptions."""
        foods = self.load()
        query = (english_query or "").lower().strip()
        if not foods or not query:
            return None
        for label, strategy in SEARCH_STRATEGIES:
            food = strategy(foods, query)
            if food is not None:
                logger.info("food dataset %s match for %r: %r", label, query, food.get("description"))
                return food
        logger.info("no food dataset match for %r", query)
        return None


def nutrient_amounts(food: Food) -> Dict[int, float]:
    amounts: Dict[int, float] = {}
    for entry in food.get("foodNutrients") or []:
        nutrient = entry.get("nutrient") or {}
        nutrient_id = nutrient.get("id")
        if nutrient_id is None or entry.get("amount") is None:
            continue
        amounts[int(nutrient_id)] = safe_float(entry.get("amount"))
    return amounts


def _dv_percent(amounts: Dict[int, float], nutrient_id: int) -> int:
    return int(round_half_up(amounts.get(nutrient_id, 0.0) / DAILY_VALUES[nutrient_id] * 100))


def record_from_food(
    food: Food,
    name: str,
    spanish_name: Optional[str] = None,
    category: str = BULK_CATEGORY,
) -> NutrientRecord:
    """Per-100 g NutrientRecord from one dataset entry, named ``name``."""
    n = nutrient_amounts(food)

    def g(nutrient_id: int) -> float:
        return max(0.0, n.get(nutrient_id, 0.0))

    sugar = g(SUGARS_TOTAL) or g(SUGARS_TOTAL_NLEA)
    return NutrientRecord.model_validate(
        {
            "ingredient_name": normalize_name(name),
            "spanish_name": spanish_name,
            "serving_size_g": 100.0,
            "calories": int(round_half_up(g(ENERGY_KCAL))),
            "protein_g": round_half_up(g(PROTEIN), 1),
            "carbs_g": round_half_up(g(CARBOHYDRATE), 1),
            "fat_g": round_half_up(g(FAT), 1),
            "fiber_g": round_half_up(g(FIBER), 1),
            "sugar_g": round_half_up(sugar, 1),
            "sodium_mg": int(round_half_up(g(SODIUM))),
            "vitamin_a_dv": max(0, _dv_percent(n, VITAMIN_A_RAE)),
            "vitamin_c_dv": max(0, _dv_percent(n, VITAMIN_C)),
            "calcium_dv": max(0, _dv_percent(n, CALCIUM)),
            "iron_dv": max(0, _dv_percent(n, IRON)),
            "category": category,
        }
    )
