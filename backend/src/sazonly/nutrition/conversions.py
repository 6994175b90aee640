"""Conversion of (quantity, unit, ingredient) to grams.

Lookup order: literal g/kg, the unit-conversion table, the fallback map built
from the same seed rows as the table, then bare unit defaults.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Dict, List, Optional, Pattern, Protocol, Tuple

from sazonly.seeds import UNIT_CONVERSIONS

from .amounts import MEASURE_UNITS, UNKNOWN_UNIT, VARIABLE_UNIT, normalize_unit
from .translate import normalize_name

logger = logging.getLogger(__name__)


class GramsPerUnit(Protocol):
    grams_per_unit: float


ConversionLookup = Callable[[str, Optional[str]], Optional[GramsPerUnit]]

DEFAULT_CATEGORY = "liquid"
COUNT_UNIT = "unidad"

# Evaluated top to bottom, first match wins: specific patterns before generic ones.
CATEGORY_RULES: List[Tuple[Pattern[str], str]] = [
    (re.compile(r"harina|pan\s*rallado|maicena|fecula"), "flour"),
    (re.compile(r"azucar|\bmiel\b"), "sugar"),
    (re.compile(r"arroz|quinoa|quinua"), "grain"),
    (re.compile(r"aceite|manteca|mantequilla|grasa"), "fat"),
    (re.compile(r"huevo"), "egg"),
    (re.compile(r"\bajos?\b"), "garlic"),
    (re.compile(r"\bpaltas?\b|aguacate"), "avocado"),
    (re.compile(r"\blimon(es)?\b"), "lemon"),
    (re.compile(r"\blimas?\b"), "lime"),
    (re.compile(r"cebolla"), "onion"),
    (re.compile(r"tomate"), "tomato"),
    (re.compile(r"\bpapas?\b|patata"), "potato"),
    (re.compile(r"manzana"), "apple"),
    (re.compile(r"banana|platano"), "banana"),
    (re.compile(r"naranja"), "orange"),
    (re.compile(r"zanahoria"), "carrot"),
    (re.compile(r"morron(es)?|pimiento"), "bell_pepper"),
]


def _build_fallback(rows) -> Dict[str, Dict[str, float]]:
    table: Dict[str, Dict[str, float]] = {}
    for unit_name, category, grams_per_unit, _notes in rows:
        table.setdefault(category or "any", {})[unit_name] = float(grams_per_unit)
    return table


FALLBACK_CONVERSIONS: Dict[str, Dict[str, float]] = _build_fallback(UNIT_CONVERSIONS)
VOLUME_DEFAULTS: Dict[str, float] = dict(FALLBACK_CONVERSIONS[DEFAULT_CATEGORY])


def infer_category(ingredient_name: str) -> str:
    name = normalize_name(ingredient_name)
    for pattern, category in CATEGORY_RULES:
        if pattern.search(name):
            return category
    return DEFAULT_CATEGORY


def table_unit(unit: str) -> str:
    """Unit as stored in the conversion table; count nouns ("huevo") become "unidad"."""
    normalized = normalize_unit(unit)
    if normalized in MEASURE_UNITS:
        return normalized
    return COUNT_UNIT


def convert_to_grams(
    quantity: float,
    unit: str,
    ingredient_name: str,
    category: Optional[str] = None,
    lookup: Optional[ConversionLookup] = None,
) -> Optional[float]:
    normalized = normalize_unit(unit)
    if normalized == "g":
        return quantity
    if normalized == "kg":
        return quantity * 1000
    if normalized in (UNKNOWN_UNIT, VARIABLE_UNIT, ""):
        logger.warning("no unit to convert for %r (%r)", ingredient_name, unit)
        return None

    inferred = infer_category(ingredient_name)
    resolved_category = category or inferred
    unit_name = table_unit(normalized)

    if lookup is not None:
        conversion = lookup(unit_name, resolved_category)
        if conversion is not None:
            return quantity * conversion.grams_per_unit

    factor = FALLBACK_CONVERSIONS.get(resolved_category, {}).get(unit_name)
    if factor is not None:
        return quantity * factor

    if unit_name in VOLUME_DEFAULTS:
        return quantity * VOLUME_DEFAULTS[unit_name]
    if unit_name == COUNT_UNIT:
        per_unit = FALLBACK_CONVERSIONS.get(inferred, {}).get(COUNT_UNIT)
        if per_unit is not None:
            return quantity * per_unit

    logger.warning("could not convert %s %s of %r to grams", quantity, unit, ingredient_name)
    return None
