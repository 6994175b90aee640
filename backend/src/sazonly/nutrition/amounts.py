"""Parsing of free-text ingredient amounts ("2 tazas", "al gusto", "(150g)")."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from fractions import Fraction
from typing import Optional

from sazonly.models.recipes import Recipe

from .translate import strip_accents

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParsedAmount:
    quantity: float
    unit: str
    grams: Optional[float] = None

    @property
    def is_variable(self) -> bool:
        """True for "al gusto"-style amounts that are skipped, not missing."""
        return self.unit == VARIABLE_UNIT

    @property
    def is_unknown(self) -> bool:
        return self.unit == UNKNOWN_UNIT


VARIABLE_UNIT = "variable"
UNKNOWN_UNIT = "unknown"

NON_QUANTIFIABLE = re.compile(r"\bal?\s*gusto\b|\bopcional\b|\balgun[ao]s?\b|\bun\s*poco\b|\bc/n\b")

# "1 1/2", "1/2", "2", "2.5"
_NUMBER = r"\d+\s+\d+/\d+|\d+/\d+|\d+(?:\.\d+)?"

_PAREN_GRAMS = re.compile(rf"\(\s*({_NUMBER})\s*(?:g|gr|grs|gramos?)\s*\)")
_RANGE = re.compile(rf"(?<![\d.])({_NUMBER})\s*(?:-|\ba\b)\s*({_NUMBER})\s*(?:de\s+)?([a-z]+)?")
_NUMBER_UNIT = re.compile(rf"(?<![\d./])({_NUMBER})\s*(?:de\s+)?([a-z]+)")
_BARE_NUMBER = re.compile(rf"^({_NUMBER})$")
# serving scaler: numbers in the original text, case kept
_PAREN_GRAMS_TEXT = re.compile(rf"(\(\s*)({_NUMBER})(\s*(?:g|gr|grs|gramos?)\s*\))", re.IGNORECASE)
_LEADING_RANGE = re.compile(rf"^({_NUMBER})(\s*(?:-|\ba\b)\s*)({_NUMBER})", re.IGNORECASE)
_LEADING_NUMBER = re.compile(rf"^({_NUMBER})")

MEASURE_UNITS = frozenset(
    {"g", "kg", "ml", "l", "taza", "cucharada", "cucharadita", "unidad", "diente"}
)

UNIT_ALIASES = {
    "gr": "g",
    "grs": "g",
    "gramo": "g",
    "gramos": "g",
    "kgs": "kg",
    "kilo": "kg",
    "kilos": "kg",
    "kilogramo": "kg",
    "kilogramos": "kg",
    "cc": "ml",
    "mililitro": "ml",
    "mililitros": "ml",
    "lt": "l",
    "lts": "l",
    "litro": "l",
    "litros": "l",
    "tazas": "taza",
    "cda": "cucharada",
    "cdas": "cucharada",
    "cucharadas": "cucharada",
    "cdta": "cucharadita",
    "cdtas": "cucharadita",
    "cucharaditas": "cucharadita",
    "u": "unidad",
    "un": "unidad",
    "unidades": "unidad",
    "dientes": "diente",
}


def singularize(word: str) -> str:
    """Spanish plural -> singular for unit and count words ("limones" -> "limon")."""
    if word in UNIT_ALIASES:
        return UNIT_ALIASES[word]
    if len(word) > 4 and word.endswith("es") and word[-3] in "lnrdj":
        return word[:-2]
    if len(word) > 3 and word.endswith("s"):
        return word[:-1]
    return word


def normalize_unit(unit: str) -> str:
    return singularize(strip_accents((unit or "").lower().strip()))


def _to_number(text: str) -> float:
    parts = text.split()
    return float(sum(Fraction(p) for p in parts))


def _normalize_text(text: str) -> str:
    t = strip_accents((text or "").lower().strip())
    # decimal comma -> decimal point
    return re.sub(r"(\d),(\d)", r"\1.\2", t)


def _parse(normalized: str) -> Optional[ParsedAmount]:
    if NON_QUANTIFIABLE.search(normalized):
        return ParsedAmount(0.0, VARIABLE_UNIT, 0.0)

    m = _PAREN_GRAMS.search(normalized)
    if m:
        grams = _to_number(m.group(1))
        return ParsedAmount(grams, "g", grams)

    m = _RANGE.search(normalized)
    if m:
        low, high = _to_number(m.group(1)), _to_number(m.group(2))
        unit = normalize_unit(m.group(3)) if m.group(3) else "g"
        return ParsedAmount((low + high) / 2, unit, None)

    m = _NUMBER_UNIT.search(normalized)
    if m:
        quantity = _to_number(m.group(1))
        unit = normalize_unit(m.group(2))
        if unit == "g":
            return ParsedAmount(quantity, unit, quantity)
        if unit == "kg":
            return ParsedAmount(quantity, unit, quantity * 1000)
        return ParsedAmount(quantity, unit, None)

    m = _BARE_NUMBER.match(normalized)
    if m:
        quantity = _to_number(m.group(1))
        return ParsedAmount(quantity, "g", quantity)

    return None


def parse_amount(text: str) -> ParsedAmount:
    """Turn a free-text amount into quantity, unit and (when known) grams."""
    try:
        parsed = _parse(_normalize_text(text))
    except (ZeroDivisionError, ValueError):
        # "1/0 taza"
        parsed = None
    if parsed is None:
        logger.warning("could not parse amount %r", text)
        return ParsedAmount(0.0, UNKNOWN_UNIT, 0.0)
    return parsed


def _format_quantity(value: float) -> str:
    if value < 1:
        shown = f"{value:.2f}"
    elif value < 10:
        shown = f"{value:.1f}"
    else:
        shown = str(int(value + 0.5))
    if "." in shown:
        shown = shown.rstrip("0").rstrip(".")
    return shown


def scale_amount(text: str, multiplier: float) -> str:
    """Rescale the numbers of an amount string.

    The leading quantity, both ends of a leading range and a parenthesized
    gram weight are scaled: "2-3 tazas (300g)" x2 -> "4-6 tazas (600g)".
    Text without a number to scale comes back unchanged.
    """
    if multiplier == 1:
        return text
    normalized = re.sub(r"(\d),(\d)", r"\1.\2", (text or "").strip())
    if NON_QUANTIFIABLE.search(strip_accents(normalized.lower())):
        return text

    def scaled(number: str) -> str:
        return _format_quantity(_to_number(number) * multiplier)

    try:
        out = _PAREN_GRAMS_TEXT.sub(lambda m: m.group(1) + scaled(m.group(2)) + m.group(3), normalized)
        m = _LEADING_RANGE.match(out)
        if m:
            out = scaled(m.group(1)) + m.group(2) + scaled(m.group(3)) + out[m.end():]
        else:
            m = _LEADING_NUMBER.match(out)
            if m:
                out = scaled(m.group(1)) + out[m.end():]
    except ZeroDivisionError:
        return text
    return out if out != normalized else text


def scale_recipe(recipe: Recipe, servings: int) -> Recipe:
    """Copy of ``recipe`` with every amount rescaled to ``servings`` portions."""
    base = recipe.servings or 1
    if servings < 1:
        raise ValueError("servings must be >= 1")
    multiplier = servings / base
    ingredients = [
        ing.model_copy(update={"amount": scale_amount(ing.amount, multiplier)})
        for ing in recipe.ingredients
    ]
    return recipe.model_copy(update={"servings": servings, "ingredients": ingredients})
