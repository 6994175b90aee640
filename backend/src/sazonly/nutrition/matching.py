"""Resolve an ingredient name to a per-100 g nutrient record.

Local tiers run in ``MATCH_STRATEGIES`` order over the cached records; when
all of them miss, the name is translated and looked up in the bulk food
dataset, and the synthesized record is stored and cached.
"""

from __future__ import annotations

import asyncio
import logging
import re
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from sqlalchemy.exc import SQLAlchemyError

from sazonly.models.nutrition import NutrientRecord

from .cache import NutrientCache
from .fooddata import FoodDataIndex, record_from_food
from .store import NutritionStore
from .translate import normalize_name, translate_to_english

logger = logging.getLogger(__name__)

Strategy = Callable[[Sequence[NutrientRecord], str], Optional[NutrientRecord]]

# query -> name of the record to use; entries are opaque pairs.
ALIASES: Dict[str, str] = {
    "carne molida": "carne picada",
    "res": "carne de res",
    "parmesano": "queso parmesano",
    "queso rallado": "queso parmesano",
    "cherry": "tomate",
    "tomates cherry": "tomate",
    "cebollas": "cebolla",
    "tomates": "tomate",
    "huevos": "huevo",
}


def _spanish(record: NutrientRecord) -> str:
    return normalize_name(record.spanish_name or "")


def _english(record: NutrientRecord) -> str:
    return normalize_name(record.ingredient_name)


def _tokens(text: str) -> List[str]:
    return re.findall(r"[a-z0-9]+", text)


def _first(records: Sequence[NutrientRecord], predicate) -> Optional[NutrientRecord]:
    return next((r for r in records if predicate(r)), None)


def exact_spanish(records, query):
    return _first(records, lambda r: _spanish(r) == query)


def exact_english(records, query):
    return _first(records, lambda r: _english(r) == query)


def spanish_contains_query(records, query):
    return _first(records, lambda r: bool(_spanish(r)) and query in _spanish(r))


def english_contains_query(records, query):
    return _first(records, lambda r: query in _english(r))


def query_contains_spanish(records, query):
    return _first(records, lambda r: bool(_spanish(r)) and _spanish(r) in query)


def query_contains_english(records, query):
    return _first(records, lambda r: bool(_english(r)) and _english(r) in query)


def _word_overlap(name_of: Callable[[NutrientRecord], str]) -> Strategy:
    def strategy(records, query):
        words = [w for w in _tokens(query) if len(w) > 2]
        if not words:
            return None
        return _first(records, lambda r: any(w in _tokens(name_of(r)) for w in words))

    return strategy


def alias(records, query):
    target = ALIASES.get(query)
    if target is None:
        return None
    target = normalize_name(target)
    return _first(records, lambda r: _spanish(r) == target or _english(r) == target)


MATCH_STRATEGIES: List[Tuple[str, Strategy]] = [
    ("exact_spanish", exact_spanish),
    ("exact_english", exact_english),
    ("spanish_contains_query", spanish_contains_query),
    ("english_contains_query", english_contains_query),
    ("query_contains_spanish", query_contains_spanish),
    ("query_contains_english", query_contains_english),
    ("word_overlap_spanish", _word_overlap(_spanish)),
    ("word_overlap_english", _word_overlap(_english)),
    ("alias", alias),
]


def match_local(name: str, records: Sequence[NutrientRecord]) -> Optional[NutrientRecord]:
    """First hit across the local tiers, or None."""
    query = normalize_name(name)
    if not query:
        return None
    for label, strategy in MATCH_STRATEGIES:
        record = strategy(records, query)
        if record is not None:
            logger.debug("%s match for %r: %r", label, name, record.ingredient_name)
            return record
    return None


class NutrientMatcher:
    def __init__(self, store: Optional[NutritionStore], fooddata: Optional[FoodDataIndex]):
        self.store = store
        self.fooddata = fooddata
        self._insert_lock = asyncio.Lock()

    async def find_best_match(self, name: str, cache: NutrientCache) -> Optional[NutrientRecord]:
        record = match_local(name, cache.get())
        if record is not None:
            return record

        record = self._from_fooddata(name)
        if record is None:
            logger.warning("no nutrient data found for %r", name)
            return None

        # check-then-insert under the lock so one name is stored only once
        async with self._insert_lock:
            existing = cache.find_by_name(record.ingredient_name)
            if existing is not None:
                return existing
            self._persist(record)
            cache.add_if_absent(record)
        return record

    def _from_fooddata(self, name: str) -> Optional[NutrientRecord]:
        if self.fooddata is None:
            return None
        english = translate_to_english(name)
        food = self.fooddata.search(english)
        if food is None:
            return None
        logger.info("resolved %r via food dataset (%r)", name, food.get("description"))
        return record_from_food(food, name)

    def _persist(self, record: NutrientRecord) -> None:
        if self.store is None:
            return
        try:
            self.store.add_record(record)
        except SQLAlchemyError as exc:
            # the record is still used from the cache for this process
            logger.warning("could not store nutrient record %r: %s", record.ingredient_name, exc)


async def find_best_match(
    name: str,
    cache: NutrientCache,
    matcher: Optional[NutrientMatcher] = None,
) -> Optional[NutrientRecord]:
    if matcher is None:
        from .calculator import get_calculator

        matcher = get_calculator().matcher
    return await matcher.find_best_match(name, cache)
