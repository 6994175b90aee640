from __future__ import annotations

import logging
from typing import Callable, Iterator, List, Optional

from sazonly.models.nutrition import NutrientRecord

from .translate import normalize_name

logger = logging.getLogger(__name__)


class NutrientCache:
    """Read-through snapshot of all nutrient records.

    Loaded once on first use; ``invalidate()`` makes the next ``load()`` re-read
    the store (e.g. after a bulk reseed).
    """

    def __init__(self, loader: Callable[[], List[NutrientRecord]]):
        self._loader = loader
        self._records: Optional[List[NutrientRecord]] = None

    @property
    def loaded(self) -> bool:
        return self._records is not None

    def load(self) -> List[NutrientRecord]:
        if self._records is None:
            self._records = list(self._loader())
            logger.info("nutrient cache loaded with %d records", len(self._records))
        return self._records

    def get(self) -> List[NutrientRecord]:
        return self.load()

    def invalidate(self) -> None:
        self._records = None

    def find_by_name(self, ingredient_name: str) -> Optional[NutrientRecord]:
        key = normalize_name(ingredient_name)
        return next((r for r in self.load() if normalize_name(r.ingredient_name) == key), None)

    def add_if_absent(self, record: NutrientRecord) -> bool:
        if self.find_by_name(record.ingredient_name) is not None:
            return False
        self.load().append(record)
        return True

    def __iter__(self) -> Iterator[NutrientRecord]:
        return iter(self.load())

    def __len__(self) -> int:
        return len(self.load())
