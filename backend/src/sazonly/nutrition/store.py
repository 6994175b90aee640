"""Nutrient and unit-conversion tables as consumed by the nutrition engine."""

from __future__ import annotations

import logging
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from sazonly.models.nutrition import NutrientRecord, UnitConversion

from .translate import normalize_name

logger = logging.getLogger(__name__)

UNIVERSAL_CATEGORY = "any"


class NutritionStore:
    """Short-lived sessions per call; returned rows are detached snapshots."""

    def __init__(self, engine: Engine):
        self.engine = engine

    def _session(self) -> Session:
        return Session(self.engine, expire_on_commit=False)

    def get_all_records(self) -> List[NutrientRecord]:
        with self._session() as session:
            return list(session.exec(select(NutrientRecord).order_by(NutrientRecord.id)).all())

    def get_record(self, ingredient_name: str) -> Optional[NutrientRecord]:
        name = normalize_name(ingredient_name)
        with self._session() as session:
            stmt = select(NutrientRecord).where(func.lower(NutrientRecord.ingredient_name) == name)
            return session.exec(stmt).first()

    def get_unit_conversion(self, unit_name: str, category: Optional[str] = None) -> Optional[UnitConversion]:
        """Category-specific row first, then a universal (NULL / "any") row."""
        unit = normalize_name(unit_name)
        with self._session() as session:
            if category:
                stmt = select(UnitConversion).where(
                    func.lower(UnitConversion.unit_name) == unit,
                    UnitConversion.ingredient_category == category,
                )
                found = session.exec(stmt).first()
                if found:
                    return found

            stmt = select(UnitConversion).where(
                func.lower(UnitConversion.unit_name) == unit,
                or_(
                    UnitConversion.ingredient_category.is_(None),
                    UnitConversion.ingredient_category == UNIVERSAL_CATEGORY,
                ),
            )
            return session.exec(stmt).first()

    def add_record(self, record: NutrientRecord, spanish_name: Optional[str] = None) -> bool:
        """Insert a copy of ``record``; False if that canonical name already exists."""
        if self.get_record(record.ingredient_name) is not None:
            logger.debug("nutrient record %r already stored", record.ingredient_name)
            return False

        data = record.model_dump(exclude={"id", "created_at"})
        if spanish_name:
            data["spanish_name"] = spanish_name
        row = NutrientRecord.model_validate(data)

        with self._session() as session:
            session.add(row)
            try:
                session.commit()
            except IntegrityError:
                session.rollback()
                logger.debug("nutrient record %r inserted concurrently", record.ingredient_name)
                return False
        logger.info("stored nutrient record %r", record.ingredient_name)
        return True
