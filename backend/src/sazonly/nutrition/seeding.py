"""Seeding of the nutrient and unit-conversion tables.

All passes are idempotent: the curated and base passes skip non-empty
tables, the update and bulk passes insert only rows that are not there yet.
"""

from __future__ import annotations

import logging
from typing import Dict

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session, select

from sazonly.models.nutrition import NutrientRecord, UnitConversion
from sazonly.seeds import NUTRIENT_FIELDS, NUTRIENT_RECORDS, PER_UNIT_CONVERSIONS, UNIT_CONVERSIONS

from .fooddata import BULK_CATEGORY, FoodDataIndex, record_from_food
from .translate import normalize_name, reverse_translations

logger = logging.getLogger(__name__)

# Fewer bulk rows than this means an earlier bulk seed was interrupted.
MIN_BULK_RECORDS = 300


def _count(session: Session, model, *where) -> int:
    stmt = select(func.count()).select_from(model)
    if where:
        stmt = stmt.where(*where)
    return int(session.exec(stmt).one())


def seed_nutrient_records(session: Session) -> int:
    if _count(session, NutrientRecord) > 0:
        logger.info("nutrient records already present, skipping curated seed")
        return 0

    for name, spanish, category, *values in NUTRIENT_RECORDS:
        data = dict(zip(NUTRIENT_FIELDS, values))
        session.add(
            NutrientRecord.model_validate(
                {"ingredient_name": name, "spanish_name": spanish, "category": category, **data}
            )
        )
    session.commit()
    logger.info("seeded %d curated nutrient records", len(NUTRIENT_RECORDS))
    return len(NUTRIENT_RECORDS)


def _conversion_exists(session: Session, unit_name: str, category) -> bool:
    stmt = select(UnitConversion).where(
        UnitConversion.unit_name == unit_name,
        UnitConversion.ingredient_category == category,
    )
    return session.exec(stmt).first() is not None


def seed_unit_conversions(session: Session) -> int:
    if _count(session, UnitConversion) > 0:
        logger.info("unit conversions already present, skipping seed")
        return 0

    for unit_name, category, grams, notes in UNIT_CONVERSIONS:
        session.add(
            UnitConversion(unit_name=unit_name, ingredient_category=category, grams_per_unit=grams, notes=notes)
        )
    session.commit()
    logger.info("seeded %d unit conversions", len(UNIT_CONVERSIONS))
    return len(UNIT_CONVERSIONS)


def update_unit_conversions(session: Session) -> int:
    """Insert-or-ignore the per-unit rows; existing rows are left untouched."""
    inserted = 0
    for unit_name, category, grams, notes in PER_UNIT_CONVERSIONS:
        if _conversion_exists(session, unit_name, category):
            continue
        session.add(
            UnitConversion(unit_name=unit_name, ingredient_category=category, grams_per_unit=grams, notes=notes)
        )
        try:
            session.commit()
        except IntegrityError:
            session.rollback()
            continue
        inserted += 1
    logger.info("unit conversions updated, %d inserted", inserted)
    return inserted


def _spanish_for(description: str, reverse: Dict[str, str]):
    """Spanish name for a dataset description: whole name, then its head noun."""
    name = normalize_name(description)
    head = name.split(",")[0].strip()
    candidates = [name, head]
    if head.endswith("s"):
        # "apples" -> "apple", "potatoes" -> "potato"
        candidates += [head[:-1], head[:-2]]
    return next((reverse[c] for c in candidates if c in reverse), None)


def seed_bulk_records(session: Session, index: FoodDataIndex) -> int:
    """Load every bulk dataset entry as a ``usda_foundation`` nutrient record."""
    foods = index.load()
    if not foods:
        logger.warning("food dataset is empty, skipping bulk seed")
        return 0

    existing_bulk = _count(session, NutrientRecord, NutrientRecord.category == BULK_CATEGORY)
    if existing_bulk >= min(MIN_BULK_RECORDS, len(foods)):
        logger.info("bulk nutrient records already loaded (%d)", existing_bulk)
        return 0

    known = {normalize_name(n) for n in session.exec(select(NutrientRecord.ingredient_name)).all()}
    reverse = reverse_translations()
    inserted = 0
    for food in foods:
        description = str(food.get("description") or "").strip()
        name = normalize_name(description)
        if not name or name in known:
            continue
        session.add(record_from_food(food, description, spanish_name=_spanish_for(description, reverse)))
        known.add(name)
        inserted += 1
    session.commit()
    logger.info("seeded %d/%d bulk nutrient records", inserted, len(foods))
    return inserted


def seed_all(session: Session, index: FoodDataIndex) -> Dict[str, int]:
    return {
        "nutrient_records": seed_nutrient_records(session),
        "unit_conversions": seed_unit_conversions(session),
        "unit_conversions_updated": update_unit_conversions(session),
        "bulk_records": seed_bulk_records(session, index),
    }
