from sqlalchemy import func
from sqlmodel import Session, select

from sazonly.models.nutrition import NutrientRecord, UnitConversion
from sazonly.nutrition.fooddata import BULK_CATEGORY, FoodDataIndex
from sazonly.nutrition.seeding import (
    MIN_BULK_RECORDS,
    seed_all,
    seed_bulk_records,
    seed_nutrient_records,
    seed_unit_conversions,
    update_unit_conversions,
)
from sazonly.seeds import NUTRIENT_RECORDS, PER_UNIT_CONVERSIONS, UNIT_CONVERSIONS

from fdc_samples import TEST_FOODS, fdc_food


def _count(session, model, *where):
    stmt = select(func.count()).select_from(model)
    if where:
        stmt = stmt.where(*where)
    return session.exec(stmt).one()


def test_seed_all_is_idempotent(engine):
    index = FoodDataIndex(foods=TEST_FOODS)
    with Session(engine) as session:
        first = seed_all(session, index)
        assert first["nutrient_records"] == len(NUTRIENT_RECORDS)
        assert first["unit_conversions"] == len(UNIT_CONVERSIONS)
        # the per-unit rows were part of the base seed already
        assert first["unit_conversions_updated"] == 0
        assert first["bulk_records"] == len(TEST_FOODS)

        second = seed_all(session, index)
        assert second == {
            "nutrient_records": 0,
            "unit_conversions": 0,
            "unit_conversions_updated": 0,
            "bulk_records": 0,
        }
        assert _count(session, NutrientRecord) == len(NUTRIENT_RECORDS) + len(TEST_FOODS)
        assert _count(session, UnitConversion) == len(UNIT_CONVERSIONS)


def test_update_pass_fills_in_missing_per_unit_rows(db_session):
    gone = db_session.exec(
        select(UnitConversion).where(UnitConversion.unit_name == "unidad", UnitConversion.ingredient_category == "onion")
    ).one()
    db_session.delete(gone)
    db_session.commit()

    assert update_unit_conversions(db_session) == 1
    assert update_unit_conversions(db_session) == 0
    assert _count(db_session, UnitConversion) == len(UNIT_CONVERSIONS)
    assert len(PER_UNIT_CONVERSIONS) > 1


def test_curated_and_base_seeds_skip_populated_tables(db_session):
    assert seed_nutrient_records(db_session) == 0
    assert seed_unit_conversions(db_session) == 0


def test_bulk_records_get_spanish_names_and_skip_known_names(db_session):
    foods = TEST_FOODS + [fdc_food("Chicken", 200), fdc_food("Honey", 304), fdc_food("Kale, raw", 35)]
    inserted = seed_bulk_records(db_session, FoodDataIndex(foods=foods))
    # "chicken" and "honey" already exist as curated records
    assert inserted == len(TEST_FOODS) + 1
    assert _count(db_session, NutrientRecord, NutrientRecord.ingredient_name == "honey") == 1

    broccoli = db_session.exec(select(NutrientRecord).where(NutrientRecord.ingredient_name == "broccoli, raw")).one()
    assert broccoli.category == BULK_CATEGORY
    assert broccoli.spanish_name == "brocoli"


def test_bulk_seed_with_empty_dataset_does_nothing(db_session):
    assert seed_bulk_records(db_session, FoodDataIndex(foods=[])) == 0


def test_interrupted_bulk_seed_is_completed_on_the_next_run(db_session):
    foods = [fdc_food(f"Test food {i}, raw", 100 + i) for i in range(MIN_BULK_RECORDS + 5)]
    assert seed_bulk_records(db_session, FoodDataIndex(foods=foods[:10])) == 10

    assert seed_bulk_records(db_session, FoodDataIndex(foods=foods)) == MIN_BULK_RECORDS - 5
    assert _count(db_session, NutrientRecord, NutrientRecord.category == BULK_CATEGORY) == len(foods)
    # enough bulk rows now, the pass is skipped
    assert seed_bulk_records(db_session, FoodDataIndex(foods=foods + [fdc_food("Kale, raw", 35)])) == 0
