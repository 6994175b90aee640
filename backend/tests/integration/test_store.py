import asyncio

from sqlalchemy.exc import OperationalError
from sqlmodel import Session, select

from sazonly.models.nutrition import NutrientRecord, UnitConversion
from sazonly.nutrition.cache import NutrientCache
from sazonly.nutrition.calculator import NutritionCalculator
from sazonly.nutrition.fooddata import FoodDataIndex
from sazonly.nutrition.matching import NutrientMatcher
from sazonly.nutrition.store import NutritionStore

from fdc_samples import TEST_FOODS


def test_records_come_back_in_insertion_order(seeded_engine):
    store = NutritionStore(seeded_engine)
    records = store.get_all_records()
    assert records[0].ingredient_name == "ground beef"
    assert store.get_record("Chicken").spanish_name == "pollo"
    assert store.get_record("kombucha") is None


def test_unit_conversion_prefers_the_category_row(seeded_engine):
    store = NutritionStore(seeded_engine)
    assert store.get_unit_conversion("taza", "flour").grams_per_unit == 120
    assert store.get_unit_conversion("TAZA", "liquid").grams_per_unit == 240
    # "g" is only stored as a universal row
    assert store.get_unit_conversion("g", "flour").grams_per_unit == 1
    assert store.get_unit_conversion("taza", "fat") is None


def test_lookups_fold_case_accents_and_spacing(seeded_engine):
    store = NutritionStore(seeded_engine)
    assert store.get_record("Chícken").spanish_name == "pollo"
    assert store.get_record("  CHICKEN ").spanish_name == "pollo"
    assert store.get_unit_conversion("Tazá", "flour").grams_per_unit == 120
    assert store.get_unit_conversion(" taza ", "liquid").grams_per_unit == 240


def test_universal_rows_with_null_category(seeded_engine):
    with Session(seeded_engine) as session:
        session.add(UnitConversion(unit_name="pizca", ingredient_category=None, grams_per_unit=0.5))
        session.commit()
    assert NutritionStore(seeded_engine).get_unit_conversion("pizca", "spice").grams_per_unit == 0.5


def test_add_record_does_not_duplicate(engine):
    store = NutritionStore(engine)
    record = NutrientRecord(ingredient_name="kale", calories=35)
    assert store.add_record(record, spanish_name="col rizada")
    assert not store.add_record(NutrientRecord(ingredient_name="Kale", calories=99))
    stored = store.get_all_records()
    assert [(r.ingredient_name, r.spanish_name, r.calories) for r in stored] == [("kale", "col rizada", 35)]
    # the caller's object is not attached to a session
    assert record.id is None


async def test_bulk_match_is_persisted_once(calculator, seeded_engine):
    await asyncio.gather(*(calculator.matcher.find_best_match("brócoli", calculator.cache) for _ in range(4)))

    with Session(seeded_engine) as session:
        rows = session.exec(select(NutrientRecord).where(NutrientRecord.ingredient_name == "brocoli")).all()
    assert len(rows) == 1
    assert rows[0].category == "usda_foundation"

    # a fresh calculator over the same database finds it locally
    fresh = NutritionCalculator(NutritionStore(seeded_engine), fooddata=None)
    result = await fresh.calculate({"servings": 1, "ingredients": [{"item": "brocoli", "amount": "100 g"}]})
    assert result.calories_per_serving == 34


async def test_store_lookup_drives_unit_conversion(calculator, seeded_engine):
    with Session(seeded_engine) as session:
        row = session.exec(
            select(UnitConversion).where(UnitConversion.unit_name == "taza", UnitConversion.ingredient_category == "flour")
        ).one()
        row.grams_per_unit = 125
        session.add(row)
        session.commit()

    result = await calculator.calculate({"ingredients": [{"item": "harina", "amount": "1 taza"}]})
    # 125 g of wheat flour at 364 kcal / 100 g
    assert result.calories_per_serving == 455


class ReadOnlyStore(NutritionStore):
    def add_record(self, record, spanish_name=None):
        raise OperationalError("INSERT INTO nutrient_record", {}, Exception("attempt to write a readonly database"))


async def test_bulk_match_is_cached_when_the_insert_fails(seeded_engine):
    store = ReadOnlyStore(seeded_engine)
    cache = NutrientCache(store.get_all_records)
    matcher = NutrientMatcher(store=store, fooddata=FoodDataIndex(foods=TEST_FOODS))
    before = len(cache)

    record = await matcher.find_best_match("brócoli", cache)
    assert record.ingredient_name == "brocoli"
    assert len(cache) == before + 1
    assert NutritionStore(seeded_engine).get_record("brocoli") is None

    # served from the cache from now on
    assert await matcher.find_best_match("brocoli", cache) is record
    assert len(cache) == before + 1
