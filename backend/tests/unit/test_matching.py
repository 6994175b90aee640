import asyncio

import pytest

from sazonly.models.nutrition import NutrientRecord
from sazonly.nutrition.cache import NutrientCache
from sazonly.nutrition.fooddata import FoodDataIndex
from sazonly.nutrition.matching import NutrientMatcher, match_local
from sazonly.seeds import NUTRIENT_FIELDS, NUTRIENT_RECORDS

from fdc_samples import TEST_FOODS


def _curated():
    return [
        NutrientRecord.model_validate(
            {"id": i, "ingredient_name": name, "spanish_name": spanish, "category": category,
             **dict(zip(NUTRIENT_FIELDS, values))}
        )
        for i, (name, spanish, category, *values) in enumerate(NUTRIENT_RECORDS, start=1)
    ]


class ExplodingIndex(FoodDataIndex):
    def search(self, english_query):
        raise AssertionError(f"bulk dataset consulted for {english_query!r}")


@pytest.fixture
def records():
    return _curated()


@pytest.mark.parametrize(
    "query, expected",
    [
        ("pollo", "chicken"),  # exact spanish
        ("Pollo", "chicken"),
        ("Chicken", "chicken"),  # exact english
        ("carne", "ground beef"),  # spanish name contains the query
        ("parmesano", "parmesan cheese"),
        ("pechuga de pollo", "chicken"),  # query contains a spanish name
        ("crema batida", "heavy cream"),  # shared word
        ("cherry", "tomato"),  # alias
    ],
)
def test_match_local_tiers(records, query, expected):
    assert match_local(query, records).ingredient_name == expected


def test_match_local_misses(records):
    assert match_local("kombucha", records) is None
    assert match_local("", records) is None


def test_records_without_spanish_name_are_not_matched_by_spanish_tiers():
    bulk = NutrientRecord(ingredient_name="zucchini", spanish_name=None)
    # an empty spanish name would otherwise be "contained" in every query
    assert match_local("anything at all", [bulk]) is None


async def test_every_seeded_name_resolves_to_its_own_record(records):
    matcher = NutrientMatcher(store=None, fooddata=ExplodingIndex(foods=[]))
    cache = NutrientCache(lambda: records)
    for record in records:
        assert (await matcher.find_best_match(record.spanish_name, cache)) is record
        assert (await matcher.find_best_match(record.ingredient_name, cache)) is record


async def test_bulk_fallback_is_cached(records):
    matcher = NutrientMatcher(store=None, fooddata=FoodDataIndex(foods=TEST_FOODS))
    cache = NutrientCache(lambda: records)

    first = await matcher.find_best_match("Brócoli", cache)
    assert first.ingredient_name == "brocoli"
    assert first.calories == 34
    assert len(cache) == len(records) + 1

    second = await matcher.find_best_match("brocoli", cache)
    assert second is first
    assert len(cache) == len(records) + 1


async def test_concurrent_lookups_insert_once(records):
    matcher = NutrientMatcher(store=None, fooddata=FoodDataIndex(foods=TEST_FOODS))
    cache = NutrientCache(lambda: records)

    results = await asyncio.gather(*(matcher.find_best_match("choclo", cache) for _ in range(5)))
    assert {r.ingredient_name for r in results} == {"choclo"}
    assert sum(1 for r in cache if r.ingredient_name == "choclo") == 1


async def test_unknown_everywhere_returns_none(records):
    matcher = NutrientMatcher(store=None, fooddata=FoodDataIndex(foods=TEST_FOODS))
    cache = NutrientCache(lambda: records)
    assert await matcher.find_best_match("kombucha", cache) is None
    assert len(cache) == len(records)


async def test_without_a_dataset_only_local_tiers_run(records):
    matcher = NutrientMatcher(store=None, fooddata=None)
    cache = NutrientCache(lambda: records)
    assert await matcher.find_best_match("brocoli", cache) is None
