import pytest


@pytest.mark.asyncio
async def test_health_reports_table_sizes(client):
    r = await client.get("/health")
    assert r.status_code == 200
    data = r.json()
    assert data["status"] == "ok"
    assert data["nutrient_records"] > 30
    assert data["unit_conversions"] > 20


@pytest.mark.asyncio
async def test_recipe_nutrition(client):
    payload = {
        "title": "Pollo al horno",
        "servings": 2,
        "ingredients": [
            {"item": "pollo", "amount": "200g"},
            {"item": "sal", "amount": "a gusto"},
            {"item": "kombucha", "amount": "1 taza"},
        ],
    }
    r = await client.post("/nutrition/recipe", json=payload)
    assert r.status_code == 200
    assert r.headers["content-type"] == "application/json; charset=utf-8"
    data = r.json()
    assert data["calories_per_serving"] == 239
    assert data["servings"] == 2
    assert data["missing_ingredients"] == ["kombucha"]
    assert data["is_approximate"] is True


@pytest.mark.asyncio
async def test_recipe_nutrition_rescaled_servings(client):
    payload = {"servings": 2, "ingredients": [{"item": "pollo", "amount": "200g"}]}
    r = await client.post("/nutrition/recipe", params={"servings": 4}, json=payload)
    assert r.status_code == 200
    data = r.json()
    # amounts double along with the servings, so the per-serving value holds
    assert data["servings"] == 4
    assert data["calories_per_serving"] == 239


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [{"title": "sin ingredientes"}, {"ingredients": [{"item": ""}]}, {"servings": -1, "ingredients": []}],
)
async def test_malformed_recipe_is_rejected(client, payload):
    r = await client.post("/nutrition/recipe", json=payload)
    assert r.status_code == 422


@pytest.mark.asyncio
async def test_parse(client):
    r = await client.get("/nutrition/parse", params={"amount": "2-3 tazas"})
    assert r.status_code == 200
    assert r.json() == {"amount": "2-3 tazas", "quantity": 2.5, "unit": "taza", "grams": None}

    r = await client.get("/nutrition/parse", params={"amount": "al gusto"})
    assert r.json()["unit"] == "variable"


@pytest.mark.asyncio
async def test_convert(client):
    r = await client.get("/nutrition/convert", params={"quantity": 2, "unit": "tazas", "ingredient": "harina"})
    assert r.status_code == 200
    assert r.json() == {"quantity": 2.0, "unit": "tazas", "ingredient": "harina", "category": "flour", "grams": 240.0}

    r = await client.get("/nutrition/convert", params={"quantity": 1, "unit": "lata", "ingredient": "atun"})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_translate(client):
    r = await client.get("/nutrition/translate", params={"name": "Aceite de oliva"})
    assert r.status_code == 200
    assert r.json() == {"name": "Aceite de oliva", "english": "olive oil"}


@pytest.mark.asyncio
async def test_match(client):
    r = await client.get("/nutrition/match", params={"name": "pollo"})
    assert r.status_code == 200
    data = r.json()
    assert data["ingredient_name"] == "chicken"
    assert data["calories"] == 239

    r = await client.get("/nutrition/match", params={"name": "choclo"})
    assert r.status_code == 200
    assert r.json()["category"] == "usda_foundation"

    r = await client.get("/nutrition/match", params={"name": "kombucha"})
    assert r.status_code == 404


@pytest.mark.asyncio
async def test_cache_invalidate(client, calculator):
    calculator.cache.load()
    assert calculator.cache.loaded
    r = await client.post("/nutrition/cache/invalidate")
    assert r.status_code == 204
    assert not calculator.cache.loaded
