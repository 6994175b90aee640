import tempfile
from contextlib import suppress
from pathlib import Path
from typing import AsyncIterator, Iterator

import pytest
from fastapi import FastAPI
from httpx import AsyncClient, ASGITransport
from sqlmodel import Session, SQLModel, create_engine

from sazonly.core import database as core_database
from sazonly.core.database import get_session
from sazonly.main import create_app
from sazonly.nutrition.calculator import NutritionCalculator, get_calculator
from sazonly.nutrition.fooddata import FoodDataIndex
from sazonly.nutrition.seeding import seed_nutrient_records, seed_unit_conversions, update_unit_conversions
from sazonly.nutrition.store import NutritionStore

from fdc_samples import TEST_FOODS


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture
def engine():
    # Use a fresh SQLite DB file in a temp dir per test for isolation
    tmp = tempfile.TemporaryDirectory()
    db_path = Path(tmp.name) / "test.db"
    engine = create_engine(f"sqlite:///{db_path}", connect_args={"check_same_thread": False})

    from sazonly.models import nutrition  # noqa: F401
    SQLModel.metadata.create_all(engine)

    try:
        yield engine
    finally:
        with suppress(Exception):
            engine.dispose()
        tmp.cleanup()


@pytest.fixture
def seeded_engine(engine):
    with Session(engine) as session:
        seed_nutrient_records(session)
        seed_unit_conversions(session)
        update_unit_conversions(session)
    return engine


@pytest.fixture
def fooddata() -> FoodDataIndex:
    return FoodDataIndex(foods=TEST_FOODS)


@pytest.fixture
def calculator(seeded_engine, fooddata) -> NutritionCalculator:
    return NutritionCalculator(NutritionStore(seeded_engine), fooddata)


@pytest.fixture
def test_app(monkeypatch, seeded_engine, calculator) -> Iterator[FastAPI]:
    def _override_get_session():
        with Session(seeded_engine) as session:
            yield session

    # patch global engine so startup hooks operate on the test database
    monkeypatch.setattr(core_database, "engine", seeded_engine, raising=False)

    app = create_app()
    app.dependency_overrides[get_session] = _override_get_session
    app.dependency_overrides[get_calculator] = lambda: calculator

    try:
        yield app
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def db_session(seeded_engine):
    with Session(seeded_engine) as session:
        yield session
