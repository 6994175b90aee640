from __future__ import annotations

import logging

from fastapi import FastAPI, Response
from fastapi.responses import RedirectResponse
from sqlalchemy import inspect
from sqlmodel import Session
from starlette.requests import Request

from sazonly.core import database
from sazonly.core.config import get_settings
from sazonly.nutrition.calculator import get_calculator
from sazonly.nutrition.fooddata import FoodDataIndex
from sazonly.nutrition.seeding import seed_all
from sazonly.routers import health, nutrition

logger = logging.getLogger(__name__)

CORE_ROUTERS = (
    (health.router, {"tags": ["health"]}),
    (nutrition.router, {}),
)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)
    application = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url=settings.docs_url,
    )

    @application.middleware("http")
    async def enforce_utf8_json(request: Request, call_next):
        response = await call_next(request)
        if response.headers.get("content-type", "").startswith("application/json"):
            response.headers["content-type"] = "application/json; charset=utf-8"
        return response

    @application.get("/favicon.ico", include_in_schema=False)
    def favicon():
        return Response(status_code=204)

    for router, include_kwargs in CORE_ROUTERS:
        application.include_router(router, **include_kwargs)

    @application.get("/", include_in_schema=False)
    def root():
        return RedirectResponse(settings.docs_url or "/docs")

    @application.get("/__dbcheck", include_in_schema=False)
    def dbcheck():
        return {"tables": inspect(database.engine).get_table_names()}

    @application.on_event("startup")
    def _startup():
        database.init_db()
        if not settings.seed_on_startup:
            return
        with Session(database.engine) as session:
            counts = seed_all(session, FoodDataIndex(settings.fooddata_path))
        logger.info("startup seeding: %s", counts)
        # the seed passes may have added rows the cache has not seen
        get_calculator().invalidate_cache()

    return application


app = create_app()
