"""
main.py – FastAPI app entry point (slim wire-up only).
Connects routes, middleware and lifespan. No business logic here.

    uvicorn cities_api.main:app --reload
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .logging_config import setup_logging
from .routes import cities, system
from .deps import get_loader

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.preload_city_data:
        logger.info("Preloading city data…")
        get_loader().preload()
    logger.info("Ready.")
    yield
    logger.info("Shutdown.")


app = FastAPI(
    title=settings.project_name,
    description="Reference data for U.S. cities: climate, elevation, population and current local time.",
    version=settings.api_version,
    lifespan=lifespan,
)

app.add_middleware(CORSMiddleware, allow_origins=settings.cors_origins, allow_methods=["GET"], allow_headers=["*"])

app.include_router(system.router)
app.include_router(cities.router)
