"""FastAPI application entry point for the news API."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from newslist import __version__
from newslist.api.routes import router
from newslist.config import get_settings
from newslist.services.catalog import SAMPLE_ARTICLES
from newslist.utils.logging import get_logger, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    settings = get_settings()
    setup_logging(settings.log_level, json_logs=settings.log_json)
    logger = get_logger(__name__)
    logger.info(
        "News API starting",
        version=__version__,
        news_api_base_url=settings.news_api_base_url,
        catalog_size=len(SAMPLE_ARTICLES),
    )
    yield
    logger.info("News API shutting down")


app = FastAPI(
    title="newslist",
    description="Sample news catalogue consumed by the newslist client",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(router)
