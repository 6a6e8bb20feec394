"""API routes for the news service."""

from datetime import UTC, datetime

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from newslist import __version__
from newslist.api.models import (
    AuthorSearchResponse,
    HealthResponse,
    NewsResponse,
    ReceivedArticleResponse,
    StatsResponse,
    WelcomeResponse,
)
from newslist.models import Article
from newslist.services.catalog import NewsCatalog, RequestCounter
from newslist.utils.logging import get_logger

logger = get_logger(__name__)

APPLICATION_NAME = "News Web App"
WELCOME_TEMPLATE = "Welcome to News Web App, {name}! Your request was processed at {time}"

router = APIRouter(tags=["news"])

catalog = NewsCatalog()
request_counter = RequestCounter()


def _now() -> str:
    return datetime.now(UTC).isoformat()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="healthy", version=__version__)


@router.get("/name", response_class=HTMLResponse)
async def app_name() -> str:
    """Application name as an HTML fragment."""
    return f"<h3>{APPLICATION_NAME}</h3>"


@router.get("/news", response_model=NewsResponse)
async def get_news(
    author: str | None = Query(default=None, description="Partial author name, case-insensitive"),
    limit: int = Query(default=10, description="Maximum number of articles to return"),
) -> NewsResponse:
    """List news articles, optionally filtered by author and limited."""
    articles = catalog.search(author=author, limit=limit)
    request_id = request_counter.next()
    logger.info("News requested", author=author, limit=limit, count=len(articles), request_id=request_id)
    return NewsResponse(
        status="ok",
        total=len(articles),
        request_id=request_id,
        timestamp=_now(),
        articles=articles,
    )


@router.get("/news/author", response_model=AuthorSearchResponse)
async def get_news_by_author(
    name: str = Query(description="Exact author name, case-insensitive"),
) -> AuthorSearchResponse:
    """List news articles by a single author."""
    articles = catalog.by_author(name)
    return AuthorSearchResponse(
        status="ok" if articles else "no_results",
        searched_author=name,
        total=len(articles),
        request_id=request_counter.next(),
        timestamp=_now(),
        articles=articles,
    )


@router.post("/news", response_model=ReceivedArticleResponse)
async def add_news(article: Article) -> ReceivedArticleResponse:
    """Accept an article. Nothing is stored."""
    logger.info("Article received", author=article.author, title=article.title)
    return ReceivedArticleResponse(
        status="received",
        received_article=article,
        request_id=request_counter.next(),
        timestamp=_now(),
    )


@router.get("/welcome", response_model=WelcomeResponse)
async def welcome(
    name: str = Query(default="Guest"),
    category: str = Query(default="general"),
) -> WelcomeResponse:
    """Personalised welcome message."""
    now = _now()
    return WelcomeResponse(
        message=WELCOME_TEMPLATE.format(name=name, time=now),
        category=category,
        request_id=request_counter.next(),
        timestamp=now,
        status="ok",
    )


@router.get("/stats", response_model=StatsResponse)
async def stats() -> StatsResponse:
    """Server statistics."""
    return StatsResponse(
        total_requests=request_counter.value,
        server_time=_now(),
        status="running",
        application_name=APPLICATION_NAME,
    )
