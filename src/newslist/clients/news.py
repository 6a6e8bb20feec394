"""HTTP client for the news API."""

import httpx
from pydantic import ValidationError

from newslist.config import Settings, get_settings
from newslist.models import FetchResult
from newslist.utils.logging import get_logger

logger = get_logger(__name__)

NEWS_PATH = "/news"


class FetchError(Exception):
    """Raised when a news list cannot be fetched or its payload parsed."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(reason)


class NewsClient:
    """Fetches the article list from `<base_url>/news`.

    The client holds no per-request state, so one instance can serve any
    number of callers at once.
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        # Single attempt, no timeout: a request that never answers keeps the
        # caller waiting.
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            timeout=None,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "NewsClient":
        """Create a client pointed at the configured news API."""
        settings = settings or get_settings()
        return cls(settings.news_api_base_url)

    @property
    def url(self) -> str:
        return f"{self._base_url}{NEWS_PATH}"

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "NewsClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def fetch_news(self) -> FetchResult:
        """Fetch the current news list.

        Returns:
            The validated response envelope.

        Raises:
            FetchError: If the request fails, the server answers with a
                non-2xx status, or the body is not a valid news envelope.
        """
        logger.info("Fetching news", url=self.url)
        try:
            response = await self._client.get(NEWS_PATH)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("HTTP error fetching news", url=self.url, status=e.response.status_code)
            raise FetchError(f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            logger.warning("Request error fetching news", url=self.url, error=str(e))
            raise FetchError(f"request failed: {e}") from e

        try:
            payload = response.json()
        except ValueError as e:
            logger.warning("News response is not JSON", url=self.url)
            raise FetchError("invalid JSON body") from e

        try:
            result = FetchResult.model_validate(payload)
        except ValidationError as e:
            logger.warning(
                "News response failed validation",
                url=self.url,
                errors=e.error_count(),
            )
            raise FetchError("malformed news payload") from e

        logger.info(
            "News fetched",
            request_id=result.request_id,
            total=result.total,
            count=len(result.articles),
        )
        return result
