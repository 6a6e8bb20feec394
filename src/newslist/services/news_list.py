"""Presentation controller for the news list."""

from dataclasses import replace

from newslist.clients.news import FetchError, NewsClient
from newslist.models import LOAD_ERROR_MESSAGE, PresentationState
from newslist.utils.logging import get_logger

logger = get_logger(__name__)


class NewsListController:
    """Loads the news list once and exposes the outcome as PresentationState.

    The owning context (a UI mount, a CLI entry point, a test) calls
    `start()` exactly once. Observers read `state` at any time; each
    transition swaps in a new frozen instance.
    """

    def __init__(self, news_client: NewsClient) -> None:
        self._news = news_client
        self._state = PresentationState()
        self._started = False

    @property
    def state(self) -> PresentationState:
        return self._state

    @property
    def started(self) -> bool:
        return self._started

    async def start(self) -> PresentationState:
        """Fetch the news list and settle into Loaded or Failed.

        Returns:
            The settled state.

        Raises:
            RuntimeError: If the controller was already started.
        """
        if self._started:
            raise RuntimeError("NewsListController.start() may only be called once")
        self._started = True

        # Loading must be observable before the first await.
        self._state = PresentationState(loading=True)
        logger.info("Loading news")

        try:
            result = await self._news.fetch_news()
        except FetchError as e:
            self._state = replace(self._state, loading=False, error=LOAD_ERROR_MESSAGE)
            logger.error("Error loading news", reason=e.reason)
            return self._state

        self._state = PresentationState(
            articles=tuple(result.articles),
            loading=False,
            error=None,
            total=result.total,
        )
        logger.info("News loaded", total=result.total, count=len(result.articles))
        return self._state
