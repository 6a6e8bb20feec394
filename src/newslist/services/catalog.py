"""Sample article catalogue served by the news API."""

import threading

from newslist.models import Article

SAMPLE_ARTICLES: tuple[Article, ...] = (
    Article(
        author="John Smith",
        title="Tech Stocks Rise as Market Shows Optimism",
        content=(
            "Technology stocks experienced significant gains today as investors "
            "show renewed confidence in the sector."
        ),
    ),
    Article(
        author="Sarah Johnson",
        title="Global Economic Outlook Improves",
        content=(
            "Economists predict stronger growth for the coming quarter based on "
            "recent economic indicators."
        ),
    ),
    Article(
        author="Mike Davis",
        title="Renewable Energy Investments Surge",
        content=(
            "Clean energy projects receive record funding as companies shift "
            "towards sustainable practices."
        ),
    ),
    Article(
        author="Emily Chen",
        title="Cryptocurrency Market Stabilizes",
        content="Digital currencies show signs of stability after weeks of volatility in the market.",
    ),
    Article(
        author="Robert Wilson",
        title="Healthcare Innovation Breakthrough",
        content="Medical researchers announce promising results in new treatment methodologies.",
    ),
    Article(
        author="Lisa Brown",
        title="E-commerce Growth Continues Strong",
        content="Online retail sales maintain upward trend as consumer behavior shifts permanently.",
    ),
    Article(
        author="David Taylor",
        title="Manufacturing Sector Shows Recovery",
        content=(
            "Industrial production increases for the third consecutive month, "
            "signaling economic recovery."
        ),
    ),
)


class RequestCounter:
    """Thread-safe monotonically increasing request counter."""

    def __init__(self) -> None:
        self._value = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        with self._lock:
            return self._value


class NewsCatalog:
    """Read-only view over a fixed list of articles."""

    def __init__(self, articles: tuple[Article, ...] = SAMPLE_ARTICLES) -> None:
        self._articles = articles

    def all(self) -> list[Article]:
        return list(self._articles)

    def search(self, author: str | None = None, limit: int = 10) -> list[Article]:
        """Filter by partial author name and cap the result size.

        Args:
            author: Case-insensitive substring of the author name. Empty or
                None disables filtering.
            limit: Maximum number of articles. Values <= 0 mean no limit.

        Returns:
            Matching articles in catalogue order.
        """
        articles = self.all()
        if author:
            needle = author.lower()
            articles = [a for a in articles if needle in a.author.lower()]
        if 0 < limit < len(articles):
            articles = articles[:limit]
        return articles

    def by_author(self, name: str) -> list[Article]:
        """Articles whose author equals `name`, ignoring case."""
        wanted = name.lower()
        return [a for a in self._articles if a.author.lower() == wanted]
