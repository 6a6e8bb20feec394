"""Shared data models for newslist."""

from dataclasses import dataclass
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator

LOAD_ERROR_MESSAGE = "Failed to load news articles"


class Article(BaseModel):
    """A single news item."""

    model_config = ConfigDict(frozen=True)

    author: StrictStr
    title: StrictStr
    content: StrictStr


class FetchResult(BaseModel):
    """Envelope returned by the news endpoint.

    Only the wire key names are accepted and scalar fields are not coerced,
    so a body that strays from the contract fails validation. `total` is
    the count reported by the server and may differ from `len(articles)`.
    """

    model_config = ConfigDict(frozen=True)

    status: StrictStr
    total: StrictInt = Field(ge=0)
    request_id: StrictInt = Field(alias="requestId")
    timestamp: StrictStr
    articles: tuple[Article, ...]

    @field_validator("timestamp")
    @classmethod
    def validate_timestamp(cls, v: str) -> str:
        """Require an ISO-8601 timestamp; the original string is kept."""
        try:
            datetime.fromisoformat(v)
        except ValueError as e:
            raise ValueError(f"timestamp {v!r} is not ISO-8601") from e
        return v


@dataclass(frozen=True)
class PresentationState:
    """What the rendering layer observes for the news list."""

    articles: tuple[Article, ...] = ()
    loading: bool = True
    error: str | None = None
    total: int = 0

    @property
    def loaded(self) -> bool:
        """True once articles have been fetched successfully."""
        return not self.loading and self.error is None
