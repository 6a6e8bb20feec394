"""Pydantic models for API requests and responses."""

from pydantic import BaseModel, ConfigDict, Field

from newslist.models import Article


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class NewsResponse(_CamelModel):
    """Response model for the news list endpoint."""

    status: str = Field(description="Status of the request")
    total: int = Field(description="Number of articles returned")
    request_id: int = Field(alias="requestId", description="Server request counter value")
    timestamp: str = Field(description="Server time, ISO-8601")
    articles: list[Article] = Field(description="Articles in catalogue order")


class AuthorSearchResponse(NewsResponse):
    """Response model for the exact author search endpoint."""

    searched_author: str = Field(alias="searchedAuthor", description="Author name searched for")


class ReceivedArticleResponse(_CamelModel):
    """Response model for article submission."""

    status: str = Field(description="Always 'received'")
    received_article: Article = Field(alias="receivedArticle")
    request_id: int = Field(alias="requestId")
    timestamp: str


class WelcomeResponse(_CamelModel):
    """Response model for the welcome endpoint."""

    message: str
    category: str
    request_id: int = Field(alias="requestId")
    timestamp: str
    status: str


class StatsResponse(_CamelModel):
    """Response model for the server statistics endpoint."""

    total_requests: int = Field(alias="totalRequests")
    server_time: str = Field(alias="serverTime")
    status: str
    application_name: str = Field(alias="applicationName")


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(description="Health status")
    version: str = Field(description="Application version")
