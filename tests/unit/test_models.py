"""Unit tests for the news data models."""

import pytest
from pydantic import ValidationError

from newslist.models import Article, FetchResult, PresentationState


def _payload(**overrides) -> dict:
    data = {
        "status": "ok",
        "total": 2,
        "requestId": 1,
        "timestamp": "2024-01-01T00:00:00Z",
        "articles": [
            {"author": "A", "title": "T1", "content": "C1"},
            {"author": "B", "title": "T2", "content": "C2"},
        ],
    }
    data.update(overrides)
    return data


class TestArticle:
    """Tests for the Article value type."""

    def test_structural_equality(self) -> None:
        """Articles with the same fields compare equal."""
        assert Article(author="A", title="T", content="C") == Article(author="A", title="T", content="C")

    def test_is_immutable(self) -> None:
        """Articles cannot be modified after creation."""
        article = Article(author="A", title="T", content="C")
        with pytest.raises(ValidationError):
            article.title = "changed"


class TestFetchResult:
    """Tests for FetchResult deserialization."""

    def test_parses_wire_format(self) -> None:
        """Should map requestId and nested articles."""
        result = FetchResult.model_validate(_payload())
        assert result.request_id == 1
        assert result.status == "ok"
        assert result.articles[1] == Article(author="B", title="T2", content="C2")

    def test_total_independent_of_article_count(self) -> None:
        """Server-reported total is kept as-is."""
        result = FetchResult.model_validate(_payload(total=50))
        assert result.total == 50
        assert len(result.articles) == 2

    def test_missing_field_rejected(self) -> None:
        """A missing envelope field fails validation."""
        data = _payload()
        del data["requestId"]
        with pytest.raises(ValidationError):
            FetchResult.model_validate(data)

    def test_negative_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            FetchResult.model_validate(_payload(total=-1))

    def test_malformed_article_rejected(self) -> None:
        """An article without content fails validation."""
        with pytest.raises(ValidationError):
            FetchResult.model_validate(_payload(articles=[{"author": "A", "title": "T"}]))


class TestPresentationState:
    """Tests for PresentationState defaults."""

    def test_defaults_are_loading(self) -> None:
        state = PresentationState()
        assert state == PresentationState(articles=(), loading=True, error=None, total=0)
        assert not state.loaded

    def test_loaded(self) -> None:
        assert PresentationState(loading=False).loaded
        assert not PresentationState(loading=False, error="boom").loaded


class TestFetchResultStrictness:
    """Off-contract envelopes are rejected rather than coerced."""

    @pytest.mark.parametrize("total", [True, "7", 7.0])
    def test_total_must_be_integer(self, total) -> None:
        with pytest.raises(ValidationError):
            FetchResult.model_validate(_payload(total=total))

    def test_request_id_must_be_integer(self) -> None:
        with pytest.raises(ValidationError):
            FetchResult.model_validate(_payload(requestId="7"))

    def test_snake_case_request_id_rejected(self) -> None:
        """Only the wire name requestId is accepted."""
        data = _payload()
        data["request_id"] = data.pop("requestId")
        with pytest.raises(ValidationError):
            FetchResult.model_validate(data)

    def test_timestamp_must_be_iso_8601(self) -> None:
        with pytest.raises(ValidationError, match="ISO-8601"):
            FetchResult.model_validate(_payload(timestamp="not-a-date"))

    def test_timestamp_kept_verbatim(self) -> None:
        result = FetchResult.model_validate(_payload(timestamp="2024-01-01T00:00:00+02:00"))
        assert result.timestamp == "2024-01-01T00:00:00+02:00"

    def test_article_fields_must_be_strings(self) -> None:
        with pytest.raises(ValidationError):
            FetchResult.model_validate(
                _payload(articles=[{"author": 1, "title": "T", "content": "C"}])
            )
