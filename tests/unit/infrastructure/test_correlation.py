"""Unit tests for request context (correlation and principal IDs)."""

import asyncio
import re

import pytest

from src.infrastructure.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    get_principal_id,
    request_context_processor,
    set_correlation_id,
    set_principal_id,
)


@pytest.fixture(autouse=True)
def clean_context() -> None:
    """Start and finish every test with an empty context."""
    set_correlation_id("")
    set_principal_id("")
    yield
    set_correlation_id("")
    set_principal_id("")


class TestGenerateCorrelationId:
    """Tests for generate_correlation_id()."""

    def test_uuid4_format(self) -> None:
        uuid_pattern = re.compile(
            r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
        )
        assert uuid_pattern.match(generate_correlation_id()) is not None

    def test_unique(self) -> None:
        assert len({generate_correlation_id() for _ in range(100)}) == 100


class TestContextVariables:
    """Tests for set/get of context values."""

    def test_empty_by_default(self) -> None:
        assert get_correlation_id() == ""
        assert get_principal_id() == ""

    def test_set_and_get(self) -> None:
        set_correlation_id("corr-1")
        set_principal_id("alice")

        assert get_correlation_id() == "corr-1"
        assert get_principal_id() == "alice"

    @pytest.mark.asyncio
    async def test_isolated_between_tasks(self) -> None:
        """Concurrent tasks keep their own principal."""
        results: dict[str, str] = {}

        async def act_as(principal: str) -> None:
            set_principal_id(principal)
            await asyncio.sleep(0.01)
            results[principal] = get_principal_id()

        await asyncio.gather(act_as("alice"), act_as("bob"), act_as("carol"))

        assert results == {"alice": "alice", "bob": "bob", "carol": "carol"}


class TestRequestContextProcessor:
    """Tests for the structlog processor."""

    def test_adds_both_ids(self) -> None:
        set_correlation_id("corr-2")
        set_principal_id("alice")

        result = request_context_processor(None, "info", {"event": "e", "key": 1})

        assert result == {
            "event": "e",
            "key": 1,
            "correlation_id": "corr-2",
            "principal_id": "alice",
        }

    def test_skips_unset_values(self) -> None:
        result = request_context_processor(None, "info", {"event": "e"})

        assert "correlation_id" not in result
        assert "principal_id" not in result

    def test_explicit_values_win(self) -> None:
        set_principal_id("alice")

        result = request_context_processor(
            None, "info", {"event": "e", "principal_id": "bob"}
        )

        assert result["principal_id"] == "bob"
