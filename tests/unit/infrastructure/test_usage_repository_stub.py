"""Unit tests for UsageRepositoryStub (Usage Store)."""

from __future__ import annotations

import pytest

from src.infrastructure.stubs.usage_repository_stub import UsageRepositoryStub


@pytest.fixture
def stub() -> UsageRepositoryStub:
    """Create a fresh UsageRepositoryStub."""
    return UsageRepositoryStub()


class TestUsageCounter:
    """Tests for get_access_count() and record_access()."""

    @pytest.mark.asyncio
    async def test_absent_reads_zero(self, stub: UsageRepositoryStub) -> None:
        assert await stub.get_access_count(1) == 0
        assert not stub.has_row(1)

    @pytest.mark.asyncio
    async def test_every_call_increments(self, stub: UsageRepositoryStub) -> None:
        assert await stub.record_access(1) == 1
        assert await stub.record_access(1) == 2
        assert await stub.record_access(2) == 1

        assert await stub.get_access_count(1) == 2

    @pytest.mark.asyncio
    async def test_clear(self, stub: UsageRepositoryStub) -> None:
        await stub.record_access(1)

        stub.clear()

        assert await stub.get_access_count(1) == 0
