"""Unit tests for PublicationRepositoryStub (Record Store)."""

from __future__ import annotations

import pytest

from src.domain.models.publication import Publication
from src.infrastructure.stubs.publication_repository_stub import (
    PublicationRepositoryStub,
)


def _publication(publication_id: int, creator: str = "alice") -> Publication:
    return Publication(
        id=publication_id,
        title=f"Work {publication_id}",
        creator=creator,
        byte_count=100,
        creation_block=1,
        description="desc",
        tags=("t",),
    )


@pytest.fixture
def stub() -> PublicationRepositoryStub:
    """Create a fresh PublicationRepositoryStub."""
    return PublicationRepositoryStub()


class TestInsert:
    """Tests for insert() and the counter."""

    @pytest.mark.asyncio
    async def test_insert_advances_counter(self, stub: PublicationRepositoryStub) -> None:
        assert await stub.get_publication_count() == 0

        await stub.insert(_publication(1))

        assert await stub.get_publication_count() == 1
        assert await stub.get(1) == _publication(1)

    @pytest.mark.asyncio
    async def test_insert_rejects_skipped_identifier(
        self, stub: PublicationRepositoryStub
    ) -> None:
        with pytest.raises(ValueError, match="not the next identifier"):
            await stub.insert(_publication(2))

    @pytest.mark.asyncio
    async def test_insert_rejects_occupied_identifier(
        self, stub: PublicationRepositoryStub
    ) -> None:
        await stub.insert(_publication(1))

        with pytest.raises(ValueError, match="already exists"):
            await stub.insert(_publication(1))


class TestReplace:
    """Tests for replace()."""

    @pytest.mark.asyncio
    async def test_replace_overwrites(self, stub: PublicationRepositoryStub) -> None:
        await stub.insert(_publication(1))

        await stub.replace(_publication(1, creator="bob"))

        stored = await stub.get(1)
        assert stored is not None
        assert stored.creator == "bob"

    @pytest.mark.asyncio
    async def test_replace_unknown_raises(self, stub: PublicationRepositoryStub) -> None:
        with pytest.raises(KeyError):
            await stub.replace(_publication(1))


class TestDelete:
    """Tests for delete()."""

    @pytest.mark.asyncio
    async def test_delete_keeps_counter(self, stub: PublicationRepositoryStub) -> None:
        await stub.insert(_publication(1))

        await stub.delete(1)

        assert await stub.get(1) is None
        assert await stub.get_publication_count() == 1
        assert stub.get_stored_count() == 0

    @pytest.mark.asyncio
    async def test_delete_unknown_raises(self, stub: PublicationRepositoryStub) -> None:
        with pytest.raises(KeyError):
            await stub.delete(5)


class TestHelpers:
    """Tests for test helper methods."""

    @pytest.mark.asyncio
    async def test_clear_resets_counter(self, stub: PublicationRepositoryStub) -> None:
        await stub.insert(_publication(1))

        stub.clear()

        assert await stub.get_publication_count() == 0
        assert await stub.get(1) is None
