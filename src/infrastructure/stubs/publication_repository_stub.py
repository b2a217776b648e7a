"""Publication repository stub implementation (Record Store).

This module provides an in-memory stub implementation of
PublicationRepositoryProtocol for development and testing purposes.

Constraints:
- Identifiers are issued strictly as count + 1
- The counter never moves backwards, so removed ids are never reissued
"""

from __future__ import annotations

from src.application.ports.publication_repository import (
    PublicationRepositoryProtocol,
)
from src.domain.models.publication import Publication


class PublicationRepositoryStub(PublicationRepositoryProtocol):
    """In-memory stub implementation of PublicationRepositoryProtocol.

    This stub stores publications in memory for development and testing.
    It is NOT suitable for production use.

    Attributes:
        _publications: Dictionary mapping publication id to Publication.
        _publication_count: Number of identifiers issued so far.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._publications: dict[int, Publication] = {}
        self._publication_count: int = 0

    async def get_publication_count(self) -> int:
        """Return the number of identifiers issued so far."""
        return self._publication_count

    async def get(self, publication_id: int) -> Publication | None:
        """Retrieve a publication by identifier."""
        return self._publications.get(publication_id)

    async def insert(self, publication: Publication) -> None:
        """Store a new publication and advance the counter.

        Raises:
            ValueError: If the id is occupied or is not count + 1.
        """
        if publication.id in self._publications:
            raise ValueError(f"Publication already exists: {publication.id}")
        expected_id = self._publication_count + 1
        if publication.id != expected_id:
            raise ValueError(
                f"Publication id {publication.id} is not the next identifier "
                f"({expected_id})"
            )
        self._publications[publication.id] = publication
        self._publication_count = expected_id

    async def replace(self, publication: Publication) -> None:
        """Overwrite an existing publication.

        Raises:
            KeyError: If no publication exists at publication.id.
        """
        if publication.id not in self._publications:
            raise KeyError(f"Publication not found: {publication.id}")
        self._publications[publication.id] = publication

    async def delete(self, publication_id: int) -> None:
        """Permanently erase a publication.

        Raises:
            KeyError: If no publication exists at publication_id.
        """
        if publication_id not in self._publications:
            raise KeyError(f"Publication not found: {publication_id}")
        del self._publications[publication_id]

    # Test helper methods

    def clear(self) -> None:
        """Clear all stored data and reset the counter (for testing)."""
        self._publications.clear()
        self._publication_count = 0

    def get_stored_count(self) -> int:
        """Get number of publications currently stored (for testing)."""
        return len(self._publications)
