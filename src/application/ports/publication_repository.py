"""Publication repository port (Record Store).

This module defines the abstract interface for the Record Store: the mapping
from publication identifier to Publication, plus the registry counter.

Developer Golden Rules:
1. SERVICE AUTHORIZES - Ownership checks live in the service, not the store
2. COUNTER WITH INSERT - insert() advances the counter in the same step
3. NEVER REISSUE - Removing a publication does not rewind the counter
4. FAIL LOUD - Repository raises on misuse (unknown id, occupied id)
"""

from __future__ import annotations

from typing import Protocol

from src.domain.models.publication import Publication


class PublicationRepositoryProtocol(Protocol):
    """Protocol for Record Store operations.

    Methods:
        get_publication_count: Current value of the registry counter
        get: Retrieve a publication by identifier
        insert: Store a new publication and advance the counter
        replace: Overwrite an existing publication in place
        delete: Permanently erase a publication
    """

    async def get_publication_count(self) -> int:
        """Return the number of identifiers issued so far.

        The next identifier is always this value plus one.
        """
        ...

    async def get(self, publication_id: int) -> Publication | None:
        """Retrieve a publication by identifier.

        Args:
            publication_id: The registry identifier.

        Returns:
            The publication if present, None otherwise.
        """
        ...

    async def insert(self, publication: Publication) -> None:
        """Store a newly registered publication and advance the counter.

        Args:
            publication: Publication whose id equals the current count plus one.

        Raises:
            ValueError: If the id is occupied or is not the next identifier.
        """
        ...

    async def replace(self, publication: Publication) -> None:
        """Overwrite the stored publication with the same id.

        Args:
            publication: Replacement record.

        Raises:
            KeyError: If no publication exists at publication.id.
        """
        ...

    async def delete(self, publication_id: int) -> None:
        """Permanently erase a publication.

        Args:
            publication_id: The identifier to erase.

        Raises:
            KeyError: If no publication exists at publication_id.
        """
        ...
