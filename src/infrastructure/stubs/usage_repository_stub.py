"""Usage repository stub implementation (Usage Store).

This module provides an in-memory stub implementation of
UsageRepositoryProtocol for development and testing purposes.
"""

from __future__ import annotations

from src.application.ports.usage_repository import UsageRepositoryProtocol
from src.domain.models.usage_stat import UsageStat


class UsageRepositoryStub(UsageRepositoryProtocol):
    """In-memory stub implementation of UsageRepositoryProtocol.

    Attributes:
        _stats: Dictionary mapping publication id to UsageStat.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._stats: dict[int, UsageStat] = {}

    async def get_access_count(self, publication_id: int) -> int:
        """Return the access count, 0 when no row exists."""
        stat = self._stats.get(publication_id)
        return stat.access_count if stat is not None else 0

    async def record_access(self, publication_id: int) -> int:
        """Increment the counter by one and return the new value."""
        stat = self._stats.get(publication_id, UsageStat(publication_id=publication_id))
        updated = stat.incremented()
        self._stats[publication_id] = updated
        return updated.access_count

    # Test helper methods

    def has_row(self, publication_id: int) -> bool:
        """Check whether a row exists for a publication (for testing)."""
        return publication_id in self._stats

    def clear(self) -> None:
        """Clear all stored counters (for testing)."""
        self._stats.clear()
