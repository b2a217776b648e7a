"""Usage repository port (Usage Store).

This module defines the abstract interface for per-publication access
counters. A missing row reads as zero.
"""

from __future__ import annotations

from typing import Protocol


class UsageRepositoryProtocol(Protocol):
    """Protocol for Usage Store operations.

    Methods:
        get_access_count: Read the counter, defaulting to 0
        record_access: Increment the counter by exactly one
    """

    async def get_access_count(self, publication_id: int) -> int:
        """Return the access count for ``publication_id`` (0 if absent)."""
        ...

    async def record_access(self, publication_id: int) -> int:
        """Increment the access count by one.

        Not idempotent: every call increments.

        Returns:
            The count after the increment.
        """
        ...
