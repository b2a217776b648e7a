"""Permission repository port (Permission Store).

This module defines the abstract interface for the Permission Store: the
mapping from (publication identifier, user) to a boolean access flag.

Default-deny: a missing row reads as not permitted. There is no revoke
operation on this port.
"""

from __future__ import annotations

from typing import Protocol


class PermissionRepositoryProtocol(Protocol):
    """Protocol for Permission Store operations.

    Methods:
        is_permitted: Read a flag, defaulting to False
        grant: Insert or overwrite a permitted=True row
    """

    async def is_permitted(self, publication_id: int, user: str) -> bool:
        """Return whether ``user`` may access ``publication_id``.

        Never raises; absent rows read as False.
        """
        ...

    async def grant(self, publication_id: int, user: str) -> None:
        """Record that ``user`` may access ``publication_id``."""
        ...
