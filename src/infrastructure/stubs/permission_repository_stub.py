"""Permission repository stub implementation (Permission Store).

This module provides an in-memory stub implementation of
PermissionRepositoryProtocol for development and testing purposes.
"""

from __future__ import annotations

from src.application.ports.permission_repository import (
    PermissionRepositoryProtocol,
)
from src.domain.models.permission import Permission, PermissionKey


class PermissionRepositoryStub(PermissionRepositoryProtocol):
    """In-memory stub implementation of PermissionRepositoryProtocol.

    Attributes:
        _permissions: Dictionary mapping PermissionKey to Permission.
    """

    def __init__(self) -> None:
        """Initialize the stub with empty storage."""
        self._permissions: dict[PermissionKey, Permission] = {}

    async def is_permitted(self, publication_id: int, user: str) -> bool:
        """Return the stored flag, False when no row exists."""
        permission = self._permissions.get(PermissionKey(publication_id, user))
        return permission is not None and permission.permitted

    async def grant(self, publication_id: int, user: str) -> None:
        """Insert or overwrite a permitted row."""
        key = PermissionKey(publication_id, user)
        self._permissions[key] = Permission(key=key, permitted=True)

    # Test helper methods

    def list_for_publication(self, publication_id: int) -> list[Permission]:
        """List rows for one publication, ordered by user (for testing)."""
        return sorted(
            (p for p in self._permissions.values() if p.key.publication_id == publication_id),
            key=lambda p: p.key.user,
        )

    def get_permission_count(self) -> int:
        """Get total number of stored rows (for testing)."""
        return len(self._permissions)

    def clear(self) -> None:
        """Clear all stored rows (for testing)."""
        self._permissions.clear()
