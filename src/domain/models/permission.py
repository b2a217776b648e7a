"""Permission domain model.

A Permission row records whether one user may invoke the access operation on
one publication. Absence of a row means not permitted.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PermissionKey:
    """Composite key of the Permission Store.

    Attributes:
        publication_id: The publication the grant applies to.
        user: The identity the grant applies to.
    """

    publication_id: int
    user: str


@dataclass(frozen=True)
class Permission:
    """An explicit permission row.

    Attributes:
        key: (publication_id, user) pair.
        permitted: Whether access is allowed.
    """

    key: PermissionKey
    permitted: bool = True
