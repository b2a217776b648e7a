"""Domain errors for the Publication Registry.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from RegistryError.
"""

from src.domain.errors.publication import (
    AccessForbiddenError,
    AdminOnlyError,
    DuplicateEntryError,
    InvalidSizeError,
    InvalidTitleError,
    InvalidUserError,
    PermissionDeniedError,
    PublicationNotFoundError,
    PublicationRegistryError,
    RegistryErrorCode,
    UnauthorizedError,
)

__all__: list[str] = [
    "RegistryErrorCode",
    "PublicationRegistryError",
    "PublicationNotFoundError",
    "DuplicateEntryError",
    "InvalidTitleError",
    "InvalidSizeError",
    "UnauthorizedError",
    "InvalidUserError",
    "AdminOnlyError",
    "PermissionDeniedError",
    "AccessForbiddenError",
]
