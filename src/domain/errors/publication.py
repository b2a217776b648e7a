"""Publication registry domain errors.

This module provides the closed error taxonomy for the registry. Every error
carries a stable numeric code so external callers can interoperate without
parsing messages.

Error Codes:
- 301 NotFound: No publication exists at the requested identifier
- 302 DuplicateEntry: Reserved
- 303 InvalidTitle: Title, description or tag list failed validation
- 304 InvalidSize: Declared byte count failed validation
- 305 Unauthorized: Caller is not the publication's creator
- 306 InvalidUser: Reserved
- 307 AdminOnly: Reserved
- 308 PermissionDenied: Caller lacks an access grant for the publication
- 309 AccessForbidden: Reserved

Reserved codes have no raising code path. They stay in the taxonomy for
interface compatibility.
"""

from __future__ import annotations

from enum import IntEnum

from src.domain.exceptions import RegistryError


class RegistryErrorCode(IntEnum):
    """Stable numeric codes reported to registry callers."""

    NOT_FOUND = 301
    DUPLICATE_ENTRY = 302
    INVALID_TITLE = 303
    INVALID_SIZE = 304
    UNAUTHORIZED = 305
    INVALID_USER = 306
    ADMIN_ONLY = 307
    PERMISSION_DENIED = 308
    ACCESS_FORBIDDEN = 309


class PublicationRegistryError(RegistryError):
    """Base error for publication registry operations.

    Subclasses set ``code``, ``title`` and ``slug``. The HTTP status is not
    a property of the error; the API layer maps codes to statuses.

    Attributes:
        code: Stable numeric registry code.
        title: Short human-readable summary used in problem details.
        slug: URN suffix used to build the problem ``type``.
    """

    code: RegistryErrorCode
    title: str = "Registry Error"
    slug: str = "error"

    def context(self) -> dict:
        """Return error-specific fields for problem details."""
        return {}

    def to_rfc7807_dict(self) -> dict:
        """Serialize to RFC 7807 problem details with the registry code.

        The ``status`` member is left to the caller, which owns the
        code-to-status mapping.

        Returns:
            Dictionary with type, title, detail, code and context fields.
        """
        result: dict = {
            "type": f"urn:publication-registry:{self.slug}",
            "title": self.title,
            "detail": str(self),
            "code": int(self.code),
        }
        result.update(self.context())
        return result


class PublicationNotFoundError(PublicationRegistryError):
    """Raised when no publication exists at the requested identifier.

    Attributes:
        publication_id: The identifier that was looked up.
    """

    code = RegistryErrorCode.NOT_FOUND
    title = "Publication Not Found"
    slug = "not-found"

    def __init__(self, publication_id: int) -> None:
        self.publication_id = publication_id
        super().__init__(f"Publication {publication_id} not found")

    def context(self) -> dict:
        return {"publication_id": self.publication_id}


class DuplicateEntryError(PublicationRegistryError):
    """Reserved: a publication identifier is already occupied.

    Identifiers are always freshly allocated, so no registry operation
    raises this error.
    """

    code = RegistryErrorCode.DUPLICATE_ENTRY
    title = "Duplicate Entry"
    slug = "duplicate-entry"

    def __init__(self, publication_id: int) -> None:
        self.publication_id = publication_id
        super().__init__(f"Publication {publication_id} already exists")

    def context(self) -> dict:
        return {"publication_id": self.publication_id}


class InvalidTitleError(PublicationRegistryError):
    """Raised when title, description or tags fail validation.

    Description and tag failures report this same code (303). The
    ``field`` attribute tells them apart for diagnostics without changing
    the code callers see.

    Attributes:
        field: Which input failed ("title", "description" or "tags").
        reason: Description of the violated bound.
    """

    code = RegistryErrorCode.INVALID_TITLE
    title = "Invalid Title"
    slug = "invalid-title"

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"Invalid {field}: {reason}")

    def context(self) -> dict:
        return {"field": self.field}


class InvalidSizeError(PublicationRegistryError):
    """Raised when the declared byte count is out of range.

    Attributes:
        byte_count: The rejected value.
    """

    code = RegistryErrorCode.INVALID_SIZE
    title = "Invalid Size"
    slug = "invalid-size"

    def __init__(self, byte_count: object) -> None:
        self.byte_count = byte_count
        super().__init__(f"Invalid byte count: {byte_count!r}")

    def context(self) -> dict:
        return {"byte_count": self.byte_count}


class UnauthorizedError(PublicationRegistryError):
    """Raised when a non-creator attempts an ownership-gated operation.

    Attributes:
        publication_id: The publication the caller tried to mutate.
        requester: The caller identity.
        operation: Name of the rejected operation.
    """

    code = RegistryErrorCode.UNAUTHORIZED
    title = "Unauthorized"
    slug = "unauthorized"

    def __init__(self, publication_id: int, requester: str, operation: str) -> None:
        self.publication_id = publication_id
        self.requester = requester
        self.operation = operation
        super().__init__(
            f"{requester} is not the creator of publication {publication_id}; "
            f"{operation} rejected"
        )

    def context(self) -> dict:
        return {
            "publication_id": self.publication_id,
            "requester": self.requester,
            "operation": self.operation,
        }


class InvalidUserError(PublicationRegistryError):
    """Reserved: the supplied user identity is malformed or unknown."""

    code = RegistryErrorCode.INVALID_USER
    title = "Invalid User"
    slug = "invalid-user"

    def __init__(self, user: str) -> None:
        self.user = user
        super().__init__(f"Invalid user: {user}")

    def context(self) -> dict:
        return {"user": self.user}


class AdminOnlyError(PublicationRegistryError):
    """Reserved: the operation requires an administrator."""

    code = RegistryErrorCode.ADMIN_ONLY
    title = "Admin Only"
    slug = "admin-only"

    def __init__(self, requester: str, operation: str) -> None:
        self.requester = requester
        self.operation = operation
        super().__init__(f"{operation} is restricted to administrators")

    def context(self) -> dict:
        return {"requester": self.requester, "operation": self.operation}


class PermissionDeniedError(PublicationRegistryError):
    """Raised when the caller has no access grant for the publication.

    Attributes:
        publication_id: The publication the caller tried to access.
        requester: The caller identity.
    """

    code = RegistryErrorCode.PERMISSION_DENIED
    title = "Permission Denied"
    slug = "permission-denied"

    def __init__(self, publication_id: int, requester: str) -> None:
        self.publication_id = publication_id
        self.requester = requester
        super().__init__(
            f"{requester} has no access permission for publication {publication_id}"
        )

    def context(self) -> dict:
        return {"publication_id": self.publication_id, "requester": self.requester}


class AccessForbiddenError(PublicationRegistryError):
    """Reserved: access to the publication is forbidden outright."""

    code = RegistryErrorCode.ACCESS_FORBIDDEN
    title = "Access Forbidden"
    slug = "access-forbidden"

    def __init__(self, publication_id: int, requester: str) -> None:
        self.publication_id = publication_id
        self.requester = requester
        super().__init__(
            f"Access to publication {publication_id} is forbidden for {requester}"
        )

    def context(self) -> dict:
        return {"publication_id": self.publication_id, "requester": self.requester}
