"""Publication registry service implementation.

This module implements the registry's state machine over three independent
stores: the Record Store (publications and the registry counter), the
Permission Store and the Usage Store.

Operation Rules:
- register: validate, allocate count + 1, store, grant creator, advance counter
- get_details: record plus access count; pure read
- change_creator / modify / remove: existence, then ownership, then write
- access_publication: existence, then permission, then increment usage

Atomicity:
Every public operation runs under one registry-wide asyncio.Lock. All checks
complete before the first write, so a rejected operation leaves every store
untouched, and identifier allocation is linearized with record insertion.

Known Limitations (reproduced deliberately):
- Removal does not delete permission or usage rows
- Only registration writes permission rows; there is no grant/revoke
- change_creator does not grant the new creator access permission
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from typing import TYPE_CHECKING, NoReturn

from structlog import BoundLogger, get_logger

from src.domain.errors import (
    PermissionDeniedError,
    PublicationNotFoundError,
    PublicationRegistryError,
    UnauthorizedError,
)
from src.domain.models.publication import Publication, PublicationDetails
from src.domain.services.publication_validator import validate_publication_fields

if TYPE_CHECKING:
    from src.application.ports.permission_repository import (
        PermissionRepositoryProtocol,
    )
    from src.application.ports.publication_repository import (
        PublicationRepositoryProtocol,
    )
    from src.application.ports.sequence_source import SequenceSourceProtocol
    from src.application.ports.usage_repository import UsageRepositoryProtocol

logger = get_logger(__name__)


class PublicationRegistryService:
    """Service for registering, mutating and accessing publications.

    The service ensures:
    1. Field validation runs before any write (register, modify)
    2. Ownership-gated operations compare the caller with the stored creator
    3. Access requires an explicit permission row (default deny)
    4. Operations are serialized and indivisible

    Example:
        >>> service = PublicationRegistryService(
        ...     publication_repo=PublicationRepositoryStub(),
        ...     permission_repo=PermissionRepositoryStub(),
        ...     usage_repo=UsageRepositoryStub(),
        ...     sequence_source=SequenceSourceStub(),
        ... )
        >>> publication_id = await service.register(
        ...     title="Field Notes",
        ...     byte_count=2048,
        ...     description="Survey notes",
        ...     tags=["survey"],
        ...     requester="principal-a",
        ... )
    """

    def __init__(
        self,
        publication_repo: PublicationRepositoryProtocol,
        permission_repo: PermissionRepositoryProtocol,
        usage_repo: UsageRepositoryProtocol,
        sequence_source: SequenceSourceProtocol,
    ) -> None:
        """Initialize the registry service.

        Args:
            publication_repo: Record Store holding publications and the counter.
            permission_repo: Permission Store.
            usage_repo: Usage Store.
            sequence_source: Supplies the position stamped as creation_block.
        """
        self._publication_repo = publication_repo
        self._permission_repo = permission_repo
        self._usage_repo = usage_repo
        self._sequence_source = sequence_source
        self._lock = asyncio.Lock()

    async def register(
        self,
        title: str,
        byte_count: int,
        description: str,
        tags: Sequence[str],
        requester: str,
    ) -> int:
        """Register a new publication owned by ``requester``.

        Args:
            title: Title, 1..63 characters.
            byte_count: Declared file size, 1 <= n < 1,000,000,000.
            description: Description, 1..255 characters.
            tags: 1..8 labels of 1..31 characters.
            requester: Caller identity; becomes the creator.

        Returns:
            The newly allocated publication identifier.

        Raises:
            InvalidTitleError: Title, description or tags out of bounds.
            InvalidSizeError: Byte count out of bounds.
        """
        log = logger.bind(requester=requester, operation="register")

        async with self._lock:
            self._validate(log, title, byte_count, description, tags)

            publication_id = await self._publication_repo.get_publication_count() + 1
            publication = Publication(
                id=publication_id,
                title=title,
                creator=requester,
                byte_count=byte_count,
                creation_block=self._sequence_source.current_position(),
                description=description,
                tags=tuple(tags),
            )
            await self._publication_repo.insert(publication)
            await self._permission_repo.grant(publication_id, requester)

        log.info(
            "Publication registered",
            publication_id=publication_id,
            creation_block=publication.creation_block,
        )
        return publication_id

    async def get_details(self, publication_id: int) -> PublicationDetails:
        """Return a publication's fields and its access count.

        Raises:
            PublicationNotFoundError: No publication at ``publication_id``.
        """
        async with self._lock:
            publication = await self._publication_repo.get(publication_id)
            if publication is None:
                self._reject(
                    logger.bind(publication_id=publication_id, operation="get_details"),
                    PublicationNotFoundError(publication_id),
                )
            access_count = await self._usage_repo.get_access_count(publication_id)

        return PublicationDetails(publication=publication, access_count=access_count)

    async def change_creator(
        self,
        publication_id: int,
        new_creator: str,
        requester: str,
    ) -> bool:
        """Transfer ownership of a publication.

        Only ``creator`` changes. No permission row is granted to the new
        creator and none is revoked from the old one.

        Raises:
            PublicationNotFoundError: No publication at ``publication_id``.
            UnauthorizedError: ``requester`` is not the creator.
        """
        log = logger.bind(
            publication_id=publication_id,
            requester=requester,
            operation="change_creator",
        )

        async with self._lock:
            publication = await self._get_owned(log, publication_id, requester, "change_creator")
            await self._publication_repo.replace(publication.with_creator(new_creator))

        log.info("Publication creator changed", new_creator=new_creator)
        return True

    async def modify(
        self,
        publication_id: int,
        title: str,
        byte_count: int,
        description: str,
        tags: Sequence[str],
        requester: str,
    ) -> bool:
        """Replace a publication's title, byte count, description and tags.

        Existence and ownership are checked before field validation.

        Raises:
            PublicationNotFoundError: No publication at ``publication_id``.
            UnauthorizedError: ``requester`` is not the creator.
            InvalidTitleError: Title, description or tags out of bounds.
            InvalidSizeError: Byte count out of bounds.
        """
        log = logger.bind(
            publication_id=publication_id,
            requester=requester,
            operation="modify",
        )

        async with self._lock:
            publication = await self._get_owned(log, publication_id, requester, "modify")
            self._validate(log, title, byte_count, description, tags)
            await self._publication_repo.replace(
                publication.with_metadata(title, byte_count, description, tags)
            )

        log.info("Publication modified")
        return True

    async def remove(self, publication_id: int, requester: str) -> bool:
        """Permanently delete a publication.

        Permission and usage rows for the publication are left in place.

        Raises:
            PublicationNotFoundError: No publication at ``publication_id``.
            UnauthorizedError: ``requester`` is not the creator.
        """
        log = logger.bind(
            publication_id=publication_id,
            requester=requester,
            operation="remove",
        )

        async with self._lock:
            await self._get_owned(log, publication_id, requester, "remove")
            await self._publication_repo.delete(publication_id)

        log.info("Publication removed")
        return True

    async def access_publication(self, publication_id: int, requester: str) -> bool:
        """Record one access to a publication by a permitted caller.

        Raises:
            PublicationNotFoundError: No publication at ``publication_id``.
            PermissionDeniedError: ``requester`` has no permission row.
        """
        log = logger.bind(
            publication_id=publication_id,
            requester=requester,
            operation="access_publication",
        )

        async with self._lock:
            publication = await self._publication_repo.get(publication_id)
            if publication is None:
                self._reject(log, PublicationNotFoundError(publication_id))

            if not await self._permission_repo.is_permitted(publication_id, requester):
                self._reject(log, PermissionDeniedError(publication_id, requester))

            access_count = await self._usage_repo.record_access(publication_id)

        log.info("Publication accessed", access_count=access_count)
        return True

    async def has_permission(self, publication_id: int, user: str) -> bool:
        """Read the permission flag for (publication, user).

        Never raises. Unknown publications and users read as False.
        """
        async with self._lock:
            return await self._permission_repo.is_permitted(publication_id, user)

    async def get_publication_count(self) -> int:
        """Return how many identifiers have been issued."""
        async with self._lock:
            return await self._publication_repo.get_publication_count()

    async def _get_owned(
        self,
        log: BoundLogger,
        publication_id: int,
        requester: str,
        operation: str,
    ) -> Publication:
        """Fetch a publication and check the caller owns it."""
        publication = await self._publication_repo.get(publication_id)
        if publication is None:
            self._reject(log, PublicationNotFoundError(publication_id))
        if not publication.is_created_by(requester):
            self._reject(log, UnauthorizedError(publication_id, requester, operation))
        return publication

    def _validate(
        self,
        log: BoundLogger,
        title: str,
        byte_count: int,
        description: str,
        tags: Sequence[str],
    ) -> None:
        try:
            validate_publication_fields(title, byte_count, description, tags)
        except PublicationRegistryError as error:
            self._reject(log, error)

    @staticmethod
    def _reject(log: BoundLogger, error: PublicationRegistryError) -> NoReturn:
        """Log a rejection with its registry code, then raise it."""
        log.warning(
            "Registry operation rejected",
            error_code=int(error.code),
            error_type=type(error).__name__,
            reason=str(error),
        )
        raise error
