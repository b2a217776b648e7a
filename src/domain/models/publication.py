"""Publication domain models.

This module defines the records held by the registry's Record Store:
- Publication: One registered work's metadata
- PublicationDetails: Read view combining a Publication with its access count

Invariants:
- id is unique, positive and never reissued
- creation_block never changes after registration
- creator changes only through ownership transfer

Usage:
    publication = Publication(
        id=1,
        title="Field Notes",
        creator="principal-a",
        byte_count=2048,
        creation_block=17,
        description="Survey notes, spring season",
        tags=("survey", "notes"),
    )
    transferred = publication.with_creator("principal-b")
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, replace


@dataclass(frozen=True, eq=True)
class Publication:
    """A registered publication's metadata.

    Instances are immutable. Mutations produce a replacement stored in the
    same slot, so ``id`` and ``creation_block`` are carried over unchanged.

    Attributes:
        id: Registry-assigned identifier, starting at 1.
        title: Title, 1..63 characters.
        creator: Identity of the current owning principal.
        byte_count: Declared file size in bytes.
        creation_block: Sequence position at registration.
        description: Description, 1..255 characters.
        tags: Ordered labels, 1..8 entries of 1..31 characters.
    """

    id: int
    title: str
    creator: str
    byte_count: int
    creation_block: int
    description: str
    tags: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate identity fields.

        Metadata bounds are enforced by the validator before construction.

        Raises:
            ValueError: If id is not positive or creation_block is negative.
        """
        if self.id < 1:
            raise ValueError(f"id must be positive, got {self.id}")
        if self.creation_block < 0:
            raise ValueError(
                f"creation_block must be non-negative, got {self.creation_block}"
            )
        if not isinstance(self.tags, tuple):
            object.__setattr__(self, "tags", tuple(self.tags))

    def with_creator(self, new_creator: str) -> Publication:
        """Return a copy owned by ``new_creator``, all other fields kept."""
        return replace(self, creator=new_creator)

    def with_metadata(
        self,
        title: str,
        byte_count: int,
        description: str,
        tags: Sequence[str],
    ) -> Publication:
        """Return a copy with replaced metadata.

        ``creator`` and ``creation_block`` are kept.
        """
        return replace(
            self,
            title=title,
            byte_count=byte_count,
            description=description,
            tags=tuple(tags),
        )

    def is_created_by(self, principal: str) -> bool:
        """Check whether ``principal`` is the current creator."""
        return self.creator == principal

    def to_dict(self) -> dict:
        """Serialize to dictionary for logs and API payloads."""
        return {
            "id": self.id,
            "title": self.title,
            "creator": self.creator,
            "byte_count": self.byte_count,
            "creation_block": self.creation_block,
            "description": self.description,
            "tags": list(self.tags),
        }


@dataclass(frozen=True)
class PublicationDetails:
    """Read view of a publication plus its usage counter.

    Attributes:
        publication: The stored publication record.
        access_count: Successful access operations so far (0 if never accessed).
    """

    publication: Publication
    access_count: int = 0

    def __post_init__(self) -> None:
        if self.access_count < 0:
            raise ValueError(
                f"access_count must be non-negative, got {self.access_count}"
            )

    def to_dict(self) -> dict:
        """Serialize to dictionary including access_count."""
        result = self.publication.to_dict()
        result["access_count"] = self.access_count
        return result
