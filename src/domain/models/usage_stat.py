"""Usage statistics domain model."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UsageStat:
    """Access counter for one publication.

    Attributes:
        publication_id: The counted publication.
        access_count: Successful access operations, never negative.
    """

    publication_id: int
    access_count: int = 0

    def __post_init__(self) -> None:
        if self.access_count < 0:
            raise ValueError(
                f"access_count must be non-negative, got {self.access_count}"
            )

    def incremented(self) -> UsageStat:
        """Return the stat after one more access."""
        return UsageStat(
            publication_id=self.publication_id,
            access_count=self.access_count + 1,
        )
