"""Publication metadata validation domain service.

This module provides the field validation shared by registration and
modification of publications.

Validation Order (first failure wins):
1. Title: 1 <= len(title) < 64 -> InvalidTitleError
2. Byte count: 1 <= byte_count < 1,000,000,000 -> InvalidSizeError
3. Description: 1 <= len(description) < 256 -> InvalidTitleError
4. Tags: 1..8 entries, each 1 <= len(tag) < 32 -> InvalidTitleError

Description and tag failures deliberately report the title error code (303).
Callers depend on that mapping.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.errors.publication import InvalidSizeError, InvalidTitleError

# Upper bounds are exclusive except MAX_TAG_COUNT
TITLE_MAX_CHARS: int = 64
FILE_SIZE_LIMIT: int = 1_000_000_000
DESCRIPTION_MAX_CHARS: int = 256
MAX_TAG_COUNT: int = 8
TAG_MAX_CHARS: int = 32


def validate_title(title: str) -> None:
    """Validate title length.

    Raises:
        InvalidTitleError: If the title is empty or 64+ characters.
    """
    if not 1 <= len(title) < TITLE_MAX_CHARS:
        raise InvalidTitleError(
            "title",
            f"length must be 1..{TITLE_MAX_CHARS - 1} characters, got {len(title)}",
        )


def validate_byte_count(byte_count: int) -> None:
    """Validate declared file size.

    Booleans are rejected even though they are ints in Python.

    Raises:
        InvalidSizeError: If byte_count is not an int or is out of range.
    """
    if isinstance(byte_count, bool) or not isinstance(byte_count, int):
        raise InvalidSizeError(byte_count)
    if not 1 <= byte_count < FILE_SIZE_LIMIT:
        raise InvalidSizeError(byte_count)


def validate_description(description: str) -> None:
    """Validate description length.

    Raises:
        InvalidTitleError: If the description is empty or 256+ characters.
    """
    if not 1 <= len(description) < DESCRIPTION_MAX_CHARS:
        raise InvalidTitleError(
            "description",
            f"length must be 1..{DESCRIPTION_MAX_CHARS - 1} characters, "
            f"got {len(description)}",
        )


def validate_tags(tags: Sequence[str]) -> None:
    """Validate tag list size and each tag's length.

    Raises:
        InvalidTitleError: If the list is empty, has more than 8 entries,
            is a bare string, or any tag is empty or 32+ characters.
    """
    if isinstance(tags, str):
        raise InvalidTitleError("tags", "must be a list of labels, not a string")
    if not 1 <= len(tags) <= MAX_TAG_COUNT:
        raise InvalidTitleError(
            "tags", f"must contain 1..{MAX_TAG_COUNT} entries, got {len(tags)}"
        )
    for index, tag in enumerate(tags):
        if not 1 <= len(tag) < TAG_MAX_CHARS:
            raise InvalidTitleError(
                "tags",
                f"tag {index} length must be 1..{TAG_MAX_CHARS - 1} characters, "
                f"got {len(tag)}",
            )


def validate_publication_fields(
    title: str,
    byte_count: int,
    description: str,
    tags: Sequence[str],
) -> None:
    """Run every field rule in order.

    Args:
        title: Publication title.
        byte_count: Declared file size in bytes.
        description: Free-text description.
        tags: Ordered short labels.

    Raises:
        InvalidTitleError: Title, description or tags out of bounds.
        InvalidSizeError: Byte count out of bounds.
    """
    validate_title(title)
    validate_byte_count(byte_count)
    validate_description(description)
    validate_tags(tags)
