"""Domain services for the Publication Registry.

Domain services contain business logic that doesn't naturally fit in entities
or value objects. They must NOT depend on infrastructure.

Available services:
- validate_publication_fields: Field rules shared by register and modify
"""

from src.domain.services.publication_validator import (
    DESCRIPTION_MAX_CHARS,
    FILE_SIZE_LIMIT,
    MAX_TAG_COUNT,
    TAG_MAX_CHARS,
    TITLE_MAX_CHARS,
    validate_publication_fields,
)

__all__ = [
    "DESCRIPTION_MAX_CHARS",
    "FILE_SIZE_LIMIT",
    "MAX_TAG_COUNT",
    "TAG_MAX_CHARS",
    "TITLE_MAX_CHARS",
    "validate_publication_fields",
]
