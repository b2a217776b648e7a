"""Domain models for the Publication Registry.

Contains value objects and domain models that represent
core registry concepts. These models are immutable and
contain no infrastructure dependencies.
"""

from src.domain.models.permission import Permission, PermissionKey
from src.domain.models.publication import Publication, PublicationDetails
from src.domain.models.usage_stat import UsageStat

__all__: list[str] = [
    "Permission",
    "PermissionKey",
    "Publication",
    "PublicationDetails",
    "UsageStat",
]
