"""Infrastructure stubs for development and testing.

This module provides in-memory implementations of the application ports.

Available stubs:
- PublicationRepositoryStub: Record Store with the registry counter
- PermissionRepositoryStub: Default-deny permission flags
- UsageRepositoryStub: Per-publication access counters
- SequenceSourceStub: Manually advanced sequence position

WARNING: These stubs keep state in process memory only.
"""

from src.infrastructure.stubs.permission_repository_stub import (
    PermissionRepositoryStub,
)
from src.infrastructure.stubs.publication_repository_stub import (
    PublicationRepositoryStub,
)
from src.infrastructure.stubs.sequence_source_stub import SequenceSourceStub
from src.infrastructure.stubs.usage_repository_stub import UsageRepositoryStub

__all__: list[str] = [
    "PermissionRepositoryStub",
    "PublicationRepositoryStub",
    "SequenceSourceStub",
    "UsageRepositoryStub",
]
