"""Shared fixtures for Publication Registry tests.

Async tests carry ``pytest.mark.asyncio``. Unit tests live under tests/unit/,
mirroring the src/ layer they exercise.
"""

import pytest

from src.application.services.publication_registry_service import (
    PublicationRegistryService,
)
from src.infrastructure.stubs import (
    PermissionRepositoryStub,
    PublicationRepositoryStub,
    SequenceSourceStub,
    UsageRepositoryStub,
)


@pytest.fixture
def project_version() -> str:
    """Installed package version."""
    from src import __version__

    return __version__


@pytest.fixture
def registry_service() -> PublicationRegistryService:
    """Registry service over empty in-memory stores."""
    return PublicationRegistryService(
        publication_repo=PublicationRepositoryStub(),
        permission_repo=PermissionRepositoryStub(),
        usage_repo=UsageRepositoryStub(),
        sequence_source=SequenceSourceStub(),
    )
