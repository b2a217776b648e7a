"""Publication registry API dependencies.

Dependency injection setup for the registry service and its stores.
Provides in-memory stub implementations.

All stores are process-wide singletons so every request sees the same
registry state. Tests replace them through the set_* functions or
app.dependency_overrides, and call reset_publication_dependencies() between
cases.
"""

from src.application.ports.permission_repository import (
    PermissionRepositoryProtocol,
)
from src.application.ports.publication_repository import (
    PublicationRepositoryProtocol,
)
from src.application.ports.sequence_source import SequenceSourceProtocol
from src.application.ports.usage_repository import UsageRepositoryProtocol
from src.application.services.publication_registry_service import (
    PublicationRegistryService,
)
from src.config.registry_config import RegistryConfig
from src.infrastructure.stubs.permission_repository_stub import (
    PermissionRepositoryStub,
)
from src.infrastructure.stubs.publication_repository_stub import (
    PublicationRepositoryStub,
)
from src.infrastructure.stubs.sequence_source_stub import SequenceSourceStub
from src.infrastructure.stubs.usage_repository_stub import UsageRepositoryStub

# Singleton instances for stubs

_registry_config: RegistryConfig | None = None
_publication_repository: PublicationRepositoryProtocol | None = None
_permission_repository: PermissionRepositoryProtocol | None = None
_usage_repository: UsageRepositoryProtocol | None = None
_sequence_source: SequenceSourceProtocol | None = None
_publication_registry_service: PublicationRegistryService | None = None


def get_registry_config() -> RegistryConfig:
    """Get registry configuration, loaded from the environment once."""
    global _registry_config
    if _registry_config is None:
        _registry_config = RegistryConfig.from_environment()
    return _registry_config


def get_publication_repository() -> PublicationRepositoryProtocol:
    """Get the Record Store instance.

    Returns:
        PublicationRepositoryProtocol implementation.
    """
    global _publication_repository
    if _publication_repository is None:
        _publication_repository = PublicationRepositoryStub()
    return _publication_repository


def get_permission_repository() -> PermissionRepositoryProtocol:
    """Get the Permission Store instance.

    Returns:
        PermissionRepositoryProtocol implementation.
    """
    global _permission_repository
    if _permission_repository is None:
        _permission_repository = PermissionRepositoryStub()
    return _permission_repository


def get_usage_repository() -> UsageRepositoryProtocol:
    """Get the Usage Store instance.

    Returns:
        UsageRepositoryProtocol implementation.
    """
    global _usage_repository
    if _usage_repository is None:
        _usage_repository = UsageRepositoryStub()
    return _usage_repository


def get_sequence_source() -> SequenceSourceProtocol:
    """Get the sequence source, seeded from configuration.

    Returns:
        SequenceSourceProtocol implementation.
    """
    global _sequence_source
    if _sequence_source is None:
        _sequence_source = SequenceSourceStub(
            start=get_registry_config().initial_sequence_position
        )
    return _sequence_source


def get_publication_registry_service() -> PublicationRegistryService:
    """Get the registry service instance.

    The service owns the registry lock, so it must be a singleton for the
    lock to serialize every request.

    Returns:
        PublicationRegistryService wired to the singleton stores.
    """
    global _publication_registry_service
    if _publication_registry_service is None:
        _publication_registry_service = PublicationRegistryService(
            publication_repo=get_publication_repository(),
            permission_repo=get_permission_repository(),
            usage_repo=get_usage_repository(),
            sequence_source=get_sequence_source(),
        )
    return _publication_registry_service


def reset_publication_dependencies() -> None:
    """Reset all singletons (for testing)."""
    global _registry_config
    global _publication_repository
    global _permission_repository
    global _usage_repository
    global _sequence_source
    global _publication_registry_service

    _registry_config = None
    _publication_repository = None
    _permission_repository = None
    _usage_repository = None
    _sequence_source = None
    _publication_registry_service = None


def set_registry_config(config: RegistryConfig) -> None:
    """Set custom registry configuration (for testing)."""
    global _registry_config, _sequence_source, _publication_registry_service
    _registry_config = config
    _sequence_source = None
    _publication_registry_service = None


def set_sequence_source(source: SequenceSourceProtocol) -> None:
    """Set custom sequence source (for testing)."""
    global _sequence_source, _publication_registry_service
    _sequence_source = source
    _publication_registry_service = None
