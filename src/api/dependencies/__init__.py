"""API dependencies for dependency injection."""

from src.api.dependencies.identity import get_requester
from src.api.dependencies.publication import (
    get_publication_registry_service,
    get_registry_config,
    reset_publication_dependencies,
)

__all__: list[str] = [
    "get_publication_registry_service",
    "get_registry_config",
    "get_requester",
    "reset_publication_dependencies",
]
