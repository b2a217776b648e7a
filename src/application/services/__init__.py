"""Application services - Use case orchestration.

This module contains application services that orchestrate domain
operations and coordinate with infrastructure adapters.

Available services:
- PublicationRegistryService: Registration, ownership-gated mutation and access
"""

from src.application.services.publication_registry_service import (
    PublicationRegistryService,
)

__all__: list[str] = ["PublicationRegistryService"]
