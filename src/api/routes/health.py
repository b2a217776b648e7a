"""Health check endpoint for the Publication Registry API.

Healthy means the registry service answers a read under its lock, so a
wedged registry shows up here rather than only on mutating calls.
"""

from fastapi import APIRouter, Depends

from src.api.dependencies.publication import get_publication_registry_service
from src.api.models.health import RegistryHealthResponse
from src.application.services.publication_registry_service import (
    PublicationRegistryService,
)

router = APIRouter(prefix="/v1", tags=["health"])


@router.get("/health", response_model=RegistryHealthResponse)
async def health_check(
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> RegistryHealthResponse:
    """Return health status and the registry counter."""
    return RegistryHealthResponse(
        publication_count=await service.get_publication_count()
    )
