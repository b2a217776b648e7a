"""API request and response models."""

from src.api.models.health import RegistryHealthResponse
from src.api.models.publication import (
    ChangeCreatorRequest,
    ModifyPublicationRequest,
    OperationResponse,
    PermissionCheckResponse,
    PublicationDetailsResponse,
    PublicationErrorResponse,
    RegisterPublicationRequest,
    RegisterPublicationResponse,
    RegistryStatsResponse,
)

__all__ = [
    "ChangeCreatorRequest",
    "RegistryHealthResponse",
    "ModifyPublicationRequest",
    "OperationResponse",
    "PermissionCheckResponse",
    "PublicationDetailsResponse",
    "PublicationErrorResponse",
    "RegisterPublicationRequest",
    "RegisterPublicationResponse",
    "RegistryStatsResponse",
]
