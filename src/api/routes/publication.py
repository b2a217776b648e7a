"""Publication registry API routes.

FastAPI router for registering, reading, mutating and accessing publications.

Caller identity comes from the configured identity header (see
src.api.dependencies.identity). Registry errors are returned as RFC 7807
problem details carrying the numeric registry code.

Status Mapping:
- 301 NotFound -> 404
- 302 DuplicateEntry -> 409
- 303 InvalidTitle, 304 InvalidSize, 306 InvalidUser -> 400
- 305 Unauthorized, 307 AdminOnly, 308 PermissionDenied, 309 AccessForbidden -> 403
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from src.api.dependencies.identity import get_requester
from src.api.dependencies.publication import get_publication_registry_service
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
from src.application.services.publication_registry_service import (
    PublicationRegistryService,
)
from src.domain.errors import PublicationRegistryError, RegistryErrorCode

router = APIRouter(prefix="/v1", tags=["publications"])

ERROR_STATUS: dict[RegistryErrorCode, int] = {
    RegistryErrorCode.NOT_FOUND: 404,
    RegistryErrorCode.DUPLICATE_ENTRY: 409,
    RegistryErrorCode.INVALID_TITLE: 400,
    RegistryErrorCode.INVALID_SIZE: 400,
    RegistryErrorCode.UNAUTHORIZED: 403,
    RegistryErrorCode.INVALID_USER: 400,
    RegistryErrorCode.ADMIN_ONLY: 403,
    RegistryErrorCode.PERMISSION_DENIED: 403,
    RegistryErrorCode.ACCESS_FORBIDDEN: 403,
}


def _to_http_exception(error: PublicationRegistryError, request: Request) -> HTTPException:
    """Convert a registry error into an RFC 7807 HTTPException."""
    status_code = ERROR_STATUS[error.code]
    detail = error.to_rfc7807_dict()
    detail["status"] = status_code
    detail["instance"] = str(request.url)
    return HTTPException(status_code=status_code, detail=detail)


@router.post(
    "/publications",
    response_model=RegisterPublicationResponse,
    status_code=201,
    responses={
        400: {
            "model": PublicationErrorResponse,
            "description": "Invalid title, description, tags (303) or size (304)",
        },
        401: {"description": "Caller identity header missing"},
    },
    summary="Register a publication",
)
async def register_publication(
    request_data: RegisterPublicationRequest,
    request: Request,
    requester: str = Depends(get_requester),
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> RegisterPublicationResponse:
    """Register a publication owned by the caller.

    The caller becomes the creator and is granted access permission.
    """
    try:
        publication_id = await service.register(
            title=request_data.title,
            byte_count=request_data.byte_count,
            description=request_data.description,
            tags=request_data.tags,
            requester=requester,
        )
    except PublicationRegistryError as e:
        raise _to_http_exception(e, request) from None
    return RegisterPublicationResponse(publication_id=publication_id)


@router.get(
    "/publications/{publication_id}",
    response_model=PublicationDetailsResponse,
    responses={404: {"model": PublicationErrorResponse, "description": "Not found (301)"}},
    summary="Get publication details",
)
async def get_publication_details(
    publication_id: int,
    request: Request,
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> PublicationDetailsResponse:
    """Return all stored fields plus the access count. No identity required."""
    try:
        details = await service.get_details(publication_id)
    except PublicationRegistryError as e:
        raise _to_http_exception(e, request) from None

    publication = details.publication
    return PublicationDetailsResponse(
        publication_id=publication.id,
        title=publication.title,
        creator=publication.creator,
        byte_count=publication.byte_count,
        creation_block=publication.creation_block,
        description=publication.description,
        tags=list(publication.tags),
        access_count=details.access_count,
    )


@router.put(
    "/publications/{publication_id}",
    response_model=OperationResponse,
    responses={
        400: {"model": PublicationErrorResponse, "description": "Invalid fields (303/304)"},
        403: {"model": PublicationErrorResponse, "description": "Not the creator (305)"},
        404: {"model": PublicationErrorResponse, "description": "Not found (301)"},
    },
    summary="Modify publication metadata",
)
async def modify_publication(
    publication_id: int,
    request_data: ModifyPublicationRequest,
    request: Request,
    requester: str = Depends(get_requester),
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> OperationResponse:
    """Replace title, byte count, description and tags. Creator only."""
    try:
        await service.modify(
            publication_id=publication_id,
            title=request_data.title,
            byte_count=request_data.byte_count,
            description=request_data.description,
            tags=request_data.tags,
            requester=requester,
        )
    except PublicationRegistryError as e:
        raise _to_http_exception(e, request) from None
    return OperationResponse(success=True)


@router.delete(
    "/publications/{publication_id}",
    response_model=OperationResponse,
    responses={
        403: {"model": PublicationErrorResponse, "description": "Not the creator (305)"},
        404: {"model": PublicationErrorResponse, "description": "Not found (301)"},
    },
    summary="Remove a publication",
)
async def remove_publication(
    publication_id: int,
    request: Request,
    requester: str = Depends(get_requester),
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> OperationResponse:
    """Permanently delete a publication. Creator only."""
    try:
        await service.remove(publication_id=publication_id, requester=requester)
    except PublicationRegistryError as e:
        raise _to_http_exception(e, request) from None
    return OperationResponse(success=True)


@router.post(
    "/publications/{publication_id}/creator",
    response_model=OperationResponse,
    responses={
        403: {"model": PublicationErrorResponse, "description": "Not the creator (305)"},
        404: {"model": PublicationErrorResponse, "description": "Not found (301)"},
    },
    summary="Transfer publication ownership",
)
async def change_publication_creator(
    publication_id: int,
    request_data: ChangeCreatorRequest,
    request: Request,
    requester: str = Depends(get_requester),
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> OperationResponse:
    """Hand ownership to another principal. Creator only."""
    try:
        await service.change_creator(
            publication_id=publication_id,
            new_creator=request_data.new_creator,
            requester=requester,
        )
    except PublicationRegistryError as e:
        raise _to_http_exception(e, request) from None
    return OperationResponse(success=True)


@router.post(
    "/publications/{publication_id}/access",
    response_model=OperationResponse,
    responses={
        403: {"model": PublicationErrorResponse, "description": "No permission (308)"},
        404: {"model": PublicationErrorResponse, "description": "Not found (301)"},
    },
    summary="Record an access",
)
async def access_publication(
    publication_id: int,
    request: Request,
    requester: str = Depends(get_requester),
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> OperationResponse:
    """Increment the access counter for a permitted caller."""
    try:
        await service.access_publication(
            publication_id=publication_id, requester=requester
        )
    except PublicationRegistryError as e:
        raise _to_http_exception(e, request) from None
    return OperationResponse(success=True)


@router.get(
    "/publications/{publication_id}/permissions/{user}",
    response_model=PermissionCheckResponse,
    summary="Check an access permission",
)
async def check_permission(
    publication_id: int,
    user: str,
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> PermissionCheckResponse:
    """Read the permission flag. Unknown pairs read as not permitted."""
    permitted = await service.has_permission(publication_id, user)
    return PermissionCheckResponse(
        publication_id=publication_id, user=user, permitted=permitted
    )


@router.get(
    "/registry/stats",
    response_model=RegistryStatsResponse,
    summary="Registry counter",
)
async def get_registry_stats(
    service: PublicationRegistryService = Depends(get_publication_registry_service),
) -> RegistryStatsResponse:
    """Return how many identifiers have been issued."""
    return RegistryStatsResponse(
        publication_count=await service.get_publication_count()
    )
