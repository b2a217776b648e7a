"""Publication registry API request/response models.

Pydantic models for the publication registry endpoints.

Developer Golden Rules:
1. STRUCTURE ONLY - Pydantic checks types; length and range rules live in the
   domain so the registry error codes (303/304) stay authoritative
2. FAIL LOUD - Registry errors return RFC 7807 bodies with the numeric code
"""

from pydantic import BaseModel, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class PublicationFieldsRequest(BaseModel):
    """Metadata fields shared by register and modify requests.

    Attributes:
        title: Title, 1..63 characters.
        byte_count: Declared file size in bytes.
        description: Description, 1..255 characters.
        tags: 1..8 labels of 1..31 characters.
    """

    title: str = Field(..., description="Publication title (1-63 characters)")
    # Non-integers pass through uncoerced so the domain rejects them with 304
    byte_count: StrictInt | StrictBool | StrictFloat | StrictStr = Field(
        ..., description="Declared file size in bytes (1 to 999,999,999)"
    )
    description: str = Field(
        ..., description="Publication description (1-255 characters)"
    )
    tags: list[str] = Field(
        ..., description="Ordered labels (1-8 entries of 1-31 characters)"
    )


class RegisterPublicationRequest(PublicationFieldsRequest):
    """Request to register a new publication."""


class ModifyPublicationRequest(PublicationFieldsRequest):
    """Request to replace a publication's metadata."""


class ChangeCreatorRequest(BaseModel):
    """Request to transfer ownership of a publication.

    Attributes:
        new_creator: Identity of the new owning principal.
    """

    new_creator: str = Field(
        ..., min_length=1, description="Identity of the new owning principal"
    )


class RegisterPublicationResponse(BaseModel):
    """Response after registering a publication.

    Attributes:
        publication_id: The newly allocated identifier.
    """

    publication_id: int = Field(..., ge=1, description="Newly allocated identifier")


class PublicationDetailsResponse(BaseModel):
    """Full publication details with usage counter."""

    publication_id: int = Field(..., ge=1)
    title: str
    creator: str
    byte_count: int
    creation_block: int = Field(..., ge=0)
    description: str
    tags: list[str]
    access_count: int = Field(..., ge=0)


class OperationResponse(BaseModel):
    """Success flag for mutating operations."""

    success: bool = True


class PermissionCheckResponse(BaseModel):
    """Permission flag for one (publication, user) pair."""

    publication_id: int
    user: str
    permitted: bool


class RegistryStatsResponse(BaseModel):
    """Registry counter snapshot.

    Attributes:
        publication_count: Identifiers issued so far, including removed ones.
    """

    publication_count: int = Field(..., ge=0)


class PublicationErrorResponse(BaseModel):
    """RFC 7807 error body carrying the registry error code."""

    type: str = Field(..., description="URN identifying the error type")
    title: str = Field(..., description="Short human-readable summary")
    status: int = Field(..., description="HTTP status code")
    detail: str = Field(..., description="Human-readable explanation")
    instance: str = Field(..., description="Request URL")
    code: int | None = Field(
        default=None, description="Registry error code (301-309)"
    )
