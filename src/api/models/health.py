"""Health check response model."""

from pydantic import BaseModel, Field


class RegistryHealthResponse(BaseModel):
    """Liveness of the registry API with a counter snapshot.

    Attributes:
        status: "healthy" while the registry answers reads.
        publication_count: Identifiers issued so far.
    """

    status: str = Field(default="healthy")
    publication_count: int = Field(..., ge=0)
