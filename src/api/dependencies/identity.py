"""Caller identity dependency.

The registry does not authenticate callers. The hosting environment's
authentication layer forwards the already-verified principal in a request
header (default: X-Principal-ID), and this dependency passes it through as
an opaque string.
"""

from fastapi import Depends, HTTPException, Request

from src.api.dependencies.publication import get_registry_config
from src.config.registry_config import RegistryConfig
from src.infrastructure.observability.correlation import set_principal_id


async def get_requester(
    request: Request,
    config: RegistryConfig = Depends(get_registry_config),
) -> str:
    """Return the caller identity from the configured header.

    Args:
        request: Incoming request.
        config: Registry configuration naming the identity header.

    Returns:
        The opaque principal identity.

    Raises:
        HTTPException 401: Header missing or blank.
    """
    principal = request.headers.get(config.identity_header, "").strip()
    if not principal:
        raise HTTPException(
            status_code=401,
            detail={
                "type": "urn:publication-registry:identity-missing",
                "title": "Caller Identity Missing",
                "status": 401,
                "detail": f"Request must carry the {config.identity_header} header",
                "instance": str(request.url),
            },
        )
    set_principal_id(principal)
    return principal
