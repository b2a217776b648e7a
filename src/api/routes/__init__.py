"""
API routes for the Publication Registry.

Available routers:
- health: Health check endpoint
- publication: Registry operations
"""

from src.api.routes.health import router as health_router
from src.api.routes.publication import router as publication_router

__all__: list[str] = ["health_router", "publication_router"]
