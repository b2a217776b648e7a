"""
API layer - FastAPI routes and HTTP concerns for the Publication Registry.

This layer contains:
- FastAPI route definitions
- Request/Response models
- HTTP middleware
- Dependency wiring of stores and the registry service

IMPORT RULES:
- CAN import from: application, config
- Infrastructure adapters are only reached through src.api.dependencies
"""

__all__: list[str] = []
