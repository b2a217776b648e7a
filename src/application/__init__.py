"""
Application layer - Use cases and orchestration for the Publication Registry.

This layer contains:
- Port definitions (abstract interfaces for infrastructure)
- The registry service that sequences checks and store writes

IMPORT RULES:
- CAN import from: domain
- CANNOT import from: infrastructure, api
"""

from src.application.ports import (
    PermissionRepositoryProtocol,
    PublicationRepositoryProtocol,
    SequenceSourceProtocol,
    UsageRepositoryProtocol,
)

__all__: list[str] = [
    "PermissionRepositoryProtocol",
    "PublicationRepositoryProtocol",
    "SequenceSourceProtocol",
    "UsageRepositoryProtocol",
]
