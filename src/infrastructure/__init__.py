"""
Infrastructure layer - Adapters for the Publication Registry.

This layer contains:
- In-memory store implementations (stubs)
- Observability (structlog configuration, correlation IDs)

IMPORT RULES:
- CAN import from: domain, application
- Implements ports defined in application layer
"""

from src.infrastructure.stubs import (
    PermissionRepositoryStub,
    PublicationRepositoryStub,
    SequenceSourceStub,
    UsageRepositoryStub,
)

__all__: list[str] = [
    "PermissionRepositoryStub",
    "PublicationRepositoryStub",
    "SequenceSourceStub",
    "UsageRepositoryStub",
]
