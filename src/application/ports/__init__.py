"""Application ports - Abstract interfaces for infrastructure adapters.

This module defines the contracts that infrastructure adapters must implement.
Ports enable dependency inversion and make the application layer testable.

Available ports:
- PublicationRepositoryProtocol: Record Store and registry counter
- PermissionRepositoryProtocol: Per-user access flags
- UsageRepositoryProtocol: Per-publication access counters
- SequenceSourceProtocol: Current sequence position (block height)
"""

from src.application.ports.permission_repository import PermissionRepositoryProtocol
from src.application.ports.publication_repository import (
    PublicationRepositoryProtocol,
)
from src.application.ports.sequence_source import SequenceSourceProtocol
from src.application.ports.usage_repository import UsageRepositoryProtocol

__all__: list[str] = [
    "PermissionRepositoryProtocol",
    "PublicationRepositoryProtocol",
    "SequenceSourceProtocol",
    "UsageRepositoryProtocol",
]
