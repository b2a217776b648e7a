"""
Domain layer - Pure business logic for the Publication Registry.

This layer contains:
- Domain models (Publication, PublicationDetails, Permission, UsageStat)
- Validation rules shared by registration and modification
- The closed registry error taxonomy

CRITICAL: This layer must NOT import from application, infrastructure, or api.
Only stdlib and typing imports are allowed.
"""

from src.domain.exceptions import RegistryError
from src.domain.models import Publication, PublicationDetails

__all__: list[str] = [
    "RegistryError",
    "Publication",
    "PublicationDetails",
]
