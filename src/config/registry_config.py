"""Publication registry configuration.

This module defines runtime configuration for the registry service with
environment variable overrides.

Environment Variables:
- REGISTRY_ENVIRONMENT: 'production' (JSON logs) or 'development' (console logs)
- REGISTRY_IDENTITY_HEADER: Request header carrying the caller identity
  (default: X-Principal-ID)
- REGISTRY_INITIAL_SEQUENCE_POSITION: Starting position of the in-memory
  sequence source (default: 1)

Field validation limits (title 64, size 1e9, description 256, 8 tags of 32)
are part of the registry's interface contract and are not configurable.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"production", "development"})


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_choice_env(key: str, choices: frozenset[str], default: str) -> str:
    """Get a string environment variable restricted to ``choices``.

    Values are compared case-insensitively; anything else yields ``default``.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    return normalized if normalized in choices else default


@dataclass(frozen=True)
class RegistryConfig:
    """Configuration for the publication registry service.

    Attributes:
        environment: Selects the log renderer. Default: production.
        identity_header: Header the API reads the caller identity from.
            Default: X-Principal-ID.
        initial_sequence_position: Position the in-memory sequence source
            starts at. Default: 1.
    """

    environment: str = "production"
    identity_header: str = "X-Principal-ID"
    initial_sequence_position: int = 1

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )
        if not self.identity_header.strip():
            raise ValueError("identity_header must not be empty")
        if self.initial_sequence_position < 0:
            raise ValueError(
                "initial_sequence_position must be non-negative, "
                f"got {self.initial_sequence_position}"
            )

    @classmethod
    def from_environment(cls) -> "RegistryConfig":
        """Create config from environment variables with defaults.

        Returns:
            RegistryConfig with values from environment or defaults.
        """
        header = os.environ.get("REGISTRY_IDENTITY_HEADER", "").strip()
        position = _get_int_env("REGISTRY_INITIAL_SEQUENCE_POSITION", 1)
        return cls(
            environment=_get_choice_env(
                "REGISTRY_ENVIRONMENT", VALID_ENVIRONMENTS, "production"
            ),
            identity_header=header or "X-Principal-ID",
            initial_sequence_position=position if position >= 0 else 1,
        )


# Default production config
DEFAULT_REGISTRY_CONFIG = RegistryConfig()

# Testing config with readable console logs and a recognisable start position
TEST_REGISTRY_CONFIG = RegistryConfig(
    environment="development",
    initial_sequence_position=100,
)
