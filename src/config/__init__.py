"""Configuration module for the Publication Registry.

Available Configurations:
- RegistryConfig: Log environment, identity header, sequence start
"""

from src.config.registry_config import (
    DEFAULT_REGISTRY_CONFIG,
    TEST_REGISTRY_CONFIG,
    RegistryConfig,
)

__all__ = [
    "RegistryConfig",
    "DEFAULT_REGISTRY_CONFIG",
    "TEST_REGISTRY_CONFIG",
]
