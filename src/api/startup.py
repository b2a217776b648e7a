"""Startup hooks for the Publication Registry API.

This module provides the startup sequence:
1. Configure structured logging for the configured environment
2. Log the effective registry configuration

Usage in FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        run_startup(get_registry_config())
        yield
"""

from src.config.registry_config import RegistryConfig
from src.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)


def configure_logging(config: RegistryConfig) -> None:
    """Configure structlog for the configured environment."""
    configure_structlog(environment=config.environment)


def run_startup(config: RegistryConfig) -> None:
    """Run all startup steps.

    Args:
        config: Effective registry configuration.
    """
    configure_logging(config)
    get_logger_for_service("PublicationRegistryAPI", component="api").info(
        "registry_api_started",
        environment=config.environment,
        identity_header=config.identity_header,
        initial_sequence_position=config.initial_sequence_position,
    )
