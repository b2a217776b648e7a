"""Observability infrastructure for structured logging and request context.

This module provides cross-cutting observability concerns:
- Structured JSON logging with structlog
- Correlation and principal IDs carried in contextvars

Usage:
    from src.infrastructure.observability import (
        configure_structlog,
        set_correlation_id,
    )

    configure_structlog(environment="production")
    set_correlation_id(request_correlation_id)
"""

from src.infrastructure.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    get_principal_id,
    request_context_processor,
    set_correlation_id,
    set_principal_id,
)
from src.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "generate_correlation_id",
    "get_correlation_id",
    "get_logger_for_service",
    "get_principal_id",
    "request_context_processor",
    "set_correlation_id",
    "set_principal_id",
]
