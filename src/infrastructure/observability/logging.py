"""structlog setup for the registry process.

Every log line passes through the same processor chain; only the final
renderer depends on the deployment environment:

- production: one JSON object per line, for log shippers
- development: colored key=value console output

Each entry carries ``correlation_id`` and ``principal_id`` when the request
context has them (see src.infrastructure.observability.correlation).

Example production line:
    {"event": "Publication registered", "level": "info",
     "timestamp": "2026-01-01T00:00:00.000000Z", "publication_id": 7,
     "correlation_id": "3f2c...", "principal_id": "alice"}
"""

import logging
import os
from typing import Callable, cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.correlation import request_context_processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

RENDERERS: dict[str, Callable[[], list[Processor]]] = {
    "production": lambda: [
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ],
    "development": lambda: [structlog.dev.ConsoleRenderer(colors=True)],
}


def _get_log_level() -> int:
    """Resolve LOG_LEVEL to a stdlib level number, INFO when unknown."""
    level = getattr(logging, os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper(), None)
    if isinstance(level, int):
        return level
    return logging.INFO


def _registry_processors() -> list[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, request_context_processor),
        structlog.processors.StackInfoRenderer(),
    ]


def configure_structlog(environment: str = "production") -> None:
    """Install the registry's structlog configuration.

    Called once from the API startup hook. Unknown environments render
    as production.

    Args:
        environment: "production" or "development".
    """
    renderers = RENDERERS.get(environment, RENDERERS["production"])()

    structlog.configure(
        processors=[*_registry_processors(), *renderers],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger_for_service(
    service_name: str, component: str = "registry"
) -> structlog.BoundLogger:
    """Return a logger with ``service`` and ``component`` bound."""
    return structlog.get_logger().bind(service=service_name, component=component)
