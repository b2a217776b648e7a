"""Request context for log correlation.

Two context variables travel with each request across await points:
- correlation_id: ties together every log line emitted for one request
- principal_id: the caller identity the request is acting as

Both are injected into every structlog entry by request_context_processor.

Usage:
    # In middleware (request start)
    set_correlation_id(request.headers.get("X-Correlation-ID") or generate_correlation_id())

    # In the identity dependency
    set_principal_id(principal)
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string means "not set"
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")
_principal_id: ContextVar[str] = ContextVar("principal_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4 string)."""
    return str(uuid4())


def get_correlation_id() -> str:
    """Return the current correlation ID, or "" when none is set."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context."""
    _correlation_id.set(correlation_id)


def get_principal_id() -> str:
    """Return the caller identity bound to the current context, or ""."""
    return _principal_id.get()


def set_principal_id(principal_id: str) -> None:
    """Bind the caller identity to the current context."""
    _principal_id.set(principal_id)


def request_context_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor adding correlation_id and principal_id.

    Values already present in the event are kept. Unset context values are
    omitted rather than logged as empty strings.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with request context added.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict.setdefault("correlation_id", correlation_id)
    principal_id = get_principal_id()
    if principal_id:
        event_dict.setdefault("principal_id", principal_id)
    return event_dict
