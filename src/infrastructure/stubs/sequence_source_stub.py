"""Sequence source stub implementation.

This module provides a controllable SequenceSourceProtocol implementation.
The position only moves when a caller advances it, which makes creation_block
values deterministic in development and tests.

Usage:
    >>> source = SequenceSourceStub(start=100)
    >>> source.current_position()
    100
    >>> source.advance(5)
    >>> source.current_position()
    105
"""

from __future__ import annotations

from src.application.ports.sequence_source import SequenceSourceProtocol


class SequenceSourceStub(SequenceSourceProtocol):
    """In-memory, manually advanced sequence position.

    Attributes:
        _position: Current sequence position.
    """

    def __init__(self, start: int = 1) -> None:
        """Initialize the stub.

        Args:
            start: Initial position. Must be non-negative.

        Raises:
            ValueError: If start is negative.
        """
        if start < 0:
            raise ValueError(f"start must be non-negative, got {start}")
        self._position = start

    def current_position(self) -> int:
        """Return the current sequence position."""
        return self._position

    def advance(self, steps: int = 1) -> None:
        """Move the position forward.

        Raises:
            ValueError: If steps is negative (positions never decrease).
        """
        if steps < 0:
            raise ValueError(f"steps must be non-negative, got {steps}")
        self._position += steps
