"""Sequence Source Protocol - interface for the current sequence position.

The registry stamps each new publication with the sequence position (block
height or logical clock value) at which it was registered. Services MUST
inject a SequenceSourceProtocol implementation rather than reading a clock
directly, so tests can pin the position.
"""

from __future__ import annotations

from abc import ABC, abstractmethod


class SequenceSourceProtocol(ABC):
    """Abstract interface for sequence position provisioning.

    Example usage:
        class MyService:
            def __init__(self, sequence_source: SequenceSourceProtocol) -> None:
                self._sequence = sequence_source

            def stamp(self) -> int:
                return self._sequence.current_position()
    """

    @abstractmethod
    def current_position(self) -> int:
        """Return the current sequence position.

        Returns:
            Non-negative, non-decreasing integer.
        """
        ...
