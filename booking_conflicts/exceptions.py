"""Errors raised by the conflict engine."""

from __future__ import annotations


class ConflictEngineError(Exception):
    """Base class for conflict engine errors."""


class BatchTooLargeError(ConflictEngineError):
    """Raised when a batch scan is asked to cover more bookings than allowed."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(
            f"{size} active bookings exceeds the batch detection limit of {limit}"
        )
