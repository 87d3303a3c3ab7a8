"""Domain events emitted by the conflict policy controller."""

from __future__ import annotations

from pydantic import BaseModel

from booking_conflicts.domain.models import ConflictMode, SeverityCounts


class ConflictModeChanged(BaseModel):
    """Fired after a new enforcement mode was stored."""

    previous: ConflictMode
    mode: ConflictMode


class ConflictModePersistFailed(BaseModel):
    """Fired when the preference store rejected a mode write.

    The in-memory mode is already updated when this is published.
    """

    mode: ConflictMode
    error: str


class ConflictsDetected(BaseModel):
    """Fired when a candidate booking collides with existing bookings."""

    booking_id: str
    conflicting_booking_ids: list[str]
    counts: SeverityCounts
    mode: ConflictMode
    can_proceed: bool
