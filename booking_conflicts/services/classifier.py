"""Classification and wording of conflicting booking pairs."""

from __future__ import annotations

from datetime import datetime, tzinfo

from booking_conflicts.domain.models import (
    Booking,
    BookingSnapshot,
    ConflictRecord,
    ConflictSeverity,
    ConflictType,
    IdProvider,
    new_id,
)
from booking_conflicts.utils.tz import resolve_timezone


def classify(a: Booking, b: Booking) -> tuple[ConflictType, ConflictSeverity]:
    """Return the conflict type and severity for two overlapping bookings.

    Shared resource wins over shared owner; anything else is a plain overlap.
    """
    if a.resource_id == b.resource_id:
        return ConflictType.RESOURCE_CONFLICT, ConflictSeverity.HIGH
    if a.owner_id == b.owner_id:
        return ConflictType.DOUBLE_BOOKING, ConflictSeverity.MEDIUM
    return ConflictType.TIME_OVERLAP, ConflictSeverity.LOW


def _span(booking: Booking, zone: tzinfo) -> str:
    return f"{_hhmm(booking.start, zone)}-{_hhmm(booking.end, zone)}"


def _hhmm(value: datetime, zone: tzinfo) -> str:
    return value.astimezone(zone).strftime("%H:%M")


def generate_message(
    conflict_type: ConflictType,
    a: Booking,
    b: Booking,
    tz: str | tzinfo | None = None,
) -> str:
    zone = resolve_timezone(tz)
    first = f'"{a.title}" ({_span(a, zone)})'
    second = f'"{b.title}" ({_span(b, zone)})'

    if conflict_type == ConflictType.RESOURCE_CONFLICT:
        return f"Resource conflict: {first} and {second} use the same space."
    if conflict_type == ConflictType.DOUBLE_BOOKING:
        return (
            f"Double booking: the same client booked {first} and {second} "
            "at the same time."
        )
    if conflict_type == ConflictType.TIME_OVERLAP:
        return f"Overlap: {first} and {second} overlap."
    return "Conflict detected"


def build_conflict_record(
    a: Booking,
    b: Booking,
    id_provider: IdProvider | None = None,
    tz: str | tzinfo | None = None,
) -> ConflictRecord:
    """Classify an overlapping pair and snapshot both sides into a record."""
    conflict_type, severity = classify(a, b)
    return ConflictRecord(
        id=(id_provider or new_id)(),
        type=conflict_type,
        severity=severity,
        booking_a=BookingSnapshot.of(a),
        booking_b=BookingSnapshot.of(b),
        message=generate_message(conflict_type, a, b, tz),
    )
