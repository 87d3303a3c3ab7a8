"""Tests for conflict list summaries."""

from datetime import datetime, timezone

from booking_conflicts.domain.models import Booking, ConflictSeverity, SeverityCounts
from booking_conflicts.services.aggregates import (
    count_by_severity,
    get_booking_conflicts,
    has_conflicts,
    highest_severity,
)
from booking_conflicts.services.conflicts import detect_conflicts


def _make_booking(booking_id: str, resource_id: str, owner_id: str, hour: int) -> Booking:
    return Booking(
        id=booking_id,
        resource_id=resource_id,
        owner_id=owner_id,
        title=booking_id,
        start=datetime(2025, 3, 10, hour, 0, tzinfo=timezone.utc),
        end=datetime(2025, 3, 10, hour + 2, 0, tzinfo=timezone.utc),
    )


def _conflicts():
    bookings = [
        _make_booking("b1", "space-1", "client-1", 10),
        _make_booking("b2", "space-1", "client-2", 11),  # high with b1
        _make_booking("b3", "space-2", "client-1", 11),  # medium with b1, low with b2
        _make_booking("b4", "space-3", "client-4", 15),
    ]
    return detect_conflicts(bookings)


def test_count_by_severity_empty():
    """An empty conflict list counts zero everywhere."""
    assert count_by_severity([]) == SeverityCounts(high=0, medium=0, low=0, total=0)


def test_count_by_severity():
    """Each severity is counted once and total matches the list length."""
    counts = count_by_severity(_conflicts())
    assert counts == SeverityCounts(high=1, medium=1, low=1, total=3)


def test_has_conflicts_matches_either_side():
    """A booking on either side of a record has conflicts."""
    conflicts = _conflicts()
    assert has_conflicts("b1", conflicts)
    assert has_conflicts("b3", conflicts)
    assert not has_conflicts("b4", conflicts)


def test_get_booking_conflicts():
    """Only records involving the booking are returned."""
    conflicts = _conflicts()
    mine = get_booking_conflicts("b2", conflicts)
    assert len(mine) == 2
    assert all(c.involves("b2") for c in mine)
    assert get_booking_conflicts("missing", conflicts) == []


def test_highest_severity():
    """The headline severity is the most severe one present."""
    conflicts = _conflicts()
    assert highest_severity(conflicts) == ConflictSeverity.HIGH
    low_only = [c for c in conflicts if c.severity == ConflictSeverity.LOW]
    assert highest_severity(low_only) == ConflictSeverity.LOW
    assert highest_severity([]) is None
