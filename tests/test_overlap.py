"""Tests for the half-open interval overlap primitive."""

from datetime import datetime, timezone

import pytest

from booking_conflicts.domain.models import Booking
from booking_conflicts.services.overlap import bookings_overlap, overlaps


def _at(hour: int, minute: int = 0) -> datetime:
    return datetime(2025, 3, 10, hour, minute, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ((_at(10), _at(11)), (_at(10, 30), _at(11, 30)), True),
        ((_at(10), _at(12)), (_at(10, 30), _at(11)), True),
        ((_at(10), _at(11)), (_at(10), _at(11)), True),
        ((_at(10), _at(11)), (_at(11), _at(12)), False),
        ((_at(8), _at(9)), (_at(10), _at(11)), False),
    ],
)
def test_overlaps_is_symmetric(a, b, expected):
    """Overlap gives the same answer in both argument orders."""
    assert overlaps(*a, *b) is expected
    assert overlaps(*b, *a) is expected


def test_touching_intervals_do_not_overlap():
    """An interval ending exactly when another starts is not an overlap."""
    assert not overlaps(_at(9), _at(10), _at(10), _at(11))


def test_bookings_overlap_uses_booking_times():
    """The booking wrapper compares start and end times."""
    a = Booking(resource_id="space-1", owner_id="c1", start=_at(10), end=_at(11))
    b = Booking(resource_id="space-2", owner_id="c2", start=_at(10, 59), end=_at(12))
    assert bookings_overlap(a, b)
