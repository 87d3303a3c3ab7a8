"""Half-open interval overlap test shared by every conflict check."""

from __future__ import annotations

from datetime import datetime

from booking_conflicts.domain.models import Booking


def overlaps(
    a_start: datetime,
    a_end: datetime,
    b_start: datetime,
    b_end: datetime,
) -> bool:
    """Return True if ``[a_start, a_end)`` and ``[b_start, b_end)`` intersect.

    Exact boundary touches (a_end == b_start) are NOT considered overlaps.
    """
    return a_start < b_end and a_end > b_start


def bookings_overlap(a: Booking, b: Booking) -> bool:
    return overlaps(a.start, a.end, b.start, b.end)
