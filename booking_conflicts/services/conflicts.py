"""Service for detecting scheduling conflicts between bookings."""

from __future__ import annotations

import logging
from datetime import datetime, tzinfo

from booking_conflicts.domain.models import Booking, ConflictRecord, IdProvider, as_aware
from booking_conflicts.exceptions import BatchTooLargeError
from booking_conflicts.services.classifier import build_conflict_record
from booking_conflicts.services.overlap import bookings_overlap, overlaps

logger = logging.getLogger(__name__)

DEFAULT_MAX_BATCH_BOOKINGS = 500


def active_bookings(bookings: list[Booking]) -> list[Booking]:
    """Drop cancelled bookings, keeping input order."""
    return [b for b in bookings if b.is_active]


def detect_conflicts(
    bookings: list[Booking],
    *,
    id_provider: IdProvider | None = None,
    tz: str | tzinfo | None = None,
    max_bookings: int | None = None,
) -> list[ConflictRecord]:
    """Return one record per overlapping pair of active bookings.

    Pairs are visited in nested-scan order (outer index, then inner index)
    and keyed by their sorted ids, so duplicate entries never produce a second
    record for the same pair. Raises BatchTooLargeError when the active set is
    larger than ``max_bookings`` (``0`` disables the limit).
    """
    active = active_bookings(bookings)

    limit = DEFAULT_MAX_BATCH_BOOKINGS if max_bookings is None else max_bookings
    if limit and len(active) > limit:
        raise BatchTooLargeError(len(active), limit)

    conflicts: list[ConflictRecord] = []
    seen_pairs: set[tuple[str, str]] = set()

    for i, a in enumerate(active):
        for b in active[i + 1 :]:
            pair = tuple(sorted((a.id, b.id)))
            if pair in seen_pairs:
                continue
            seen_pairs.add(pair)

            # Same id on both sides is a duplicated entry, not a conflict
            if a.id == b.id:
                continue

            if bookings_overlap(a, b):
                conflicts.append(build_conflict_record(a, b, id_provider, tz))

    logger.debug(
        "Scanned %d active bookings, found %d conflicts", len(active), len(conflicts)
    )
    return conflicts


def check_new_booking_conflicts(
    candidate: Booking,
    existing: list[Booking],
    *,
    id_provider: IdProvider | None = None,
    tz: str | tzinfo | None = None,
) -> list[ConflictRecord]:
    """Return conflicts between ``candidate`` and the active existing bookings.

    The candidate is always ``booking_a``. An existing booking with the
    candidate's own id is skipped so an edited booking does not conflict with
    its previous version.
    """
    return [
        build_conflict_record(candidate, booking, id_provider, tz)
        for booking in existing
        if booking.is_active
        and booking.id != candidate.id
        and bookings_overlap(candidate, booking)
    ]


def find_conflicting_bookings(
    start: datetime,
    end: datetime,
    existing: list[Booking],
    resource_id: str | None = None,
) -> list[Booking]:
    """Return active bookings overlapping ``[start, end)``.

    When ``resource_id`` is given only bookings on that resource are returned.
    """
    start, end = as_aware(start), as_aware(end)
    return [
        booking
        for booking in existing
        if booking.is_active
        and (not resource_id or booking.resource_id == resource_id)
        and overlaps(start, end, booking.start, booking.end)
    ]
