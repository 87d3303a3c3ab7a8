"""Service for suggesting free time slots near a conflicting booking."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, tzinfo
from typing import Iterator

from booking_conflicts.domain.models import (
    AlternativeSlot,
    Booking,
    IdProvider,
    SlotSearchWindow,
    as_aware,
    new_id,
)
from booking_conflicts.services.overlap import overlaps
from booking_conflicts.utils.tz import resolve_timezone

logger = logging.getLogger(__name__)

DEFAULT_MAX_SUGGESTIONS = 3


def find_alternative_slots(
    start: datetime,
    end: datetime,
    resource_id: str,
    existing: list[Booking],
    max_suggestions: int = DEFAULT_MAX_SUGGESTIONS,
    *,
    window: SlotSearchWindow | None = None,
    id_provider: IdProvider | None = None,
) -> list[AlternativeSlot]:
    """Return up to ``max_suggestions`` free slots of the same duration.

    Later offsets on the same day are tried first, then earlier ones. A slot
    is kept only if it lies inside the window's working hours and overlaps no
    active booking on ``resource_id``. An empty list means nothing fits.
    """
    start, end = as_aware(start), as_aware(end)
    window = window or SlotSearchWindow()
    make_id = id_provider or new_id
    zone = resolve_timezone(window.timezone)

    duration = end - start
    day = start.astimezone(zone).date()
    opens = datetime.combine(day, window.opens_at, tzinfo=zone)
    closes = datetime.combine(day, window.closes_at, tzinfo=zone)

    busy = [
        b for b in existing if b.is_active and b.resource_id == resource_id
    ]

    step = timedelta(minutes=window.step_minutes)
    searches = [
        (step, _steps(window.forward_hours, window.step_minutes)),
        (-step, _steps(window.backward_hours, window.step_minutes)),
    ]

    slots: list[AlternativeSlot] = []
    for direction, count in searches:
        for offset in _offsets(direction, count):
            if len(slots) >= max_suggestions:
                break

            slot_start = start + offset
            slot_end = slot_start + duration

            if slot_start.astimezone(zone).date() != day:
                break
            if slot_start < opens or slot_end > closes:
                continue

            if any(overlaps(slot_start, slot_end, b.start, b.end) for b in busy):
                continue

            slots.append(
                AlternativeSlot(
                    id=make_id(),
                    start=slot_start,
                    end=slot_end,
                    label=_label(slot_start, slot_end, zone),
                )
            )

    logger.debug(
        "Found %d alternative slots for resource %s around %s",
        len(slots),
        resource_id,
        start.isoformat(),
    )
    return slots


def _steps(hours: int, step_minutes: int) -> int:
    return (hours * 60) // step_minutes


def _offsets(direction: timedelta, count: int) -> Iterator[timedelta]:
    for n in range(1, count + 1):
        yield direction * n


def _label(start: datetime, end: datetime, zone: tzinfo) -> str:
    return f"{start.astimezone(zone):%H:%M} - {end.astimezone(zone):%H:%M}"
