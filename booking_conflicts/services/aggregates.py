"""Read-only summaries over an already computed list of conflicts."""

from __future__ import annotations

from booking_conflicts.domain.models import (
    ConflictRecord,
    ConflictSeverity,
    SeverityCounts,
)

_SEVERITY_RANK = {
    ConflictSeverity.HIGH: 3,
    ConflictSeverity.MEDIUM: 2,
    ConflictSeverity.LOW: 1,
}


def count_by_severity(conflicts: list[ConflictRecord]) -> SeverityCounts:
    return SeverityCounts(
        high=sum(1 for c in conflicts if c.severity == ConflictSeverity.HIGH),
        medium=sum(1 for c in conflicts if c.severity == ConflictSeverity.MEDIUM),
        low=sum(1 for c in conflicts if c.severity == ConflictSeverity.LOW),
        total=len(conflicts),
    )


def has_conflicts(booking_id: str, conflicts: list[ConflictRecord]) -> bool:
    """Return True if ``booking_id`` is on either side of any conflict."""
    return any(c.involves(booking_id) for c in conflicts)


def get_booking_conflicts(
    booking_id: str, conflicts: list[ConflictRecord]
) -> list[ConflictRecord]:
    return [c for c in conflicts if c.involves(booking_id)]


def highest_severity(conflicts: list[ConflictRecord]) -> ConflictSeverity | None:
    """Return the most severe level present, or None for an empty list."""
    if not conflicts:
        return None
    return max((c.severity for c in conflicts), key=_SEVERITY_RANK.__getitem__)
