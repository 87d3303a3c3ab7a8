"""Booking conflict detection and prevention engine."""

from booking_conflicts.domain.models import (
    AlternativeSlot,
    Booking,
    BookingSnapshot,
    BookingStatus,
    ConflictCheckResult,
    ConflictMode,
    ConflictRecord,
    ConflictSeverity,
    ConflictType,
    ModeUpdate,
    SeverityCounts,
    SlotSearchWindow,
)
from booking_conflicts.exceptions import BatchTooLargeError, ConflictEngineError
from booking_conflicts.repos.memory import InMemoryPreferenceStore, PreferenceStore
from booking_conflicts.services.aggregates import (
    count_by_severity,
    get_booking_conflicts,
    has_conflicts,
    highest_severity,
)
from booking_conflicts.services.alternatives import find_alternative_slots
from booking_conflicts.services.classifier import classify, generate_message
from booking_conflicts.services.conflicts import (
    check_new_booking_conflicts,
    detect_conflicts,
    find_conflicting_bookings,
)
from booking_conflicts.services.overlap import bookings_overlap, overlaps
from booking_conflicts.services.policy import ConflictPolicyController, ConflictPreferences

__all__ = [
    "AlternativeSlot",
    "BatchTooLargeError",
    "Booking",
    "BookingSnapshot",
    "BookingStatus",
    "ConflictCheckResult",
    "ConflictEngineError",
    "ConflictMode",
    "ConflictPolicyController",
    "ConflictPreferences",
    "ConflictRecord",
    "ConflictSeverity",
    "ConflictType",
    "InMemoryPreferenceStore",
    "ModeUpdate",
    "PreferenceStore",
    "SeverityCounts",
    "SlotSearchWindow",
    "bookings_overlap",
    "check_new_booking_conflicts",
    "classify",
    "count_by_severity",
    "detect_conflicts",
    "find_alternative_slots",
    "find_conflicting_bookings",
    "generate_message",
    "get_booking_conflicts",
    "has_conflicts",
    "highest_severity",
    "overlaps",
]
