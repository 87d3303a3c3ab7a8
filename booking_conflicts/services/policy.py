"""Enforcement of the block/warn/allow conflict policy before a booking is saved."""

from __future__ import annotations

import logging

from booking_conflicts.domain.bus import EventBus
from booking_conflicts.domain.events import (
    ConflictModeChanged,
    ConflictModePersistFailed,
    ConflictsDetected,
)
from booking_conflicts.domain.models import (
    Booking,
    ConflictCheckResult,
    ConflictMode,
    IdProvider,
    ModeUpdate,
    SlotSearchWindow,
)
from booking_conflicts.repos.memory import PreferenceStore
from booking_conflicts.services.aggregates import count_by_severity
from booking_conflicts.services.alternatives import find_alternative_slots
from booking_conflicts.services.conflicts import check_new_booking_conflicts
from booking_conflicts.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)

DEFAULT_MODE = ConflictMode.WARN
DEFAULT_STORAGE_KEY = "booking_conflict_mode"


class ConflictPreferences:
    """Holds the conflict mode and mirrors it into a PreferenceStore.

    The stored value is read once on construction. Missing, unknown or
    unreadable values fall back to ``warn``.
    """

    def __init__(self, store: PreferenceStore, storage_key: str = DEFAULT_STORAGE_KEY) -> None:
        self._store = store
        self.storage_key = storage_key
        self.mode: ConflictMode = self._load()

    def _load(self) -> ConflictMode:
        try:
            raw = self._store.get(self.storage_key)
        except Exception as exc:
            logger.warning("Could not read conflict mode, using %s: %s", DEFAULT_MODE, exc)
            return DEFAULT_MODE

        if raw is None:
            return DEFAULT_MODE
        try:
            return ConflictMode(raw)
        except ValueError:
            logger.warning("Ignoring unknown stored conflict mode %r", raw)
            return DEFAULT_MODE

    def save(self, mode: ConflictMode) -> str | None:
        """Assign ``mode`` and persist it; return a warning if the write failed.

        Raises ValueError for an unknown mode, leaving the current one in place.
        """
        mode = ConflictMode(mode)
        self.mode = mode
        try:
            self._store.set(self.storage_key, mode.value)
        except Exception as exc:
            logger.warning("Could not persist conflict mode %s: %s", mode, exc)
            return f"Conflict mode set to {mode.value} but could not be saved: {exc}"
        return None


class ConflictPolicyController:
    """Runs the pre-commit conflict check for a candidate booking.

    ``allow`` skips detection entirely. Otherwise the candidate is checked
    against the existing bookings, alternative slots are suggested when it
    collides, and ``can_proceed`` is only False in ``block`` mode with
    conflicts present.
    """

    def __init__(
        self,
        preferences: ConflictPreferences,
        *,
        bus: EventBus | None = None,
        id_provider: IdProvider | None = None,
        window: SlotSearchWindow | None = None,
        settings: Settings | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self.preferences = preferences
        self.bus = bus or EventBus()
        self.id_provider = id_provider
        self.window = window or self._settings.slot_window()
        self.last_result: ConflictCheckResult | None = None

    def get_mode(self) -> ConflictMode:
        return self.preferences.mode

    def set_mode(self, mode: ConflictMode) -> ModeUpdate:
        previous = self.preferences.mode
        warning = self.preferences.save(mode)
        mode = self.preferences.mode

        logger.info("Conflict mode changed from %s to %s", previous, mode)
        self.bus.publish(ConflictModeChanged(previous=previous, mode=mode))

        if warning is not None:
            self.bus.publish(ConflictModePersistFailed(mode=mode, error=warning))
            return ModeUpdate(mode=mode, persisted=False, warning=warning)
        return ModeUpdate(mode=mode)

    def clear_conflicts(self) -> None:
        self.last_result = None

    def check_for_conflicts(
        self, candidate: Booking, existing: list[Booking]
    ) -> ConflictCheckResult:
        mode = self.preferences.mode

        if mode == ConflictMode.ALLOW:
            result = ConflictCheckResult(mode=mode)
            self.last_result = result
            return result

        conflicts = check_new_booking_conflicts(
            candidate,
            existing,
            id_provider=self.id_provider,
            tz=self.window.timezone,
        )

        alternatives = []
        if conflicts:
            alternatives = find_alternative_slots(
                candidate.start,
                candidate.end,
                candidate.resource_id,
                [b for b in existing if b.id != candidate.id],
                self._settings.max_suggestions,
                window=self.window,
                id_provider=self.id_provider,
            )

        result = ConflictCheckResult(
            has_conflicts=bool(conflicts),
            conflicts=conflicts,
            can_proceed=mode == ConflictMode.WARN or not conflicts,
            alternatives=alternatives,
            mode=mode,
        )
        self.last_result = result

        if conflicts:
            logger.info(
                "Booking %s has %d conflict(s) in %s mode, can_proceed=%s",
                candidate.id,
                len(conflicts),
                mode,
                result.can_proceed,
            )
            self.bus.publish(
                ConflictsDetected(
                    booking_id=candidate.id,
                    conflicting_booking_ids=[c.booking_b.id for c in conflicts],
                    counts=count_by_severity(conflicts),
                    mode=mode,
                    can_proceed=result.can_proceed,
                )
            )
        return result
