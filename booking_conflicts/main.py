"""FastAPI application — in-process HTTP surface for the booking conflict engine."""

from __future__ import annotations

from fastapi import FastAPI, HTTPException

from booking_conflicts.domain.bus import EventBus
from booking_conflicts.domain.models import (
    AlternativeSlot,
    AlternativesRequest,
    CheckRequest,
    ConflictCheckResult,
    DetectRequest,
    DetectResponse,
    ModeRequest,
    ModeUpdate,
)
from booking_conflicts.exceptions import BatchTooLargeError
from booking_conflicts.repos.memory import InMemoryPreferenceStore
from booking_conflicts.services.aggregates import count_by_severity
from booking_conflicts.services.alternatives import find_alternative_slots
from booking_conflicts.services.conflicts import detect_conflicts
from booking_conflicts.services.policy import ConflictPolicyController, ConflictPreferences
from booking_conflicts.utils.config import get_settings
from booking_conflicts.utils.logger import setup_logging

settings = get_settings()
setup_logging(settings.log_level)

app = FastAPI(title="Booking Conflict Service")

# ── Singletons (created at import time for simplicity) ────────────────
event_bus = EventBus()
preference_store = InMemoryPreferenceStore()
preferences = ConflictPreferences(preference_store, storage_key=settings.mode_storage_key)
controller = ConflictPolicyController(preferences, bus=event_bus, settings=settings)


# ── Routes ────────────────────────────────────────────────────────────


@app.post("/conflicts/detect", response_model=DetectResponse)
def detect(payload: DetectRequest) -> DetectResponse:
    """Return every conflicting pair in the submitted booking set."""
    try:
        conflicts = detect_conflicts(
            payload.bookings,
            tz=settings.timezone,
            max_bookings=settings.max_batch_bookings,
        )
    except BatchTooLargeError as exc:
        raise HTTPException(status_code=413, detail=str(exc))
    return DetectResponse(conflicts=conflicts, counts=count_by_severity(conflicts))


@app.post("/conflicts/check", response_model=ConflictCheckResult)
def check(payload: CheckRequest) -> ConflictCheckResult:
    """Run the policy check for a candidate booking before it is saved."""
    return controller.check_for_conflicts(payload.candidate, payload.existing)


@app.get("/conflicts/last", response_model=ConflictCheckResult)
def last_result() -> ConflictCheckResult:
    if controller.last_result is None:
        raise HTTPException(status_code=404, detail="No conflict check has been run")
    return controller.last_result


@app.delete("/conflicts/last")
def clear_last_result() -> dict:
    controller.clear_conflicts()
    return {"status": "cleared"}


@app.post("/alternatives", response_model=list[AlternativeSlot])
def alternatives(payload: AlternativesRequest) -> list[AlternativeSlot]:
    """Suggest free slots of the same duration on the given resource."""
    return find_alternative_slots(
        payload.start,
        payload.end,
        payload.resource_id,
        payload.existing,
        payload.max_suggestions,
        window=controller.window,
    )


@app.get("/conflict-mode")
def get_conflict_mode() -> dict:
    return {"mode": controller.get_mode()}


@app.put("/conflict-mode", response_model=ModeUpdate)
def put_conflict_mode(body: ModeRequest) -> ModeUpdate:
    """Change the enforcement mode; a failed save is reported, not raised."""
    return controller.set_mode(body.mode)
