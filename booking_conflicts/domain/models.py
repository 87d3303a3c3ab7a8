"""Domain models for booking conflict detection."""

from __future__ import annotations

import uuid
from datetime import datetime, time, timezone
from enum import Enum
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

try:
    from enum import StrEnum
except ImportError:  # pragma: no cover - fallback for older Python runtimes

    class StrEnum(str, Enum):
        pass


IdProvider = Callable[[], str]


class BookingStatus(StrEnum):
    PENDING = "pending"
    CONFIRMED = "confirmed"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class ConflictType(StrEnum):
    TIME_OVERLAP = "time_overlap"
    DOUBLE_BOOKING = "double_booking"
    RESOURCE_CONFLICT = "resource_conflict"


class ConflictSeverity(StrEnum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class ConflictMode(StrEnum):
    BLOCK = "block"
    WARN = "warn"
    ALLOW = "allow"


def new_id() -> str:
    return str(uuid.uuid4())


def as_aware(value: datetime) -> datetime:
    # Naive timestamps are taken to be UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# ---------------------------------------------------------------------------
# Bookings
# ---------------------------------------------------------------------------


class Booking(BaseModel):
    id: str = Field(default_factory=new_id)
    resource_id: str
    owner_id: str
    title: str = ""
    start: datetime
    end: datetime
    status: BookingStatus = BookingStatus.CONFIRMED

    @field_validator("start", "end")
    @classmethod
    def _timezone_aware(cls, value: datetime) -> datetime:
        return as_aware(value)

    @model_validator(mode="after")
    def _end_after_start(self) -> Booking:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self

    @property
    def is_active(self) -> bool:
        return self.status != BookingStatus.CANCELLED


class BookingSnapshot(BaseModel):
    """Frozen copy of the booking fields a conflict refers to."""

    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    start: datetime
    end: datetime
    resource_id: str
    owner_id: str

    @classmethod
    def of(cls, booking: Booking) -> BookingSnapshot:
        return cls(
            id=booking.id,
            title=booking.title,
            start=booking.start,
            end=booking.end,
            resource_id=booking.resource_id,
            owner_id=booking.owner_id,
        )


# ---------------------------------------------------------------------------
# Conflict results
# ---------------------------------------------------------------------------


class ConflictRecord(BaseModel):
    id: str = Field(default_factory=new_id)
    type: ConflictType
    severity: ConflictSeverity
    booking_a: BookingSnapshot
    booking_b: BookingSnapshot
    message: str

    def involves(self, booking_id: str) -> bool:
        return self.booking_a.id == booking_id or self.booking_b.id == booking_id


class AlternativeSlot(BaseModel):
    id: str = Field(default_factory=new_id)
    start: datetime
    end: datetime
    label: str


class ConflictCheckResult(BaseModel):
    has_conflicts: bool = False
    conflicts: list[ConflictRecord] = Field(default_factory=list)
    can_proceed: bool = True
    alternatives: list[AlternativeSlot] = Field(default_factory=list)
    mode: ConflictMode = ConflictMode.WARN


class SeverityCounts(BaseModel):
    high: int = 0
    medium: int = 0
    low: int = 0
    total: int = 0


class ModeUpdate(BaseModel):
    mode: ConflictMode
    persisted: bool = True
    warning: str | None = None


class SlotSearchWindow(BaseModel):
    """Bounds for the alternative-slot search on a single studio day.

    Offsets are tried in ``step_minutes`` increments, up to ``forward_hours``
    after the original start and then up to ``backward_hours`` before it.
    Candidates must start no earlier than ``opens_at`` and end no later than
    ``closes_at`` in ``timezone`` (an IANA name resolved with dateutil).
    """

    opens_at: time = time(9, 0)
    closes_at: time = time(20, 0)
    forward_hours: int = Field(default=8, ge=0)
    backward_hours: int = Field(default=4, ge=0)
    step_minutes: int = Field(default=60, gt=0)
    timezone: str = "UTC"

    @model_validator(mode="after")
    def _closes_after_opens(self) -> SlotSearchWindow:
        if self.closes_at <= self.opens_at:
            raise ValueError("closes_at must be after opens_at")
        return self


# ---------------------------------------------------------------------------
# Request DTOs
# ---------------------------------------------------------------------------


class DetectRequest(BaseModel):
    bookings: list[Booking]


class DetectResponse(BaseModel):
    conflicts: list[ConflictRecord]
    counts: SeverityCounts


class CheckRequest(BaseModel):
    candidate: Booking
    existing: list[Booking] = Field(default_factory=list)


class AlternativesRequest(BaseModel):
    start: datetime
    end: datetime
    resource_id: str
    existing: list[Booking] = Field(default_factory=list)
    max_suggestions: int = Field(default=3, ge=0)

    @field_validator("start", "end")
    @classmethod
    def _timezone_aware(cls, value: datetime) -> datetime:
        return as_aware(value)

    @model_validator(mode="after")
    def _end_after_start(self) -> AlternativesRequest:
        if self.end <= self.start:
            raise ValueError("end must be after start")
        return self


class ModeRequest(BaseModel):
    mode: ConflictMode
