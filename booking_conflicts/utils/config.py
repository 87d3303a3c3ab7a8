from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import time

from dotenv import load_dotenv

from booking_conflicts.domain.models import SlotSearchWindow

load_dotenv()


def _env_time(name: str, default: str) -> time:
    return time.fromisoformat(os.environ.get(name, default))


@dataclass(frozen=True)
class Settings:
    """Central configuration loaded from environment variables."""

    # Studio calendar
    timezone: str = field(
        default_factory=lambda: os.environ.get("BOOKING_CONFLICTS_TIMEZONE", "UTC")
    )
    opens_at: time = field(
        default_factory=lambda: _env_time("BOOKING_CONFLICTS_OPENS_AT", "09:00")
    )
    closes_at: time = field(
        default_factory=lambda: _env_time("BOOKING_CONFLICTS_CLOSES_AT", "20:00")
    )

    # Alternative slot search
    forward_hours: int = field(
        default_factory=lambda: int(os.environ.get("BOOKING_CONFLICTS_FORWARD_HOURS", "8"))
    )
    backward_hours: int = field(
        default_factory=lambda: int(os.environ.get("BOOKING_CONFLICTS_BACKWARD_HOURS", "4"))
    )
    step_minutes: int = field(
        default_factory=lambda: int(os.environ.get("BOOKING_CONFLICTS_STEP_MINUTES", "60"))
    )
    max_suggestions: int = field(
        default_factory=lambda: int(os.environ.get("BOOKING_CONFLICTS_MAX_SUGGESTIONS", "3"))
    )

    # Batch detection
    max_batch_bookings: int = field(
        default_factory=lambda: int(os.environ.get("BOOKING_CONFLICTS_MAX_BATCH", "500"))
    )

    # Preferences
    mode_storage_key: str = field(
        default_factory=lambda: os.environ.get(
            "BOOKING_CONFLICTS_MODE_KEY", "booking_conflict_mode"
        )
    )

    # Logging
    log_level: str = field(
        default_factory=lambda: os.environ.get("BOOKING_CONFLICTS_LOG_LEVEL", "INFO")
    )

    def slot_window(self) -> SlotSearchWindow:
        """Default alternative-slot search window for this deployment."""
        return SlotSearchWindow(
            opens_at=self.opens_at,
            closes_at=self.closes_at,
            forward_hours=self.forward_hours,
            backward_hours=self.backward_hours,
            step_minutes=self.step_minutes,
            timezone=self.timezone,
        )


def get_settings() -> Settings:
    """Return a Settings instance built from the current environment."""
    return Settings()
