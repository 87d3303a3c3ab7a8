"""Tests for environment-driven settings and logging setup."""

import logging
from datetime import time

from booking_conflicts.utils.config import Settings, get_settings
from booking_conflicts.utils.logger import setup_logging


def test_defaults(monkeypatch):
    """Without environment overrides the documented defaults apply."""
    for name in (
        "BOOKING_CONFLICTS_TIMEZONE",
        "BOOKING_CONFLICTS_OPENS_AT",
        "BOOKING_CONFLICTS_CLOSES_AT",
        "BOOKING_CONFLICTS_MAX_BATCH",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()
    assert settings.timezone == "UTC"
    assert settings.opens_at == time(9, 0)
    assert settings.closes_at == time(20, 0)
    assert settings.max_batch_bookings == 500


def test_environment_overrides(monkeypatch):
    """Environment variables feed the slot search window."""
    monkeypatch.setenv("BOOKING_CONFLICTS_TIMEZONE", "Europe/Paris")
    monkeypatch.setenv("BOOKING_CONFLICTS_OPENS_AT", "08:30")
    monkeypatch.setenv("BOOKING_CONFLICTS_FORWARD_HOURS", "3")
    monkeypatch.setenv("BOOKING_CONFLICTS_STEP_MINUTES", "30")

    window = Settings().slot_window()

    assert window.timezone == "Europe/Paris"
    assert window.opens_at == time(8, 30)
    assert window.forward_hours == 3
    assert window.step_minutes == 30


def test_setup_logging_adds_one_handler():
    """Repeated setup does not stack handlers."""
    setup_logging("DEBUG")
    setup_logging("DEBUG")

    package_logger = logging.getLogger("booking_conflicts")
    tagged = [h for h in package_logger.handlers if getattr(h, "_booking_conflicts", False)]
    assert len(tagged) == 1
    assert package_logger.level == logging.DEBUG
