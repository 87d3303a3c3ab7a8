from __future__ import annotations

import logging
import sys


def setup_logging(level: str = "INFO") -> None:
    """Configure package logging for the conflict engine."""
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger("booking_conflicts")
    root.setLevel(numeric_level)

    # Re-imports of the app module must not stack handlers
    if any(getattr(h, "_booking_conflicts", False) for h in root.handlers):
        return

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler._booking_conflicts = True
    root.addHandler(handler)

    logging.getLogger("httpx").setLevel(logging.WARNING)
