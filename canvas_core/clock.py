# =============================================================================
# canvas_core/clock.py - Single source of "now"
# =============================================================================
# Handlers read the current time once per call through utcnow() so that
# tests can patch one function and get deterministic due-date filtering.
# =============================================================================

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)
