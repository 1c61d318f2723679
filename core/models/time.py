from __future__ import annotations

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Datetime actual en UTC (tz-aware)."""
    return datetime.now(timezone.utc)
