"""ISO-8601 timestamps in the format JavaScript clients expect."""

from __future__ import annotations

from datetime import UTC, datetime


def utc_timestamp(now: datetime | None = None) -> str:
    """Return *now* (default: current time) as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    moment = now or datetime.now(UTC)
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
