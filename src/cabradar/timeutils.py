"""Freshness helpers for detail pages."""

from datetime import datetime, timezone

from cabradar.config import DisplayConfig


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse a feed timestamp into an aware datetime.

    Naive values are taken as UTC. Returns None for missing or unparseable
    input.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    else:
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def _minutes_since(moment: datetime, now: datetime | None) -> int:
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return int((now - moment).total_seconds() // 60)


def is_live(
    last_updated: str | datetime | None,
    now: datetime | None = None,
    config: DisplayConfig | None = None,
) -> bool:
    """Check whether an entity was updated within the live window."""
    moment = parse_timestamp(last_updated)
    if moment is None:
        return False
    window = (config or DisplayConfig()).live_window_minutes
    return _minutes_since(moment, now) <= window


def format_relative_time(moment: str | datetime, now: datetime | None = None) -> str:
    """Format a timestamp as "Just now", "5 minutes ago", "2 hours ago"...

    Raises:
        ValueError: If the timestamp cannot be parsed.
    """
    parsed = parse_timestamp(moment)
    if parsed is None:
        raise ValueError(f"Invalid timestamp: {moment!r}")

    minutes = _minutes_since(parsed, now)
    if minutes < 1:
        return "Just now"
    if minutes < 60:
        return f"{minutes} minutes ago"
    if minutes < 1440:
        hours = minutes // 60
        return f"{hours} hour{'s' if hours > 1 else ''} ago"
    days = minutes // 1440
    return f"{days} day{'s' if days > 1 else ''} ago"
