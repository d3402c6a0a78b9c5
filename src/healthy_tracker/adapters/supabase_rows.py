"""Row parsing helpers shared by the Supabase repositories."""

from datetime import date, datetime, time


def parse_date(raw: object) -> date:
    """Parse a date column stored as a date or timestamp string."""
    if isinstance(raw, datetime):
        return raw.date()
    if isinstance(raw, date):
        return raw
    if isinstance(raw, str) and raw:
        return date.fromisoformat(raw[:10])
    raise ValueError(f"Missing date value: {raw!r}")


def parse_time(raw: object) -> time | None:
    """Parse an optional time-of-day column."""
    if isinstance(raw, time):
        return raw
    if isinstance(raw, str) and raw.strip():
        try:
            return time.fromisoformat(raw.strip())
        except ValueError:
            return None
    return None


def parse_datetime(raw: object) -> datetime | None:
    if isinstance(raw, str) and raw:
        return datetime.fromisoformat(raw)
    return None


def optional_float(raw: object) -> float | None:
    if raw is None:
        return None
    return float(raw)
