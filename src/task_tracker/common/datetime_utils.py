from __future__ import annotations

import math
from datetime import date, datetime, timezone
from typing import Any, Optional


def now_utc() -> datetime:
    """Current UTC time as a naive datetime, truncated to whole seconds.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


def _as_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def parse_datetime_value(value: Any) -> datetime:
    """Convert a date-like value into a naive UTC datetime.

    Accepted inputs:
    - datetime / date
    - int / float: epoch milliseconds
    - str: ISO 8601 (date-only, trailing 'Z' and offsets allowed)

    Raises ValueError for anything else.
    """
    if isinstance(value, datetime):
        return _as_naive_utc(value)

    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)

    # bool is an int subclass; true/false is never a timestamp.
    if isinstance(value, bool):
        raise ValueError(f"Unsupported date value: {value!r}")

    if isinstance(value, (int, float)):
        if isinstance(value, float) and not math.isfinite(value):
            raise ValueError(f"Invalid timestamp: {value!r}")
        try:
            parsed = datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as e:
            raise ValueError(f"Invalid timestamp: {value!r}") from e
        return parsed.replace(tzinfo=None)

    if isinstance(value, str):
        s = value.strip()
        if not s:
            raise ValueError("Empty date string")
        if s.endswith(("Z", "z")):
            s = s[:-1] + "+00:00"
        return _as_naive_utc(datetime.fromisoformat(s))

    raise ValueError(f"Unsupported date value: {value!r}")


def format_datetime(value: Optional[datetime]) -> Optional[str]:
    """ISO 8601 string with a 'Z' suffix (values are stored as naive UTC)."""
    if value is None:
        return None
    return value.isoformat() + "Z"
