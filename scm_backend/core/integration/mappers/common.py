"""Conversion helpers shared by vendor mappers."""

from datetime import datetime, timezone
from typing import Any


def parse_datetime(value: Any) -> datetime | None:
    """
    Parse vendor timestamps into aware UTC datetimes.

    Accepts ISO 8601 strings (including a trailing "Z"), datetimes and
    epoch seconds. Empty values map to None.

    Raises:
        ValueError: Value is present but not a recognizable timestamp
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, (int, float)):
        parsed = datetime.fromtimestamp(value, tz=timezone.utc)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Unsupported timestamp value: {value!r}")

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def require(record: dict[str, Any], key: str) -> Any:
    """Return record[key], raising a readable error when it is missing."""
    value = record.get(key)
    if value is None:
        raise ValueError(f"missing required field '{key}'")
    return value
