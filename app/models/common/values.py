"""Coercion of loosely-typed row values.

Row fields arrive as arbitrary JSON. Each helper returns ``None`` (or zero for
numbers) when the value does not have the expected shape, so callers can treat
a bad value exactly like a missing one.
"""

import math
import re
from datetime import UTC, date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any

# Leading decimal number, the way lenient form inputs are read ("12.50 EUR")
_NUMBER_PREFIX = re.compile(r"^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?")


def parse_timestamp(value: Any) -> datetime | None:
    """ISO-8601 string/date/datetime -> aware UTC datetime. Naive means UTC."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime(value.year, value.month, value.day)
    elif isinstance(value, str) and value.strip():
        try:
            dt = datetime.fromisoformat(value.strip())
        except ValueError:
            return None
    else:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def parse_number(value: Any) -> Decimal:
    """Numeric value of a field; anything unreadable counts as zero."""
    if isinstance(value, bool) or value is None:
        return Decimal(0)
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal(0)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        return Decimal(str(value)) if math.isfinite(value) else Decimal(0)
    if isinstance(value, str):
        match = _NUMBER_PREFIX.match(value.strip())
        if not match:
            return Decimal(0)
        try:
            return Decimal(match.group(0))
        except InvalidOperation:
            return Decimal(0)
    return Decimal(0)


def parse_text(value: Any) -> str | None:
    """Plain string, or the label of a single-select option."""
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("value"), str):
        return value["value"]
    return None


def parse_status(value: Any) -> str | None:
    """Lower-cased status label."""
    text = parse_text(value)
    return text.strip().lower() if text is not None else None
