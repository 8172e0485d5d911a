"""API errors and validation helpers."""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import datetime

from app.models.common import parse_timestamp
from app.repositories import TableNotFoundError


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Agency code: two letters + three digits (e.g. TT001)
AGENCY_CODE = re.compile(r"^[A-Za-z]{2}\d{3}$")


def validate_agency_code(agency_code: str) -> str:
    """Validate an agency code and return it upper-cased."""
    code = (agency_code or "").strip()
    if not AGENCY_CODE.match(code):
        raise ValidationError(f"Invalid agency code: {agency_code!r}. Expected two letters and three digits")
    return code.upper()


def validate_date_range(start: str | None, end: str | None) -> tuple[datetime | None, datetime | None]:
    """Parse optional ISO-8601 bounds, rejecting unreadable or inverted ranges."""
    lower = parse_timestamp(start) if start else None
    upper = parse_timestamp(end) if end else None
    if start and lower is None:
        raise ValidationError(f"Invalid start_date: {start!r}")
    if end and upper is None:
        raise ValidationError(f"Invalid end_date: {end!r}")
    if lower and upper and lower > upper:
        raise ValidationError("start_date must not be after end_date")
    return lower, upper


@contextmanager
def table_errors() -> Iterator[None]:
    """Report a missing table as NotFoundError."""
    try:
        yield
    except TableNotFoundError as e:
        raise NotFoundError(str(e)) from e
