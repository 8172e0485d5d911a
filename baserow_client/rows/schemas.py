"""Row API schemas.

Rows are untyped field bags: Baserow enforces no schema we rely on, so a row
is a mapping of field name to any JSON value. Consumers coerce the fields
they need and treat failed coercion as a missing value.
"""

from typing import Any

from pydantic import BaseModel

RowValue = str | int | float | bool | None | list[Any] | dict[str, Any]
Row = dict[str, RowValue]


class RowPage(BaseModel):
    """One page of a row listing."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[dict[str, Any]] = []
