"""Record API response schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class RecordsResponse(BaseModel):
    """Rows of one entity for an agency."""

    entity: str
    count: int
    items: list[dict[str, Any]]
    fetched_at: datetime


class RecordResponse(BaseModel):
    """A single row."""

    entity: str
    item: dict[str, Any]
