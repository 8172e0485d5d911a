"""Health API response schemas."""

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Service and table index status."""

    status: str
    table_index_stale: bool
    table_index_refreshes: int
    table_kinds: int
