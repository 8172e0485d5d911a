"""Rows API client."""

from baserow_client.rows.client import RowsClient
from baserow_client.rows.schemas import Row, RowPage, RowValue

__all__ = [
    "RowsClient",
    "Row",
    "RowPage",
    "RowValue",
]
