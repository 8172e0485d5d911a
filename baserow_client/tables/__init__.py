"""Tables API client."""

from baserow_client.tables.client import TablesClient
from baserow_client.tables.schemas import TableSchema

__all__ = [
    "TablesClient",
    "TableSchema",
]
