"""Baserow API client package."""

from baserow_client.base import BaseClient, set_api_config
from baserow_client.errors import RemoteStoreError
from baserow_client.rows import Row, RowsClient
from baserow_client.tables import TablesClient, TableSchema

__all__ = [
    # Base
    "BaseClient",
    "RemoteStoreError",
    "set_api_config",
    # Clients
    "TablesClient",
    "RowsClient",
    # Schemas
    "TableSchema",
    "Row",
]
