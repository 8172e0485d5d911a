"""Base repository class."""

from collections.abc import Mapping
from typing import Any

from loguru import logger

from app.repositories.registry import TableRegistry
from baserow_client.rows import Row, RowsClient


class TableNotFoundError(LookupError):
    """No table of the requested kind exists for the agency."""

    def __init__(self, prefix: str, agency_code: str | None):
        self.prefix = prefix
        self.agency_code = agency_code
        owner = agency_code or "global"
        super().__init__(f"Table '{prefix}' not found for {owner}")


class BaseRepository:
    """Row access for one table kind, resolved per agency.

    Subclasses set ``prefix``; ``agency_code=None`` addresses the shared table.
    """

    prefix: str = ""

    def __init__(self, registry: TableRegistry, rows: RowsClient):
        self._registry = registry
        self._rows = rows
        logger.debug("{} initialized", self.__class__.__name__)

    async def table_id(self, agency_code: str | None) -> int:
        """Resolved table id, raising TableNotFoundError if absent."""
        table_id = await self._registry.resolve(self.prefix, agency_code)
        if table_id is None:
            raise TableNotFoundError(self.prefix, agency_code)
        return table_id

    async def list_rows(self, agency_code: str | None, filters: Mapping[str, Any] | None = None) -> list[Row]:
        return await self._rows.list_rows(await self.table_id(agency_code), filters)

    async def get_row(self, agency_code: str | None, row_id: int) -> Row:
        return await self._rows.get_row(await self.table_id(agency_code), row_id)

    async def create_row(self, agency_code: str | None, fields: Mapping[str, Any]) -> Row:
        return await self._rows.create_row(await self.table_id(agency_code), fields)

    async def update_row(self, agency_code: str | None, row_id: int, fields: Mapping[str, Any]) -> Row:
        return await self._rows.update_row(await self.table_id(agency_code), row_id, fields)
