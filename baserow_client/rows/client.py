"""Rows API client - list, create, update and fetch rows of a table."""

from collections.abc import Mapping
from typing import Any

from baserow_client.base import BaseClient
from baserow_client.rows.schemas import Row, RowPage

ROWS_PATH = "/api/database/rows/table/{table_id}/"
ROW_PATH = "/api/database/rows/table/{table_id}/{row_id}/"


def _page(data: Any) -> RowPage:
    """Accept both the paginated envelope and a bare list of rows."""
    if isinstance(data, list):
        return RowPage(count=len(data), results=data)
    return RowPage.model_validate(data)


class RowsClient(BaseClient):
    """Client for Baserow row endpoints.

    Filters are forwarded verbatim as query parameters. Failures raise
    ``RemoteStoreError``; nothing here retries.
    """

    def __init__(self, page_size: int = 200, **kwargs):
        super().__init__(**kwargs)
        self._page_size = page_size

    @staticmethod
    def _params(extra: Mapping[str, Any] | None = None) -> dict[str, Any]:
        return {"user_field_names": "true", **(extra or {})}

    async def list_rows(self, table_id: int, filters: Mapping[str, Any] | None = None) -> list[Row]:
        """GET /rows/table/{id}/ - all rows, following pagination.

        An explicit ``page`` filter fetches that page only.
        """
        path = ROWS_PATH.format(table_id=table_id)
        params = self._params(filters)

        if "page" in params:
            return _page(await self._get(path, params)).results

        params.setdefault("size", self._page_size)
        rows: list[Row] = []
        page_no = 1
        while True:
            params["page"] = page_no
            page = _page(await self._get(path, params))
            rows.extend(page.results)
            if not page.next:
                break
            page_no += 1
        return rows

    async def create_row(self, table_id: int, fields: Mapping[str, Any]) -> Row:
        """POST /rows/table/{id}/ - create a row."""
        return await self._request(
            "POST",
            ROWS_PATH.format(table_id=table_id),
            params=self._params(),
            json=dict(fields),
        )

    async def update_row(self, table_id: int, row_id: int, fields: Mapping[str, Any]) -> Row:
        """PATCH /rows/table/{id}/{row_id}/ - partial update."""
        return await self._request(
            "PATCH",
            ROW_PATH.format(table_id=table_id, row_id=row_id),
            params=self._params(),
            json=dict(fields),
        )

    async def get_row(self, table_id: int, row_id: int) -> Row:
        """GET /rows/table/{id}/{row_id}/ - single row."""
        return await self._get(ROW_PATH.format(table_id=table_id, row_id=row_id), self._params())
