"""Shared fixtures: an in-memory Baserow behind httpx.MockTransport and a fake clock."""

import asyncio
import json
import re
from typing import Any

import httpx
import pytest
import pytest_asyncio

from app.repositories.registry import TableRegistry
from baserow_client import RowsClient, TablesClient

TABLES_PATH = "/api/database/tables/"
_ROWS = re.compile(r"^/api/database/rows/table/(\d+)/(?:(\d+)/)?$")


class FakeBaserow:
    """Minimal Baserow: table listing and row CRUD with pagination."""

    def __init__(self, tables: list[dict] | None = None, rows: dict[int, list[dict]] | None = None):
        self.tables = tables or []
        self.rows = rows or {}
        self.requests: list[httpx.Request] = []
        self.tables_status: int | None = None
        self.rows_status: int | None = None
        self.delay = 0.0

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def calls(self, path: str, method: str = "GET") -> int:
        return sum(1 for r in self.requests if r.url.path == path and r.method == method)

    async def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.delay:
            await asyncio.sleep(self.delay)

        path = request.url.path
        if path == TABLES_PATH:
            if self.tables_status:
                return httpx.Response(self.tables_status, json={"error": "boom"})
            return httpx.Response(200, json=self.tables)

        match = _ROWS.match(path)
        if not match:
            return httpx.Response(404, json={"error": "ERROR_NOT_FOUND"})
        if self.rows_status:
            return httpx.Response(self.rows_status, json={"error": "boom"})

        table_id = int(match.group(1))
        if table_id not in self.rows:
            return httpx.Response(404, json={"error": "ERROR_TABLE_DOES_NOT_EXIST"})
        table = self.rows[table_id]

        if match.group(2) is None:
            if request.method == "GET":
                return self._list(request, table)
            if request.method == "POST":
                row = {"id": max((r["id"] for r in table), default=0) + 1, **_body(request)}
                table.append(row)
                return httpx.Response(200, json=row)
            return httpx.Response(405)

        row_id = int(match.group(2))
        row = next((r for r in table if r["id"] == row_id), None)
        if row is None:
            return httpx.Response(404, json={"error": "ERROR_ROW_DOES_NOT_EXIST"})
        if request.method == "PATCH":
            row.update(_body(request))
        return httpx.Response(200, json=row)

    def _list(self, request: httpx.Request, table: list[dict]) -> httpx.Response:
        size = int(request.url.params.get("size", 100))
        page = int(request.url.params.get("page", 1))
        start = (page - 1) * size
        results = table[start : start + size]
        has_next = start + size < len(table)
        return httpx.Response(
            200,
            json={
                "count": len(table),
                "next": f"{request.url.copy_set_param('page', page + 1)}" if has_next else None,
                "previous": None,
                "results": results,
            },
        )


def _body(request: httpx.Request) -> dict[str, Any]:
    return json.loads(request.content or b"{}")


class FakeClock:
    """Monotonic clock advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def baserow() -> FakeBaserow:
    return FakeBaserow(
        tables=[
            {"id": 1, "name": "users", "database_id": 10},
            {"id": 11, "name": "appointments_table_TT001", "database_id": 10},
            {"id": 12, "name": "clients_welcome_tt001", "database_id": 10},
            {"id": 13, "name": "clients_retargeting_TT001", "database_id": 10},
            {"id": 14, "name": "clients_followup_TT001", "database_id": 10},
            {"id": 15, "name": "email_logs_table_retargeting_TT001", "database_id": 10},
            {"id": 21, "name": "appointments_table_AB002", "database_id": 20},
            {"id": 30, "name": "Leads Board", "database_id": 10},
        ],
        rows={1: [], 11: [], 12: [], 13: [], 14: [], 15: [], 21: []},
    )


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest_asyncio.fixture
async def tables_client(baserow):
    async with TablesClient(retry_attempts=1, transport=baserow.transport) as client:
        yield client


@pytest_asyncio.fixture
async def rows_client(baserow):
    async with RowsClient(page_size=2, transport=baserow.transport) as client:
        yield client


@pytest.fixture
def registry(tables_client, clock) -> TableRegistry:
    return TableRegistry(tables_client, ttl=300, clock=clock)
