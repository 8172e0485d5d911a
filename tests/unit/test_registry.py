"""Tests for the cached table registry."""

import asyncio

import pytest

from app.models.registry import GLOBAL
from app.repositories.registry import TableRegistry, build_mapping
from baserow_client import RemoteStoreError, TableSchema

TABLES_PATH = "/api/database/tables/"


def _tables(*pairs):
    return [TableSchema(id=i, name=n, database_id=1) for i, n in pairs]


class TestBuildMapping:
    def test_groups_by_prefix_and_agency(self):
        mapping = build_mapping(_tables((1, "users"), (2, "clients_welcome_TT001"), (3, "clients_welcome_AB002")))
        assert mapping == {
            "users": {GLOBAL: 1},
            "clients_welcome": {"TT001": 2, "AB002": 3},
        }

    def test_duplicate_later_wins(self):
        mapping = build_mapping(_tables((2, "clients_welcome_TT001"), (9, "Clients Welcome TT001")))
        assert mapping["clients_welcome"]["TT001"] == 9


class TestResolve:
    @pytest.mark.asyncio
    async def test_agency_table(self, registry):
        assert await registry.resolve("clients_welcome", "TT001") == 12

    @pytest.mark.asyncio
    async def test_agency_code_case_insensitive(self, registry):
        assert await registry.resolve("appointments_table", "ab002") == 21

    @pytest.mark.asyncio
    async def test_global_table_without_agency(self, registry):
        assert await registry.resolve("users") == 1
        assert await registry.resolve("users", "") == 1

    @pytest.mark.asyncio
    async def test_unknown_is_none(self, registry):
        assert await registry.resolve("nope", "TT001") is None
        assert await registry.resolve("clients_welcome", "ZZ999") is None
        assert await registry.resolve("clients_welcome") is None

    @pytest.mark.asyncio
    async def test_unsuffixed_name_is_global(self, registry):
        assert await registry.resolve("leads_board") == 30

    @pytest.mark.asyncio
    async def test_idempotent_within_ttl(self, registry, baserow, clock):
        first = await registry.resolve("clients_welcome", "TT001")
        clock.advance(60)
        second = await registry.resolve("clients_welcome", "TT001")
        assert first == second == 12
        assert baserow.calls(TABLES_PATH) == 1


class TestFreshness:
    @pytest.mark.asyncio
    async def test_not_refreshed_before_ttl(self, registry, baserow, clock):
        await registry.resolve("users")
        clock.advance(4 * 60)
        await registry.resolve("users")
        assert baserow.calls(TABLES_PATH) == 1

    @pytest.mark.asyncio
    async def test_refreshed_at_ttl(self, registry, baserow, clock):
        await registry.resolve("users")
        clock.advance(5 * 60)
        await registry.resolve("users")
        assert baserow.calls(TABLES_PATH) == 2

    @pytest.mark.asyncio
    async def test_refresh_replaces_whole_mapping(self, registry, baserow, clock):
        await registry.resolve("users")
        baserow.tables = [{"id": 99, "name": "clients_welcome_TT001", "database_id": 1}]
        clock.advance(300)

        assert await registry.resolve("clients_welcome", "TT001") == 99
        assert await registry.resolve("users") is None

    @pytest.mark.asyncio
    async def test_invalidate_forces_refresh(self, registry, baserow):
        await registry.resolve("users")
        registry.invalidate()
        assert registry.is_stale
        await registry.resolve("users")
        assert baserow.calls(TABLES_PATH) == 2


class TestRefreshFailure:
    @pytest.mark.asyncio
    async def test_first_refresh_failure_raises(self, registry, baserow):
        baserow.tables_status = 500
        with pytest.raises(RemoteStoreError) as exc:
            await registry.resolve("users")
        assert exc.value.status_code == 500
        assert registry.last_refreshed_at is None

    @pytest.mark.asyncio
    async def test_failure_keeps_previous_mapping(self, registry, baserow, clock):
        await registry.resolve("users")
        before = registry.snapshot()
        refreshed_at = registry.last_refreshed_at

        clock.advance(300)
        baserow.tables_status = 502
        with pytest.raises(RemoteStoreError):
            await registry.resolve("clients_welcome", "TT001")

        assert registry.snapshot() == before
        assert registry.last_refreshed_at == refreshed_at
        assert registry.lookup("clients_welcome", "TT001") == 12
        assert registry.is_stale

    @pytest.mark.asyncio
    async def test_next_call_retries_immediately(self, registry, baserow, clock):
        baserow.tables_status = 503
        with pytest.raises(RemoteStoreError):
            await registry.resolve("users")

        baserow.tables_status = None
        assert await registry.resolve("users") == 1
        assert baserow.calls(TABLES_PATH) == 2


class TestSingleFlight:
    @pytest.mark.asyncio
    async def test_concurrent_stale_resolves_share_one_refresh(self, registry, baserow):
        baserow.delay = 0.05
        results = await asyncio.gather(
            registry.resolve("clients_welcome", "TT001"),
            registry.resolve("appointments_table", "TT001"),
            registry.resolve("users"),
        )
        assert results == [12, 11, 1]
        assert baserow.calls(TABLES_PATH) == 1
        assert registry.refresh_count == 1

    @pytest.mark.asyncio
    async def test_concurrent_waiters_share_a_failed_refresh(self, registry, baserow):
        baserow.tables_status = 503
        baserow.delay = 0.05
        results = await asyncio.gather(*(registry.resolve("users") for _ in range(5)), return_exceptions=True)

        assert all(isinstance(r, RemoteStoreError) for r in results)
        assert baserow.calls(TABLES_PATH) == 1
        assert registry.is_stale

    @pytest.mark.asyncio
    async def test_refresh_after_shared_failure_retries(self, registry, baserow):
        baserow.tables_status = 503
        await asyncio.gather(registry.resolve("users"), registry.resolve("users"), return_exceptions=True)

        baserow.tables_status = None
        assert await registry.resolve("users") == 1
        assert baserow.calls(TABLES_PATH) == 2

    @pytest.mark.asyncio
    async def test_force_refresh_ignores_ttl(self, registry, baserow):
        await registry.refresh()
        await registry.refresh(force=True)
        assert baserow.calls(TABLES_PATH) == 2


class TestAgencyCodes:
    @pytest.mark.asyncio
    async def test_lists_agencies_of_a_kind(self, registry):
        await registry.refresh()
        assert registry.agency_codes("appointments_table") == ["AB002", "TT001"]
        assert registry.agency_codes("users") == []


@pytest.mark.asyncio
async def test_default_clock_is_monotonic(tables_client):
    registry = TableRegistry(tables_client)
    assert registry.is_stale
    assert registry.last_refreshed_at is None
