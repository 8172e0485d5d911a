"""Table registry - resolves (table kind, agency) to a Baserow table id."""

import asyncio
import time
from collections.abc import Callable, Iterable

from loguru import logger

from app.models.registry import GLOBAL, TableMapping
from app.repositories.registry.naming import parse_table_name
from baserow_client.tables import TablesClient, TableSchema

DEFAULT_TTL = 5 * 60.0


def build_mapping(tables: Iterable[TableSchema]) -> TableMapping:
    """Index tables by prefix and agency code.

    When two names parse to the same pair the later table wins.
    """
    mapping: TableMapping = {}
    for table in tables:
        parsed = parse_table_name(table.name)
        group = mapping.setdefault(parsed.prefix, {})
        key = parsed.tenant_key
        if key in group and group[key] != table.id:
            logger.warning(
                "Duplicate table for {}/{}: {} ('{}') replaces {}",
                parsed.prefix,
                key,
                table.id,
                table.name,
                group[key],
            )
        group[key] = table.id
    return mapping


class TableRegistry:
    """Time-bounded cache of the table index.

    The whole index is rebuilt from the table listing once it is older than
    ``ttl`` seconds. A failed refresh keeps the previous index and leaves it
    stale, so the next lookup tries again. Concurrent refreshes collapse into
    one listing call.
    """

    def __init__(
        self,
        tables_client: TablesClient,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._tables = tables_client
        self._ttl = ttl
        self._clock = clock
        self._mapping: TableMapping = {}
        self._last_refresh: float | None = None
        self._inflight: asyncio.Task | None = None
        self._refresh_count = 0
        logger.debug("TableRegistry initialized (ttl={}s)", ttl)

    @property
    def last_refreshed_at(self) -> float | None:
        return self._last_refresh

    @property
    def refresh_count(self) -> int:
        return self._refresh_count

    @property
    def is_stale(self) -> bool:
        if self._last_refresh is None:
            return True
        return self._clock() - self._last_refresh >= self._ttl

    async def refresh(self, force: bool = False) -> None:
        """Rebuild the index if stale (or always, with ``force``).

        Callers arriving while a refresh is running wait for that one and get
        its outcome, including its error.
        """
        if not force and not self.is_stale:
            return

        if self._inflight is None:
            self._inflight = asyncio.ensure_future(self._rebuild())
        await asyncio.shield(self._inflight)

    async def _rebuild(self) -> None:
        now = self._clock()
        try:
            tables = await self._tables.tables()
        except Exception as e:
            logger.error("Failed to refresh table mapping: {}", e)
            raise
        finally:
            self._inflight = None

        self._mapping = build_mapping(tables)
        self._last_refresh = now
        self._refresh_count += 1
        logger.info("Table mapping refreshed: {} tables, prefixes={}", len(tables), sorted(self._mapping))

    def invalidate(self) -> None:
        """Mark the index stale; the current mapping stays as a fallback."""
        self._last_refresh = None

    def lookup(self, prefix: str, agency_code: str | None = None) -> int | None:
        """Resolve against the current index without refreshing."""
        group = self._mapping.get(prefix)
        if group is None:
            return None
        key = agency_code.upper() if agency_code else GLOBAL
        return group.get(key)

    async def resolve(self, prefix: str, agency_code: str | None = None) -> int | None:
        """Table id for a kind and agency, ``None`` if no such table exists.

        Without an agency code the shared (GLOBAL) table is returned.
        Raises ``RemoteStoreError`` when a needed refresh fails.
        """
        await self.refresh()
        return self.lookup(prefix, agency_code)

    def agency_codes(self, prefix: str) -> list[str]:
        """Agencies that have a table of this kind."""
        return sorted(k for k in self._mapping.get(prefix, {}) if k != GLOBAL)

    def snapshot(self) -> TableMapping:
        return {prefix: dict(group) for prefix, group in self._mapping.items()}
