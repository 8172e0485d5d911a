"""Overview service - headline KPIs per agency."""

from datetime import UTC, datetime

from loguru import logger

from app.models.overview import Kpis
from app.repositories.appointments import APPOINTMENTS
from app.repositories.clients import WELCOME
from app.repositories.registry import TableRegistry
from app.services.overview import metrics
from baserow_client.rows import Row, RowsClient


class OverviewService:
    """Dashboard overview business logic."""

    def __init__(self, registry: TableRegistry, rows: RowsClient):
        self._registry = registry
        self._rows = rows
        logger.debug("OverviewService initialized")

    async def _rows_of(self, prefix: str, agency_code: str) -> list[Row]:
        """All rows of the agency's table, or none if it has no such table."""
        table_id = await self._registry.resolve(prefix, agency_code)
        if table_id is None:
            logger.debug("No {} table for {}", prefix, agency_code)
            return []
        return await self._rows.list_rows(table_id)

    async def compute_kpis(self, agency_code: str, now: datetime | None = None) -> Kpis:
        """KPIs for an agency. Never raises: any failure yields all zeros."""
        now = metrics.as_utc(now) if now else datetime.now(UTC)

        with logger.contextualize(agency=agency_code):
            try:
                appointments = await self._rows_of(APPOINTMENTS, agency_code)
                welcome = await self._rows_of(WELCOME, agency_code)
                kpis = metrics.compute_kpis(appointments, welcome, now)
            except Exception:
                logger.exception("Error calculating KPIs")
                return Kpis.zero()

            logger.info(
                "KPIs from {} appointments, {} new clients: {}",
                len(appointments),
                len(welcome),
                kpis.to_dict(json_safe=True),
            )
            return kpis
