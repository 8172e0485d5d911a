"""Appointment repository."""

from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

from app.models.common import parse_timestamp
from app.repositories.base import BaseRepository
from baserow_client.rows import Row

APPOINTMENTS = "appointments_table"

_EARLIEST = datetime.min.replace(tzinfo=UTC)


def _starts_at_key(row: Row) -> tuple[bool, datetime]:
    starts_at = parse_timestamp(row.get("starts_at"))
    return (starts_at is None, starts_at or _EARLIEST)


class AppointmentRepository(BaseRepository):
    """Appointments of an agency, optionally bounded by ``starts_at``."""

    prefix = APPOINTMENTS

    async def list_rows(
        self,
        agency_code: str | None,
        filters: Mapping[str, Any] | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[Row]:
        """Appointments with ``start <= starts_at <= end``, earliest first.

        Rows without a readable ``starts_at`` are dropped when a bound is given
        and sorted last otherwise.
        """
        rows = await super().list_rows(agency_code, filters)

        lower = parse_timestamp(start)
        upper = parse_timestamp(end)
        if lower or upper:
            kept = []
            for row in rows:
                starts_at = parse_timestamp(row.get("starts_at"))
                if starts_at is None:
                    continue
                if lower and starts_at < lower:
                    continue
                if upper and starts_at > upper:
                    continue
                kept.append(row)
            rows = kept

        return sorted(rows, key=_starts_at_key)
