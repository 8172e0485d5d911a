"""Client repositories - welcome, retargeting and follow-up pipelines."""

from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from app.models.common import parse_timestamp
from app.repositories.base import BaseRepository
from baserow_client.rows import Row

WELCOME = "clients_welcome"
RETARGETING = "clients_retargeting"
FOLLOWUP = "clients_followup"

# Retargeting clients not seen for this long need attention
ATTENTION_AFTER = timedelta(days=30)


def _now(now: datetime | None) -> datetime:
    return parse_timestamp(now) or datetime.now(UTC)


class WelcomeClientRepository(BaseRepository):
    """New clients. ``created_at`` drives the new-client metric and is always server time."""

    prefix = WELCOME

    async def create_row(
        self,
        agency_code: str | None,
        fields: Mapping[str, Any],
        now: datetime | None = None,
    ) -> Row:
        data = dict(fields)
        data["created_at"] = _now(now).isoformat()
        return await super().create_row(agency_code, data)


class RetargetingClientRepository(BaseRepository):
    """Lapsed clients, flagged with ``needs_attention``."""

    prefix = RETARGETING

    async def list_rows(
        self,
        agency_code: str | None,
        filters: Mapping[str, Any] | None = None,
        now: datetime | None = None,
    ) -> list[Row]:
        cutoff = _now(now) - ATTENTION_AFTER
        rows = await super().list_rows(agency_code, filters)

        result = []
        for row in rows:
            last_visit = parse_timestamp(row.get("last_visit_date"))
            result.append({**row, "needs_attention": last_visit is None or last_visit < cutoff})
        return result


class FollowupClientRepository(BaseRepository):
    """Clients awaiting follow-up, soonest due first, flagged with ``is_overdue``."""

    prefix = FOLLOWUP

    async def list_rows(
        self,
        agency_code: str | None,
        filters: Mapping[str, Any] | None = None,
        now: datetime | None = None,
    ) -> list[Row]:
        current = _now(now)
        rows = await super().list_rows(agency_code, filters)

        dated = []
        undated = []
        for row in rows:
            due = parse_timestamp(row.get("due_date"))
            enriched = {**row, "is_overdue": due is not None and due < current}
            if due is None:
                undated.append(enriched)
            else:
                dated.append((due, enriched))

        dated.sort(key=lambda item: item[0])
        return [row for _, row in dated] + undated
