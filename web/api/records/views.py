"""Record API views - per-agency CRUD over the Baserow tables."""

from datetime import UTC, datetime
from typing import Any

from app.container import container
from app.repositories import BaseRepository, EmailLogRepository
from web.api.errors import (
    ValidationError,
    table_errors,
    validate_agency_code,
    validate_date_range,
)

from .schemas import RecordResponse, RecordsResponse

ENTITIES = ("appointments", "welcome", "retargeting", "followups")

# Pipelines that keep an email log
EMAIL_CHANNELS = {"retargeting": "retargeting", "followups": "followup"}


def _repository(entity: str) -> BaseRepository:
    repos = {
        "appointments": container.appointments,
        "welcome": container.welcome,
        "retargeting": container.retargeting,
        "followups": container.followups,
    }
    if entity not in repos:
        raise ValidationError(f"Invalid entity type: {entity!r}. Expected one of {', '.join(ENTITIES)}")
    return repos[entity]


async def list_records(
    agency_code: str,
    entity: str,
    start_date: str | None = None,
    end_date: str | None = None,
) -> RecordsResponse:
    """List an entity's rows; appointments accept an optional date range."""
    agency_code = validate_agency_code(agency_code)
    repo = _repository(entity)

    with table_errors():
        if entity == "appointments":
            start, end = validate_date_range(start_date, end_date)
            items = await container.appointments.list_rows(agency_code, start=start, end=end)
        else:
            items = await repo.list_rows(agency_code)

    return RecordsResponse(entity=entity, count=len(items), items=items, fetched_at=datetime.now(UTC))


async def get_record(agency_code: str, entity: str, row_id: int) -> RecordResponse:
    agency_code = validate_agency_code(agency_code)
    repo = _repository(entity)
    with table_errors():
        item = await repo.get_row(agency_code, row_id)
    return RecordResponse(entity=entity, item=item)


async def create_record(agency_code: str, entity: str, fields: dict[str, Any]) -> RecordResponse:
    agency_code = validate_agency_code(agency_code)
    repo = _repository(entity)
    with table_errors():
        item = await repo.create_row(agency_code, fields)
    return RecordResponse(entity=entity, item=item)


async def update_record(agency_code: str, entity: str, row_id: int, fields: dict[str, Any]) -> RecordResponse:
    agency_code = validate_agency_code(agency_code)
    repo = _repository(entity)
    with table_errors():
        item = await repo.update_row(agency_code, row_id, fields)
    return RecordResponse(entity=entity, item=item)


async def log_email(
    agency_code: str,
    entity: str,
    client_id: int,
    subject: str,
    content: str = "",
) -> RecordResponse:
    """Record an email sent to a retargeting or follow-up client."""
    agency_code = validate_agency_code(agency_code)
    if entity not in EMAIL_CHANNELS:
        raise ValidationError(f"No email log for entity: {entity!r}")
    if not subject.strip():
        raise ValidationError("Subject is required")

    repo: EmailLogRepository = container.email_logs[EMAIL_CHANNELS[entity]]
    with table_errors():
        item = await repo.log(agency_code, client_id, subject, content)
    return RecordResponse(entity=f"{entity}_email_logs", item=item)
