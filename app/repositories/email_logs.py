"""Email log repository - outreach history per client pipeline."""

from datetime import UTC, datetime

from app.repositories.base import BaseRepository
from app.repositories.registry import TableRegistry
from baserow_client.rows import Row, RowsClient

CHANNELS = ("retargeting", "followup")


class EmailLogRepository(BaseRepository):
    """Email logs of one pipeline (``email_logs_table_<channel>``)."""

    def __init__(self, registry: TableRegistry, rows: RowsClient, channel: str):
        if channel not in CHANNELS:
            raise ValueError(f"Unknown email log channel: {channel}")
        self.channel = channel
        self.prefix = f"email_logs_table_{channel}"
        super().__init__(registry, rows)

    async def log(
        self,
        agency_code: str,
        client_id: int,
        subject: str,
        content: str = "",
        now: datetime | None = None,
    ) -> Row:
        """Record a sent email for a client."""
        sent_at = (now or datetime.now(UTC)).isoformat()
        return await self.create_row(
            agency_code,
            {
                "client_id": client_id,
                "subject": subject,
                "content": content,
                "sent_at": sent_at,
                "status": "sent",
            },
        )
