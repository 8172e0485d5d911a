"""User repository - the shared users table."""

from app.models.common import parse_text
from app.repositories.base import BaseRepository
from baserow_client.rows import Row

USERS = "users"


class UserRepository(BaseRepository):
    """Dashboard users; one table for all agencies."""

    prefix = USERS

    async def find_by_email(self, email: str) -> Row | None:
        """User row with this email (case-insensitive), if any."""
        wanted = email.strip().lower()
        for row in await self.list_rows(None):
            value = parse_text(row.get("email"))
            if value and value.strip().lower() == wanted:
                return row
        return None
