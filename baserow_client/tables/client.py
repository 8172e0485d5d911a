"""Tables API client - table listing used by the name registry."""

from tenacity import (
    AsyncRetrying,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential,
)

from baserow_client.base import BaseClient, _is_retryable_error
from baserow_client.tables.schemas import TableSchema

TABLES_PATH = "/api/database/tables/"


class TablesClient(BaseClient):
    """Client for the Baserow table listing endpoint."""

    retry_wait = wait_exponential(multiplier=1, min=1, max=10)

    def __init__(self, retry_attempts: int = 3, **kwargs):
        super().__init__(**kwargs)
        self._retry_attempts = max(1, retry_attempts)

    async def tables(self) -> list[TableSchema]:
        """GET /api/database/tables/ - every table the token can see."""
        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self._retry_attempts),
            wait=self.retry_wait,
            retry=retry_if_exception(_is_retryable_error),
            reraise=True,
        ):
            with attempt:
                data = await self._get(TABLES_PATH)

        # Some deployments wrap the listing in a paginated envelope
        if isinstance(data, dict):
            data = data.get("results", [])
        return [TableSchema.model_validate(t) for t in data]
