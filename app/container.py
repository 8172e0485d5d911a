"""Dependency Injection container - initialized at app startup."""

import httpx
from loguru import logger

import settings
from app.repositories import (
    AppointmentRepository,
    EmailLogRepository,
    FollowupClientRepository,
    RetargetingClientRepository,
    TableRegistry,
    UserRepository,
    WelcomeClientRepository,
)
from app.services.overview import OverviewService
from baserow_client import RowsClient, TablesClient, set_api_config


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    async def init(self, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """Open the Baserow clients and wire everything. Call once at app startup."""
        if self._initialized:
            return

        set_api_config(
            base_url=settings.BASEROW_URL,
            token=settings.BASEROW_TOKEN,
            timeout=settings.API_TIMEOUT,
            auth_scheme=settings.BASEROW_AUTH_SCHEME,
        )

        # Clients (one connection pool each)
        self._tables_client = TablesClient(
            retry_attempts=settings.TABLES_RETRY_ATTEMPTS,
            max_concurrent=settings.MAX_CONCURRENT,
            transport=transport,
        )
        self._rows_client = RowsClient(
            page_size=settings.PAGE_SIZE,
            max_concurrent=settings.MAX_CONCURRENT,
            transport=transport,
        )
        await self._tables_client.__aenter__()
        await self._rows_client.__aenter__()

        # Table index (one per process)
        self.registry = TableRegistry(self._tables_client, ttl=settings.TABLE_CACHE_TTL)

        # Repositories
        self.appointments = AppointmentRepository(self.registry, self._rows_client)
        self.welcome = WelcomeClientRepository(self.registry, self._rows_client)
        self.retargeting = RetargetingClientRepository(self.registry, self._rows_client)
        self.followups = FollowupClientRepository(self.registry, self._rows_client)
        self.email_logs = {
            "retargeting": EmailLogRepository(self.registry, self._rows_client, "retargeting"),
            "followup": EmailLogRepository(self.registry, self._rows_client, "followup"),
        }
        self.users = UserRepository(self.registry, self._rows_client)

        # Services
        self.overview = OverviewService(self.registry, self._rows_client)

        self._initialized = True
        logger.info("Container initialized for {}", settings.BASEROW_URL)

    @property
    def initialized(self) -> bool:
        return self._initialized

    @property
    def rows(self) -> RowsClient:
        return self._rows_client

    async def close(self) -> None:
        """Close the Baserow clients; ``init`` may be called again afterwards."""
        if not self._initialized:
            return
        await self._rows_client.__aexit__(None, None, None)
        await self._tables_client.__aexit__(None, None, None)
        self._initialized = False


# Global container instance
container = Container()
