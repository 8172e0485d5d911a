"""Health API views."""

from app.container import container

from .schemas import HealthResponse


def get_health() -> HealthResponse:
    """Report table index freshness without touching Baserow.

    Before ``container.init()`` the status is ``starting``.
    """
    if not container.initialized:
        return HealthResponse(
            status="starting",
            table_index_stale=True,
            table_index_refreshes=0,
            table_kinds=0,
        )

    registry = container.registry
    return HealthResponse(
        status="ok",
        table_index_stale=registry.is_stale,
        table_index_refreshes=registry.refresh_count,
        table_kinds=len(registry.snapshot()),
    )
