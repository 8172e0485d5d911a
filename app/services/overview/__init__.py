"""Overview service and KPI reductions."""

from app.services.overview.service import OverviewService

__all__ = [
    "OverviewService",
]
