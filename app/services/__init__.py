"""Services package - service class exports."""

from app.services.overview import OverviewService

__all__ = [
    "OverviewService",
]
