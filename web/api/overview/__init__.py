"""Overview API."""

from web.api.overview.views import get_kpis

__all__ = [
    "get_kpis",
]
