"""Overview models."""

from app.models.overview.entities import Kpis

__all__ = [
    "Kpis",
]
