"""Table registry models."""

from app.models.registry.entities import GLOBAL, ParsedName, TableMapping

__all__ = [
    "GLOBAL",
    "ParsedName",
    "TableMapping",
]
