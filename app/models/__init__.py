"""Models package - entities and value coercion for all domains."""

from app.models.common import BaseEntity, parse_number, parse_status, parse_text, parse_timestamp
from app.models.overview import Kpis
from app.models.registry import GLOBAL, ParsedName, TableMapping

__all__ = [
    # Common
    "BaseEntity",
    "parse_number",
    "parse_status",
    "parse_text",
    "parse_timestamp",
    # Registry
    "GLOBAL",
    "ParsedName",
    "TableMapping",
    # Overview
    "Kpis",
]
