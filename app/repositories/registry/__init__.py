"""Table registry - naming convention and cached table index."""

from app.repositories.registry.naming import normalize_table_name, parse_table_name
from app.repositories.registry.registry import DEFAULT_TTL, TableRegistry, build_mapping

__all__ = [
    "DEFAULT_TTL",
    "TableRegistry",
    "build_mapping",
    "normalize_table_name",
    "parse_table_name",
]
