"""Common models - base classes and row value coercion."""

from app.models.common.base import BaseEntity
from app.models.common.values import (
    parse_number,
    parse_status,
    parse_text,
    parse_timestamp,
)

__all__ = [
    "BaseEntity",
    "parse_number",
    "parse_status",
    "parse_text",
    "parse_timestamp",
]
