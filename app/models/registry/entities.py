"""Table registry entities."""

from dataclasses import dataclass

from app.models.common import BaseEntity

# Tenant key for tables without an agency suffix (e.g. users)
GLOBAL = "GLOBAL"

# prefix -> agency code (or GLOBAL) -> table id
TableMapping = dict[str, dict[str, int]]


@dataclass
class ParsedName(BaseEntity):
    """Table kind and owning agency derived from a table name."""

    prefix: str
    agency_code: str | None = None

    @property
    def tenant_key(self) -> str:
        return self.agency_code or GLOBAL
