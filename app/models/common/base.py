"""Base entity class for all domain entities."""

from dataclasses import asdict, dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any


def _json_safe(value: Any) -> Any:
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    return value


@dataclass
class BaseEntity:
    """Base class for all entities."""

    def to_dict(self, json_safe: bool = False) -> dict[str, Any]:
        """Convert entity to dictionary.

        With ``json_safe`` decimals and dates become strings.
        """
        data = asdict(self)
        if json_safe:
            return {k: _json_safe(v) for k, v in data.items()}
        return data
