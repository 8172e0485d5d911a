"""Overview domain entities - computed dashboard metrics."""

from dataclasses import dataclass, field
from decimal import Decimal

from app.models.common import BaseEntity


@dataclass
class Kpis(BaseEntity):
    """Headline metrics for one agency."""

    bookings_today: int = 0
    revenue_30d: Decimal = field(default_factory=Decimal)
    new_clients_7d: int = 0
    no_shows_7d: int = 0

    @classmethod
    def zero(cls) -> "Kpis":
        return cls()
