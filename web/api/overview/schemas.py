"""Overview API response schemas."""

from decimal import Decimal

from pydantic import BaseModel, Field


class KpisResponse(BaseModel):
    """Headline KPIs for the signed-in agency."""

    bookings_today: int = Field(alias="bookingsToday")
    revenue_30d: Decimal = Field(alias="revenue30d")
    new_clients_7d: int = Field(alias="newClients7d")
    no_shows_7d: int = Field(alias="noShows7d")

    class Config:
        populate_by_name = True
