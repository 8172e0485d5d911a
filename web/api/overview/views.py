"""Overview API views - thin layer over services."""

from app.container import container
from web.api.errors import validate_agency_code

from .schemas import KpisResponse


async def get_kpis(agency_code: str) -> KpisResponse:
    """Dashboard KPIs for an agency."""
    agency_code = validate_agency_code(agency_code)
    kpis = await container.overview.compute_kpis(agency_code)

    return KpisResponse(
        bookings_today=kpis.bookings_today,
        revenue_30d=kpis.revenue_30d,
        new_clients_7d=kpis.new_clients_7d,
        no_shows_7d=kpis.no_shows_7d,
    )
