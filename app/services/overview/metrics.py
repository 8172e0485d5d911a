"""Pure KPI reductions over raw rows - no I/O, easily testable.

``bookings_today`` compares UTC calendar dates. The other metrics use rolling
windows measured back from ``now``, lower bound inclusive.
"""

from collections.abc import Iterable
from datetime import UTC, datetime, timedelta
from decimal import Decimal

from app.models.common import parse_number, parse_status, parse_timestamp
from app.models.overview import Kpis
from baserow_client.rows import Row

REVENUE_WINDOW = timedelta(days=30)
NO_SHOW_WINDOW = timedelta(days=7)
NEW_CLIENT_WINDOW = timedelta(days=7)

REVENUE_STATUSES = frozenset({"completed", "paid"})
NO_SHOW_STATUSES = frozenset({"no_show", "no-show"})


def as_utc(now: datetime) -> datetime:
    """Aware UTC datetime; naive input is taken to be UTC already."""
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now.astimezone(UTC)


def appointment_metrics(appointments: Iterable[Row], now: datetime) -> tuple[int, Decimal, int]:
    """(bookings today, revenue over 30 days, no-shows over 7 days)."""
    now = as_utc(now)
    today = now.date()
    revenue_since = now - REVENUE_WINDOW
    no_show_since = now - NO_SHOW_WINDOW

    bookings = 0
    revenue = Decimal(0)
    no_shows = 0

    for row in appointments:
        starts_at = parse_timestamp(row.get("starts_at"))
        if starts_at is None:
            continue

        if starts_at.date() == today:
            bookings += 1

        status = parse_status(row.get("status"))
        if starts_at >= revenue_since and status in REVENUE_STATUSES:
            revenue += parse_number(row.get("value"))
        if starts_at >= no_show_since and status in NO_SHOW_STATUSES:
            no_shows += 1

    return bookings, revenue, no_shows


def count_new_clients(clients: Iterable[Row], now: datetime) -> int:
    """Clients created within the last 7 days."""
    since = as_utc(now) - NEW_CLIENT_WINDOW
    count = 0
    for row in clients:
        created_at = parse_timestamp(row.get("created_at"))
        if created_at is not None and created_at >= since:
            count += 1
    return count


def compute_kpis(appointments: Iterable[Row], welcome_clients: Iterable[Row], now: datetime) -> Kpis:
    bookings, revenue, no_shows = appointment_metrics(appointments, now)
    return Kpis(
        bookings_today=bookings,
        revenue_30d=revenue,
        new_clients_7d=count_new_clients(welcome_clients, now),
        no_shows_7d=no_shows,
    )
