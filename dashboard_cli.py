#!/usr/bin/env python3
"""
Inspect the Baserow table index and agency KPIs.

Usage:
    python dashboard_cli.py tables             # Show the resolved table index
    python dashboard_cli.py kpis TT001         # KPIs for one agency
    python dashboard_cli.py kpis TT001 AB002   # KPIs for several agencies
    python dashboard_cli.py kpis all           # KPIs for every agency with appointments
"""

import asyncio
import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from app.container import container
from app.models.registry import GLOBAL
from app.repositories import APPOINTMENTS
from baserow_client import RemoteStoreError
from settings.logging import setup_logging
from web.api.errors import ValidationError, validate_agency_code

logger = setup_logging(to_file=False)


async def show_tables() -> None:
    """Print every table kind with its agencies and ids."""
    await container.registry.refresh(force=True)
    mapping = container.registry.snapshot()

    print("\n" + "=" * 60)
    print("TABLE INDEX")
    print("=" * 60)
    for prefix in sorted(mapping):
        group = mapping[prefix]
        owners = ", ".join(f"{'global' if code == GLOBAL else code}={tid}" for code, tid in sorted(group.items()))
        print(f"  {prefix:<36} {owners}")
    print("=" * 60 + "\n")


async def show_kpis(agency_codes: list[str] | None) -> None:
    """Print KPIs per agency (all agencies with appointments if None)."""
    if agency_codes is None:
        await container.registry.refresh()
        agency_codes = container.registry.agency_codes(APPOINTMENTS)
        if not agency_codes:
            print(f"\n⚠️  No '{APPOINTMENTS}' tables found.\n")
            return

    print("\n" + "=" * 60)
    print("AGENCY KPIs")
    print("=" * 60)
    for code in agency_codes:
        kpis = await container.overview.compute_kpis(code)
        print(f"\n{code}")
        print(f"  Bookings today:     {kpis.bookings_today:,}")
        print(f"  Revenue (30 days):  {kpis.revenue_30d:,.2f}")
        print(f"  New clients (7d):   {kpis.new_clients_7d:,}")
        print(f"  No-shows (7d):      {kpis.no_shows_7d:,}")
    print("\n" + "=" * 60 + "\n")


async def _run(args: list[str]) -> int:
    await container.init()
    try:
        if args[0] == "tables":
            await show_tables()
        elif args[0] == "kpis":
            codes = args[1:]
            if codes == ["all"]:
                await show_kpis(None)
            else:
                await show_kpis([validate_agency_code(c) for c in codes])
        return 0
    except RemoteStoreError as e:
        logger.error("Baserow request failed ({}): {}", e.status_code, e.message)
        return 1
    finally:
        await container.close()


def main():
    args = sys.argv[1:]

    if not args or args[0] not in ("tables", "kpis") or (args[0] == "kpis" and len(args) < 2):
        print(__doc__)
        sys.exit(1)

    try:
        sys.exit(asyncio.run(_run(args)))
    except ValidationError as e:
        print(f"\n❌ {e.message}\n")
        sys.exit(1)


if __name__ == "__main__":
    main()
