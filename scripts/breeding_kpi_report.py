#!/usr/bin/env python3
"""
Print the breeding KPI report of a tenant from the command line.

This script:
1. Computes the single-period breeding KPIs (default: trailing 12 months)
2. Computes the monthly trend series (default: trailing 6 months)
3. Prints metrics, counts and insights for both

Usage:
  python scripts/breeding_kpi_report.py --tenant-id UUID [--from 2025-01-01] [--to 2025-12-31]
      [--from-month 2025-01] [--to-month 2025-06] [--months 6] [--locale ja]
"""

import argparse
import asyncio
import sys
from datetime import datetime
from pathlib import Path
from uuid import UUID

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.application.errors import AppError
from src.application.use_cases.kpi import get_breeding_kpi, get_breeding_trends
from src.application.use_cases.kpi.event_window import KpiOptions
from src.config.settings import get_settings
from src.infrastructure.db.session import (
    SQLAlchemyUnitOfWork,
    create_engine,
    create_session_factory,
)
from src.infrastructure.messages.kpi_narrator import JinjaKpiNarrator


def _fmt(value) -> str:
    return "-" if value is None else str(value)


async def print_report(args: argparse.Namespace) -> None:
    settings = get_settings()
    engine = create_engine(settings.database_url)
    session_factory = create_session_factory(engine)
    narrator = JinjaKpiNarrator.for_locale(args.locale or settings.kpi_locale)
    options = KpiOptions.from_settings(settings)

    try:
        uow = SQLAlchemyUnitOfWork(session_factory)
        async with uow:
            kpi = await get_breeding_kpi.execute(
                uow,
                args.tenant_id,
                narrator=narrator,
                date_from=args.date_from,
                date_to=args.date_to,
                options=options,
            )
            trends = await get_breeding_trends.execute(
                uow,
                args.tenant_id,
                narrator=narrator,
                from_month=args.from_month,
                to_month=args.to_month,
                months_back=args.months,
                options=options,
            )

        print(f"Period: {kpi.period.start.isoformat()} .. {kpi.period.end.isoformat()}")
        for key, value in kpi.metrics.values().items():
            print(f"   {key}: {_fmt(value)}")
        print(f"   counts: {kpi.counts.as_dict()}")
        for insight in kpi.insights:
            print(f"   * {insight}")

        print("\nMonthly trend:")
        for point, delta in zip(trends.series, trends.deltas):
            values = ", ".join(f"{k}={_fmt(v)}" for k, v in point.metrics.values().items())
            changes = ", ".join(f"{k}={d.value}" for k, d in delta.changes.items())
            print(f"   {point.period_label}: {values}")
            print(f"      changes: {changes}")
        print(f"\n{trends.summary}")
        for recommendation in trends.overall_trend.recommendations:
            print(f"   - {recommendation}")
    except AppError as exc:
        print(f"\n❌ {exc.code}: {exc.message}")
        sys.exit(1)
    finally:
        await engine.dispose()


def main() -> None:
    parser = argparse.ArgumentParser(description="Breeding KPI report for a tenant")
    parser.add_argument("--tenant-id", type=UUID, required=True)
    parser.add_argument("--from", dest="date_from", type=datetime.fromisoformat)
    parser.add_argument("--to", dest="date_to", type=datetime.fromisoformat)
    parser.add_argument("--from-month")
    parser.add_argument("--to-month")
    parser.add_argument("--months", type=int)
    parser.add_argument("--locale")
    asyncio.run(print_report(parser.parse_args()))


if __name__ == "__main__":
    main()
