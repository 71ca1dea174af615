"""Snapshot ledger of absolute monthly totals, keyed by year."""

from datetime import date

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models.products import AssetPortfolio
from src.domain.models.trends import AnnualTrend
from src.domain.services.portfolio import portfolio_total


def _month_label(month: int | str) -> str:
    value = int(month)
    if not 1 <= value <= MONTHS_PER_YEAR:
        raise ValueError(f"Month out of range: {month}")
    return f"{value:02d}"


def record_snapshot(
    annual: AnnualTrend,
    year: int | str,
    month: int | str,
    value: int,
) -> AnnualTrend:
    """Return an annual trend with one month's absolute total stored."""
    snapshots = {
        year_key: dict(months)
        for year_key, months in annual.snapshots.items()
    }
    snapshots.setdefault(str(year), {})[_month_label(month)] = value
    return AnnualTrend(snapshots=snapshots)


def snapshot_value(
    annual: AnnualTrend,
    year: int | str,
    month: int | str,
) -> int | None:
    """Return the stored total for a month, None when not recorded."""
    return annual.snapshots.get(str(year), {}).get(_month_label(month))


def year_series(
    annual: AnnualTrend,
    year: int | str,
) -> list[tuple[str, int | None]]:
    """Return the twelve (MM, value) pairs of a year."""
    return [
        (f"{month:02d}", snapshot_value(annual, year, month))
        for month in range(1, MONTHS_PER_YEAR + 1)
    ]


def capture_portfolio_snapshot(
    annual: AnnualTrend,
    portfolio: AssetPortfolio,
    today: date,
) -> AnnualTrend:
    """Store the current portfolio total under today's year and month."""
    return record_snapshot(
        annual,
        today.year,
        today.month,
        portfolio_total(portfolio),
    )


__all__ = [
    "record_snapshot",
    "snapshot_value",
    "year_series",
    "capture_portfolio_snapshot",
]
