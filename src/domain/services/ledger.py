"""Trend ledger arithmetic.

The ledger is keyed by asset display name. Entries whose name no longer
matches a live product are kept but contribute to nothing.
"""

from collections.abc import Iterable, Sequence

from src.domain.constants import MONTHS_PER_YEAR
from src.domain.models.products import AssetPortfolio
from src.domain.models.trends import TrendLedger, TrendRow, TrendTable
from src.domain.services.ordering import (
    reconcile_order,
    split_row_key,
)
from src.domain.services.parsing import parse_signed_amount
from src.domain.services.portfolio import live_asset_names, live_row_keys


def month_keys_for_year(year: int | str) -> list[str]:
    """Return the twelve month keys (YYYY-MM) tracked for a year."""
    return [
        f"{int(year):04d}-{month:02d}"
        for month in range(1, MONTHS_PER_YEAR + 1)
    ]


def set_delta(
    ledger: TrendLedger,
    asset_name: str,
    month_key: str,
    value: str | int | None,
) -> TrendLedger:
    """Return a ledger with the delta for one asset/month overwritten.

    Args:
        ledger: Current ledger.
        asset_name: Display name of the asset.
        month_key: Month in YYYY-MM form.
        value: Raw input; cleared input and ``"-"`` store 0.

    Returns:
        TrendLedger: Updated ledger.
    """
    deltas = {name: dict(months) for name, months in ledger.deltas.items()}
    deltas.setdefault(asset_name, {})[month_key] = parse_signed_amount(value)
    return TrendLedger(deltas=deltas)


def get_delta(ledger: TrendLedger, asset_name: str, month_key: str) -> int:
    """Return the stored delta, 0 when never entered."""
    return ledger.deltas.get(asset_name, {}).get(month_key, 0)


def monthly_total(
    ledger: TrendLedger,
    live_names: Iterable[str],
    month_key: str,
) -> int:
    """Sum the deltas of every live asset for a month."""
    return sum(
        get_delta(ledger, name, month_key)
        for name in dict.fromkeys(live_names)
    )


def month_over_month_change(
    ledger: TrendLedger,
    live_names: Iterable[str],
    months: Sequence[str],
    index: int,
) -> int | None:
    """Return the change of the monthly total against the previous month.

    Returns:
        int | None: None for the first tracked month, else the difference.
    """
    if index <= 0:
        return None
    names = list(live_names)
    return monthly_total(ledger, names, months[index]) - monthly_total(
        ledger,
        names,
        months[index - 1],
    )


def running_balance(
    ledger: TrendLedger,
    asset_name: str,
    months: Sequence[str],
    month_key: str,
) -> int:
    """Sum an asset's deltas over tracked months up to ``month_key``."""
    total = 0
    for month in months:
        if month > month_key:
            break
        total += get_delta(ledger, asset_name, month)
    return total


def build_trend_table(
    portfolio: AssetPortfolio,
    ledger: TrendLedger,
    stored_order: Iterable[str],
    year: int | str,
) -> TrendTable:
    """Build the monthly trend table for one tracked year.

    Args:
        portfolio: Live product roster.
        ledger: Delta ledger keyed by asset name.
        stored_order: Saved display order of row keys.
        year: Calendar year to track.

    Returns:
        TrendTable: Rows in reconciled order with totals and changes.
    """
    months = month_keys_for_year(year)
    order = reconcile_order(live_row_keys(portfolio), stored_order)
    names = live_asset_names(portfolio)

    rows = []
    for key in order:
        category, name = split_row_key(key)
        deltas = [get_delta(ledger, name, month) for month in months]
        balances = []
        running = 0
        for delta in deltas:
            running += delta
            balances.append(running)
        rows.append(
            TrendRow(
                row_key=key,
                category=category,
                asset_name=name,
                deltas=deltas,
                running_balances=balances,
            )
        )

    totals = [monthly_total(ledger, names, month) for month in months]
    changes = [
        month_over_month_change(ledger, names, months, index)
        for index in range(len(months))
    ]
    return TrendTable(months=months, rows=rows, totals=totals, changes=changes)


__all__ = [
    "month_keys_for_year",
    "set_delta",
    "get_delta",
    "monthly_total",
    "month_over_month_change",
    "running_balance",
    "build_trend_table",
]
