"""Domain models for the two trend ledgers.

The delta ledger stores signed monthly contributions per asset name. The
annual ledger stores absolute totals per month. They are unrelated and
never reconciled with each other.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TrendLedger:
    """Sparse asset name -> {YYYY-MM: signed delta} mapping."""

    deltas: dict[str, dict[str, int]] = field(default_factory=dict)


@dataclass(frozen=True)
class AnnualTrend:
    """Sparse year -> {MM: absolute total} snapshot mapping."""

    snapshots: dict[str, dict[str, int]] = field(default_factory=dict)


@dataclass(frozen=True)
class TrendRow:
    """One asset row of the monthly trend table."""

    row_key: str
    category: str
    asset_name: str
    deltas: list[int]
    running_balances: list[int]


@dataclass(frozen=True)
class TrendTable:
    """Monthly trend table for one tracked year.

    Attributes:
        months: Tracked month keys, in calendar order.
        rows: Asset rows in reconciled display order.
        totals: Cross-asset delta total for each month.
        changes: Month-over-month change of the totals; the first entry
            is None because it has no prior month.
    """

    months: list[str]
    rows: list[TrendRow]
    totals: list[int]
    changes: list[int | None]


__all__ = ["TrendLedger", "AnnualTrend", "TrendRow", "TrendTable"]
