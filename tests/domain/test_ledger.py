"""Tests for the trend ledger arithmetic."""

from src.domain.constants import Category
from src.domain.models import AssetPortfolio, AssetProduct, TrendLedger
from src.domain.services.ledger import (
    build_trend_table,
    get_delta,
    month_keys_for_year,
    month_over_month_change,
    monthly_total,
    running_balance,
    set_delta,
)


def _ledger(entries: dict[str, dict[str, int]]) -> TrendLedger:
    ledger = TrendLedger()
    for name, months in entries.items():
        for month, value in months.items():
            ledger = set_delta(ledger, name, month, value)
    return ledger


def _portfolio(*names: tuple[Category, str]) -> AssetPortfolio:
    buckets = {category: () for category in Category}
    for index, (category, name) in enumerate(names):
        buckets[category] = buckets[category] + (
            AssetProduct(product_id=f"p{index}", name=name, amount=100),
        )
    return AssetPortfolio(buckets=buckets)


def test_monthly_totals_and_change_example() -> None:
    """Totals and month-over-month change should match the worked example."""
    ledger = _ledger(
        {
            "A": {"2025-01": 500000, "2025-02": -100000},
            "B": {"2025-01": 200000},
        }
    )
    months = month_keys_for_year(2025)

    assert monthly_total(ledger, ["A", "B"], "2025-01") == 700000
    assert monthly_total(ledger, ["A", "B"], "2025-02") == -100000
    assert month_over_month_change(ledger, ["A", "B"], months, 1) == -800000


def test_first_month_change_is_none_and_zero_change_is_zero() -> None:
    """The first month has no prior value; later flat months give 0."""
    ledger = TrendLedger()
    months = month_keys_for_year(2025)

    assert month_over_month_change(ledger, ["A"], months, 0) is None
    assert month_over_month_change(ledger, ["A"], months, 1) == 0


def test_set_delta_overwrites_and_clears_to_zero() -> None:
    """Last write wins; cleared input aggregates like an absent key."""
    ledger = set_delta(TrendLedger(), "A", "2025-03", "1,000")
    ledger = set_delta(ledger, "A", "2025-03", "-250")
    assert get_delta(ledger, "A", "2025-03") == -250

    cleared = set_delta(ledger, "A", "2025-03", "-")
    assert cleared.deltas["A"]["2025-03"] == 0
    assert monthly_total(cleared, ["A"], "2025-03") == monthly_total(
        TrendLedger(), ["A"], "2025-03"
    )


def test_set_delta_does_not_mutate_input() -> None:
    """Ledger updates should return a new ledger."""
    original = set_delta(TrendLedger(), "A", "2025-01", 10)

    set_delta(original, "A", "2025-01", 20)

    assert original.deltas == {"A": {"2025-01": 10}}


def test_orphaned_entries_do_not_contribute() -> None:
    """Deltas of assets missing from the roster are ignored but kept."""
    ledger = _ledger({"A": {"2025-01": 5}, "Old name": {"2025-01": 100}})

    assert monthly_total(ledger, ["A"], "2025-01") == 5
    assert ledger.deltas["Old name"] == {"2025-01": 100}


def test_duplicate_live_names_count_once() -> None:
    """A name shared by two products refers to one ledger entry."""
    ledger = _ledger({"A": {"2025-01": 5}})

    assert monthly_total(ledger, ["A", "A"], "2025-01") == 5


def test_running_balance_sums_tracked_months() -> None:
    """Running balance sums deltas up to and including the month."""
    ledger = _ledger(
        {"A": {"2024-12": 999, "2025-01": 100, "2025-03": -30, "2025-05": 7}}
    )
    months = month_keys_for_year(2025)

    assert running_balance(ledger, "A", months, "2025-01") == 100
    assert running_balance(ledger, "A", months, "2025-04") == 70
    assert running_balance(ledger, "A", months, "2025-12") == 77


def test_build_trend_table_reconciles_rows_and_totals() -> None:
    """Trend table rows follow the reconciled order with derived values."""
    portfolio = _portfolio(
        (Category.DEPOSIT_SAVINGS, "A"),
        (Category.PENSION, "B"),
    )
    ledger = _ledger(
        {
            "A": {"2025-01": 500000, "2025-02": -100000},
            "B": {"2025-01": 200000},
            "Deleted": {"2025-01": 1},
        }
    )

    table = build_trend_table(
        portfolio,
        ledger,
        ["pension:B", "insurance:Stale"],
        2025,
    )

    assert table.months[0] == "2025-01"
    assert len(table.months) == 12
    assert [row.row_key for row in table.rows] == [
        "pension:B",
        "deposit_savings:A",
    ]
    row_a = table.rows[1]
    assert row_a.asset_name == "A"
    assert row_a.category == "deposit_savings"
    assert row_a.deltas[:3] == [500000, -100000, 0]
    assert row_a.running_balances[:3] == [500000, 400000, 400000]
    assert table.totals[:3] == [700000, -100000, 0]
    assert table.changes[:3] == [None, -800000, 100000]


def test_build_trend_table_skips_unnamed_products() -> None:
    """Products without a name have no trend row."""
    portfolio = _portfolio((Category.INVESTMENT, ""), (Category.INVESTMENT, "ETF"))

    table = build_trend_table(portfolio, TrendLedger(), [], "2026")

    assert [row.asset_name for row in table.rows] == ["ETF"]
