"""Tests for the annual snapshot ledger."""

from datetime import date

import pytest

from src.domain.constants import Category
from src.domain.models import AnnualTrend, AssetPortfolio
from src.domain.services.annual import (
    capture_portfolio_snapshot,
    record_snapshot,
    snapshot_value,
    year_series,
)
from src.domain.services.portfolio import add_product, update_product


def test_record_snapshot_stores_absolute_values() -> None:
    """Snapshots overwrite by year and two-digit month."""
    annual = record_snapshot(AnnualTrend(), 2025, 3, 1000)
    annual = record_snapshot(annual, "2025", "03", 1200)

    assert annual.snapshots == {"2025": {"03": 1200}}
    assert snapshot_value(annual, 2025, 3) == 1200
    assert snapshot_value(annual, 2025, 4) is None


def test_year_series_lists_twelve_months() -> None:
    """Unrecorded months appear as None."""
    annual = record_snapshot(AnnualTrend(), 2024, 12, 50)

    series = year_series(annual, 2024)

    assert len(series) == 12
    assert series[0] == ("01", None)
    assert series[-1] == ("12", 50)


def test_invalid_month_raises() -> None:
    """Months outside 1..12 are rejected."""
    with pytest.raises(ValueError):
        record_snapshot(AnnualTrend(), 2025, 13, 1)


def test_capture_portfolio_snapshot_uses_total() -> None:
    """Capturing stores the portfolio total for today's month."""
    portfolio = add_product(AssetPortfolio(), Category.TRUST_ISA, "t1")
    portfolio = update_product(portfolio, Category.TRUST_ISA, "t1", amount=777)

    annual = capture_portfolio_snapshot(
        AnnualTrend(),
        portfolio,
        date(2025, 7, 15),
    )

    assert annual.snapshots == {"2025": {"07": 777}}
