"""Tests for portfolio operations."""

import pytest

from src.domain.constants import Category
from src.domain.models import AssetPortfolio
from src.domain.services.portfolio import (
    add_product,
    category_total,
    live_asset_names,
    live_row_keys,
    portfolio_total,
    remove_product,
    update_product,
)


def _filled() -> AssetPortfolio:
    portfolio = AssetPortfolio()
    portfolio = add_product(portfolio, Category.DEPOSIT_SAVINGS, "d1")
    portfolio = add_product(portfolio, Category.DEPOSIT_SAVINGS, "d2")
    portfolio = add_product(portfolio, Category.INVESTMENT, "i1")
    portfolio = update_product(
        portfolio, Category.DEPOSIT_SAVINGS, "d1", name="Fixed deposit", amount=1000
    )
    portfolio = update_product(
        portfolio, Category.DEPOSIT_SAVINGS, "d2", name="Savings", amount=250
    )
    return update_product(
        portfolio, Category.INVESTMENT, "i1", name="ETF", amount=4000
    )


def test_add_product_creates_empty_product() -> None:
    """New products start with no name, zero amount and no memo."""
    portfolio = add_product(AssetPortfolio(), Category.PENSION, "p1")

    (product,) = portfolio.products(Category.PENSION)
    assert product.product_id == "p1"
    assert product.name == ""
    assert product.amount == 0
    assert product.maturity_date is None
    assert product.memo == ""


def test_totals_are_derived_sums() -> None:
    """Category and portfolio totals should sum product amounts."""
    portfolio = _filled()

    assert category_total(portfolio, Category.DEPOSIT_SAVINGS) == 1250
    assert category_total(portfolio, Category.INSURANCE) == 0
    assert portfolio_total(portfolio) == 5250


def test_update_product_rejects_unknown_fields() -> None:
    """Fields that are not product attributes are refused."""
    portfolio = _filled()

    with pytest.raises(ValueError, match="colour"):
        update_product(portfolio, Category.INVESTMENT, "i1", colour="red")


def test_update_product_cannot_change_the_id() -> None:
    """The product id is positional only and never a field change."""
    portfolio = _filled()

    with pytest.raises(TypeError):
        update_product(
            portfolio,
            Category.INVESTMENT,
            "i1",
            **{"product_id": "x"},
        )
    assert [
        product.product_id
        for product in portfolio.products(Category.INVESTMENT)
    ] == ["i1"]


def test_remove_product_leaves_other_products() -> None:
    """Removing one product keeps the rest in order."""
    portfolio = remove_product(_filled(), Category.DEPOSIT_SAVINGS, "d1")

    names = [p.name for p in portfolio.products(Category.DEPOSIT_SAVINGS)]
    assert names == ["Savings"]
    assert portfolio_total(portfolio) == 4250


def test_live_names_and_keys_follow_category_order() -> None:
    """Live names and row keys list named products by category order."""
    portfolio = add_product(_filled(), Category.INSURANCE, "blank")

    assert live_asset_names(portfolio) == ["Fixed deposit", "Savings", "ETF"]
    assert live_row_keys(portfolio) == [
        "deposit_savings:Fixed deposit",
        "deposit_savings:Savings",
        "investment:ETF",
    ]
