"""Domain services package."""

from .annual import (
    capture_portfolio_snapshot,
    record_snapshot,
    snapshot_value,
    year_series,
)
from .ledger import (
    build_trend_table,
    get_delta,
    month_keys_for_year,
    month_over_month_change,
    monthly_total,
    running_balance,
    set_delta,
)
from .ordering import reconcile_order, reorder, row_key, split_row_key
from .parsing import format_won, parse_amount, parse_signed_amount
from .plan import (
    add_plan_item,
    available_amount,
    remove_plan_item,
    set_income,
    update_plan_item,
)
from .portfolio import (
    add_product,
    category_total,
    live_asset_names,
    live_row_keys,
    portfolio_total,
    remove_product,
    update_product,
)
from .validation import (
    PortfolioValidationError,
    find_blank_products,
    validate_portfolio,
)

__all__ = [
    "capture_portfolio_snapshot",
    "record_snapshot",
    "snapshot_value",
    "year_series",
    "build_trend_table",
    "get_delta",
    "month_keys_for_year",
    "month_over_month_change",
    "monthly_total",
    "running_balance",
    "set_delta",
    "reconcile_order",
    "reorder",
    "row_key",
    "split_row_key",
    "format_won",
    "parse_amount",
    "parse_signed_amount",
    "add_plan_item",
    "available_amount",
    "remove_plan_item",
    "set_income",
    "update_plan_item",
    "add_product",
    "category_total",
    "live_asset_names",
    "live_row_keys",
    "portfolio_total",
    "remove_product",
    "update_product",
    "PortfolioValidationError",
    "find_blank_products",
    "validate_portfolio",
]
