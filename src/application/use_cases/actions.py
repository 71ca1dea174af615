"""Reducer-style actions over AppState.

Each action is a pure function returning a new state; the controller is
the only caller that swaps its state for the result.
"""

from dataclasses import replace
from datetime import date

from src.domain.constants import Category
from src.domain.models import AppState
from src.domain.services import annual, ledger, ordering, plan, portfolio
from src.domain.services.parsing import parse_amount, parse_signed_amount
from src.domain.services.plan import PlanSection


def add_product(state: AppState, category: Category, product_id: str) -> AppState:
    return replace(
        state,
        portfolio=portfolio.add_product(state.portfolio, category, product_id),
    )


def update_product(
    state: AppState,
    category: Category,
    product_id: str,
    **changes,
) -> AppState:
    """Update product fields, normalizing raw amount and date inputs."""
    if "amount" in changes:
        changes["amount"] = parse_amount(changes["amount"])
    if "maturity_date" in changes:
        changes["maturity_date"] = _normalize_date(changes["maturity_date"])
    if "memo" in changes and changes["memo"] is None:
        changes["memo"] = ""
    return replace(
        state,
        portfolio=portfolio.update_product(
            state.portfolio,
            category,
            product_id,
            **changes,
        ),
    )


def delete_product(
    state: AppState,
    category: Category,
    product_id: str,
) -> AppState:
    """Remove a product; its ledger entries stay and become orphans."""
    return replace(
        state,
        portfolio=portfolio.remove_product(
            state.portfolio,
            category,
            product_id,
        ),
    )


def set_trend_delta(
    state: AppState,
    asset_name: str,
    month_key: str,
    raw_value: str | int | None,
) -> AppState:
    return replace(
        state,
        ledger=ledger.set_delta(state.ledger, asset_name, month_key, raw_value),
    )


def move_trend_row(state: AppState, from_index: int, to_index: int) -> AppState:
    """Move a row within the reconciled display order."""
    current = ordering.reconcile_order(
        portfolio.live_row_keys(state.portfolio),
        state.row_order,
    )
    return replace(
        state,
        row_order=tuple(ordering.reorder(current, from_index, to_index)),
    )


def set_plan_income(state: AppState, raw_income: str | int | None) -> AppState:
    return replace(
        state,
        plan=plan.set_income(state.plan, parse_amount(raw_income)),
    )


def add_plan_item(state: AppState, section: PlanSection, item_id: str) -> AppState:
    return replace(state, plan=plan.add_plan_item(state.plan, section, item_id))


def update_plan_item(
    state: AppState,
    section: PlanSection,
    item_id: str,
    name: str | None = None,
    amount: str | int | None = None,
) -> AppState:
    return replace(
        state,
        plan=plan.update_plan_item(
            state.plan,
            section,
            item_id,
            name=name,
            amount=None if amount is None else parse_amount(amount),
        ),
    )


def remove_plan_item(
    state: AppState,
    section: PlanSection,
    item_id: str,
) -> AppState:
    return replace(
        state,
        plan=plan.remove_plan_item(state.plan, section, item_id),
    )


def record_annual_snapshot(
    state: AppState,
    year: int | str,
    month: int | str,
    raw_value: str | int | None,
) -> AppState:
    return replace(
        state,
        annual=annual.record_snapshot(
            state.annual,
            year,
            month,
            parse_signed_amount(raw_value),
        ),
    )


def capture_annual_snapshot(state: AppState, today: date) -> AppState:
    return replace(
        state,
        annual=annual.capture_portfolio_snapshot(
            state.annual,
            state.portfolio,
            today,
        ),
    )


def _normalize_date(value: date | str | None) -> str | None:
    if not value:
        return None
    if isinstance(value, date):
        return value.isoformat()
    return date.fromisoformat(value.strip()).isoformat()


__all__ = [
    "add_product",
    "update_product",
    "delete_product",
    "set_trend_delta",
    "move_trend_row",
    "set_plan_income",
    "add_plan_item",
    "update_plan_item",
    "remove_plan_item",
    "record_annual_snapshot",
    "capture_annual_snapshot",
]
