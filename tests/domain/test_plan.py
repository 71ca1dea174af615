"""Tests for monthly plan operations."""

import pytest

from src.domain.models import MonthlyPlan
from src.domain.services.plan import (
    add_plan_item,
    available_amount,
    remove_plan_item,
    set_income,
    update_plan_item,
)


def test_available_amount_subtracts_savings_only() -> None:
    """Cash items do not reduce the available amount."""
    plan = set_income(MonthlyPlan(), 3000000)
    plan = add_plan_item(plan, "savings", "s1")
    plan = update_plan_item(plan, "savings", "s1", name="Installment", amount=1000000)
    plan = add_plan_item(plan, "cash", "c1")
    plan = update_plan_item(plan, "cash", "c1", name="Allowance", amount=500000)

    assert available_amount(plan) == 2000000


def test_available_amount_floors_at_zero() -> None:
    """Over-committed savings never give a negative amount."""
    plan = add_plan_item(set_income(MonthlyPlan(), 100), "savings", "s1")
    plan = update_plan_item(plan, "savings", "s1", amount=500)

    assert available_amount(plan) == 0


def test_update_and_remove_items_by_id() -> None:
    """Items are addressed by id within their section."""
    plan = add_plan_item(MonthlyPlan(), "cash", "c1")
    plan = add_plan_item(plan, "cash", "c2")
    plan = update_plan_item(plan, "cash", "c2", name="Travel")
    plan = remove_plan_item(plan, "cash", "c1")

    assert [(item.item_id, item.name) for item in plan.cash] == [("c2", "Travel")]
    assert plan.savings == ()


def test_unknown_section_raises() -> None:
    """Sections other than savings and cash are rejected."""
    with pytest.raises(ValueError):
        add_plan_item(MonthlyPlan(), "debts", "x")
