"""Pure operations over the monthly plan."""

from typing import Literal

from src.domain.models.plan import MonthlyPlan, PlanItem


PlanSection = Literal["savings", "cash"]


def set_income(plan: MonthlyPlan, income: int) -> MonthlyPlan:
    """Return a plan with the monthly income replaced."""
    return MonthlyPlan(
        income=max(0, income),
        savings=plan.savings,
        cash=plan.cash,
    )


def _with_section(
    plan: MonthlyPlan,
    section: PlanSection,
    items: tuple[PlanItem, ...],
) -> MonthlyPlan:
    if section == "savings":
        return MonthlyPlan(income=plan.income, savings=items, cash=plan.cash)
    if section == "cash":
        return MonthlyPlan(income=plan.income, savings=plan.savings, cash=items)
    raise ValueError(f"Unknown plan section: {section}")


def _section(plan: MonthlyPlan, section: PlanSection) -> tuple[PlanItem, ...]:
    if section == "savings":
        return plan.savings
    if section == "cash":
        return plan.cash
    raise ValueError(f"Unknown plan section: {section}")


def add_plan_item(
    plan: MonthlyPlan,
    section: PlanSection,
    item_id: str,
) -> MonthlyPlan:
    """Append an empty line item to a plan section."""
    items = _section(plan, section) + (PlanItem(item_id=item_id),)
    return _with_section(plan, section, items)


def update_plan_item(
    plan: MonthlyPlan,
    section: PlanSection,
    item_id: str,
    name: str | None = None,
    amount: int | None = None,
) -> MonthlyPlan:
    """Update the name and/or amount of one line item."""
    items = tuple(
        PlanItem(
            item_id=item.item_id,
            name=item.name if name is None else name,
            amount=item.amount if amount is None else max(0, amount),
        )
        if item.item_id == item_id
        else item
        for item in _section(plan, section)
    )
    return _with_section(plan, section, items)


def remove_plan_item(
    plan: MonthlyPlan,
    section: PlanSection,
    item_id: str,
) -> MonthlyPlan:
    """Remove a line item from a plan section."""
    items = tuple(
        item for item in _section(plan, section) if item.item_id != item_id
    )
    return _with_section(plan, section, items)


def available_amount(plan: MonthlyPlan) -> int:
    """Return income left after savings commitments, floored at 0."""
    committed = sum(item.amount for item in plan.savings)
    return max(0, plan.income - committed)


__all__ = [
    "PlanSection",
    "set_income",
    "add_plan_item",
    "update_plan_item",
    "remove_plan_item",
    "available_amount",
]
