"""Domain models for the monthly plan."""

from dataclasses import dataclass


@dataclass(frozen=True)
class PlanItem:
    """Named, amounted line item of the monthly plan."""

    item_id: str
    name: str = ""
    amount: int = 0


@dataclass(frozen=True)
class MonthlyPlan:
    """Monthly income with savings commitments and discretionary cash."""

    income: int = 0
    savings: tuple[PlanItem, ...] = ()
    cash: tuple[PlanItem, ...] = ()


__all__ = ["PlanItem", "MonthlyPlan"]
