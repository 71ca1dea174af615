"""Aggregate application state for one user."""

from dataclasses import dataclass, field

from .plan import MonthlyPlan
from .products import AssetPortfolio
from .trends import AnnualTrend, TrendLedger


@dataclass(frozen=True)
class UserProfile:
    """Optional profile details edited from the settings screen."""

    name: str | None = None
    gender: str | None = None
    birth_date: str | None = None


@dataclass(frozen=True)
class AppState:
    """Everything the controller owns for the signed-in user."""

    portfolio: AssetPortfolio = field(default_factory=AssetPortfolio)
    ledger: TrendLedger = field(default_factory=TrendLedger)
    row_order: tuple[str, ...] = ()
    plan: MonthlyPlan = field(default_factory=MonthlyPlan)
    annual: AnnualTrend = field(default_factory=AnnualTrend)
    profile: UserProfile = field(default_factory=UserProfile)


__all__ = ["UserProfile", "AppState"]
