"""Domain models package."""

from .plan import MonthlyPlan, PlanItem
from .products import AssetPortfolio, AssetProduct
from .state import AppState, UserProfile
from .trends import AnnualTrend, TrendLedger, TrendRow, TrendTable

__all__ = [
    "AssetProduct",
    "AssetPortfolio",
    "TrendLedger",
    "AnnualTrend",
    "TrendRow",
    "TrendTable",
    "PlanItem",
    "MonthlyPlan",
    "UserProfile",
    "AppState",
]
