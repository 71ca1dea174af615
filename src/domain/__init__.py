"""Domain package for business rules and core models."""

from .constants import CATEGORY_DOCUMENT_FIELDS, CATEGORY_LABELS, Category
from .models import (
    AnnualTrend,
    AppState,
    AssetPortfolio,
    AssetProduct,
    MonthlyPlan,
    PlanItem,
    TrendLedger,
    TrendRow,
    TrendTable,
    UserProfile,
)

__all__ = [
    "Category",
    "CATEGORY_LABELS",
    "CATEGORY_DOCUMENT_FIELDS",
    "AnnualTrend",
    "AppState",
    "AssetPortfolio",
    "AssetProduct",
    "MonthlyPlan",
    "PlanItem",
    "TrendLedger",
    "TrendRow",
    "TrendTable",
    "UserProfile",
]
