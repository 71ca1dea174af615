"""Domain constants for asset tracking."""

from enum import Enum


class Category(str, Enum):
    """Fixed asset categories a product can belong to."""

    DEPOSIT_SAVINGS = "deposit_savings"
    TRUST_ISA = "trust_isa"
    INSURANCE = "insurance"
    PENSION = "pension"
    INVESTMENT = "investment"


CATEGORY_LABELS = {
    Category.DEPOSIT_SAVINGS: "Deposits/Savings",
    Category.TRUST_ISA: "Trust/ISA",
    Category.INSURANCE: "Insurance",
    Category.PENSION: "Pension",
    Category.INVESTMENT: "Investment",
}

CATEGORY_DOCUMENT_FIELDS = {
    Category.DEPOSIT_SAVINGS: "depositSavings",
    Category.TRUST_ISA: "trustISA",
    Category.INSURANCE: "insurance",
    Category.PENSION: "pension",
    Category.INVESTMENT: "investment",
}

ROW_KEY_SEPARATOR = ":"

MONTHS_PER_YEAR = 12


__all__ = [
    "Category",
    "CATEGORY_LABELS",
    "CATEGORY_DOCUMENT_FIELDS",
    "ROW_KEY_SEPARATOR",
    "MONTHS_PER_YEAR",
]
