"""Mapping between AppState and the per-user document.

Document layout (top-level fields)::

    assets          {depositSavings|trustISA|insurance|pension|investment:
                     [{id, name, amount, maturityDate?, memo}]}
    trendDeltas     {asset name: {YYYY-MM: signed int}}
    trendRowOrder   [row key]
    monthlyPlan     {income, savings: [{id, name, amount}], cash: [...]}
    annualTrend     {YYYY: {MM: int}}
    name, gender, birthDate    profile fields
    updatedAt       ISO timestamp of the last merge-write

Decoding never fails: missing or legacy-shaped sections fall back to
empty structures, numeric strings are coerced and products or plan items
without an id receive a fresh one.
"""

from collections.abc import Callable
from typing import Any
from uuid import uuid4

from src.domain.constants import CATEGORY_DOCUMENT_FIELDS, Category
from src.domain.models import (
    AnnualTrend,
    AppState,
    AssetPortfolio,
    AssetProduct,
    MonthlyPlan,
    PlanItem,
    TrendLedger,
    UserProfile,
)
from src.domain.services.parsing import parse_amount, parse_signed_amount


ASSETS_FIELD = "assets"
TREND_DELTAS_FIELD = "trendDeltas"
TREND_ROW_ORDER_FIELD = "trendRowOrder"
MONTHLY_PLAN_FIELD = "monthlyPlan"
ANNUAL_TREND_FIELD = "annualTrend"
UPDATED_AT_FIELD = "updatedAt"

STATE_FIELDS = (
    ASSETS_FIELD,
    TREND_DELTAS_FIELD,
    TREND_ROW_ORDER_FIELD,
    MONTHLY_PLAN_FIELD,
    ANNUAL_TREND_FIELD,
)

PROFILE_FIELDS = {
    "name": "name",
    "gender": "gender",
    "birth_date": "birthDate",
}

IdFactory = Callable[[], str]


def new_id() -> str:
    """Return a fresh opaque identifier."""
    return uuid4().hex


def encode_state(state: AppState) -> dict[str, Any]:
    """Return the owned top-level fields for a merge-write.

    Profile fields are not included; they are written by the profile
    update flow only.
    """
    return {
        ASSETS_FIELD: {
            CATEGORY_DOCUMENT_FIELDS[category]: [
                _encode_product(product)
                for product in state.portfolio.products(category)
            ]
            for category in Category
        },
        TREND_DELTAS_FIELD: {
            name: dict(months) for name, months in state.ledger.deltas.items()
        },
        TREND_ROW_ORDER_FIELD: list(state.row_order),
        MONTHLY_PLAN_FIELD: {
            "income": state.plan.income,
            "savings": [_encode_item(item) for item in state.plan.savings],
            "cash": [_encode_item(item) for item in state.plan.cash],
        },
        ANNUAL_TREND_FIELD: {
            year: dict(months)
            for year, months in state.annual.snapshots.items()
        },
    }


def encode_profile(profile: UserProfile) -> dict[str, str]:
    """Return the non-empty profile fields in document form."""
    encoded = {}
    for attribute, field_name in PROFILE_FIELDS.items():
        value = getattr(profile, attribute)
        if value:
            encoded[field_name] = value
    return encoded


def decode_state(
    document: dict[str, Any] | None,
    id_factory: IdFactory = new_id,
) -> AppState:
    """Build an AppState from a stored document.

    Args:
        document: Raw stored document, or None for a new user.
        id_factory: Generator for ids missing from legacy entries.

    Returns:
        AppState: Decoded state with defaults for missing sections.
    """
    data = document if isinstance(document, dict) else {}
    return AppState(
        portfolio=_decode_portfolio(data.get(ASSETS_FIELD), id_factory),
        ledger=TrendLedger(deltas=_decode_ledger(data.get(TREND_DELTAS_FIELD))),
        row_order=_decode_order(data.get(TREND_ROW_ORDER_FIELD)),
        plan=_decode_plan(data.get(MONTHLY_PLAN_FIELD), id_factory),
        annual=AnnualTrend(
            snapshots=_decode_annual(data.get(ANNUAL_TREND_FIELD))
        ),
        profile=_decode_profile(data),
    )


def _encode_product(product: AssetProduct) -> dict[str, Any]:
    encoded: dict[str, Any] = {
        "id": product.product_id,
        "name": product.name,
        "amount": product.amount,
        "memo": product.memo,
    }
    if product.maturity_date:
        encoded["maturityDate"] = product.maturity_date
    return encoded


def _encode_item(item: PlanItem) -> dict[str, Any]:
    return {"id": item.item_id, "name": item.name, "amount": item.amount}


def _decode_portfolio(raw: Any, id_factory: IdFactory) -> AssetPortfolio:
    section = raw if isinstance(raw, dict) else {}
    buckets = {}
    for category in Category:
        entries = section.get(CATEGORY_DOCUMENT_FIELDS[category])
        if not isinstance(entries, list):
            entries = []
        buckets[category] = tuple(
            _decode_product(entry, id_factory)
            for entry in entries
            if isinstance(entry, dict)
        )
    return AssetPortfolio(buckets=buckets)


def _decode_product(raw: dict[str, Any], id_factory: IdFactory) -> AssetProduct:
    maturity = raw.get("maturityDate")
    return AssetProduct(
        product_id=str(raw.get("id") or id_factory()),
        name=_as_text(raw.get("name")),
        amount=parse_amount(raw.get("amount")),
        maturity_date=str(maturity) if maturity else None,
        memo=_as_text(raw.get("memo")),
    )


def _decode_ledger(raw: Any) -> dict[str, dict[str, int]]:
    if not isinstance(raw, dict):
        return {}
    deltas = {}
    for name, months in raw.items():
        if not isinstance(months, dict):
            continue
        deltas[str(name)] = {
            str(month): parse_signed_amount(value)
            for month, value in months.items()
        }
    return deltas


def _decode_order(raw: Any) -> tuple[str, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(key for key in raw if isinstance(key, str))


def _decode_plan(raw: Any, id_factory: IdFactory) -> MonthlyPlan:
    section = raw if isinstance(raw, dict) else {}
    return MonthlyPlan(
        income=parse_amount(section.get("income")),
        savings=_decode_items(section.get("savings"), id_factory),
        cash=_decode_items(section.get("cash"), id_factory),
    )


def _decode_items(raw: Any, id_factory: IdFactory) -> tuple[PlanItem, ...]:
    if not isinstance(raw, list):
        return ()
    return tuple(
        PlanItem(
            item_id=str(entry.get("id") or id_factory()),
            name=_as_text(entry.get("name")),
            amount=parse_amount(entry.get("amount")),
        )
        for entry in raw
        if isinstance(entry, dict)
    )


def _decode_annual(raw: Any) -> dict[str, dict[str, int]]:
    if not isinstance(raw, dict):
        return {}
    snapshots = {}
    for year, months in raw.items():
        if not isinstance(months, dict):
            continue
        snapshots[str(year)] = {
            str(month).zfill(2): parse_signed_amount(value)
            for month, value in months.items()
        }
    return snapshots


def _decode_profile(data: dict[str, Any]) -> UserProfile:
    values = {}
    for attribute, field_name in PROFILE_FIELDS.items():
        value = data.get(field_name)
        values[attribute] = str(value) if value else None
    return UserProfile(**values)


def _as_text(value: Any) -> str:
    return "" if value is None else str(value)


__all__ = [
    "ASSETS_FIELD",
    "TREND_DELTAS_FIELD",
    "TREND_ROW_ORDER_FIELD",
    "MONTHLY_PLAN_FIELD",
    "ANNUAL_TREND_FIELD",
    "UPDATED_AT_FIELD",
    "STATE_FIELDS",
    "PROFILE_FIELDS",
    "new_id",
    "encode_state",
    "encode_profile",
    "decode_state",
]
