"""Parsing and formatting helpers for user-entered amounts."""

import math
import re


_NON_DIGITS = re.compile(r"[^0-9]")


def parse_signed_amount(raw: str | int | float | None) -> int:
    """Parse a signed delta typed by the user.

    Every character that is not a digit is dropped; a minus sign is kept
    only when it is the first non-blank character. A bare ``"-"`` or an
    empty string yields 0. A minus after a prefix is dropped with the
    other symbols, so ``"₩ -2,000원"`` parses as 2000.

    Stored numbers are taken as they are; floats are truncated toward
    zero, so ``-1500.0`` stays -1500.

    Args:
        raw: Text from an input field, or an already parsed number.

    Returns:
        int: Parsed signed amount.
    """
    if raw is None:
        return 0
    if isinstance(raw, (bool, int)):
        return int(raw)
    if isinstance(raw, float):
        return _truncate(raw)
    text = str(raw).strip()
    negative = text.startswith("-")
    digits = _NON_DIGITS.sub("", text)
    if not digits:
        return 0
    value = int(digits)
    return -value if negative else value


def parse_amount(raw: str | int | float | None) -> int:
    """Parse a non-negative amount, stripping separators and signs.

    Args:
        raw: Text such as ``"1,500,000"`` or a number. Floats are
            truncated toward zero before the sign is dropped.

    Returns:
        int: Parsed amount, 0 when nothing numeric remains.
    """
    if raw is None:
        return 0
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return abs(raw)
    if isinstance(raw, float):
        return abs(_truncate(raw))
    digits = _NON_DIGITS.sub("", str(raw))
    return int(digits) if digits else 0


def _truncate(value: float) -> int:
    if not math.isfinite(value):
        return 0
    return int(value)


def format_won(value: int) -> str:
    """Format an amount with thousands separators and the won suffix."""
    return f"{value:,}원"


__all__ = ["parse_signed_amount", "parse_amount", "format_won"]
