"""Display order helpers for the trend table rows."""

from collections.abc import Iterable, Sequence

from src.domain.constants import ROW_KEY_SEPARATOR, Category


def row_key(category: Category | str, name: str) -> str:
    """Return the composite row key for a category and asset name."""
    category_value = (
        category.value if isinstance(category, Category) else category
    )
    return f"{category_value}{ROW_KEY_SEPARATOR}{name}"


def split_row_key(key: str) -> tuple[str, str]:
    """Split a row key into its category and asset name parts."""
    category, _, name = key.partition(ROW_KEY_SEPARATOR)
    return category, name


def reorder(order: Sequence[str], from_index: int, to_index: int) -> list[str]:
    """Move one key from ``from_index`` to ``to_index``.

    Indices out of range leave the order unchanged.

    Args:
        order: Current display order.
        from_index: Position of the row being moved.
        to_index: Position the row lands at after removal.

    Returns:
        list[str]: New display order.
    """
    moved = list(order)
    if not 0 <= from_index < len(moved):
        return moved
    item = moved.pop(from_index)
    target = max(0, min(to_index, len(moved)))
    moved.insert(target, item)
    return moved


def reconcile_order(
    live_keys: Iterable[str],
    stored_order: Iterable[str],
) -> list[str]:
    """Reconcile a stored display order against the live rows.

    Stored keys that are still live come first in their stored order,
    followed by live keys missing from the stored order in live order.
    Stale keys are dropped and duplicates collapse to their first
    occurrence.

    Args:
        live_keys: Row keys of the current product roster.
        stored_order: Previously saved display order.

    Returns:
        list[str]: Reconciled display order.
    """
    live = list(dict.fromkeys(live_keys))
    live_set = set(live)
    result = list(
        dict.fromkeys(key for key in stored_order if key in live_set)
    )
    included = set(result)
    result.extend(key for key in live if key not in included)
    return result


__all__ = ["row_key", "split_row_key", "reorder", "reconcile_order"]
