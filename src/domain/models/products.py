"""Domain models for financial products and their categories."""

from dataclasses import dataclass, field

from src.domain.constants import Category


@dataclass(frozen=True)
class AssetProduct:
    """One financial holding owned by a category bucket.

    Attributes:
        product_id: Opaque, unique, client-generated identifier.
        name: User-facing name, also the key into the trend ledger.
        amount: Non-negative amount in whole currency units.
        maturity_date: Optional ISO date (YYYY-MM-DD).
        memo: Free-text note, empty when unset.
    """

    product_id: str
    name: str = ""
    amount: int = 0
    maturity_date: str | None = None
    memo: str = ""


def _empty_buckets() -> dict[Category, tuple[AssetProduct, ...]]:
    return {category: () for category in Category}


@dataclass(frozen=True)
class AssetPortfolio:
    """Products grouped by category, in user insertion order."""

    buckets: dict[Category, tuple[AssetProduct, ...]] = field(
        default_factory=_empty_buckets
    )

    def products(self, category: Category) -> tuple[AssetProduct, ...]:
        """Return the products held in a category."""
        return self.buckets.get(category, ())

    def all_products(self) -> list[tuple[Category, AssetProduct]]:
        """Return every product with its category, in display order."""
        return [
            (category, product)
            for category in Category
            for product in self.products(category)
        ]


__all__ = ["AssetProduct", "AssetPortfolio"]
