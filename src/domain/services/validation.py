"""Domain validation helpers."""

from src.domain.constants import CATEGORY_LABELS, Category
from src.domain.models.products import AssetPortfolio


class PortfolioValidationError(ValueError):
    """Raised when the portfolio cannot be saved as entered.

    Attributes:
        blank_products: (category, product_id) pairs with a blank name.
    """

    def __init__(self, blank_products: list[tuple[Category, str]]) -> None:
        self.blank_products = blank_products
        labels = sorted(
            {CATEGORY_LABELS[category] for category, _ in blank_products}
        )
        super().__init__(
            "Product name is required "
            f"({len(blank_products)} missing in {', '.join(labels)})"
        )


def find_blank_products(
    portfolio: AssetPortfolio,
) -> list[tuple[Category, str]]:
    """Return products whose name is empty or whitespace."""
    return [
        (category, product.product_id)
        for category, product in portfolio.all_products()
        if not product.name.strip()
    ]


def validate_portfolio(portfolio: AssetPortfolio) -> None:
    """Raise PortfolioValidationError when a product name is blank."""
    blank = find_blank_products(portfolio)
    if blank:
        raise PortfolioValidationError(blank)


__all__ = [
    "PortfolioValidationError",
    "find_blank_products",
    "validate_portfolio",
]
