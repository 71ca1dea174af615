"""Pure operations over the product portfolio."""

from src.domain.constants import Category
from src.domain.models.products import AssetPortfolio, AssetProduct
from src.domain.services.ordering import row_key


def _replace_bucket(
    portfolio: AssetPortfolio,
    category: Category,
    products: tuple[AssetProduct, ...],
) -> AssetPortfolio:
    buckets = dict(portfolio.buckets)
    buckets[category] = products
    return AssetPortfolio(buckets=buckets)


def add_product(
    portfolio: AssetPortfolio,
    category: Category,
    product_id: str,
) -> AssetPortfolio:
    """Append an empty product to a category."""
    return _replace_bucket(
        portfolio,
        category,
        portfolio.products(category) + (AssetProduct(product_id=product_id),),
    )


def update_product(
    portfolio: AssetPortfolio,
    category: Category,
    product_id: str,
    **changes,
) -> AssetPortfolio:
    """Apply field changes to one product; unknown ids are ignored."""
    products = tuple(
        _apply_changes(product, changes)
        if product.product_id == product_id
        else product
        for product in portfolio.products(category)
    )
    return _replace_bucket(portfolio, category, products)


def _apply_changes(product: AssetProduct, changes: dict) -> AssetProduct:
    values = {
        "product_id": product.product_id,
        "name": product.name,
        "amount": product.amount,
        "maturity_date": product.maturity_date,
        "memo": product.memo,
    }
    unknown = set(changes) - (set(values) - {"product_id"})
    if unknown:
        raise ValueError(f"Unsupported product fields: {sorted(unknown)}")
    values.update(changes)
    return AssetProduct(**values)


def remove_product(
    portfolio: AssetPortfolio,
    category: Category,
    product_id: str,
) -> AssetPortfolio:
    """Remove a product from a category."""
    return _replace_bucket(
        portfolio,
        category,
        tuple(
            product
            for product in portfolio.products(category)
            if product.product_id != product_id
        ),
    )


def category_total(portfolio: AssetPortfolio, category: Category) -> int:
    """Return the summed amount of one category."""
    return sum(product.amount for product in portfolio.products(category))


def portfolio_total(portfolio: AssetPortfolio) -> int:
    """Return the summed amount of every category."""
    return sum(category_total(portfolio, category) for category in Category)


def live_asset_names(portfolio: AssetPortfolio) -> list[str]:
    """Return distinct non-blank product names in display order."""
    names = (
        product.name
        for _, product in portfolio.all_products()
        if product.name.strip()
    )
    return list(dict.fromkeys(names))


def live_row_keys(portfolio: AssetPortfolio) -> list[str]:
    """Return distinct row keys of named products in display order."""
    keys = (
        row_key(category, product.name)
        for category, product in portfolio.all_products()
        if product.name.strip()
    )
    return list(dict.fromkeys(keys))


__all__ = [
    "add_product",
    "update_product",
    "remove_product",
    "category_total",
    "portfolio_total",
    "live_asset_names",
    "live_row_keys",
]
