# src/filters/category_filter.py

"""Category facet derivation for the filter sidebar."""

import logging

from src.models.product import Product

logger = logging.getLogger("storefront.filters")


class CategoryFilter:
    """Derive the category facet shown in the filter panel."""

    @staticmethod
    def derive_categories(products: list[Product]) -> list[str]:
        """Return the distinct product categories in ascending order.

        Comparison is plain string equality, so ``"Men"`` and ``"men"``
        are two separate categories. Ordering is by UTF-16 code unit,
        matching a browser's default string sort. The input list is not
        modified.
        """
        categories = sorted(
            {p.category for p in products},
            key=lambda c: c.encode("utf-16-be", "surrogatepass"),
        )
        logger.debug(
            "Derived %d categories from %d products",
            len(categories),
            len(products),
        )
        return categories
