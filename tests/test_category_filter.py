# tests/test_category_filter.py

"""Tests for the category facet derivation."""

import unittest

from src.filters.category_filter import CategoryFilter
from src.models.product import Product


def _make_product(pid: int, category: str) -> Product:
    """Create a minimal Product in the given category."""
    return Product(id=pid, title=f"P{pid}", price=1.0, category=category)


class TestDeriveCategories(unittest.TestCase):
    """derive_categories returns a sorted, duplicate-free list."""

    def test_two_categories(self) -> None:
        """The two-product scenario yields ['x', 'y']."""
        products = [_make_product(1, "x"), _make_product(2, "y")]
        self.assertEqual(
            CategoryFilter.derive_categories(products), ["x", "y"]
        )

    def test_empty(self) -> None:
        """No products, no categories."""
        self.assertEqual(CategoryFilter.derive_categories([]), [])

    def test_duplicates_removed(self) -> None:
        """Repeated categories appear once."""
        products = [
            _make_product(1, "jewelery"),
            _make_product(2, "electronics"),
            _make_product(3, "jewelery"),
            _make_product(4, "electronics"),
        ]
        result = CategoryFilter.derive_categories(products)
        self.assertEqual(len(result), len(set(result)))
        self.assertEqual(result, ["electronics", "jewelery"])

    def test_sorted_ascending(self) -> None:
        """Output is in ascending lexicographic order."""
        products = [
            _make_product(1, "women's clothing"),
            _make_product(2, "electronics"),
            _make_product(3, "men's clothing"),
            _make_product(4, "jewelery"),
        ]
        result = CategoryFilter.derive_categories(products)
        self.assertEqual(result, sorted(result))
        self.assertEqual(result[0], "electronics")

    def test_case_sensitive(self) -> None:
        """Categories are compared by plain string equality."""
        products = [_make_product(1, "Men"), _make_product(2, "men")]
        self.assertEqual(
            CategoryFilter.derive_categories(products), ["Men", "men"]
        )

    def test_utf16_code_unit_order(self) -> None:
        """Astral characters sort before high BMP ones, as in a browser."""
        products = [
            _make_product(1, "\uff01 fullwidth"),
            _make_product(2, "\U0001f600 emoji"),
        ]
        self.assertEqual(
            CategoryFilter.derive_categories(products),
            ["\U0001f600 emoji", "\uff01 fullwidth"],
        )

    def test_idempotent_and_input_untouched(self) -> None:
        """Repeated calls agree and do not mutate the input."""
        products = [_make_product(2, "y"), _make_product(1, "x")]
        snapshot = list(products)
        first = CategoryFilter.derive_categories(products)
        second = CategoryFilter.derive_categories(products)
        self.assertEqual(first, second)
        self.assertEqual(products, snapshot)


if __name__ == "__main__":
    unittest.main()
