# tests/test_settings.py

"""Tests for the Settings configuration class."""

import unittest
from pathlib import Path

from src.config.settings import Settings


class TestSettings(unittest.TestCase):
    """Verify Settings constants."""

    def test_catalog_url_is_http(self) -> None:
        """CATALOG_URL must be an absolute http(s) URL."""
        self.assertRegex(Settings.CATALOG_URL, r"^https?://")

    def test_request_timeout_is_positive_int(self) -> None:
        """REQUEST_TIMEOUT must be a positive integer."""
        self.assertIsInstance(Settings.REQUEST_TIMEOUT, int)
        self.assertGreater(Settings.REQUEST_TIMEOUT, 0)

    def test_default_headers_disable_caching(self) -> None:
        """Every catalog request asks intermediaries not to cache."""
        self.assertEqual(
            Settings.DEFAULT_HEADERS["Cache-Control"], "no-cache"
        )
        self.assertEqual(Settings.DEFAULT_HEADERS["Pragma"], "no-cache")

    def test_default_headers_accept_json(self) -> None:
        """The catalog is requested as JSON."""
        self.assertIn("json", Settings.DEFAULT_HEADERS["Accept"])

    def test_price_range_is_ordered(self) -> None:
        """The decorative slider bounds are 0..200."""
        self.assertEqual(Settings.PRICE_RANGE_MIN, 0)
        self.assertEqual(Settings.PRICE_RANGE_MAX, 200)

    def test_default_sort_is_an_option(self) -> None:
        """DEFAULT_SORT must be one of SORT_OPTIONS."""
        values = [o["value"] for o in Settings.SORT_OPTIONS]
        self.assertIn(Settings.DEFAULT_SORT, values)
        self.assertEqual(
            values, ["featured", "price-asc", "price-desc"]
        )

    def test_site_url_has_no_trailing_path(self) -> None:
        """SITE_URL is a bare origin used to derive product URLs."""
        self.assertFalse(Settings.SITE_URL.endswith("/products"))

    def test_port_is_valid(self) -> None:
        """PORT is a usable TCP port."""
        self.assertGreater(Settings.PORT, 0)
        self.assertLess(Settings.PORT, 65536)

    def test_path_constants_are_paths(self) -> None:
        """Path-typed settings are Path instances."""
        self.assertIsInstance(Settings.BASE_DIR, Path)
        self.assertIsInstance(Settings.TEMPLATES_DIR, Path)
        self.assertIsInstance(Settings.OUTPUT_DIR, Path)
        self.assertIsInstance(Settings.LOGS_DIR, Path)

    def test_listing_template_exists(self) -> None:
        """The listing template must exist on disk."""
        self.assertTrue(
            (Settings.TEMPLATES_DIR / "listing.html").exists()
        )

    def test_impersonate_browser_is_string(self) -> None:
        """IMPERSONATE_BROWSER must be a non-empty string."""
        self.assertIsInstance(Settings.IMPERSONATE_BROWSER, str)
        self.assertTrue(len(Settings.IMPERSONATE_BROWSER) > 0)


if __name__ == "__main__":
    unittest.main()
