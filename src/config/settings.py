# src/config/settings.py

"""Central configuration for the storefront PLP."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the storefront PLP."""

    # --- Catalog upstream ---
    CATALOG_URL: str = os.getenv(
        "PLP_CATALOG_URL", "https://fakestoreapi.com/products"
    )
    REQUEST_TIMEOUT: int = int(os.getenv("PLP_REQUEST_TIMEOUT", "15"))
    HEALTH_SLOW_MS: float = 5000.0      # Probe latency flagged as slow

    # --- Browser Impersonation ---
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"
    DEFAULT_HEADERS: dict[str, str] = {
        "Accept": "application/json",
        "Accept-Language": "en-US,en;q=0.9",
        "Cache-Control": "no-cache",
        "Pragma": "no-cache",
    }

    # --- Page ---
    SITE_URL: str = os.getenv("PLP_SITE_URL", "https://example.com")
    PAGE_NAME: str = "Discover Our Products"
    PAGE_DESCRIPTION: str = (
        "Browse a curated list of demo products rendered on a "
        "server-side Appscrip PLP implementation."
    )
    PRICE_RANGE_MIN: int = 0
    PRICE_RANGE_MAX: int = 200
    SORT_OPTIONS: list[dict[str, str]] = [
        {"value": "featured", "label": "Featured"},
        {"value": "price-asc", "label": "Price: Low to High"},
        {"value": "price-desc", "label": "Price: High to Low"},
    ]
    DEFAULT_SORT: str = "featured"

    # --- Server ---
    HOST: str = os.getenv("PLP_HOST", "127.0.0.1")
    PORT: int = int(os.getenv("PLP_PORT", "8000"))

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    TEMPLATES_DIR: Path = BASE_DIR / "src" / "web" / "templates"
    OUTPUT_DIR: Path = BASE_DIR / "output"
    LOGS_DIR: Path = BASE_DIR / "logs"
