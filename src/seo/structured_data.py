# src/seo/structured_data.py

"""schema.org JSON-LD document for the product listing page."""

import json
from typing import Any

from src.config.settings import Settings
from src.models.product import Product

SCHEMA_CONTEXT = "https://schema.org"

# Characters that could close the surrounding <script> element
_SCRIPT_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
}


def product_url(product: Product, site_url: str | None = None) -> str:
    """Canonical detail-page URL for a product."""
    base = (site_url or Settings.SITE_URL).rstrip("/")
    return f"{base}/products/{product.id}"


def build_structured_data(
    products: list[Product],
    site_url: str | None = None,
) -> dict[str, Any]:
    """Build a ``CollectionPage`` whose main entity lists every product.

    ``position`` is the 1-based index in *products*, so the item list
    follows the catalog order exactly.
    """
    return {
        "@context": SCHEMA_CONTEXT,
        "@type": "CollectionPage",
        "name": Settings.PAGE_NAME,
        "description": Settings.PAGE_DESCRIPTION,
        "mainEntity": {
            "@type": "ItemList",
            "itemListElement": [
                {
                    "@type": "ListItem",
                    "position": position,
                    "url": product_url(product, site_url),
                    "name": product.title,
                }
                for position, product in enumerate(products, 1)
            ],
        },
    }


def to_json_ld(document: dict[str, Any]) -> str:
    """Serialise *document* for a ``<script type="application/ld+json">``."""
    text = json.dumps(document, ensure_ascii=False, separators=(",", ":"))
    for char, escaped in _SCRIPT_ESCAPES.items():
        text = text.replace(char, escaped)
    return text
