# src/services/page_renderer.py

"""Builds and renders the product listing page."""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any

from jinja2 import Environment

from src.catalog.catalog_client import CatalogClient
from src.config.settings import Settings
from src.filters.category_filter import CategoryFilter
from src.models.product import Product
from src.seo.structured_data import build_structured_data, to_json_ld
from src.web.templating import jinja_env

logger = logging.getLogger("storefront.renderer")

TEMPLATE_NAME = "listing.html"


@dataclass
class ListingPage:
    """Everything the listing template needs for one render."""

    products: list[Product] = field(
        default_factory=lambda: list[Product]()
    )
    categories: list[str] = field(
        default_factory=lambda: list[str]()
    )
    structured_data: dict[str, Any] = field(
        default_factory=lambda: dict[str, Any]()
    )

    @property
    def item_count(self) -> int:
        """Number of product cards on the page."""
        return len(self.products)


class PageRenderer:
    """Fetch the catalog, derive the facets and render HTML.

    The catalog fetch is the only I/O. ``CatalogFetchError`` is not
    caught here: a failed fetch must abort the whole render.
    """

    def __init__(
        self,
        client: CatalogClient | None = None,
        env: Environment | None = None,
    ) -> None:
        self.settings = Settings()
        self.client = client or CatalogClient()
        self.env = env or jinja_env

    def close(self) -> None:
        """Close the catalog client and its HTTP session."""
        self.client.close()

    def __enter__(self) -> "PageRenderer":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    @staticmethod
    def assemble(products: list[Product]) -> ListingPage:
        """Run the pure derivations over an already fetched catalog."""
        return ListingPage(
            products=list(products),
            categories=CategoryFilter.derive_categories(products),
            structured_data=build_structured_data(products),
        )

    def build_page(self) -> ListingPage:
        """Fetch the catalog and derive categories and structured data."""
        products = self.client.fetch_products()
        page = self.assemble(products)
        logger.info(
            "Built listing page: %d products, %d categories",
            page.item_count,
            len(page.categories),
        )
        return page

    def render_page(self, page: ListingPage) -> str:
        """Render an assembled page through the listing template."""
        template = self.env.get_template(TEMPLATE_NAME)
        return template.render(
            page=page,
            json_ld=to_json_ld(page.structured_data),
            settings=self.settings,
        )

    def render(self) -> str:
        """Fetch, derive and render in a single pass."""
        return self.render_page(self.build_page())

    async def render_async(self) -> str:
        """Awaitable render; the blocking fetch runs in a worker thread."""
        page = await asyncio.to_thread(self.build_page)
        return self.render_page(page)
