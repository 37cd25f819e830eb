# src/catalog/catalog_client.py

"""HTTP client for the upstream product catalog."""

import logging
from typing import Any

from curl_cffi import requests as curl_requests

from src.config.settings import Settings
from src.models.product import Product


class CatalogFetchError(RuntimeError):
    """The catalog endpoint failed or returned an unusable payload."""

    def __init__(
        self,
        message: str,
        url: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class CatalogClient:
    """Fetches the full product list from ``Settings.CATALOG_URL``.

    There is no retry and no fallback data: every failure surfaces as
    :class:`CatalogFetchError` so the caller can abort the render.
    """

    def __init__(self, url: str | None = None) -> None:
        self.logger = logging.getLogger("storefront.catalog")
        self.settings = Settings()
        self.url = url or self.settings.CATALOG_URL
        self.session = curl_requests.Session(
            impersonate=self.settings.IMPERSONATE_BROWSER
        )
        self._request_timeout: int = self.settings.REQUEST_TIMEOUT

    def close(self) -> None:
        """Release the underlying curl session."""
        self.session.close()

    def __enter__(self) -> "CatalogClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch_get(self) -> curl_requests.Response:
        """Single uncached GET against the catalog endpoint."""
        try:
            resp = self.session.get(
                self.url,
                headers=dict(self.settings.DEFAULT_HEADERS),
                timeout=self._request_timeout,
            )
        except Exception as exc:
            self.logger.error(
                "[catalog] Request to %s failed: %s",
                self.url,
                exc,
                exc_info=True,
            )
            raise CatalogFetchError(
                f"Failed to load products: {exc}", self.url
            ) from exc

        if resp.status_code != 200:
            self.logger.error(
                "[catalog] HTTP %d from %s",
                resp.status_code,
                self.url,
            )
            raise CatalogFetchError(
                f"Failed to load products: HTTP {resp.status_code}",
                self.url,
                status_code=resp.status_code,
            )
        return resp

    def _parse_products(self, payload: Any) -> list[Product]:
        """Map the decoded JSON array onto Product records."""
        if not isinstance(payload, list):
            raise CatalogFetchError(
                "Catalog payload is not a JSON array",
                self.url,
                status_code=200,
            )
        products: list[Product] = []
        for index, item in enumerate(payload):
            try:
                products.append(Product.from_dict(item))
            except (KeyError, TypeError, ValueError, OverflowError) as exc:
                raise CatalogFetchError(
                    f"Malformed product at index {index}: {exc!r}",
                    self.url,
                    status_code=200,
                ) from exc
        return products

    def fetch_products(self) -> list[Product]:
        """Fetch and decode the current catalog."""
        resp = self._fetch_get()
        try:
            payload = resp.json()
        except ValueError as exc:
            self.logger.error(
                "[catalog] Non-JSON body from %s", self.url
            )
            raise CatalogFetchError(
                "Catalog response is not valid JSON",
                self.url,
                status_code=resp.status_code,
            ) from exc

        products = self._parse_products(payload)
        self.logger.info(
            "[catalog] Fetched %d products from %s",
            len(products),
            self.url,
        )
        return products
