# src/services/health_checker.py

"""Catalog endpoint connectivity health checker."""

import asyncio
import logging
import time
from dataclasses import dataclass

from src.catalog.catalog_client import CatalogClient
from src.config.settings import Settings

logger = logging.getLogger("storefront.health")

_HEALTH_TIMEOUT = 10  # seconds per probe


@dataclass
class HealthResult:
    """Result of a single catalog health probe."""

    url: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def probe_catalog(client: CatalogClient | None = None) -> HealthResult:
    """Issue one GET to the catalog endpoint and classify the outcome."""
    owns_client = client is None
    try:
        client = client or CatalogClient()
    except Exception as exc:
        return HealthResult(
            url=Settings.CATALOG_URL,
            status="down",
            latency_ms=0.0,
            message=f"Failed to create client: {exc}",
        )

    start = time.monotonic()
    try:
        resp = client.session.get(
            client.url,
            headers=dict(client.settings.DEFAULT_HEADERS),
            timeout=_HEALTH_TIMEOUT,
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        if resp.status_code != 200:
            return HealthResult(
                url=client.url,
                status="down",
                latency_ms=elapsed_ms,
                message=f"HTTP {resp.status_code}",
            )

        if elapsed_ms > Settings.HEALTH_SLOW_MS:
            return HealthResult(
                url=client.url,
                status="slow",
                latency_ms=elapsed_ms,
                message="High latency",
            )

        return HealthResult(
            url=client.url,
            status="ok",
            latency_ms=elapsed_ms,
            message="",
        )

    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult(
            url=client.url,
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )
    finally:
        if owns_client:
            client.close()


class HealthChecker:
    """Runs the catalog probe off the event loop."""

    def __init__(self, client: CatalogClient | None = None) -> None:
        self.client = client

    async def check(self) -> HealthResult:
        """Probe the catalog endpoint in a worker thread."""
        result = await asyncio.to_thread(probe_catalog, self.client)
        logger.info(
            "Health check %s: %s (%.0fms) %s",
            result.url,
            result.status,
            result.latency_ms,
            result.message,
        )
        return result
