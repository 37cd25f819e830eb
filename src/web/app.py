# src/web/app.py

"""FastAPI application serving the product listing page."""

import logging
from collections.abc import Iterator

from fastapi import Depends, FastAPI, Request
from fastapi.responses import HTMLResponse, JSONResponse

from src.catalog.catalog_client import CatalogFetchError
from src.services.health_checker import HealthChecker
from src.services.page_renderer import PageRenderer

logger = logging.getLogger("storefront.web")

_ERROR_PAGE = (
    "<!DOCTYPE html><html lang=\"en\"><head><meta charset=\"utf-8\">"
    "<title>Something went wrong</title></head><body>"
    "<h1>Something went wrong</h1>"
    "<p>The product listing is temporarily unavailable.</p>"
    "</body></html>"
)

app = FastAPI(
    title="Storefront PLP",
    description=(
        "Server-rendered product listing page backed by the "
        "Fake Store demo catalog."
    ),
    version="1.0.0",
)


def get_renderer() -> Iterator[PageRenderer]:
    """A fresh renderer per request, closed once the request finishes."""
    with PageRenderer() as renderer:
        yield renderer


def get_health_checker() -> HealthChecker:
    return HealthChecker()


@app.exception_handler(CatalogFetchError)
async def catalog_fetch_error_handler(
    request: Request, exc: CatalogFetchError,
) -> HTMLResponse:
    """Turn an upstream failure into a generic 500 page."""
    logger.error(
        "Render of %s aborted: %s (upstream %s, status %s)",
        request.url.path,
        exc,
        exc.url,
        exc.status_code,
    )
    return HTMLResponse(
        content=_ERROR_PAGE,
        status_code=500,
        headers={"Cache-Control": "no-store"},
    )


@app.get("/", response_class=HTMLResponse)
async def listing_page(
    renderer: PageRenderer = Depends(get_renderer),
) -> HTMLResponse:
    """Render the product listing page from the live catalog."""
    html = await renderer.render_async()
    return HTMLResponse(
        content=html,
        headers={"Cache-Control": "no-store"},
    )


@app.get("/health")
async def health(
    checker: HealthChecker = Depends(get_health_checker),
) -> JSONResponse:
    """Report catalog upstream reachability."""
    result = await checker.check()
    return JSONResponse(
        content={
            "status": result.status,
            "latency_ms": round(result.latency_ms, 1),
            "message": result.message,
        },
        status_code=503 if result.status == "down" else 200,
    )
