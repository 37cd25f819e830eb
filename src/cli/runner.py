# src/cli/runner.py

"""Headless CLI commands: snapshot render, catalog dump, health check."""

import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from src.catalog.catalog_client import CatalogClient, CatalogFetchError
from src.models.product import Product
from src.services.health_checker import HealthChecker
from src.services.page_renderer import PageRenderer
from src.storage.file_manager import FileManager

logger = logging.getLogger("storefront.cli")

# Stderr console for status messages so stdout stays clean for JSON
_err = Console(stderr=True)


def _print_table(products: list[Product]) -> None:
    """Render a Rich table of the catalog to stdout."""
    table = Table(
        title="Catalog",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("#", style="dim", width=4)
    table.add_column("Title", max_width=60)
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right", style="green")

    for p in products:
        table.add_row(
            str(p.id),
            p.title[:60],
            p.category,
            f"${p.price:,.2f}",
        )

    Console().print(table)


def run_render(output_dir: str | None = None) -> int:
    """Render the page once and save it as a static snapshot."""
    file_manager = FileManager(Path(output_dir) if output_dir else None)

    _err.print("[bold]Rendering product listing page...[/bold]")
    with PageRenderer() as renderer:
        try:
            page = renderer.build_page()
        except CatalogFetchError as exc:
            _err.print(f"[red]Catalog fetch failed: {exc}[/red]")
            return 1
        html = renderer.render_page(page)

    path = file_manager.save_page(html)
    _err.print(
        f"[green]✓ {page.item_count} products, "
        f"{len(page.categories)} categories[/green]"
    )
    _err.print(f"[dim]Saved page → {path}[/dim]")
    return 0


def run_catalog(output_format: str = "json") -> int:
    """Print the current upstream catalog as JSON or a table."""
    try:
        with CatalogClient() as client:
            products = client.fetch_products()
    except CatalogFetchError as exc:
        _err.print(f"[red]Catalog fetch failed: {exc}[/red]")
        return 1

    if not products:
        _err.print("[yellow]Catalog is empty.[/yellow]")

    if output_format == "table":
        _print_table(products)
    else:
        json.dump(
            [p.to_dict() for p in products],
            sys.stdout,
            ensure_ascii=False,
            indent=2,
        )
        sys.stdout.write("\n")
    return 0


async def run_health_check() -> int:
    """Probe the catalog endpoint and print the outcome."""
    _err.print("[bold]Running catalog health check...[/bold]")
    result = await HealthChecker().check()

    table = Table(
        title="Catalog Health Check",
        show_lines=True,
        title_style="bold cyan",
    )
    table.add_column("Endpoint", style="bold")
    table.add_column("Status", justify="center")
    table.add_column("Latency", justify="right")
    table.add_column("Notes", style="dim")

    if result.status == "ok":
        status = "[green]✅ OK[/green]"
    elif result.status == "slow":
        status = "[yellow]⚠️  SLOW[/yellow]"
    else:
        status = "[red]❌ DOWN[/red]"

    latency = (
        f"{result.latency_ms:.0f}ms"
        if result.latency_ms > 0
        else "—"
    )
    table.add_row(result.url, status, latency, result.message)

    Console().print(table)
    return 1 if result.status == "down" else 0
