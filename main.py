# main.py

"""Entry point for the storefront PLP (web server or headless CLI)."""

import argparse
import asyncio
import logging
import sys

from src.config.logging_config import setup_logging
from src.config.settings import Settings

logger = logging.getLogger("storefront.main")


def _build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="storefront_plp",
        description="Server-rendered product listing page.",
        epilog=f"Catalog endpoint: {Settings.CATALOG_URL}",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--render",
        action="store_true",
        default=False,
        help="Render the page once and save a static HTML snapshot.",
    )
    mode.add_argument(
        "--catalog",
        action="store_true",
        default=False,
        help="Print the current upstream catalog.",
    )
    mode.add_argument(
        "--health",
        action="store_true",
        default=False,
        help="Run a connectivity health check on the catalog endpoint.",
    )
    parser.add_argument(
        "--host",
        default=Settings.HOST,
        help=f"Bind address when serving (default: {Settings.HOST}).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=Settings.PORT,
        help=f"Port when serving (default: {Settings.PORT}).",
    )
    parser.add_argument(
        "-f",
        "--format",
        choices=["json", "table"],
        default="json",
        dest="output_format",
        help="Output format for --catalog (default: json).",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        dest="output_dir",
        help="Custom output directory for --render (default: output/).",
    )
    return parser


def _run_server(host: str, port: int) -> None:
    """Serve the listing page with uvicorn."""
    import uvicorn

    from src.web.app import app

    try:
        uvicorn.run(app, host=host, port=port)
    except Exception:
        logger.critical("Fatal error while serving", exc_info=True)
        raise
    finally:
        logger.info("storefront server shutting down")


def main() -> None:
    """Route to the server (no mode flag) or a one-shot CLI command."""
    log_file = setup_logging()
    logger.info("storefront starting, log file: %s", log_file)

    args = _build_parser().parse_args()

    if args.render:
        from src.cli.runner import run_render

        sys.exit(run_render(args.output_dir))
    elif args.catalog:
        from src.cli.runner import run_catalog

        sys.exit(run_catalog(args.output_format))
    elif args.health:
        from src.cli.runner import run_health_check

        sys.exit(asyncio.run(run_health_check()))
    else:
        _run_server(args.host, args.port)


if __name__ == "__main__":
    main()
