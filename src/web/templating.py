# src/web/templating.py

"""Jinja2 environment shared by the web app and the snapshot renderer."""

from jinja2 import Environment, FileSystemLoader, select_autoescape

from src.config.settings import Settings


def format_price(value: float) -> str:
    """Render a price as ``$12.50``."""
    return f"${value:.2f}"


def create_environment() -> Environment:
    """Build an autoescaping environment rooted at ``TEMPLATES_DIR``."""
    env = Environment(
        loader=FileSystemLoader(str(Settings.TEMPLATES_DIR)),
        autoescape=select_autoescape(["html", "xml"]),
        trim_blocks=True,
        lstrip_blocks=True,
    )
    env.filters["price"] = format_price
    return env


jinja_env = create_environment()
