# src/storage/file_manager.py

"""Saves rendered page snapshots and catalog dumps to disk."""

import json
import logging
from datetime import datetime
from pathlib import Path

from src.config.settings import Settings
from src.models.product import Product

logger = logging.getLogger("storefront.storage")


class FileManager:
    """Writes timestamped render artefacts into ``OUTPUT_DIR``."""

    def __init__(self, output_dir: Path | None = None) -> None:
        self.output_dir: Path = output_dir or Settings.OUTPUT_DIR
        self.output_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("FileManager initialised, output_dir=%s", self.output_dir)

    @staticmethod
    def _timestamp() -> str:
        return datetime.now().strftime("%Y%m%d_%H%M%S")

    def save_page(self, html: str) -> Path:
        """Save a rendered listing page as a static HTML file."""
        filepath = self.output_dir / f"plp_{self._timestamp()}.html"
        filepath.write_text(html, encoding="utf-8")
        logger.info("Saved page snapshot (%d bytes) to %s", len(html), filepath)
        return filepath

    def save_catalog(self, products: list[Product]) -> Path:
        """Save the fetched catalog in its upstream JSON layout."""
        filepath = self.output_dir / f"catalog_{self._timestamp()}.json"
        data = [p.to_dict() for p in products]

        with open(filepath, "w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)

        logger.info("Saved %d products to %s", len(products), filepath)
        return filepath
