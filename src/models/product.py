# src/models/product.py

"""Product data model for the catalog snapshot of a single render."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Product:
    """One catalog entry as served by the upstream demo API."""

    id: int
    title: str
    price: float
    description: str = ""
    category: str = ""
    image: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a Product from one element of the upstream JSON array.

        Unknown keys (e.g. ``rating``) are ignored and a ``null`` text
        field becomes ``""``. Raises ``KeyError``, ``TypeError``,
        ``ValueError`` or ``OverflowError`` when ``id``/``title``/``price``
        are missing or unusable.
        """
        raw_id = data["id"]
        # bool is an int subclass; floats would truncate into a shared id
        if isinstance(raw_id, bool) or not isinstance(raw_id, int):
            raise TypeError(f"product id must be an integer, got {raw_id!r}")
        raw_title = data["title"]
        return cls(
            id=raw_id,
            title="" if raw_title is None else str(raw_title),
            price=float(data["price"]),
            description=str(data.get("description") or ""),
            category=str(data.get("category") or ""),
            image=str(data.get("image") or ""),
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialise back to the upstream field layout."""
        return {
            "id": self.id,
            "title": self.title,
            "price": self.price,
            "description": self.description,
            "category": self.category,
            "image": self.image,
        }
