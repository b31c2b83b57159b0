"""
Catalog domain models and serialization helpers.

Catalog items are the sellable products and services a business adds to
its invoices. Each item may belong to one category, whose name is resolved
at fetch time so the picker can display and search it:

    CatalogItem
    ├── type ("product" | "service")
    ├── category_id / category_name
    └── sale_price (only meaningful when sale_price_enabled)

Serialization functions convert between dataclasses and JSON-compatible
dictionaries for storage in dcc.Store and transmission over callbacks.
"""

from dataclasses import asdict, dataclass
from typing import Any, List, Mapping, Sequence

PRODUCT = "product"
SERVICE = "service"
ITEM_TYPES = (PRODUCT, SERVICE)

# Facet value that disables the category or type filter
ALL = "all"


@dataclass(slots=True, frozen=True)
class Category:
    """A named grouping of catalog items."""

    id: str
    name: str


@dataclass(slots=True, frozen=True)
class CatalogItem:
    """A product or service that can be added as an invoice line."""

    id: str
    name: str
    type: str = PRODUCT
    description: str | None = None
    category_id: str | None = None
    category_name: str | None = None
    sale_price_enabled: bool = False
    sale_price: float | None = None

    @property
    def display_price(self) -> float | None:
        """Return the sale price when it should be shown, otherwise None."""
        if self.sale_price_enabled and self.sale_price is not None:
            return self.sale_price
        return None

    def searchable_terms(self) -> List[str]:
        """Return the lowercased terms matched by free-text search."""
        terms = [self.name, self.description, self.category_name]
        return [value.lower() for value in terms if value]


def serialize_item(item: CatalogItem) -> dict:
    """Convert a CatalogItem into a JSON serializable dictionary."""
    return asdict(item)


def deserialize_item(payload: Mapping[str, Any]) -> CatalogItem:
    """Convert a dictionary back into a CatalogItem."""
    sale_price = payload.get("sale_price")
    return CatalogItem(
        id=str(payload["id"]),
        name=payload.get("name", ""),
        type=payload.get("type") or PRODUCT,
        description=payload.get("description") or None,
        category_id=payload.get("category_id") or None,
        category_name=payload.get("category_name") or None,
        sale_price_enabled=bool(payload.get("sale_price_enabled", False)),
        sale_price=float(sale_price) if sale_price is not None else None,
    )


def serialize_categories(categories: Sequence[Category]) -> list[dict]:
    """Convert categories into JSON serializable dictionaries."""
    return [asdict(category) for category in categories]


def deserialize_categories(payload: Sequence[Mapping[str, Any]] | None) -> list[Category]:
    """Convert dictionaries back into Category instances."""
    return [Category(id=str(c["id"]), name=c.get("name", "")) for c in payload or []]
