"""
REST-backed implementation of CatalogService.

Reads and writes the hosted backend's `items` and `item_categories`
resources. Item rows are requested with their category embedded
(`category:item_categories(id,name)`) so the category name is resolved in
a single round trip.

Rows are wrapped in benedict for safe nested key access, so missing or
null columns fall back to defaults instead of raising KeyError.
"""

from typing import Any, Sequence

import httpx
from benedict import benedict

from invoice_builder.lib import clients, logs
from invoice_builder.models.catalog import PRODUCT, CatalogItem, Category
from invoice_builder.models.forms import ItemForm
from invoice_builder.services.catalog_service import CatalogService

LOG = logs.logger(__file__)

_ITEM_COLUMNS = (
    "id,name,description,type,category_id,enable_sale_info,sale_price,"
    "category:item_categories(id,name)"
)


def _parse_item(b: benedict) -> CatalogItem:
    """
    Parse a benedict row into a CatalogItem.

    Args:
        b: Benedict dict wrapping the item row with embedded category.

    Returns:
        Fully populated CatalogItem.
    """
    sale_price = b.get("sale_price")
    return CatalogItem(
        id=str(b.get("id")),
        name=b.get("name", "") or "",
        type=b.get("type") or PRODUCT,
        description=b.get("description") or None,
        category_id=b.get("category_id") or None,
        category_name=b.get("category.name") or None,
        sale_price_enabled=bool(b.get("enable_sale_info", False)),
        sale_price=float(sale_price) if sale_price is not None else None,
    )


def _item_payload(form: ItemForm) -> dict[str, Any]:
    return {
        "name": form.name,
        "description": form.description,
        "type": form.type,
        "category_id": form.category_id,
        "enable_sale_info": form.sale_price_enabled,
        "sale_price": form.sale_price,
    }


class CatalogServiceImpl(CatalogService):
    """
    Production catalog service using the hosted REST backend.

    Required Environment Variables:
        INVOICE_BUILDER_BACKEND_URL: Base URL of the REST API

    Optional Environment Variables:
        INVOICE_BUILDER_BACKEND_KEY: API key for the backend
    """

    def __init__(self, client: httpx.Client | None = None) -> None:
        """
        Initialize the service.

        Args:
            client: Preconfigured client, or None for the shared backend client.
        """
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = clients.backend_client()
        return self._client

    def get_items(self) -> Sequence[CatalogItem]:
        rows = clients.request_json(
            self.client,
            "GET",
            "/items",
            params={"select": _ITEM_COLUMNS, "order": "name.asc"},
        )
        LOG.info("get_items - rows:%s", len(rows))
        return [_parse_item(benedict(row)) for row in rows]

    def get_categories(self) -> Sequence[Category]:
        rows = clients.request_json(
            self.client,
            "GET",
            "/item_categories",
            params={"select": "id,name", "order": "name.asc"},
        )
        return [Category(id=str(row["id"]), name=row.get("name", "")) for row in rows]

    def create_item(self, form: ItemForm) -> CatalogItem:
        data = clients.request_json(
            self.client,
            "POST",
            "/items",
            params={"select": _ITEM_COLUMNS},
            json=_item_payload(form),
        )
        item = _parse_item(benedict(clients.first_row(data)))
        LOG.info("create_item - id:%s name:%s", item.id, item.name)
        return item

    def update_item(self, item_id: str, form: ItemForm) -> CatalogItem:
        data = clients.request_json(
            self.client,
            "PATCH",
            "/items",
            params={"id": f"eq.{item_id}", "select": _ITEM_COLUMNS},
            json=_item_payload(form),
        )
        return _parse_item(benedict(clients.first_row(data)))

    def create_category(self, name: str) -> Category:
        data = clients.request_json(
            self.client,
            "POST",
            "/item_categories",
            json={"name": name.strip()},
        )
        row = clients.first_row(data)
        return Category(id=str(row["id"]), name=row.get("name", ""))
