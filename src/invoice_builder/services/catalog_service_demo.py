"""
Demo implementation of CatalogService using static in-memory data.

Useful for local development and tests: items created through the form
are appended to the in-memory list so a refetch shows them.
"""

import uuid
from typing import Sequence

from invoice_builder.data.demo_catalog import DEMO_CATEGORIES, DEMO_ITEMS
from invoice_builder.lib.clients import BackendError
from invoice_builder.models.catalog import CatalogItem, Category
from invoice_builder.models.forms import ItemForm
from invoice_builder.services.catalog_service import CatalogService


class DemoCatalogService(CatalogService):
    """In-memory catalog backed by the demo dataset."""

    def __init__(
        self,
        items: Sequence[CatalogItem] | None = None,
        categories: Sequence[Category] | None = None,
    ) -> None:
        """
        Initialize with catalog data.

        Args:
            items: Custom items, or None to use DEMO_ITEMS.
            categories: Custom categories, or None to use DEMO_CATEGORIES.
        """
        self._items: list[CatalogItem] = list(
            items if items is not None else DEMO_ITEMS
        )
        self._categories: list[Category] = list(
            categories if categories is not None else DEMO_CATEGORIES
        )

    def get_items(self) -> Sequence[CatalogItem]:
        return list(self._items)

    def get_categories(self) -> Sequence[Category]:
        return list(self._categories)

    def create_item(self, form: ItemForm) -> CatalogItem:
        item = self._build_item(f"item-{uuid.uuid4().hex[:8]}", form)
        self._items.append(item)
        return item

    def update_item(self, item_id: str, form: ItemForm) -> CatalogItem:
        for index, existing in enumerate(self._items):
            if existing.id == item_id:
                item = self._build_item(item_id, form)
                self._items[index] = item
                return item
        raise BackendError(f"Unknown item: {item_id}")

    def create_category(self, name: str) -> Category:
        category = Category(id=f"cat-{uuid.uuid4().hex[:8]}", name=name.strip())
        self._categories.append(category)
        return category

    def _build_item(self, item_id: str, form: ItemForm) -> CatalogItem:
        names = {category.id: category.name for category in self._categories}
        return CatalogItem(
            id=item_id,
            name=form.name,
            type=form.type,
            description=form.description,
            category_id=form.category_id,
            category_name=names.get(form.category_id) if form.category_id else None,
            sale_price_enabled=form.sale_price_enabled,
            sale_price=form.sale_price,
        )
