"""
Abstract base class defining the catalog data access contract.

The item picker only reads through get_items(). The item form writes
through create_item() and update_item(), and its inline category control
through create_category(). Categories are loaded once per page and handed
to the picker.

Implementations:
- DemoCatalogService: Static in-memory data for development/testing
- CatalogServiceImpl: Hosted REST backend over httpx
"""

from abc import ABC, abstractmethod
from typing import Sequence

from invoice_builder.models.catalog import CatalogItem, Category
from invoice_builder.models.forms import ItemForm


class CatalogService(ABC):
    """
    Abstract base class for catalog data access.

    get_items() returns the full collection in provider order, with no
    pagination and no partial results; failures raise.
    """

    @abstractmethod
    def get_items(self) -> Sequence[CatalogItem]:
        """Return every catalog item with its category name resolved."""

    @abstractmethod
    def get_categories(self) -> Sequence[Category]:
        """Return every item category."""

    @abstractmethod
    def create_item(self, form: ItemForm) -> CatalogItem:
        """Create a catalog item from validated form values."""

    @abstractmethod
    def update_item(self, item_id: str, form: ItemForm) -> CatalogItem:
        """Replace an existing item's editable fields."""

    @abstractmethod
    def create_category(self, name: str) -> Category:
        """Create a new item category."""
