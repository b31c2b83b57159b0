"""
Data models and serialization helpers for the Invoice Builder UI.

This package provides:
- Catalog models (CatalogItem, Category)
- Picker and catalog state models (PickerState, CatalogSnapshot)
- Invoice draft models (InvoiceDraft, DraftLineItem, Totals)
- Customer model and pydantic form schemas
- Serialization/deserialization for dcc.Store compatibility
"""

from invoice_builder.models.catalog import (
    ALL,
    PRODUCT,
    SERVICE,
    CatalogItem,
    Category,
    deserialize_categories,
    deserialize_item,
    serialize_categories,
    serialize_item,
)
from invoice_builder.models.common import (
    VIEW_GRID,
    VIEW_LIST,
    CatalogSnapshot,
    PickerState,
)
from invoice_builder.models.customer import (
    Customer,
    deserialize_customers,
    serialize_customers,
)
from invoice_builder.models.forms import (
    CategoryForm,
    CustomerForm,
    ItemForm,
    form_errors,
)
from invoice_builder.models.invoice import (
    DraftLineItem,
    Invoice,
    InvoiceDraft,
    Totals,
    deserialize_draft,
    serialize_draft,
)

__all__ = [
    "ALL",
    "CatalogItem",
    "CatalogSnapshot",
    "Category",
    "CategoryForm",
    "Customer",
    "CustomerForm",
    "DraftLineItem",
    "Invoice",
    "InvoiceDraft",
    "ItemForm",
    "PRODUCT",
    "PickerState",
    "SERVICE",
    "Totals",
    "VIEW_GRID",
    "VIEW_LIST",
    "deserialize_categories",
    "deserialize_customers",
    "deserialize_draft",
    "deserialize_item",
    "form_errors",
    "serialize_categories",
    "serialize_customers",
    "serialize_draft",
    "serialize_item",
]
