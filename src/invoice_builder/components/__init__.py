"""
Reusable Dash UI components for the Invoice Builder application.

This package provides modular, composable components:
- item_picker: Catalog item picker (dialog/drawer, facets, grid/list)
- invoice_draft: Invoice details, line items and totals
- forms: Inline item and customer forms, blank or prefilled for editing
- management: Catalog item and customer tables with edit and delete actions

All components are pure functions that return Dash html/dcc elements,
making them easy to test and compose.
"""

from invoice_builder.components.forms import (
    build_customer_form,
    build_form_errors,
    build_item_form,
    customer_form_values,
    item_form_values,
)
from invoice_builder.components.invoice_draft import (
    build_adjustments,
    build_banner,
    build_customer_options,
    build_draft_details,
    build_line_items,
    build_totals,
)
from invoice_builder.components.item_picker import (
    build_chips,
    build_facets,
    build_item_picker,
    build_picker_trigger,
    build_results,
)
from invoice_builder.components.management import (
    build_catalog_manager,
    build_customer_table,
    build_management_cards,
)

__all__ = [
    "build_adjustments",
    "build_banner",
    "build_catalog_manager",
    "build_chips",
    "build_customer_form",
    "build_customer_options",
    "build_customer_table",
    "build_draft_details",
    "build_facets",
    "build_form_errors",
    "build_item_form",
    "build_item_picker",
    "build_line_items",
    "build_management_cards",
    "build_picker_trigger",
    "build_results",
    "build_totals",
    "customer_form_values",
    "item_form_values",
]
