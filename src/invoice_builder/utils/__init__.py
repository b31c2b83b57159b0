"""Utility functions shared across the invoice builder package."""

# Must load before catalog_helpers: models.invoice imports these names.
from invoice_builder.utils.formatting import format_currency, parse_date
from invoice_builder.utils.catalog_helpers import (
    PICKER_CURRENCY,
    filter_items,
    matches_facets,
    matches_search,
    visible_items,
)

__all__ = [
    "PICKER_CURRENCY",
    "filter_items",
    "format_currency",
    "matches_facets",
    "matches_search",
    "parse_date",
    "visible_items",
]
