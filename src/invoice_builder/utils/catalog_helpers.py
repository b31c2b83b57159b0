"""Helper functions for catalog search and facet filtering."""

from functools import lru_cache
from typing import TYPE_CHECKING, Sequence

from invoice_builder.models.catalog import ALL

if TYPE_CHECKING:
    from invoice_builder.models.catalog import CatalogItem
    from invoice_builder.models.common import PickerState

# The picker always formats prices in USD, whatever the invoice currency.
PICKER_CURRENCY = "USD"


def matches_search(item: "CatalogItem", search_term: str) -> bool:
    """
    Check if an item matches the free-text search.

    Performs case-insensitive substring matching against the item name,
    description and resolved category name.

    Args:
        item: Catalog item to check.
        search_term: Search text; empty matches everything.

    Returns:
        True if any searchable term contains the search text.
    """
    normalized = (search_term or "").lower()
    if not normalized:
        return True
    return any(normalized in value for value in item.searchable_terms())


def matches_facets(item: "CatalogItem", category: str, item_type: str) -> bool:
    """Check the exact-match category and type facets."""
    if category != ALL and item.category_id != category:
        return False
    return item_type == ALL or item.type == item_type


def filter_items(
    items: Sequence["CatalogItem"],
    search_term: str = "",
    category: str = ALL,
    item_type: str = ALL,
) -> list["CatalogItem"]:
    """
    Return the items that pass every facet, in their original order.

    Results are memoized on the full tuple of inputs so repeated renders
    over a large catalog do not rescan it.

    Args:
        items: Catalog collection in provider order.
        search_term: Free-text search.
        category: "all" or a category id.
        item_type: "all", "product" or "service".

    Returns:
        The stable filtered subsequence of items.
    """
    return list(_filter_cached(tuple(items), search_term or "", category, item_type))


def visible_items(
    items: Sequence["CatalogItem"], state: "PickerState"
) -> list["CatalogItem"]:
    """Derive the picker's visible items from its current state."""
    # active_filters chips are not part of the predicate
    return filter_items(
        items, state.search_term, state.selected_category, state.selected_type
    )


@lru_cache(maxsize=64)
def _filter_cached(
    items: tuple["CatalogItem", ...],
    search_term: str,
    category: str,
    item_type: str,
) -> tuple["CatalogItem", ...]:
    return tuple(
        item
        for item in items
        if matches_search(item, search_term)
        and matches_facets(item, category, item_type)
    )
