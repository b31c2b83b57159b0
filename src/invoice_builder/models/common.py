"""
Common state models for the Invoice Builder UI.

This module defines the state objects that are serialized to dcc.Store
for client-side persistence:

- PickerState: the item picker's open flag, filter facets and view mode
- CatalogSnapshot: the most recently fetched catalog plus loading/error flags

All models include to_dict/from_dict methods for JSON serialization
required by Dash's dcc.Store component. Transitions return new instances
so each callback can derive the next state from the stored one.
"""

from dataclasses import dataclass, field, replace
from typing import Any

from invoice_builder.models.catalog import (
    ALL,
    ITEM_TYPES,
    CatalogItem,
    deserialize_item,
    serialize_item,
)

VIEW_GRID = "grid"
VIEW_LIST = "list"

CLOSE_CANCEL = "cancel"
CLOSE_OUTSIDE = "outside"
CLOSE_SELECT = "select"
CLOSE_CREATE = "create"
CLOSE_REASONS = (CLOSE_CANCEL, CLOSE_OUTSIDE, CLOSE_SELECT, CLOSE_CREATE)


@dataclass(frozen=True)
class PickerState:
    """
    Transient picker state owned by the selection surface.

    Attributes:
        is_open: Whether the dialog/drawer is showing.
        search_term: Free-text search, matched case-insensitively.
        selected_category: "all" or a category id.
        selected_type: "all", "product" or "service".
        active_filters: Removable chip labels. Displayed only; the filter
            predicate does not read them.
        view_mode: "grid" or "list". Rendering only.
    """

    is_open: bool = False
    search_term: str = ""
    selected_category: str = ALL
    selected_type: str = ALL
    active_filters: tuple[str, ...] = ()
    view_mode: str = VIEW_GRID

    def opened(self) -> "PickerState":
        """Return the state after the trigger is activated."""
        return replace(self, is_open=True)

    def closed(self) -> "PickerState":
        """
        Return the state after the picker closes for any reason.

        Search and chips are cleared; category, type and view mode persist
        across open/close cycles.
        """
        return replace(self, is_open=False, search_term="", active_filters=())

    def with_search(self, term: str | None) -> "PickerState":
        return replace(self, search_term=term or "")

    def with_type(self, item_type: str) -> "PickerState":
        if item_type != ALL and item_type not in ITEM_TYPES:
            raise ValueError(f"Unknown item type: {item_type}")
        return replace(self, selected_type=item_type)

    def with_category(self, category_id: str | None) -> "PickerState":
        return replace(self, selected_category=category_id or ALL)

    def toggled_view(self) -> "PickerState":
        view_mode = VIEW_LIST if self.view_mode == VIEW_GRID else VIEW_GRID
        return replace(self, view_mode=view_mode)

    def toggled_filter(self, label: str) -> "PickerState":
        """Add the chip label if absent, otherwise remove it."""
        if label in self.active_filters:
            filters = tuple(f for f in self.active_filters if f != label)
        else:
            filters = self.active_filters + (label,)
        return replace(self, active_filters=filters)

    def cleared(self) -> "PickerState":
        """Reset every facet field together ("Clear all")."""
        return replace(
            self,
            search_term="",
            selected_category=ALL,
            selected_type=ALL,
            active_filters=(),
        )

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return {
            "is_open": self.is_open,
            "search_term": self.search_term,
            "selected_category": self.selected_category,
            "selected_type": self.selected_type,
            "active_filters": list(self.active_filters),
            "view_mode": self.view_mode,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "PickerState":
        """Deserialize dictionary to PickerState."""
        if not data:
            return cls()
        return cls(
            is_open=data.get("is_open", False),
            search_term=data.get("search_term", ""),
            selected_category=data.get("selected_category", ALL),
            selected_type=data.get("selected_type", ALL),
            active_filters=tuple(data.get("active_filters", [])),
            view_mode=data.get("view_mode", VIEW_GRID),
        )


@dataclass
class CatalogSnapshot:
    """
    The catalog collection currently held by the picker.

    Attributes:
        items: Items in provider order. Replaced wholesale on each fetch.
        is_loading: True while a fetch is outstanding.
        error: Display message for the last failed fetch, if any.
        token: The refetch token the latest request was issued for.
        request_id: Monotonic id of the latest issued request.
    """

    items: list[CatalogItem] = field(default_factory=list)
    is_loading: bool = True
    error: str | None = None
    token: Any = None
    request_id: int = 0

    @property
    def has_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> dict:
        """Serialize to JSON-compatible dictionary."""
        return {
            "items": [serialize_item(item) for item in self.items],
            "is_loading": self.is_loading,
            "error": self.error,
            "token": self.token,
            "request_id": self.request_id,
        }

    @classmethod
    def from_dict(cls, data: dict | None) -> "CatalogSnapshot":
        """Deserialize dictionary to CatalogSnapshot."""
        if not data:
            return cls()
        return cls(
            items=[deserialize_item(item) for item in data.get("items", [])],
            is_loading=data.get("is_loading", False),
            error=data.get("error"),
            token=data.get("token"),
            request_id=data.get("request_id", 0),
        )
