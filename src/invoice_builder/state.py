"""
Item picker state management.

This module contains the ItemPicker class, the selection surface's
controller. It owns one picker instance's PickerState and catalog
snapshot, derives the visible items from them, and emits chosen items to
the caller-supplied callbacks.

Every user event is an explicit transition followed by a recompute of the
derived view; there is no reactive machinery. The Dash callbacks build an
ItemPicker from the stored state, apply one event, and store the result.
"""

from typing import Any, Callable, Sequence

from invoice_builder.lib import logs
from invoice_builder.models.catalog import CatalogItem, Category
from invoice_builder.models.common import (
    CLOSE_CANCEL,
    CLOSE_CREATE,
    CLOSE_OUTSIDE,
    CLOSE_REASONS,
    CLOSE_SELECT,
    CatalogSnapshot,
    PickerState,
)
from invoice_builder.utils import visible_items

LOG = logs.logger(__file__)

# Component ids shared by the layout and the event dispatcher. Components
# that are not always rendered use pattern-matching ids ({"type", "index"}).
PICKER_TRIGGER = "picker-trigger"
PICKER_CLOSE = "picker-close"
PICKER_BACKDROP = "picker-backdrop"
PICKER_SEARCH = "picker-search"
PICKER_VIEW_TOGGLE = "picker-view-toggle"
PICKER_CLEAR_ALL = "picker-clear-all"
PICKER_CREATE_NEW = "picker-create-new"
PICKER_ITEM = "picker-item"
PICKER_TYPE = "picker-type"
PICKER_CATEGORY = "picker-category"
PICKER_CHIP_REMOVE = "picker-chip-remove"


class ItemPicker:
    """
    Controller for one item picker instance.

    Attributes:
        state: Current PickerState.
        snapshot: Catalog snapshot the picker filters.
        categories: Categories offered by the category facet.
    """

    def __init__(
        self,
        on_item_select: Callable[[CatalogItem], None],
        state: PickerState | None = None,
        snapshot: CatalogSnapshot | None = None,
        categories: Sequence[Category] = (),
        on_create_new_item: Callable[[], None] | None = None,
    ) -> None:
        """
        Initialize the picker.

        Args:
            on_item_select: Called with the chosen item.
            state: Stored state to continue from.
            snapshot: Catalog snapshot to present.
            categories: Categories for the category facet.
            on_create_new_item: Optional handler; when None the "create
                new" affordance is not offered at all.
        """
        self.on_item_select = on_item_select
        self.on_create_new_item = on_create_new_item
        self.state = state or PickerState()
        self.snapshot = snapshot or CatalogSnapshot()
        self.categories = list(categories)

    @property
    def is_open(self) -> bool:
        return self.state.is_open

    @property
    def can_create_new(self) -> bool:
        return self.on_create_new_item is not None

    @property
    def trigger_disabled(self) -> bool:
        """The trigger is disabled only while a fetch is outstanding."""
        return self.snapshot.is_loading

    @property
    def visible_items(self) -> list[CatalogItem]:
        """Return the filtered items in catalog order."""
        return visible_items(self.snapshot.items, self.state)

    def open(self) -> None:
        self.state = self.state.opened()

    def close(self, reason: str = CLOSE_CANCEL) -> None:
        """Close the picker; search and chips are always cleared."""
        if reason not in CLOSE_REASONS:
            raise ValueError(f"Unknown close reason: {reason}")
        LOG.debug("Picker closed - reason:%s", reason)
        self.state = self.state.closed()

    def select(self, item: CatalogItem) -> None:
        """Emit the chosen item to the caller, then close."""
        self.on_item_select(item)
        self.close(CLOSE_SELECT)

    def request_create_new(self) -> bool:
        """
        Invoke the create-new handler and close.

        Returns:
            False when no handler was supplied; nothing happens then.
        """
        if self.on_create_new_item is None:
            return False
        self.on_create_new_item()
        self.close(CLOSE_CREATE)
        return True

    def set_search(self, term: str | None) -> None:
        self.state = self.state.with_search(term)

    def set_type(self, item_type: str) -> None:
        self.state = self.state.with_type(item_type)

    def set_category(self, category_id: str) -> None:
        self.state = self.state.with_category(category_id)

    def toggle_view(self) -> None:
        self.state = self.state.toggled_view()

    def toggle_filter(self, label: str) -> None:
        self.state = self.state.toggled_filter(label)

    def pin_search(self) -> None:
        """Pin the current search text as a removable chip."""
        label = self.state.search_term.strip()
        if label and label not in self.state.active_filters:
            self.toggle_filter(label)

    def clear_all(self) -> None:
        self.state = self.state.cleared()

    def find_item(self, item_id: str) -> CatalogItem | None:
        for item in self.snapshot.items:
            if item.id == item_id:
                return item
        return None

    def handle_event(self, trigger: Any, value: Any = None, prop: str = "") -> bool:
        """
        Apply the event raised by a picker component.

        Args:
            trigger: The triggering component id (a string, or a dict with
                "type" and "index" for pattern-matching ids).
            value: The triggering property value (n_clicks, input value).
            prop: The triggering property name; "n_submit" on the search
                input pins the search text.

        Returns:
            True when the event changed something.
        """
        if isinstance(trigger, dict):
            return self._handle_indexed(trigger.get("type"), trigger.get("index"), value)
        if trigger == PICKER_SEARCH:
            if prop == "n_submit":
                self.pin_search()
            else:
                self.set_search(value)
            return True
        # Remaining events are clicks; a falsy click count means the
        # component was just (re)rendered, not clicked.
        if not value:
            return False
        if trigger == PICKER_TRIGGER:
            if self.trigger_disabled:
                return False
            self.open()
        elif trigger == PICKER_CLOSE:
            self.close(CLOSE_CANCEL)
        elif trigger == PICKER_BACKDROP:
            self.close(CLOSE_OUTSIDE)
        elif trigger == PICKER_VIEW_TOGGLE:
            self.toggle_view()
        else:
            return False
        return True

    def _handle_indexed(self, kind: str | None, index: Any, value: Any) -> bool:
        if not value:
            return False
        if kind == PICKER_ITEM:
            item = self.find_item(str(index))
            if item is None:
                LOG.warning("Selected item not in catalog: %s", index)
                return False
            self.select(item)
        elif kind == PICKER_TYPE:
            self.set_type(index)
        elif kind == PICKER_CATEGORY:
            self.set_category(index)
        elif kind == PICKER_CHIP_REMOVE:
            self.toggle_filter(index)
        elif kind == PICKER_CLEAR_ALL:
            self.clear_all()
        elif kind == PICKER_CREATE_NEW:
            return self.request_create_new()
        else:
            return False
        return True
