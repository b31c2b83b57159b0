"""
Item picker component.

Builds the picker used to add catalog items to an invoice draft:

- Trigger button (icon-only or labeled), disabled while the catalog loads
- Overlay presented as a centered dialog on wide viewports and as a
  bottom drawer on narrow ones
- Search input, grid/list toggle, type and category facets
- Removable filter chips with a "Clear all" action
- Results as a two-column card grid or a compact list
- Optional "Create New Item" footer, only when the host supports it

The static shell is built once by build_item_picker(); the dynamic regions
(facets, chips, results) are re-rendered by callbacks through the
build_* helpers below, which are pure functions of the picker state.
"""

from typing import Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from invoice_builder.models.catalog import ALL, PRODUCT, SERVICE, CatalogItem, Category
from invoice_builder.models.common import VIEW_GRID, CatalogSnapshot, PickerState
from invoice_builder.state import (
    PICKER_BACKDROP,
    PICKER_CATEGORY,
    PICKER_CHIP_REMOVE,
    PICKER_CLEAR_ALL,
    PICKER_CLOSE,
    PICKER_CREATE_NEW,
    PICKER_ITEM,
    PICKER_SEARCH,
    PICKER_TRIGGER,
    PICKER_TYPE,
    PICKER_VIEW_TOGGLE,
)
from invoice_builder.utils import PICKER_CURRENCY, format_currency

_TYPE_ICONS = {PRODUCT: "lucide:package-2", SERVICE: "lucide:sparkles"}
_DESCRIPTION_LIMIT = 120


def build_item_picker(
    categories: Sequence[Category],
    can_create_new: bool,
    icon_only: bool = False,
) -> html.Div:
    """
    Build the picker shell: trigger plus the (initially hidden) overlay.

    Args:
        categories: Categories for the category facet.
        can_create_new: When False the "Create New Item" footer is omitted
            from the tree entirely.
        icon_only: Render the trigger as an icon button.

    Returns:
        Container div holding the trigger and the overlay.
    """
    state = PickerState()
    surface_children = [
        _build_header(),
        html.Div(
            className="picker-controls",
            children=[
                _build_search_row(state),
                html.Div(
                    id="picker-facets",
                    children=build_facets(state, categories),
                ),
                html.Div(id="picker-chips", children=build_chips(state)),
            ],
        ),
        html.Div(
            id="picker-results",
            className="picker-results",
            children=build_results([], state.view_mode),
        ),
    ]
    if can_create_new:
        surface_children.append(_build_create_new())

    return html.Div(
        className="item-picker",
        children=[
            build_picker_trigger(icon_only=icon_only, disabled=True),
            html.Div(
                id="picker-overlay",
                className=overlay_class(state, narrow=False),
                children=[
                    html.Div(id=PICKER_BACKDROP, className="picker-backdrop", n_clicks=0),
                    html.Div(
                        className="picker-surface",
                        role="dialog",
                        children=surface_children,
                    ),
                ],
            ),
        ],
    )


def build_picker_trigger(icon_only: bool = False, disabled: bool = False) -> html.Button:
    """Return the button that opens the picker."""
    icon = DashIconify(icon="lucide:package-2", className="button-icon")
    return html.Button(
        id=PICKER_TRIGGER,
        className="button primary gap picker-trigger",
        disabled=disabled,
        n_clicks=0,
        title="Select Item",
        children=[icon] if icon_only else [icon, html.Span("Select Item")],
    )


def overlay_class(state: PickerState, narrow: bool) -> str:
    """
    Return the overlay class for the current state and viewport.

    The presentation mode carries no state of its own: it only changes
    how an open picker is drawn.
    """
    presentation = "drawer" if narrow else "dialog"
    visibility = "open" if state.is_open else "hidden"
    return f"picker-overlay {presentation} {visibility}"


def build_view_toggle_icon(view_mode: str) -> DashIconify:
    """Return the icon for switching to the other view mode."""
    icon = "lucide:list" if view_mode == VIEW_GRID else "lucide:grid-2x2"
    return DashIconify(icon=icon, className="button-icon")


def build_facets(state: PickerState, categories: Sequence[Category]) -> list:
    """Return the type quick filters and the category filter row."""
    type_buttons = [
        _facet_button(PICKER_TYPE, ALL, "All", state.selected_type),
        _facet_button(
            PICKER_TYPE, PRODUCT, "Products", state.selected_type, _TYPE_ICONS[PRODUCT]
        ),
        _facet_button(
            PICKER_TYPE, SERVICE, "Services", state.selected_type, _TYPE_ICONS[SERVICE]
        ),
    ]
    category_buttons = [
        _facet_button(PICKER_CATEGORY, ALL, "All Categories", state.selected_category)
    ]
    category_buttons.extend(
        _facet_button(PICKER_CATEGORY, c.id, c.name, state.selected_category)
        for c in categories
    )
    return [
        html.Div(className="facet-row", children=type_buttons),
        html.Div(className="facet-row scroll-x", children=category_buttons),
    ]


def build_chips(state: PickerState) -> list:
    """Return the active filter chips, or nothing when there are none."""
    if not state.active_filters:
        return []
    chips = [
        html.Span(
            className="badge secondary chip",
            children=[
                html.Span(label),
                html.Span(
                    id={"type": PICKER_CHIP_REMOVE, "index": label},
                    className="chip-remove",
                    n_clicks=0,
                    title=f"Remove {label}",
                    children=DashIconify(icon="lucide:x", className="chip-icon"),
                ),
            ],
        )
        for label in state.active_filters
    ]
    chips.append(
        html.Button(
            "Clear all",
            id={"type": PICKER_CLEAR_ALL, "index": "chips"},
            className="button ghost small",
            n_clicks=0,
        )
    )
    return [
        html.Div(
            className="chip-row",
            children=[
                DashIconify(icon="lucide:filter", className="muted-icon"),
                html.Div(className="chip-list", children=chips),
            ],
        )
    ]


def build_results(
    items: Sequence[CatalogItem],
    view_mode: str,
    snapshot: CatalogSnapshot | None = None,
) -> html.Div:
    """
    Return the filtered items in the requested layout.

    Args:
        items: Visible items, already filtered and in catalog order.
        view_mode: "grid" for cards, "list" for compact rows.
        snapshot: Optional snapshot used to show the fetch error.
    """
    if not items:
        message = "No items found."
        if snapshot is not None and snapshot.has_error:
            message = snapshot.error
        return html.Div(
            className="picker-empty",
            children=[
                DashIconify(icon="lucide:package-x", className="empty-icon"),
                html.P(message, className="muted"),
            ],
        )
    if view_mode == VIEW_GRID:
        return html.Div(
            className="item-grid", children=[_item_card(item) for item in items]
        )
    return html.Div(className="item-list", children=[_item_row(item) for item in items])


def _build_header() -> html.Div:
    return html.Div(
        className="picker-header",
        children=[
            html.Div(
                children=[
                    html.H3("Select an Item"),
                    html.P(
                        "Search for an existing item or create a new one.",
                        className="muted",
                    ),
                ]
            ),
            html.Button(
                id=PICKER_CLOSE,
                className="button ghost icon",
                n_clicks=0,
                title="Close",
                children=DashIconify(icon="lucide:x", className="button-icon"),
            ),
        ],
    )


def _build_search_row(state: PickerState) -> html.Div:
    return html.Div(
        className="search-row",
        children=[
            html.Div(
                className="input-with-icon",
                children=[
                    DashIconify(icon="lucide:search", className="input-icon"),
                    dcc.Input(
                        id=PICKER_SEARCH,
                        type="text",
                        value=state.search_term,
                        placeholder="Search items...",
                        className="search-input",
                        n_submit=0,
                    ),
                ],
            ),
            html.Button(
                id=PICKER_VIEW_TOGGLE,
                className="button outline icon",
                n_clicks=0,
                title="Toggle view",
                children=build_view_toggle_icon(state.view_mode),
            ),
        ],
    )


def _build_create_new() -> html.Div:
    return html.Div(
        className="picker-footer",
        children=[
            html.Button(
                id={"type": PICKER_CREATE_NEW, "index": "footer"},
                className="button ghost gap full-width",
                n_clicks=0,
                children=[
                    DashIconify(icon="lucide:plus-circle", className="button-icon"),
                    "Create New Item",
                ],
            )
        ],
    )


def _facet_button(
    kind: str, value: str, label: str, selected: str, icon: str | None = None
) -> html.Button:
    """Return a facet toggle, filled when it is the selected value."""
    variant = "primary" if value == selected else "outline"
    children = [label]
    if icon:
        children.insert(0, DashIconify(icon=icon, className="facet-icon"))
    return html.Button(
        id={"type": kind, "index": value},
        className=f"button small gap {variant}",
        n_clicks=0,
        children=children,
    )


def _item_card(item: CatalogItem) -> html.Div:
    """Return the grid card: icon, name, category, price and description."""
    title_children = [html.H4(item.name, className="item-name")]
    if item.category_name:
        title_children.append(_category_badge(item.category_name))

    header = [
        html.Div(
            className="item-title",
            children=[
                _type_icon(item),
                html.Div(children=title_children),
            ],
        )
    ]
    if item.display_price is not None:
        header.append(html.Div(_price(item), className="item-price"))

    children = [html.Div(className="item-card-header", children=header)]
    if item.description:
        children.append(
            html.P(_truncate(item.description), className="item-description muted")
        )
    return html.Div(
        id={"type": PICKER_ITEM, "index": item.id},
        className="item-card",
        n_clicks=0,
        children=children,
    )


def _item_row(item: CatalogItem) -> html.Div:
    """Return the compact list row: icon, name, category and price."""
    meta = []
    if item.category_name:
        meta.append(_category_badge(item.category_name))
    if item.display_price is not None:
        meta.append(html.Span(_price(item)))
    return html.Div(
        id={"type": PICKER_ITEM, "index": item.id},
        className="item-row",
        n_clicks=0,
        children=[
            _type_icon(item),
            html.Div(
                children=[
                    html.Div(item.name, className="item-name"),
                    html.Div(className="item-meta muted", children=meta),
                ]
            ),
        ],
    )


def _type_icon(item: CatalogItem) -> DashIconify:
    icon = _TYPE_ICONS.get(item.type, _TYPE_ICONS[PRODUCT])
    return DashIconify(icon=icon, className="type-icon")


def _category_badge(name: str) -> html.Span:
    return html.Span(name, className="badge secondary")


def _price(item: CatalogItem) -> str:
    # TODO: format in the invoice's currency once the picker receives it
    return format_currency(item.display_price, PICKER_CURRENCY)


def _truncate(text: str) -> str:
    if len(text) <= _DESCRIPTION_LIMIT:
        return text
    return text[: _DESCRIPTION_LIMIT - 1].rstrip() + "…"
