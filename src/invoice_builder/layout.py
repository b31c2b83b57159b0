"""
Layout helpers for the Invoice Builder Dash application.

This module defines the root layout structure including:
- URL tracking, used as the mount signal for the viewport classifier
- dcc.Store components for state management
- Invoice details, line items with the item picker, adjustments and totals
- Inline item and customer forms
- Catalog item and customer management tables

The layout renders immediately with the picker trigger disabled. Catalog
data is fetched in two steps that fire on mount because
catalog-refetch-token starts with a value: begin_catalog_refresh marks the
snapshot loading, then fetch_catalog applies the response.
"""

import uuid
from typing import Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from invoice_builder.components.forms import build_customer_form, build_item_form
from invoice_builder.components.invoice_draft import (
    build_adjustments,
    build_draft_details,
    build_line_items,
    build_totals,
)
from invoice_builder.components.item_picker import build_item_picker
from invoice_builder.components.management import build_management_cards
from invoice_builder.models.catalog import Category, serialize_categories
from invoice_builder.models.common import CatalogSnapshot, PickerState
from invoice_builder.models.invoice import InvoiceDraft, serialize_draft

APP_TITLE = "Create Invoice"
APP_SUBTITLE = "Build an invoice from your catalog of products and services."


def build_layout(
    categories: Sequence[Category],
    can_create_new: bool = True,
    draft: InvoiceDraft | None = None,
    session_id: str | None = None,
) -> html.Div:
    """
    Build the root layout for the Invoice Builder application.

    Args:
        categories: Categories offered by the picker's category facet.
        can_create_new: Whether the picker offers "Create New Item".
        draft: Draft to start from; a blank draft when omitted.
        session_id: Key for this page load; generated when omitted.

    Returns:
        Root html.Div containing the complete application layout.
    """
    draft = draft or InvoiceDraft()
    return html.Div(
        className="app-shell",
        children=[
            # Mount signal for the viewport classifier
            dcc.Location(id="url", refresh=False),
            # Per page load key for the server-side catalog request ledger
            dcc.Store(id="session-id", data=session_id or uuid.uuid4().hex),
            # Serialized CatalogSnapshot; loading until the first fetch lands
            dcc.Store(id="catalog-store", data=CatalogSnapshot().to_dict()),
            # Incremented to force a catalog refetch
            dcc.Store(id="catalog-refetch-token", data=0),
            # {"token", "request_id"} of the fetch in flight
            dcc.Store(id="catalog-request", data=None),
            # Categories for the facet row
            dcc.Store(id="category-store", data=serialize_categories(categories)),
            # Serialized PickerState
            dcc.Store(id="picker-state", data=PickerState().to_dict()),
            # "narrow" or "wide", written by a clientside callback
            dcc.Store(id="viewport-store", data="wide"),
            # Latest picked item, consumed by the draft callback
            dcc.Store(id="picker-selection", data=None),
            # Incremented when the picker asks for a new item
            dcc.Store(id="picker-create-request", data=0),
            # Serialized InvoiceDraft
            dcc.Store(id="draft-store", data=serialize_draft(draft)),
            # Incremented to reload the customer dropdown and table
            dcc.Store(id="customer-refresh-token", data=0),
            # Serialized customers behind the dropdown and table
            dcc.Store(id="customer-store", data=[]),
            # Id of the record an inline form is editing; None when creating
            dcc.Store(id="item-form-editing", data=None),
            dcc.Store(id="customer-form-editing", data=None),
            # Customer awaiting delete confirmation
            dcc.Store(id="customer-delete-pending", data=None),
            html.Div(
                className="app-container",
                children=[
                    _build_page_header(),
                    html.Div(id="draft-banner"),
                    build_draft_details(draft),
                    build_customer_form(),
                    _build_line_items_card(categories, can_create_new, draft),
                    build_item_form(categories),
                    html.Div(className="card", children=build_adjustments(draft)),
                    html.Div(
                        id="draft-totals",
                        className="card",
                        children=build_totals(draft.totals()),
                    ),
                    html.Div(
                        className="page-actions",
                        children=[
                            html.Button(
                                id="draft-save",
                                className="button primary gap",
                                n_clicks=0,
                                children=[
                                    DashIconify(icon="lucide:save", className="button-icon"),
                                    "Save Invoice",
                                ],
                            )
                        ],
                    ),
                    build_management_cards(),
                ],
            ),
        ],
    )


def _build_page_header() -> html.Div:
    """Return the hero text area at the top of the page."""
    return html.Div(
        className="page-header",
        children=[html.H1(APP_TITLE), html.P(APP_SUBTITLE)],
    )


def _build_line_items_card(
    categories: Sequence[Category], can_create_new: bool, draft: InvoiceDraft
) -> html.Div:
    return html.Div(
        className="card",
        children=[
            html.Div(
                className="card-header",
                children=[
                    html.H3("Line Items"),
                    build_item_picker(categories, can_create_new=can_create_new),
                ],
            ),
            html.Div(
                id="draft-line-items",
                children=build_line_items(draft.line_items, draft.currency),
            ),
        ],
    )
