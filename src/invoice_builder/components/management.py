"""
Catalog and customer management cards.

Two tables sit below the invoice form:

- Catalog Items: every item in the current catalog snapshot, each with an
  Edit button that opens the item form prefilled
- Customers: name, email, phone and location, with Edit and Delete actions;
  Delete is confirmed through a dialog before anything is removed

Row buttons use pattern-matching ids keyed by the record id.
"""

from typing import Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from invoice_builder.models.catalog import CatalogItem
from invoice_builder.models.customer import Customer
from invoice_builder.utils import PICKER_CURRENCY, format_currency

ITEM_EDIT = "item-edit"
CUSTOMER_EDIT = "customer-edit"
CUSTOMER_DELETE = "customer-delete"

DELETE_CONFIRM_MESSAGE = (
    "Are you sure you want to delete this customer? This action cannot be undone."
)


def build_management_cards() -> html.Div:
    """Return the catalog and customer cards with empty bodies."""
    return html.Div(
        className="management",
        children=[
            html.Div(
                className="card",
                children=[
                    _card_header("lucide:package", "Catalog Items"),
                    html.Div(id="catalog-manager"),
                ],
            ),
            html.Div(
                className="card",
                children=[
                    _card_header("lucide:users", "Customers"),
                    html.Div(id="customer-table"),
                ],
            ),
            dcc.ConfirmDialog(
                id="customer-delete-confirm", message=DELETE_CONFIRM_MESSAGE
            ),
        ],
    )


def build_catalog_manager(
    items: Sequence[CatalogItem], is_loading: bool = False
) -> html.Div | html.Table:
    """Return the catalog items table."""
    if is_loading:
        return html.Div("Loading items...", className="muted")
    if not items:
        return html.Div("No catalog items yet.", className="muted")
    return _table(
        ["Name", "Type", "Category", "Price", ""],
        [
            [
                item.name,
                item.type.capitalize(),
                item.category_name or "-",
                format_currency(item.display_price, PICKER_CURRENCY)
                if item.display_price is not None
                else "-",
                _row_button(ITEM_EDIT, item.id, "lucide:pencil", "Edit item"),
            ]
            for item in items
        ],
    )


def build_customer_table(customers: Sequence[Customer]) -> html.Div | html.Table:
    """Return the customers table with edit and delete actions."""
    if not customers:
        return html.Div("No customers found.", className="muted")
    return _table(
        ["Name", "Email", "Phone", "Location", "Actions"],
        [
            [
                customer.label,
                customer.email or "-",
                customer.phone or "-",
                customer_location(customer) or "-",
                html.Div(
                    className="row-actions",
                    children=[
                        _row_button(
                            CUSTOMER_EDIT, customer.id, "lucide:pencil", "Edit customer"
                        ),
                        _row_button(
                            CUSTOMER_DELETE,
                            customer.id,
                            "lucide:trash-2",
                            "Delete customer",
                        ),
                    ],
                ),
            ]
            for customer in customers
        ],
    )


def customer_location(customer: Customer) -> str:
    """Join city and state, skipping whichever is missing."""
    return ", ".join(part for part in (customer.city, customer.state) if part)


def _card_header(icon: str, title: str) -> html.Div:
    return html.Div(
        className="title-row",
        children=[DashIconify(icon=icon, className="title-icon"), html.H3(title)],
    )


def _row_button(kind: str, record_id: str, icon: str, title: str) -> html.Button:
    return html.Button(
        id={"type": kind, "index": record_id},
        className="button ghost icon",
        n_clicks=0,
        title=title,
        children=DashIconify(icon=icon, className="button-icon"),
    )


def _table(headers: Sequence[str], rows: Sequence[Sequence]) -> html.Table:
    return html.Table(
        className="data-table",
        children=[
            html.Thead(html.Tr([html.Th(header) for header in headers])),
            html.Tbody([html.Tr([html.Td(cell) for cell in row]) for row in rows]),
        ],
    )
