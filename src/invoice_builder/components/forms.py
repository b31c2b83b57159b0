"""
Inline forms for creating and editing catalog items and customers.

Both forms are rendered hidden inside the create-invoice page and shown by
callbacks, either blank or prefilled from the record being edited. Field
ids are prefixed with the form name ("item-form-", "customer-form-") so
the callbacks can collect values by field name.
"""

from typing import Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from invoice_builder.models.catalog import PRODUCT, SERVICE, CatalogItem, Category
from invoice_builder.models.customer import DEFAULT_COUNTRY, Customer

NEW_ITEM_TITLE = "New Item"
EDIT_ITEM_TITLE = "Edit Item"
NEW_CUSTOMER_TITLE = "New Customer"
EDIT_CUSTOMER_TITLE = "Edit Customer"

ITEM_FIELDS = (
    "name",
    "description",
    "type",
    "category_id",
    "sale_price_enabled",
    "sale_price",
)
CUSTOMER_FIELDS = (
    "name",
    "email",
    "phone",
    "address",
    "city",
    "state",
    "zip",
    "country",
    "is_vip",
)


def form_class(visible: bool) -> str:
    """Return the class toggling an inline form card."""
    return "card inline-form" if visible else "card inline-form hidden"


def build_item_form(categories: Sequence[Category]) -> html.Div:
    """Return the hidden item form for new and edited items."""
    return html.Div(
        id="item-form",
        className=form_class(False),
        children=[
            _form_header("lucide:package-plus", NEW_ITEM_TITLE, "item-form-title"),
            html.Div(
                className="form-grid",
                children=[
                    _text_field("item-form", "name", "Name", "Item name"),
                    _text_field("item-form", "description", "Description", ""),
                    _labeled(
                        "Type",
                        dcc.RadioItems(
                            id="item-form-type",
                            options=[
                                {"label": "Product", "value": PRODUCT},
                                {"label": "Service", "value": SERVICE},
                            ],
                            value=PRODUCT,
                            inline=True,
                        ),
                    ),
                    _labeled(
                        "Category",
                        dcc.Dropdown(
                            id="item-form-category_id",
                            options=build_category_options(categories),
                            placeholder="No category",
                            className="dropdown",
                        ),
                    ),
                    _labeled(
                        "New Category",
                        html.Div(
                            className="inline-add",
                            children=[
                                dcc.Input(
                                    id="item-form-new-category",
                                    type="text",
                                    placeholder="Category name",
                                    className="text-input",
                                ),
                                html.Button(
                                    id="item-form-add-category",
                                    className="button ghost gap",
                                    n_clicks=0,
                                    children=[
                                        DashIconify(
                                            icon="lucide:plus", className="button-icon"
                                        ),
                                        "Add",
                                    ],
                                ),
                            ],
                        ),
                    ),
                    _labeled(
                        "Sale Info",
                        dcc.Checklist(
                            id="item-form-sale_price_enabled",
                            options=[{"label": "Sell this item", "value": "enabled"}],
                            value=[],
                        ),
                    ),
                    _labeled(
                        "Sale Price",
                        dcc.Input(
                            id="item-form-sale_price",
                            type="number",
                            min=0,
                            step=0.01,
                            className="text-input",
                        ),
                    ),
                ],
            ),
            html.Ul(id="item-form-errors", className="form-errors"),
            _form_actions("item-form"),
        ],
    )


def build_customer_form() -> html.Div:
    """Return the hidden customer form for new and edited customers."""
    return html.Div(
        id="customer-form",
        className=form_class(False),
        children=[
            _form_header("lucide:user-plus", NEW_CUSTOMER_TITLE, "customer-form-title"),
            html.Div(
                className="form-grid",
                children=[
                    _text_field("customer-form", "name", "Name", "Customer name"),
                    _text_field(
                        "customer-form", "email", "Email", "name@example.com", "email"
                    ),
                    _text_field("customer-form", "phone", "Phone", ""),
                    _text_field("customer-form", "address", "Address", ""),
                    _text_field("customer-form", "city", "City", ""),
                    _text_field("customer-form", "state", "State", ""),
                    _text_field("customer-form", "zip", "Zip", ""),
                    _text_field("customer-form", "country", "Country", DEFAULT_COUNTRY),
                    _labeled(
                        "VIP",
                        dcc.Checklist(
                            id="customer-form-is_vip",
                            options=[{"label": "VIP customer", "value": "vip"}],
                            value=[],
                        ),
                    ),
                ],
            ),
            html.Ul(id="customer-form-errors", className="form-errors"),
            _form_actions("customer-form"),
        ],
    )


def build_category_options(categories: Sequence[Category]) -> list[dict]:
    return [{"label": c.name, "value": c.id} for c in categories]


def item_form_values(item: CatalogItem | None = None) -> dict:
    """
    Return the item form's field values keyed by field name.

    A blank form is returned when item is None.
    """
    if item is None:
        return {
            "name": None,
            "description": None,
            "type": PRODUCT,
            "category_id": None,
            "sale_price_enabled": [],
            "sale_price": None,
        }
    return {
        "name": item.name,
        "description": item.description,
        "type": item.type,
        "category_id": item.category_id,
        "sale_price_enabled": ["enabled"] if item.sale_price_enabled else [],
        "sale_price": item.sale_price,
    }


def customer_form_values(customer: Customer | None = None) -> dict:
    """Return the customer form's field values, blank when customer is None."""
    if customer is None:
        return {
            "name": None,
            "email": None,
            "phone": None,
            "address": None,
            "city": None,
            "state": None,
            "zip": None,
            "country": None,
            "is_vip": [],
        }
    return {
        "name": customer.name,
        "email": customer.email,
        "phone": customer.phone,
        "address": customer.address,
        "city": customer.city,
        "state": customer.state,
        "zip": customer.zip,
        "country": customer.country,
        "is_vip": ["vip"] if customer.is_vip else [],
    }


def build_form_errors(errors: dict[str, str]) -> list[html.Li]:
    """Return one list entry per invalid field."""
    return [
        html.Li(f"{field.replace('_', ' ').capitalize()}: {message}")
        if field != "form"
        else html.Li(message)
        for field, message in errors.items()
    ]


def _form_header(icon: str, title: str, title_id: str) -> html.Div:
    return html.Div(
        className="title-row",
        children=[
            DashIconify(icon=icon, className="title-icon"),
            html.H3(title, id=title_id),
        ],
    )


def _form_actions(prefix: str) -> html.Div:
    return html.Div(
        className="form-actions",
        children=[
            html.Button(
                "Cancel", id=f"{prefix}-cancel", className="button ghost", n_clicks=0
            ),
            html.Button(
                "Save", id=f"{prefix}-save", className="button primary", n_clicks=0
            ),
        ],
    )


def _text_field(
    prefix: str, name: str, label: str, placeholder: str, input_type: str = "text"
) -> html.Div:
    return _labeled(
        label,
        dcc.Input(
            id=f"{prefix}-{name}",
            type=input_type,
            placeholder=placeholder,
            className="text-input",
        ),
    )


def _labeled(label: str, control) -> html.Div:
    return html.Div(
        className="form-field",
        children=[html.Label(label, className="label"), control],
    )
