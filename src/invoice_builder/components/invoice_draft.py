"""
Invoice draft components.

Renders the create-invoice form around the item picker:

- Details card: invoice number, customer, dates, currency, notes, terms
- Line items: one row per picked item with quantity input and remove button
- Totals: subtotal, tax, additional charges, discount and total, in the
  invoice's own currency

Line rows use pattern-matching ids so callbacks can address a single line.
"""

from typing import Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from invoice_builder.models.customer import Customer
from invoice_builder.models.invoice import DraftLineItem, InvoiceDraft, Totals
from invoice_builder.utils import format_currency

CURRENCIES = ["USD", "NZD", "AUD", "EUR", "GBP", "CAD"]

LINE_QUANTITY = "line-quantity"
LINE_REMOVE = "line-remove"


def build_draft_details(draft: InvoiceDraft) -> html.Div:
    """Return the invoice header fields card."""
    return html.Div(
        className="card draft-details",
        children=[
            html.Div(
                className="form-grid",
                children=[
                    _field(
                        "Invoice Number",
                        dcc.Input(
                            id="draft-invoice-number",
                            type="text",
                            value=draft.invoice_number,
                            placeholder="INV-0001",
                            className="text-input",
                            debounce=True,
                        ),
                    ),
                    _field(
                        "Customer",
                        html.Div(
                            className="inline-field",
                            children=[
                                dcc.Dropdown(
                                    id="draft-customer",
                                    options=[],
                                    value=draft.customer_id,
                                    placeholder="Select a customer",
                                    className="dropdown",
                                ),
                                html.Button(
                                    id="customer-form-open",
                                    className="button outline icon",
                                    n_clicks=0,
                                    title="Add customer",
                                    children=DashIconify(
                                        icon="lucide:user-plus",
                                        className="button-icon",
                                    ),
                                ),
                            ],
                        ),
                    ),
                    _field(
                        "Invoice Date",
                        dcc.DatePickerSingle(
                            id="draft-issue-date",
                            date=draft.issue_date.isoformat(),
                        ),
                    ),
                    _field(
                        "Due Date",
                        dcc.DatePickerSingle(
                            id="draft-due-date",
                            date=draft.due_date.isoformat() if draft.due_date else None,
                        ),
                    ),
                    _field(
                        "Currency",
                        dcc.Dropdown(
                            id="draft-currency",
                            options=CURRENCIES,
                            value=draft.currency,
                            clearable=False,
                            className="dropdown",
                        ),
                    ),
                ],
            ),
        ],
    )


def build_customer_options(customers: Sequence[Customer]) -> list[dict]:
    """Return dropdown options for the customer selector."""
    return [{"label": c.label, "value": c.id} for c in customers]


def build_line_items(lines: Sequence[DraftLineItem], currency: str) -> html.Div:
    """Return the line item rows, or the empty hint."""
    if not lines:
        return html.Div(
            className="line-items-empty muted",
            children="No items yet. Use Select Item to add one.",
        )
    return html.Div(
        className="line-items-list",
        children=[_line_row(line, currency) for line in lines],
    )


def build_adjustments(draft: InvoiceDraft) -> html.Div:
    """Return the tax, charges, discount, notes and terms inputs."""
    return html.Div(
        className="form-grid adjustments",
        children=[
            _field("Tax Rate (%)", _number_input("draft-tax-rate", draft.tax_rate)),
            _field(
                "Additional Charges",
                _number_input("draft-additional-charges", draft.additional_charges),
            ),
            _field("Discount", _number_input("draft-discount", draft.discount)),
            _field(
                "Notes",
                dcc.Textarea(id="draft-notes", value=draft.notes, className="textarea"),
            ),
            _field(
                "Terms",
                dcc.Textarea(id="draft-terms", value=draft.terms, className="textarea"),
            ),
        ],
    )


def build_totals(totals: Totals) -> html.Div:
    """Return the totals footer."""
    return html.Div(
        className="totals",
        children=[
            _totals_row("Subtotal", totals.as_money(totals.subtotal)),
            _totals_row("Tax", totals.as_money(totals.tax)),
            _totals_row(
                "Additional Charges", totals.as_money(totals.additional_charges)
            ),
            _totals_row("Discount", f"-{totals.as_money(totals.discount)}"),
            html.Div(className="divider subtle"),
            _totals_row("Total", totals.as_money(totals.total), emphasize=True),
        ],
    )


def build_banner(message: str | None, error: bool = False) -> html.Div | None:
    """Return an inline status banner, or None when there is nothing to say."""
    if not message:
        return None
    return html.Div(
        className="banner error" if error else "banner success",
        children=[
            DashIconify(
                icon="lucide:alert-circle" if error else "lucide:check-circle",
                className="banner-icon",
            ),
            html.Span(message),
        ],
    )


def _line_row(line: DraftLineItem, currency: str) -> html.Div:
    return html.Div(
        className="line-item-row",
        children=[
            html.Span(line.description, className="line-description"),
            dcc.Input(
                id={"type": LINE_QUANTITY, "index": line.line_id},
                type="number",
                min=0,
                value=line.quantity,
                className="quantity-input",
                debounce=True,
            ),
            html.Span(format_currency(line.unit_price, currency), className="muted"),
            html.Span(format_currency(line.amount, currency), className="line-amount"),
            html.Button(
                id={"type": LINE_REMOVE, "index": line.line_id},
                className="button ghost icon",
                n_clicks=0,
                title="Remove line",
                children=DashIconify(icon="lucide:trash-2", className="button-icon"),
            ),
        ],
    )


def _number_input(component_id: str, value: float) -> dcc.Input:
    return dcc.Input(
        id=component_id,
        type="number",
        min=0,
        value=value,
        className="text-input",
        debounce=True,
    )


def _field(label: str, control) -> html.Div:
    return html.Div(
        className="form-field",
        children=[html.Label(label, className="label"), control],
    )


def _totals_row(label: str, value: str, emphasize: bool = False) -> html.Div:
    """Return a row within the totals section."""
    classes = "totals-row"
    if emphasize:
        classes += " emphasize"
    return html.Div(
        className=classes,
        children=[html.Span(label), html.Span(value)],
    )
