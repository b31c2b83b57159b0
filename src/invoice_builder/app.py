"""
Dash application entry point for the Invoice Builder UI.

This module initializes the Dash app, serves the create-invoice layout and
registers the callbacks that connect the item picker, the catalog cache,
the invoice draft and the catalog and customer management tables.

Catalog refreshes run in two steps. begin_catalog_refresh publishes the
loading snapshot so the picker trigger disables at once, and fetch_catalog
applies the response only while its request id is still the latest one
the ledger issued for the page session.
"""

import os
import uuid
from pathlib import Path
from typing import Any

from dash import ALL, Dash, Input, Output, State, ctx, html, no_update
from dash.exceptions import PreventUpdate
from pydantic import ValidationError

from invoice_builder.components.forms import (
    CUSTOMER_FIELDS,
    EDIT_CUSTOMER_TITLE,
    EDIT_ITEM_TITLE,
    ITEM_FIELDS,
    NEW_CUSTOMER_TITLE,
    NEW_ITEM_TITLE,
    build_category_options,
    build_form_errors,
    customer_form_values,
    form_class,
    item_form_values,
)
from invoice_builder.components.invoice_draft import (
    LINE_QUANTITY,
    LINE_REMOVE,
    build_banner,
    build_customer_options,
    build_line_items,
    build_totals,
)
from invoice_builder.components.item_picker import (
    build_chips,
    build_facets,
    build_results,
    build_view_toggle_icon,
    overlay_class,
)
from invoice_builder.components.management import (
    CUSTOMER_DELETE,
    CUSTOMER_EDIT,
    ITEM_EDIT,
    build_catalog_manager,
    build_customer_table,
)
from invoice_builder.layout import APP_TITLE, build_layout
from invoice_builder.lib import logs
from invoice_builder.lib.caches import CatalogCache, RequestLedger
from invoice_builder.lib.clients import BackendError
from invoice_builder.models.catalog import (
    PRODUCT,
    Category,
    deserialize_categories,
    deserialize_item,
    serialize_categories,
    serialize_item,
)
from invoice_builder.models.common import CatalogSnapshot, PickerState
from invoice_builder.models.customer import deserialize_customers, serialize_customers
from invoice_builder.models.forms import (
    CategoryForm,
    CustomerForm,
    ItemForm,
    form_errors,
)
from invoice_builder.models.invoice import deserialize_draft, serialize_draft
from invoice_builder.services import (
    get_catalog_service,
    get_customer_service,
    get_invoice_service,
)
from invoice_builder.services.catalog_service import CatalogService
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
    ItemPicker,
)

LOG = logs.logger(__file__)

# Configuration from environment
APP_PORT = int(os.getenv("INVOICE_BUILDER_PORT", "8050"))
DEBUG = os.getenv("INVOICE_BUILDER_DEBUG", "false").lower() in {"1", "true", "yes"}
NARROW_BREAKPOINT = 768

_DRAFT_FIELDS = (
    "invoice_number",
    "customer_id",
    "issue_date",
    "due_date",
    "currency",
    "tax_rate",
    "additional_charges",
    "discount",
    "notes",
    "terms",
)

# Latest catalog request id per page session, shared by every worker thread
CATALOG_REQUESTS = RequestLedger()

_assets_path = Path(__file__).resolve().parent / "assets"


def serve_layout() -> html.Div:
    """Build the layout per page load so categories are fresh."""
    try:
        categories = get_catalog_service().get_categories()
    except BackendError as exc:
        LOG.error("Error fetching categories: %s", exc, exc_info=exc)
        categories = []
    return build_layout(categories, can_create_new=True)


def apply_picker_event(
    trigger: Any,
    value: Any,
    prop: str,
    state_data: dict | None,
    catalog_data: dict | None,
    category_data: list | None,
) -> tuple[PickerState, dict | None, bool]:
    """
    Run one picker event against the stored state.

    Returns:
        The next PickerState, the selection payload (or None when nothing
        was picked) and whether "Create New Item" was requested.
    """
    selection: dict = {}
    created: list[bool] = []

    def on_item_select(item) -> None:
        selection.update(item=serialize_item(item), nonce=uuid.uuid4().hex)

    picker = ItemPicker(
        on_item_select=on_item_select,
        state=PickerState.from_dict(state_data),
        snapshot=CatalogSnapshot.from_dict(catalog_data),
        categories=deserialize_categories(category_data),
        on_create_new_item=lambda: created.append(True),
    )
    picker.handle_event(trigger, value, prop)
    return picker.state, selection or None, bool(created)


def apply_draft_event(
    trigger: Any, value: Any, fields: dict[str, Any], stored: dict | None
) -> dict:
    """
    Apply one draft edit and return the serialized draft.

    Args:
        trigger: "picker-selection", a line pattern id, or a field input id.
        value: The triggering property value.
        fields: Current header field values keyed by draft attribute.
        stored: Serialized draft before the edit.
    """
    draft = deserialize_draft(stored)
    if trigger == "picker-selection":
        if value:
            draft = draft.with_item(deserialize_item(value["item"]))
    elif isinstance(trigger, dict) and trigger.get("type") == LINE_REMOVE:
        if value:
            draft = draft.without_line(trigger["index"])
    elif isinstance(trigger, dict) and trigger.get("type") == LINE_QUANTITY:
        if value is not None:
            draft = draft.with_quantity(trigger["index"], float(value))
    else:
        payload = serialize_draft(draft)
        payload.update(fields)
        payload["invoice_number"] = fields.get("invoice_number") or ""
        payload["notes"] = fields.get("notes") or ""
        payload["terms"] = fields.get("terms") or ""
        draft = deserialize_draft(payload)
    return serialize_draft(draft)


def start_catalog_request(
    token: int | None,
    stored: dict | None,
    session: str | None,
    ledger: RequestLedger = CATALOG_REQUESTS,
) -> tuple[dict, dict] | None:
    """
    Mark the stored snapshot loading for a refetch token.

    Returns:
        The loading snapshot and the request handed to the fetch step, or
        None when token is older than the one the snapshot already holds.
    """
    snapshot = CatalogSnapshot.from_dict(stored)
    if snapshot.token is not None and (token or 0) < snapshot.token:
        LOG.info("Skipping stale refetch - token:%s latest:%s", token, snapshot.token)
        return None
    cache = CatalogCache(None, snapshot, ledger, session or "default")
    request_id = cache.begin(token)
    return snapshot.to_dict(), {"token": token, "request_id": request_id}


def complete_catalog_request(
    service: Any,
    request: dict | None,
    stored: dict | None,
    session: str | None,
    ledger: RequestLedger = CATALOG_REQUESTS,
) -> dict | None:
    """
    Fetch the catalog for a started request.

    Returns:
        The settled snapshot, or None when a newer request superseded this one.
    """
    if not request:
        return None
    snapshot = CatalogSnapshot.from_dict(stored)
    snapshot.token = request["token"]
    snapshot.request_id = request["request_id"]
    cache = CatalogCache(service, snapshot, ledger, session or "default")
    if not cache.fetch(request["request_id"]):
        return None
    return snapshot.to_dict()


def item_form_event(
    trigger: Any, value: Any, catalog_data: dict | None
) -> tuple[bool, str | None, dict] | None:
    """
    Resolve an open, edit or cancel event on the item form.

    Returns:
        Whether the form is visible, the id of the item being edited (None
        when creating) and the field values; None leaves the form as is.
    """
    if not value:
        return None
    if trigger == "picker-create-request":
        return True, None, item_form_values()
    if trigger == "item-form-cancel":
        return False, None, item_form_values()
    if isinstance(trigger, dict) and trigger.get("type") == ITEM_EDIT:
        items = CatalogSnapshot.from_dict(catalog_data).items
        item = next((i for i in items if i.id == trigger["index"]), None)
        if item is not None:
            return True, item.id, item_form_values(item)
    return None


def customer_form_event(
    trigger: Any, value: Any, customer_data: list | None
) -> tuple[bool, str | None, dict] | None:
    """Resolve an open, edit or cancel event on the customer form."""
    if not value:
        return None
    if trigger == "customer-form-open":
        return True, None, customer_form_values()
    if trigger == "customer-form-cancel":
        return False, None, customer_form_values()
    if isinstance(trigger, dict) and trigger.get("type") == CUSTOMER_EDIT:
        customers = deserialize_customers(customer_data)
        customer = next((c for c in customers if c.id == trigger["index"]), None)
        if customer is not None:
            return True, customer.id, customer_form_values(customer)
    return None


def add_category(
    service: CatalogService, name: str | None, category_data: list | None
) -> tuple[list[dict], Category]:
    """
    Create a category and append it to the stored categories.

    Raises:
        ValidationError: When name is blank.
        BackendError: When the provider rejects the write.
    """
    form = CategoryForm(name=name or "")
    category = service.create_category(form.name)
    categories = deserialize_categories(category_data) + [category]
    return serialize_categories(categories), category


def _form_outputs(visible: bool, editing: str | None, values: dict, fields, titles):
    """Flatten a form event into the open_*_form output tuple."""
    return (
        form_class(visible),
        titles[1] if editing else titles[0],
        editing,
        [],
        *(values[field] for field in fields),
    )


app = Dash(
    __name__,
    title=APP_TITLE,
    assets_folder=str(_assets_path),
    suppress_callback_exceptions=True,
)
app.layout = serve_layout

# Viewport classifier: narrow viewports get the bottom drawer.
app.clientside_callback(
    f"""
    function(pathname) {{
        return window.innerWidth < {NARROW_BREAKPOINT} ? "narrow" : "wide";
    }}
    """,
    Output("viewport-store", "data"),
    Input("url", "pathname"),
)


@app.callback(
    Output("catalog-store", "data"),
    Output("catalog-request", "data"),
    Input("catalog-refetch-token", "data"),
    State("catalog-store", "data"),
    State("session-id", "data"),
)
def begin_catalog_refresh(token: int | None, stored: dict | None, session: str | None):
    """Publish the loading snapshot on mount and whenever the token changes."""
    started = start_catalog_request(token, stored, session)
    if started is None:
        raise PreventUpdate
    return started


@app.callback(
    Output("catalog-store", "data", allow_duplicate=True),
    Input("catalog-request", "data"),
    State("catalog-store", "data"),
    State("session-id", "data"),
    prevent_initial_call=True,
)
def fetch_catalog(
    request: dict | None, stored: dict | None, session: str | None
) -> dict:
    """Fetch the catalog for the request begin_catalog_refresh issued."""
    snapshot = complete_catalog_request(get_catalog_service(), request, stored, session)
    if snapshot is None:
        raise PreventUpdate
    return snapshot


@app.callback(
    Output("catalog-manager", "children"),
    Input("catalog-store", "data"),
)
def render_catalog_manager(catalog_data: dict | None):
    snapshot = CatalogSnapshot.from_dict(catalog_data)
    return build_catalog_manager(snapshot.items, is_loading=snapshot.is_loading)


@app.callback(
    Output("picker-state", "data"),
    Output("picker-selection", "data"),
    Output("picker-create-request", "data"),
    Input(PICKER_TRIGGER, "n_clicks"),
    Input(PICKER_CLOSE, "n_clicks"),
    Input(PICKER_BACKDROP, "n_clicks"),
    Input(PICKER_VIEW_TOGGLE, "n_clicks"),
    Input(PICKER_SEARCH, "value"),
    Input(PICKER_SEARCH, "n_submit"),
    Input({"type": PICKER_ITEM, "index": ALL}, "n_clicks"),
    Input({"type": PICKER_TYPE, "index": ALL}, "n_clicks"),
    Input({"type": PICKER_CATEGORY, "index": ALL}, "n_clicks"),
    Input({"type": PICKER_CHIP_REMOVE, "index": ALL}, "n_clicks"),
    Input({"type": PICKER_CLEAR_ALL, "index": ALL}, "n_clicks"),
    Input({"type": PICKER_CREATE_NEW, "index": ALL}, "n_clicks"),
    State("picker-state", "data"),
    State("catalog-store", "data"),
    State("category-store", "data"),
    State("picker-create-request", "data"),
    prevent_initial_call=True,
)
def handle_picker_event(*args):
    """Map the triggering picker component to one state transition."""
    state_data, catalog_data, category_data, create_count = args[-4:]
    if not ctx.triggered:
        raise PreventUpdate
    triggered = ctx.triggered[0]
    prop = triggered["prop_id"].rsplit(".", 1)[-1]
    state, selection, created = apply_picker_event(
        ctx.triggered_id,
        triggered["value"],
        prop,
        state_data,
        catalog_data,
        category_data,
    )
    if state == PickerState.from_dict(state_data) and not selection and not created:
        raise PreventUpdate
    return (
        state.to_dict(),
        selection if selection else no_update,
        (create_count or 0) + 1 if created else no_update,
    )


@app.callback(
    Output("picker-overlay", "className"),
    Output("picker-facets", "children"),
    Output("picker-chips", "children"),
    Output("picker-results", "children"),
    Output(PICKER_VIEW_TOGGLE, "children"),
    Output(PICKER_TRIGGER, "disabled"),
    Output(PICKER_SEARCH, "value"),
    Input("picker-state", "data"),
    Input("catalog-store", "data"),
    Input("viewport-store", "data"),
    Input("category-store", "data"),
    State(PICKER_SEARCH, "value"),
)
def render_picker(
    state_data: dict | None,
    catalog_data: dict | None,
    viewport: str | None,
    category_data: list | None,
    search_value: str | None,
):
    """Recompute the picker's visible items and redraw its dynamic regions."""
    picker = ItemPicker(
        on_item_select=lambda item: None,
        state=PickerState.from_dict(state_data),
        snapshot=CatalogSnapshot.from_dict(catalog_data),
        categories=deserialize_categories(category_data),
    )
    state = picker.state
    # Only close and clear-all change the term without the input; both empty it.
    # Echoing typed text back would race with the next keystroke.
    search_output = "" if not state.search_term and search_value else no_update
    return (
        overlay_class(state, narrow=viewport == "narrow"),
        build_facets(state, picker.categories),
        build_chips(state),
        build_results(picker.visible_items, state.view_mode, picker.snapshot),
        build_view_toggle_icon(state.view_mode),
        picker.trigger_disabled,
        search_output,
    )


@app.callback(
    Output("draft-store", "data"),
    Input("picker-selection", "data"),
    Input({"type": LINE_QUANTITY, "index": ALL}, "value"),
    Input({"type": LINE_REMOVE, "index": ALL}, "n_clicks"),
    Input("draft-invoice-number", "value"),
    Input("draft-customer", "value"),
    Input("draft-issue-date", "date"),
    Input("draft-due-date", "date"),
    Input("draft-currency", "value"),
    Input("draft-tax-rate", "value"),
    Input("draft-additional-charges", "value"),
    Input("draft-discount", "value"),
    Input("draft-notes", "value"),
    Input("draft-terms", "value"),
    State("draft-store", "data"),
    prevent_initial_call=True,
)
def update_draft(selection, quantities, removes, *args):
    """Fold picked items, line edits and header fields into the draft."""
    *values, stored = args
    if not ctx.triggered:
        raise PreventUpdate
    fields = dict(zip(_DRAFT_FIELDS, values))
    updated = apply_draft_event(
        ctx.triggered_id, ctx.triggered[0]["value"], fields, stored
    )
    # Re-rendered line inputs fire with unchanged values.
    if updated == stored:
        raise PreventUpdate
    return updated


@app.callback(
    Output("draft-line-items", "children"),
    Output("draft-totals", "children"),
    Input("draft-store", "data"),
)
def render_draft(stored: dict | None):
    """Redraw line items and totals in the invoice's currency."""
    draft = deserialize_draft(stored)
    return build_line_items(draft.line_items, draft.currency), build_totals(
        draft.totals()
    )


@app.callback(
    Output("draft-banner", "children"),
    Input("draft-save", "n_clicks"),
    State("draft-store", "data"),
    prevent_initial_call=True,
)
def save_invoice(n_clicks: int | None, stored: dict | None):
    """Persist the draft through the invoice service."""
    if not n_clicks:
        raise PreventUpdate
    draft = deserialize_draft(stored)
    problems = draft.problems()
    if problems:
        return build_banner(" ".join(problems), error=True)
    try:
        invoice = get_invoice_service().create_invoice(draft)
    except BackendError as exc:
        LOG.error("Error saving invoice: %s", exc, exc_info=exc)
        return build_banner("Failed to save invoice.", error=True)
    LOG.info("Saved invoice - id:%s number:%s", invoice.id, invoice.invoice_number)
    return build_banner(f"Invoice {invoice.invoice_number} saved as draft.")


@app.callback(
    Output("item-form", "className"),
    Output("item-form-title", "children"),
    Output("item-form-editing", "data"),
    Output("item-form-errors", "children"),
    *[Output(f"item-form-{field}", "value") for field in ITEM_FIELDS],
    Input("picker-create-request", "data"),
    Input({"type": ITEM_EDIT, "index": ALL}, "n_clicks"),
    Input("item-form-cancel", "n_clicks"),
    State("catalog-store", "data"),
    prevent_initial_call=True,
)
def open_item_form(create_count, edit_clicks, cancel_clicks, catalog_data):
    """Show the item form blank for the picker, prefilled for a row edit."""
    if not ctx.triggered:
        raise PreventUpdate
    event = item_form_event(ctx.triggered_id, ctx.triggered[0]["value"], catalog_data)
    if event is None:
        raise PreventUpdate
    return _form_outputs(*event, ITEM_FIELDS, (NEW_ITEM_TITLE, EDIT_ITEM_TITLE))


@app.callback(
    Output("item-form-errors", "children", allow_duplicate=True),
    Output("catalog-refetch-token", "data"),
    Output("item-form", "className", allow_duplicate=True),
    Input("item-form-save", "n_clicks"),
    State("item-form-name", "value"),
    State("item-form-description", "value"),
    State("item-form-type", "value"),
    State("item-form-category_id", "value"),
    State("item-form-sale_price_enabled", "value"),
    State("item-form-sale_price", "value"),
    State("item-form-editing", "data"),
    State("catalog-refetch-token", "data"),
    prevent_initial_call=True,
)
def save_item(
    n_clicks,
    name,
    description,
    item_type,
    category_id,
    sale_enabled,
    sale_price,
    editing,
    token,
):
    """Validate and create or update a catalog item, then force a refetch."""
    if not n_clicks:
        raise PreventUpdate
    try:
        form = ItemForm(
            name=name or "",
            description=description,
            type=item_type or PRODUCT,
            category_id=category_id,
            sale_price_enabled="enabled" in (sale_enabled or []),
            sale_price=sale_price,
        )
    except ValidationError as exc:
        return build_form_errors(form_errors(exc)), no_update, no_update
    service = get_catalog_service()
    try:
        if editing:
            item = service.update_item(editing, form)
        else:
            item = service.create_item(form)
    except BackendError as exc:
        LOG.error("Error saving item: %s", exc, exc_info=exc)
        return build_form_errors({"form": "Failed to save item."}), no_update, no_update
    action = "Updated" if editing else "Created"
    LOG.info("%s item - id:%s name:%s", action, item.id, item.name)
    return [], (token or 0) + 1, form_class(False)


@app.callback(
    Output("category-store", "data"),
    Output("item-form-category_id", "options"),
    Output("item-form-category_id", "value", allow_duplicate=True),
    Output("item-form-new-category", "value"),
    Output("item-form-errors", "children", allow_duplicate=True),
    Input("item-form-add-category", "n_clicks"),
    State("item-form-new-category", "value"),
    State("category-store", "data"),
    prevent_initial_call=True,
)
def create_category(n_clicks, name, category_data):
    """Create a category inline and select it on the item form."""
    if not n_clicks:
        raise PreventUpdate
    try:
        categories, category = add_category(get_catalog_service(), name, category_data)
    except ValidationError as exc:
        errors = build_form_errors(form_errors(exc))
        return no_update, no_update, no_update, no_update, errors
    except BackendError as exc:
        LOG.error("Error creating category: %s", exc, exc_info=exc)
        errors = build_form_errors({"form": "Failed to create category."})
        return no_update, no_update, no_update, no_update, errors
    LOG.info("Created category - id:%s name:%s", category.id, category.name)
    options = build_category_options(deserialize_categories(categories))
    return categories, options, category.id, "", []


@app.callback(
    Output("draft-customer", "options"),
    Output("customer-store", "data"),
    Output("customer-table", "children"),
    Input("customer-refresh-token", "data"),
)
def load_customers(token: int | None):
    """Populate the customer dropdown and the customers table."""
    try:
        customers = get_customer_service().list_customers()
    except BackendError as exc:
        LOG.error("Error fetching customers: %s", exc, exc_info=exc)
        customers = []
    return (
        build_customer_options(customers),
        serialize_customers(customers),
        build_customer_table(customers),
    )


@app.callback(
    Output("customer-form", "className"),
    Output("customer-form-title", "children"),
    Output("customer-form-editing", "data"),
    Output("customer-form-errors", "children"),
    *[Output(f"customer-form-{field}", "value") for field in CUSTOMER_FIELDS],
    Input("customer-form-open", "n_clicks"),
    Input({"type": CUSTOMER_EDIT, "index": ALL}, "n_clicks"),
    Input("customer-form-cancel", "n_clicks"),
    State("customer-store", "data"),
    prevent_initial_call=True,
)
def open_customer_form(open_clicks, edit_clicks, cancel_clicks, customer_data):
    if not ctx.triggered:
        raise PreventUpdate
    event = customer_form_event(
        ctx.triggered_id, ctx.triggered[0]["value"], customer_data
    )
    if event is None:
        raise PreventUpdate
    return _form_outputs(
        *event, CUSTOMER_FIELDS, (NEW_CUSTOMER_TITLE, EDIT_CUSTOMER_TITLE)
    )


@app.callback(
    Output("customer-form-errors", "children", allow_duplicate=True),
    Output("customer-refresh-token", "data"),
    Output("draft-customer", "value"),
    Output("customer-form", "className", allow_duplicate=True),
    Input("customer-form-save", "n_clicks"),
    State("customer-form-name", "value"),
    State("customer-form-email", "value"),
    State("customer-form-phone", "value"),
    State("customer-form-address", "value"),
    State("customer-form-city", "value"),
    State("customer-form-state", "value"),
    State("customer-form-zip", "value"),
    State("customer-form-country", "value"),
    State("customer-form-is_vip", "value"),
    State("customer-form-editing", "data"),
    State("customer-refresh-token", "data"),
    prevent_initial_call=True,
)
def save_customer(
    n_clicks,
    name,
    email,
    phone,
    address,
    city,
    state,
    zip_code,
    country,
    is_vip,
    editing,
    token,
):
    """Validate and save a customer; a new customer is selected on the draft."""
    if not n_clicks:
        raise PreventUpdate
    try:
        form = CustomerForm(
            name=name or "",
            email=email,
            phone=phone,
            address=address,
            city=city,
            state=state,
            zip=zip_code,
            country=country,
            is_vip="vip" in (is_vip or []),
        )
    except ValidationError as exc:
        errors = build_form_errors(form_errors(exc))
        return errors, no_update, no_update, no_update
    service = get_customer_service()
    try:
        if editing:
            customer = service.update_customer(editing, form)
        else:
            customer = service.create_customer(form)
    except BackendError as exc:
        LOG.error("Error saving customer: %s", exc, exc_info=exc)
        errors = build_form_errors({"form": "Failed to save customer."})
        return errors, no_update, no_update, no_update
    if editing:
        LOG.info("Updated customer - id:%s", customer.id)
        return [], (token or 0) + 1, no_update, form_class(False)
    LOG.info("Created customer - id:%s", customer.id)
    return [], (token or 0) + 1, customer.id, form_class(False)


@app.callback(
    Output("customer-delete-confirm", "displayed"),
    Output("customer-delete-pending", "data"),
    Input({"type": CUSTOMER_DELETE, "index": ALL}, "n_clicks"),
    prevent_initial_call=True,
)
def request_customer_delete(delete_clicks):
    """Ask for confirmation before deleting a customer."""
    if not ctx.triggered or not ctx.triggered[0]["value"]:
        raise PreventUpdate
    return True, ctx.triggered_id["index"]


@app.callback(
    Output("customer-refresh-token", "data", allow_duplicate=True),
    Output("draft-customer", "value", allow_duplicate=True),
    Output("draft-banner", "children", allow_duplicate=True),
    Input("customer-delete-confirm", "submit_n_clicks"),
    State("customer-delete-pending", "data"),
    State("customer-refresh-token", "data"),
    State("draft-customer", "value"),
    prevent_initial_call=True,
)
def delete_customer(submit_clicks, customer_id, token, selected):
    """Delete the confirmed customer and drop it from the draft if selected."""
    if not submit_clicks or not customer_id:
        raise PreventUpdate
    try:
        get_customer_service().delete_customer(customer_id)
    except BackendError as exc:
        LOG.error("Error deleting customer: %s", exc, exc_info=exc)
        banner = build_banner("Failed to delete customer.", error=True)
        return no_update, no_update, banner
    LOG.info("Deleted customer - id:%s", customer_id)
    return (
        (token or 0) + 1,
        None if selected == customer_id else no_update,
        build_banner("Customer deleted."),
    )


def main() -> None:
    """Entrypoint used via `invoice_builder` or `python -m invoice_builder.app`."""
    app.run(debug=DEBUG, host="0.0.0.0", port=APP_PORT)


if __name__ == "__main__":
    main()
