"""Tests for the picker, draft and management component trees."""

from dash.development.base_component import Component

from invoice_builder.components.forms import (
    build_customer_form,
    build_form_errors,
    build_item_form,
)
from invoice_builder.components.invoice_draft import (
    LINE_REMOVE,
    build_banner,
    build_line_items,
    build_totals,
)
from invoice_builder.components.item_picker import (
    build_chips,
    build_facets,
    build_item_picker,
    build_results,
    overlay_class,
)
from invoice_builder.components.management import (
    CUSTOMER_DELETE,
    CUSTOMER_EDIT,
    DELETE_CONFIRM_MESSAGE,
    ITEM_EDIT,
    build_catalog_manager,
    build_customer_table,
    build_management_cards,
)
from invoice_builder.models.customer import Customer
from invoice_builder.models.common import VIEW_GRID, VIEW_LIST, CatalogSnapshot, PickerState
from invoice_builder.models.invoice import DraftLineItem, InvoiceDraft
from invoice_builder.state import PICKER_CLEAR_ALL, PICKER_CREATE_NEW, PICKER_TRIGGER
from tests.fakes import CATEGORIES, make_item, sample_catalog


def _walk(node):
    """Yield every component in a tree, depth first."""
    if isinstance(node, (list, tuple)):
        for child in node:
            yield from _walk(child)
        return
    if not isinstance(node, Component):
        return
    yield node
    yield from _walk(getattr(node, "children", None))


def _ids(tree) -> list:
    return [getattr(node, "id", None) for node in _walk(tree) if getattr(node, "id", None)]


def _texts(tree) -> list[str]:
    texts = []
    for node in _walk(tree):
        children = getattr(node, "children", None)
        if isinstance(children, str):
            texts.append(children)
        elif isinstance(children, list):
            texts.extend(child for child in children if isinstance(child, str))
    return texts


def _find_id(tree, component_id):
    for node in _walk(tree):
        if getattr(node, "id", None) == component_id:
            return node
    return None


class TestPickerShell:

    def test_create_new_absent_without_handler(self):
        tree = build_item_picker(CATEGORIES, can_create_new=False)
        assert all(
            not (isinstance(i, dict) and i.get("type") == PICKER_CREATE_NEW)
            for i in _ids(tree)
        )
        assert "Create New Item" not in _texts(tree)

    def test_create_new_present_with_handler(self):
        tree = build_item_picker(CATEGORIES, can_create_new=True)
        assert {"type": PICKER_CREATE_NEW, "index": "footer"} in _ids(tree)

    def test_trigger_starts_disabled(self):
        trigger = _find_id(build_item_picker(CATEGORIES, True), PICKER_TRIGGER)
        assert trigger.disabled is True

    def test_icon_only_trigger_has_no_label(self):
        trigger = _find_id(build_item_picker(CATEGORIES, True, icon_only=True), PICKER_TRIGGER)
        assert "Select Item" not in _texts(trigger)

    def test_overlay_presentation(self):
        open_state = PickerState(is_open=True)
        assert overlay_class(open_state, narrow=False) == "picker-overlay dialog open"
        assert overlay_class(open_state, narrow=True) == "picker-overlay drawer open"
        assert overlay_class(PickerState(), narrow=True).endswith("hidden")


class TestFacetsAndChips:

    def test_selected_facets_are_filled(self):
        state = PickerState(selected_type="service", selected_category="c2")
        buttons = {
            (node.id["type"], node.id["index"]): node.className
            for node in _walk(build_facets(state, CATEGORIES))
            if isinstance(getattr(node, "id", None), dict)
        }
        assert "primary" in buttons[("picker-type", "service")]
        assert "outline" in buttons[("picker-type", "all")]
        assert "primary" in buttons[("picker-category", "c2")]
        assert ("picker-category", "c1") in buttons

    def test_no_chips_no_clear_all(self):
        assert build_chips(PickerState()) == []

    def test_chips_render_with_clear_all(self):
        tree = build_chips(PickerState(active_filters=("blue", "large")))
        assert {"type": PICKER_CLEAR_ALL, "index": "chips"} in _ids(tree)
        assert {"blue", "large"} <= set(_texts(tree))


class TestResults:

    def test_grid_and_list_layouts(self):
        items = sample_catalog()
        grid = build_results(items, VIEW_GRID)
        listing = build_results(items, VIEW_LIST)
        assert grid.className == "item-grid"
        assert listing.className == "item-list"
        assert [c.id["index"] for c in grid.children] == ["1", "2", "3", "4"]
        assert [c.id["index"] for c in listing.children] == ["1", "2", "3", "4"]

    def test_price_formatted_in_usd(self):
        item = make_item("p", "Widget", sale_price=1234.5)
        for view_mode in (VIEW_GRID, VIEW_LIST):
            assert "USD 1,234.50" in _texts(build_results([item], view_mode))

    def test_price_hidden_when_sale_disabled(self):
        item = make_item("p", "Widget")
        assert not any(t.startswith("USD") for t in _texts(build_results([item], VIEW_GRID)))

    def test_long_description_truncated(self):
        item = make_item("p", "Widget", description="x" * 300)
        texts = _texts(build_results([item], VIEW_GRID))
        truncated = [t for t in texts if t.startswith("xxx")]
        assert truncated and len(truncated[0]) == 120

    def test_empty_results(self):
        assert "No items found." in _texts(build_results([], VIEW_GRID))

    def test_error_message_when_fetch_failed(self):
        snapshot = CatalogSnapshot(items=[], is_loading=False, error="Failed to load items.")
        assert "Failed to load items." in _texts(build_results([], VIEW_GRID, snapshot))


class TestDraftComponents:

    def test_line_items_empty_hint(self):
        tree = build_line_items([], "USD")
        assert "No items yet" in tree.children

    def test_line_items_use_invoice_currency(self):
        line = DraftLineItem(line_id="l1", description="Widget", quantity=2, unit_price=10)
        tree = build_line_items([line], "NZD")
        assert "NZD 20.00" in _texts(tree)
        assert {"type": LINE_REMOVE, "index": "l1"} in _ids(tree)

    def test_totals(self):
        draft = InvoiceDraft(
            currency="EUR",
            tax_rate=10,
            line_items=[DraftLineItem(line_id="l", description="x", quantity=1, unit_price=100)],
        )
        texts = _texts(build_totals(draft.totals()))
        assert "EUR 110.00" in texts

    def test_banner(self):
        assert build_banner(None) is None
        assert build_banner("Nope", error=True).className == "banner error"

    def test_form_errors(self):
        items = build_form_errors({"sale_price": "bad", "form": "Failed to save item."})
        assert [li.children for li in items] == ["Sale price: bad", "Failed to save item."]

    def test_item_form_category_options(self):
        dropdown = _find_id(build_item_form(CATEGORIES), "item-form-category_id")
        assert [o["value"] for o in dropdown.options] == ["c1", "c2"]

    def test_item_form_inline_category_control(self):
        ids = _ids(build_item_form(CATEGORIES))
        assert "item-form-new-category" in ids
        assert "item-form-add-category" in ids
        assert _find_id(build_item_form(CATEGORIES), "item-form-title").children == "New Item"

    def test_customer_form_title(self):
        assert _find_id(build_customer_form(), "customer-form-title").children == "New Customer"


class TestManagement:

    def test_catalog_rows_have_edit_buttons(self):
        tree = build_catalog_manager(sample_catalog())
        edit_ids = [i for i in _ids(tree) if isinstance(i, dict)]
        assert edit_ids == [{"type": ITEM_EDIT, "index": str(n)} for n in range(1, 5)]
        assert "USD 180.00" in _texts(tree)

    def test_catalog_loading_and_empty(self):
        assert _texts(build_catalog_manager([], is_loading=True)) == ["Loading items..."]
        assert _texts(build_catalog_manager([])) == ["No catalog items yet."]

    def test_customer_table(self):
        customers = [
            Customer(id="k1", name="Kiwi Co", email="hi@kiwi.nz", city="Auckland", state="AKL"),
            Customer(id="k2", name="Tui Ltd"),
        ]
        tree = build_customer_table(customers)
        texts = _texts(tree)
        assert "Auckland, AKL" in texts
        assert "hi@kiwi.nz" in texts
        ids = [i for i in _ids(tree) if isinstance(i, dict)]
        assert {"type": CUSTOMER_EDIT, "index": "k2"} in ids
        assert {"type": CUSTOMER_DELETE, "index": "k2"} in ids

    def test_customer_table_empty(self):
        assert _texts(build_customer_table([])) == ["No customers found."]

    def test_delete_is_confirmed(self):
        dialog = _find_id(build_management_cards(), "customer-delete-confirm")
        assert dialog.message == DELETE_CONFIRM_MESSAGE
