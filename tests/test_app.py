"""Tests for the event helpers behind the Dash callbacks."""

import uuid

import pytest
from dash import dcc
from dash.exceptions import PreventUpdate
from pydantic import ValidationError

from invoice_builder import app as app_module
from invoice_builder.app import (
    add_category,
    apply_draft_event,
    apply_picker_event,
    begin_catalog_refresh,
    complete_catalog_request,
    customer_form_event,
    fetch_catalog,
    item_form_event,
    serve_layout,
    start_catalog_request,
)
from invoice_builder.components.invoice_draft import LINE_QUANTITY, LINE_REMOVE
from invoice_builder.components.management import CUSTOMER_EDIT, ITEM_EDIT
from invoice_builder.lib.caches import FETCH_ERROR_MESSAGE, RequestLedger
from invoice_builder.models.catalog import serialize_categories, serialize_item
from invoice_builder.models.common import CatalogSnapshot, PickerState
from invoice_builder.models.customer import Customer, serialize_customers
from invoice_builder.models.invoice import InvoiceDraft, deserialize_draft, serialize_draft
from invoice_builder.services.catalog_service_demo import DemoCatalogService
from invoice_builder.state import (
    PICKER_CREATE_NEW,
    PICKER_ITEM,
    PICKER_SEARCH,
    PICKER_TRIGGER,
    ItemPicker,
)
from tests.fakes import (
    CATEGORIES,
    FailingCatalogProvider,
    FakeCatalogProvider,
    make_item,
    sample_catalog,
)


def _stores(state: PickerState | None = None, loading: bool = False):
    snapshot = CatalogSnapshot(items=sample_catalog(), is_loading=loading)
    return (
        (state or PickerState()).to_dict(),
        snapshot.to_dict(),
        serialize_categories(CATEGORIES),
    )


class TestApplyPickerEvent:

    def test_open(self):
        state, selection, created = apply_picker_event(PICKER_TRIGGER, 1, "n_clicks", *_stores())
        assert state.is_open
        assert selection is None
        assert not created

    def test_open_blocked_while_loading(self):
        state, _, _ = apply_picker_event(
            PICKER_TRIGGER, 1, "n_clicks", *_stores(loading=True)
        )
        assert not state.is_open

    def test_item_click_emits_selection(self):
        stores = _stores(PickerState(is_open=True, search_term="wid"))
        state, selection, _ = apply_picker_event(
            {"type": PICKER_ITEM, "index": "2"}, 1, "n_clicks", *stores
        )
        assert selection["item"]["id"] == "2"
        assert selection["nonce"]
        assert not state.is_open
        assert state.search_term == ""

    def test_create_new(self):
        stores = _stores(PickerState(is_open=True))
        state, _, created = apply_picker_event(
            {"type": PICKER_CREATE_NEW, "index": "footer"}, 1, "n_clicks", *stores
        )
        assert created
        assert not state.is_open

    def test_search_typing(self):
        stores = _stores(PickerState(is_open=True))
        state, _, _ = apply_picker_event(PICKER_SEARCH, "gad", "value", *stores)
        assert state.search_term == "gad"


class TestApplyDraftEvent:

    def _stored(self) -> dict:
        draft = InvoiceDraft(invoice_number="INV-1").with_item(make_item("w", "Widget", sale_price=5))
        return serialize_draft(draft)

    def test_selection_appends_line(self):
        selection = {"item": serialize_item(make_item("g", "Gadget", sale_price=3)), "nonce": "n"}
        updated = apply_draft_event("picker-selection", selection, {}, self._stored())
        lines = deserialize_draft(updated).line_items
        assert [line.item_id for line in lines] == ["w", "g"]

    def test_quantity_change(self):
        stored = self._stored()
        line_id = stored["line_items"][0]["line_id"]
        updated = apply_draft_event({"type": LINE_QUANTITY, "index": line_id}, 4, {}, stored)
        assert deserialize_draft(updated).totals().subtotal == 20

    def test_unchanged_quantity_is_a_noop(self):
        stored = self._stored()
        line_id = stored["line_items"][0]["line_id"]
        updated = apply_draft_event({"type": LINE_QUANTITY, "index": line_id}, 1, {}, stored)
        assert updated == stored

    def test_remove_ignores_fresh_render(self):
        stored = self._stored()
        line_id = stored["line_items"][0]["line_id"]
        trigger = {"type": LINE_REMOVE, "index": line_id}
        assert apply_draft_event(trigger, 0, {}, stored) == stored
        assert apply_draft_event(trigger, 1, {}, stored)["line_items"] == []

    def test_header_fields(self):
        fields = {
            "invoice_number": "INV-2",
            "customer_id": "cust-001",
            "issue_date": "2024-06-01",
            "due_date": "2024-06-15",
            "currency": "NZD",
            "tax_rate": 15,
            "additional_charges": None,
            "discount": 1,
            "notes": None,
            "terms": "Net 14",
        }
        draft = deserialize_draft(apply_draft_event("draft-currency", "NZD", fields, self._stored()))
        assert draft.invoice_number == "INV-2"
        assert draft.currency == "NZD"
        assert draft.due_date.isoformat() == "2024-06-15"
        assert draft.notes == ""
        assert draft.totals().total == 4.75
        assert len(draft.line_items) == 1


def _settled(token: int = 0, request_id: int = 1) -> dict:
    snapshot = CatalogSnapshot(
        items=sample_catalog(), is_loading=False, token=token, request_id=request_id
    )
    return snapshot.to_dict()


class TestCatalogRequests:

    def test_start_publishes_loading_snapshot(self):
        loading, request = start_catalog_request(1, _settled(), "s", RequestLedger())
        assert loading["is_loading"]
        assert loading["token"] == 1
        assert request == {"token": 1, "request_id": 2}
        picker = ItemPicker(
            on_item_select=lambda item: None, snapshot=CatalogSnapshot.from_dict(loading)
        )
        assert picker.trigger_disabled

    def test_start_skips_older_token(self):
        assert start_catalog_request(1, _settled(token=2), "s", RequestLedger()) is None

    def test_complete_success(self):
        ledger = RequestLedger()
        provider = FakeCatalogProvider([make_item("9", "New Thing")])
        loading, request = start_catalog_request(1, _settled(), "s", ledger)
        snapshot = CatalogSnapshot.from_dict(
            complete_catalog_request(provider, request, loading, "s", ledger)
        )
        assert [item.id for item in snapshot.items] == ["9"]
        assert not snapshot.is_loading
        assert snapshot.error is None
        assert snapshot.token == 1

    def test_complete_failure_is_fail_soft(self):
        ledger = RequestLedger()
        loading, request = start_catalog_request(1, _settled(), "s", ledger)
        settled = complete_catalog_request(
            FailingCatalogProvider(), request, loading, "s", ledger
        )
        snapshot = CatalogSnapshot.from_dict(settled)
        assert snapshot.items == []
        assert snapshot.error == FETCH_ERROR_MESSAGE
        assert not snapshot.is_loading

    def test_overlapping_refetches_keep_latest(self):
        ledger = RequestLedger()
        stored = _settled()
        old_loading, old_request = start_catalog_request(1, stored, "s", ledger)
        new_loading, new_request = start_catalog_request(2, stored, "s", ledger)
        assert new_request["request_id"] != old_request["request_id"]
        fresh = FakeCatalogProvider([make_item("new", "New")])
        stale = FakeCatalogProvider([make_item("old", "Old")])
        applied = complete_catalog_request(fresh, new_request, new_loading, "s", ledger)
        assert [item["id"] for item in applied["items"]] == ["new"]
        assert complete_catalog_request(stale, old_request, old_loading, "s", ledger) is None

    def test_sessions_do_not_interfere(self):
        ledger = RequestLedger()
        loading, request = start_catalog_request(1, _settled(), "a", ledger)
        start_catalog_request(1, _settled(), "b", ledger)
        provider = FakeCatalogProvider()
        assert complete_catalog_request(provider, request, loading, "a", ledger)

    def test_complete_without_request(self):
        provider = FakeCatalogProvider()
        assert complete_catalog_request(provider, None, _settled(), "s", RequestLedger()) is None
        assert provider.calls == 0


class TestCatalogRefreshCallbacks:

    def test_begin_rejects_older_token(self):
        with pytest.raises(PreventUpdate):
            begin_catalog_refresh(0, _settled(token=3), uuid.uuid4().hex)

    def test_begin_then_fetch(self, monkeypatch):
        provider = FakeCatalogProvider()
        monkeypatch.setattr(app_module, "get_catalog_service", lambda: provider)
        session = uuid.uuid4().hex
        loading, request = begin_catalog_refresh(1, _settled(), session)
        assert loading["is_loading"]
        settled = fetch_catalog(request, loading, session)
        assert not settled["is_loading"]
        assert len(settled["items"]) == 4
        assert provider.calls == 1

    def test_fetch_failure(self, monkeypatch):
        monkeypatch.setattr(app_module, "get_catalog_service", FailingCatalogProvider)
        session = uuid.uuid4().hex
        loading, request = begin_catalog_refresh(1, _settled(), session)
        settled = fetch_catalog(request, loading, session)
        assert settled["items"] == []
        assert settled["error"] == FETCH_ERROR_MESSAGE
        assert not settled["is_loading"]

    def test_superseded_fetch_is_dropped(self, monkeypatch):
        monkeypatch.setattr(app_module, "get_catalog_service", FakeCatalogProvider)
        session = uuid.uuid4().hex
        old_loading, old_request = begin_catalog_refresh(1, _settled(), session)
        begin_catalog_refresh(2, old_loading, session)
        with pytest.raises(PreventUpdate):
            fetch_catalog(old_request, old_loading, session)


class TestItemFormEvent:

    def _catalog(self) -> dict:
        return _settled()

    def test_create_request_opens_blank(self):
        visible, editing, values = item_form_event("picker-create-request", 1, self._catalog())
        assert visible
        assert editing is None
        assert values["name"] is None
        assert values["type"] == "product"

    def test_edit_prefills(self):
        trigger = {"type": ITEM_EDIT, "index": "2"}
        visible, editing, values = item_form_event(trigger, 1, self._catalog())
        assert visible
        assert editing == "2"
        assert values["name"] == "Widget"
        assert values["category_id"] == "c2"
        assert values["sale_price_enabled"] == ["enabled"]
        assert values["sale_price"] == 12.5

    def test_rerendered_edit_buttons_ignored(self):
        trigger = {"type": ITEM_EDIT, "index": "2"}
        assert item_form_event(trigger, 0, self._catalog()) is None

    def test_unknown_item_ignored(self):
        trigger = {"type": ITEM_EDIT, "index": "gone"}
        assert item_form_event(trigger, 1, self._catalog()) is None

    def test_cancel_hides(self):
        visible, editing, _ = item_form_event("item-form-cancel", 1, self._catalog())
        assert not visible
        assert editing is None


class TestCustomerFormEvent:

    def _customers(self) -> list:
        return serialize_customers(
            [Customer(id="k1", name="Kiwi Co", city="Auckland", is_vip=True)]
        )

    def test_open_blank(self):
        visible, editing, values = customer_form_event("customer-form-open", 1, [])
        assert visible
        assert editing is None
        assert values["is_vip"] == []

    def test_edit_prefills(self):
        trigger = {"type": CUSTOMER_EDIT, "index": "k1"}
        visible, editing, values = customer_form_event(trigger, 1, self._customers())
        assert visible
        assert editing == "k1"
        assert values["name"] == "Kiwi Co"
        assert values["city"] == "Auckland"
        assert values["is_vip"] == ["vip"]

    def test_ignores_unclicked(self):
        trigger = {"type": CUSTOMER_EDIT, "index": "k1"}
        assert customer_form_event(trigger, 0, self._customers()) is None


class TestAddCategory:

    def test_appends_new_category(self):
        service = DemoCatalogService(items=[], categories=list(CATEGORIES))
        categories, category = add_category(service, "  Travel ", serialize_categories(CATEGORIES))
        assert category.name == "Travel"
        assert [c["name"] for c in categories] == ["Consulting", "Hardware", "Travel"]
        assert categories[-1]["id"] == category.id

    def test_blank_name_rejected(self):
        service = DemoCatalogService(items=[], categories=[])
        with pytest.raises(ValidationError):
            add_category(service, "   ", [])
        assert service.get_categories() == []


def _store_data(layout) -> dict:
    return {c.id: c.data for c in layout.children if isinstance(c, dcc.Store)}


def test_serve_layout_renders_with_demo_categories():
    layout = serve_layout()
    assert layout.className == "app-shell"
    stores = _store_data(layout)
    assert stores["catalog-store"]["is_loading"]
    assert stores["catalog-request"] is None


def test_each_page_load_gets_its_own_session():
    first = _store_data(serve_layout())["session-id"]
    second = _store_data(serve_layout())["session-id"]
    assert first and second and first != second
