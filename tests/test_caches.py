"""Tests for the CatalogCache refresh cycle and stale response guard."""

import asyncio
import logging

from invoice_builder.lib.caches import FETCH_ERROR_MESSAGE, CatalogCache, RequestLedger
from invoice_builder.models.common import CatalogSnapshot
from invoice_builder.state import ItemPicker
from tests.fakes import FailingCatalogProvider, FakeCatalogProvider, make_item


class TestRefresh:

    def test_new_snapshot_starts_loading(self):
        cache = CatalogCache(FakeCatalogProvider())
        assert cache.is_loading
        assert cache.items == []

    def test_refresh_replaces_items(self):
        provider = FakeCatalogProvider()
        cache = CatalogCache(provider)
        snapshot = cache.refresh(token=0)
        assert provider.calls == 1
        assert not snapshot.is_loading
        assert snapshot.error is None
        assert [item.id for item in snapshot.items] == ["1", "2", "3", "4"]
        assert snapshot.token == 0

    def test_refresh_replaces_wholesale(self):
        provider = FakeCatalogProvider()
        cache = CatalogCache(provider)
        cache.refresh(token=0)
        provider.items = [make_item("9", "Only")]
        cache.refresh(token=1)
        assert [item.id for item in cache.items] == ["9"]

    def test_failure_is_fail_soft(self, caplog):
        cache = CatalogCache(FailingCatalogProvider())
        cache.snapshot.items = [make_item("old", "Stale")]
        with caplog.at_level(logging.ERROR, logger="invoice_builder.caches"):
            snapshot = cache.refresh(token=3)
        assert snapshot.items == []
        assert not snapshot.is_loading
        assert snapshot.has_error
        assert snapshot.error == FETCH_ERROR_MESSAGE
        assert any("Error fetching items" in r.getMessage() for r in caplog.records)

    def test_failed_fetch_leaves_trigger_enabled(self):
        snapshot = CatalogCache(FailingCatalogProvider()).refresh(token=0)
        picker = ItemPicker(on_item_select=lambda item: None, snapshot=snapshot)
        assert not picker.trigger_disabled
        picker.open()
        assert picker.is_open
        assert picker.visible_items == []

    def test_success_clears_previous_error(self):
        cache = CatalogCache(FakeCatalogProvider(), CatalogSnapshot(error="x"))
        cache.refresh(token=1)
        assert cache.error is None

    def test_no_retry_after_failure(self):
        provider = FailingCatalogProvider()
        CatalogCache(provider).refresh(token=0)
        assert provider.calls == 1


class TestStaleResponses:

    def test_late_response_is_ignored(self):
        cache = CatalogCache(FakeCatalogProvider())
        first = cache.begin(token=1)
        second = cache.begin(token=2)
        assert cache.resolve(second, [make_item("new", "New")])
        assert not cache.resolve(first, [make_item("old", "Old")])
        assert [item.id for item in cache.items] == ["new"]
        assert cache.snapshot.token == 2

    def test_late_failure_is_ignored(self):
        cache = CatalogCache(FakeCatalogProvider())
        first = cache.begin(token=1)
        second = cache.begin(token=2)
        cache.resolve(second, [make_item("new", "New")])
        assert not cache.reject(first, RuntimeError("boom"))
        assert cache.error is None
        assert len(cache.items) == 1

    def test_still_loading_until_latest_lands(self):
        cache = CatalogCache(FakeCatalogProvider())
        first = cache.begin(token=1)
        cache.begin(token=2)
        cache.resolve(first, [])
        assert cache.is_loading

    def test_request_ids_are_monotonic(self):
        cache = CatalogCache(FakeCatalogProvider())
        ids = [cache.begin(token=n) for n in range(3)]
        assert ids == sorted(set(ids))


class TestRequestLedger:

    def test_issue_per_key(self):
        ledger = RequestLedger()
        assert [ledger.issue("a"), ledger.issue("a"), ledger.issue("b")] == [1, 2, 1]
        assert ledger.latest("a") == 2
        assert ledger.latest("missing") == 0

    def test_issue_respects_floor(self):
        ledger = RequestLedger()
        assert ledger.issue("a", floor=7) == 8

    def test_least_recent_keys_dropped(self):
        ledger = RequestLedger(max_keys=2)
        for key in ("a", "b", "c"):
            ledger.issue(key)
        assert ledger.latest("a") == 0
        assert ledger.latest("c") == 1

    def test_caches_rebuilt_from_same_snapshot_get_distinct_ids(self):
        ledger = RequestLedger()
        stored = CatalogSnapshot(is_loading=False, token=0, request_id=1).to_dict()
        first, second = (
            CatalogCache(FakeCatalogProvider(), CatalogSnapshot.from_dict(stored), ledger, "s")
            for _ in range(2)
        )
        first_id = first.begin(token=1)
        second_id = second.begin(token=2)
        assert second_id > first_id
        assert second.fetch(second_id)
        assert not first.fetch(first_id)
        assert first.is_loading

    def test_fetch_without_ledger(self):
        cache = CatalogCache(FakeCatalogProvider())
        assert cache.fetch(cache.begin(token=0))
        assert len(cache.items) == 4


class TestRefreshAsync:

    def test_refresh_async(self):
        cache = CatalogCache(FakeCatalogProvider())
        snapshot = asyncio.run(cache.refresh_async(token=5))
        assert len(snapshot.items) == 4
        assert not snapshot.is_loading

    def test_refresh_async_failure(self):
        cache = CatalogCache(FailingCatalogProvider())
        snapshot = asyncio.run(cache.refresh_async(token=5))
        assert snapshot.items == []
        assert snapshot.error == FETCH_ERROR_MESSAGE

    def test_concurrent_refreshes_keep_latest(self):
        provider = FakeCatalogProvider()
        cache = CatalogCache(provider)

        async def run_both():
            await asyncio.gather(cache.refresh_async(1), cache.refresh_async(2))

        asyncio.run(run_both())
        assert cache.snapshot.token == 2
        assert cache.snapshot.request_id == 2
        assert not cache.is_loading
