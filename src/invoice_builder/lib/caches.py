"""
Catalog caching for the item picker.

Provides a CatalogCache class that holds the most recently fetched catalog
snapshot and refreshes it when the host's refetch token changes. Each
refresh is stamped with a monotonic request id so a response that arrives
after a newer request was issued is discarded instead of overwriting
fresher data.

Dash callbacks rebuild the cache from the stored snapshot on every call,
so request ids are issued by a RequestLedger that outlives the callbacks
and is keyed by the page session.

Failures are fail-soft: the error is logged, the snapshot is emptied and
flagged, and the loading flag is cleared so the picker stays usable.
"""

import asyncio
import threading
from collections import OrderedDict
from typing import Any, Sequence

from invoice_builder.lib import logs
from invoice_builder.models.catalog import CatalogItem
from invoice_builder.models.common import CatalogSnapshot

LOG = logs.logger(__file__)

FETCH_ERROR_MESSAGE = "Failed to load items."

DEFAULT_LEDGER_SIZE = 1024


class RequestLedger:
    """
    Latest issued request id per key, shared between callback invocations.

    The least recently used keys are dropped once max_keys is exceeded.
    """

    def __init__(self, max_keys: int = DEFAULT_LEDGER_SIZE) -> None:
        self.max_keys = max_keys
        self._latest: OrderedDict[str, int] = OrderedDict()
        self._lock = threading.Lock()

    def issue(self, key: str, floor: int = 0) -> int:
        """
        Issue the next request id for key.

        Args:
            key: Session key the request belongs to.
            floor: Lowest id already seen by the caller; the new id is
                always greater.
        """
        with self._lock:
            request_id = max(self._latest.pop(key, 0), floor) + 1
            self._latest[key] = request_id
            while len(self._latest) > self.max_keys:
                self._latest.popitem(last=False)
            return request_id

    def latest(self, key: str) -> int:
        with self._lock:
            return self._latest.get(key, 0)


class CatalogCache:
    """
    Holds one picker instance's catalog snapshot.

    Attributes:
        service: Catalog provider exposing get_items().
        snapshot: The current CatalogSnapshot.
        ledger: Optional RequestLedger issuing request ids for key.
        key: Session key used with the ledger.
    """

    def __init__(
        self,
        service: Any,
        snapshot: CatalogSnapshot | None = None,
        ledger: RequestLedger | None = None,
        key: str = "default",
    ) -> None:
        """
        Initialize the cache.

        Args:
            service: Catalog provider with a get_items() method.
            snapshot: Previously stored snapshot to continue from.
            ledger: Shared ledger; without one, ids live on the snapshot.
            key: Session key the ledger tracks this picker under.
        """
        self.service = service
        self.snapshot = snapshot or CatalogSnapshot()
        self.ledger = ledger
        self.key = key

    @property
    def items(self) -> list[CatalogItem]:
        return self.snapshot.items

    @property
    def is_loading(self) -> bool:
        return self.snapshot.is_loading

    @property
    def error(self) -> str | None:
        return self.snapshot.error

    def begin(self, token: Any) -> int:
        """
        Start a fetch for the given refetch token.

        Returns:
            The request id that must accompany the response.
        """
        if self.ledger is None:
            request_id = self.snapshot.request_id + 1
        else:
            request_id = self.ledger.issue(self.key, floor=self.snapshot.request_id)
        self.snapshot.request_id = request_id
        self.snapshot.token = token
        self.snapshot.is_loading = True
        self.snapshot.error = None
        return request_id

    @property
    def latest_request_id(self) -> int:
        if self.ledger is None:
            return self.snapshot.request_id
        return self.ledger.latest(self.key)

    def is_current(self, request_id: int) -> bool:
        """Return True when request_id is the latest issued request."""
        return request_id == self.latest_request_id

    def resolve(self, request_id: int, items: Sequence[CatalogItem]) -> bool:
        """
        Apply a successful response.

        Returns:
            False when the response was superseded and ignored.
        """
        if not self.is_current(request_id):
            LOG.info(
                "Ignoring stale catalog response - request:%s latest:%s",
                request_id,
                self.latest_request_id,
            )
            return False
        self.snapshot.items = list(items)
        self.snapshot.error = None
        self.snapshot.is_loading = False
        return True

    def reject(self, request_id: int, exc: BaseException) -> bool:
        """
        Apply a failed response: empty the catalog and flag the error.

        Returns:
            False when the failure was superseded and ignored.
        """
        if not self.is_current(request_id):
            LOG.info("Ignoring stale catalog failure - request:%s", request_id)
            return False
        LOG.error("Error fetching items: %s", exc, exc_info=exc)
        self.snapshot.items = []
        self.snapshot.error = FETCH_ERROR_MESSAGE
        self.snapshot.is_loading = False
        return True

    def fetch(self, request_id: int) -> bool:
        """
        Call the provider for an already issued request and apply the result.

        Returns:
            False when the result was superseded and ignored.
        """
        try:
            items = self.service.get_items()
        except Exception as exc:
            return self.reject(request_id, exc)
        return self.resolve(request_id, items)

    def refresh(self, token: Any) -> CatalogSnapshot:
        """Fetch the full catalog synchronously for the given token."""
        self.fetch(self.begin(token))
        return self.snapshot

    async def refresh_async(self, token: Any) -> CatalogSnapshot:
        """
        Fetch the full catalog without blocking the event loop.

        The provider call runs in the default executor. Concurrent calls
        are allowed; only the most recently started one is applied.
        """
        request_id = self.begin(token)
        try:
            items = await asyncio.get_running_loop().run_in_executor(
                None, self.service.get_items
            )
        except Exception as exc:
            self.reject(request_id, exc)
        else:
            self.resolve(request_id, items)
        return self.snapshot
