"""REST-backed implementation of InvoiceService (`invoices` resource)."""

import httpx
from benedict import benedict

from invoice_builder.lib import clients, logs
from invoice_builder.models.invoice import STATUS_DRAFT, Invoice, InvoiceDraft
from invoice_builder.services.invoice_service import InvoiceService, invoice_payload
from invoice_builder.utils import parse_date

LOG = logs.logger(__file__)


def _parse_invoice(b: benedict, draft: InvoiceDraft) -> Invoice:
    """Parse the stored row, falling back to the draft for missing columns."""
    issue_date = parse_date(b.get("date"))
    due_date = parse_date(b.get("due_date"))
    return Invoice(
        id=str(b.get("id")),
        invoice_number=b.get("invoice_number", draft.invoice_number),
        customer_id=b.get("customer_id", draft.customer_id),
        issue_date=issue_date.date() if issue_date else draft.issue_date,
        due_date=due_date.date() if due_date else draft.due_date,
        currency=b.get("currency", draft.currency),
        subtotal=float(b.get("subtotal", 0)),
        tax_amount=float(b.get("tax_amount", 0)),
        total=float(b.get("total", 0)),
        status=b.get("status", STATUS_DRAFT),
    )


class InvoiceServiceImpl(InvoiceService):
    """Production invoice service using the hosted REST backend."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = clients.backend_client()
        return self._client

    def create_invoice(self, draft: InvoiceDraft) -> Invoice:
        data = clients.request_json(
            self.client, "POST", "/invoices", json=invoice_payload(draft)
        )
        invoice = _parse_invoice(benedict(clients.first_row(data)), draft)
        LOG.info(
            "create_invoice - id:%s number:%s total:%s",
            invoice.id,
            invoice.invoice_number,
            invoice.total,
        )
        return invoice
