"""Demo implementation of InvoiceService that keeps invoices in memory."""

import uuid

from invoice_builder.models.invoice import Invoice, InvoiceDraft
from invoice_builder.services.invoice_service import InvoiceService


class DemoInvoiceService(InvoiceService):
    """Stores created invoices in a list."""

    def __init__(self) -> None:
        self.invoices: list[Invoice] = []

    def create_invoice(self, draft: InvoiceDraft) -> Invoice:
        totals = draft.totals()
        invoice = Invoice(
            id=uuid.uuid4().hex,
            invoice_number=draft.invoice_number,
            customer_id=draft.customer_id,
            issue_date=draft.issue_date,
            due_date=draft.due_date,
            currency=draft.currency,
            subtotal=totals.subtotal,
            tax_amount=totals.tax,
            total=totals.total,
        )
        self.invoices.append(invoice)
        return invoice
