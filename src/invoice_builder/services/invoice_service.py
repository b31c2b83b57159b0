"""Abstract base class defining the invoice persistence contract."""

from abc import ABC, abstractmethod

from invoice_builder.models.invoice import STATUS_DRAFT, Invoice, InvoiceDraft


class InvoiceService(ABC):
    """Contract for saving invoice drafts."""

    @abstractmethod
    def create_invoice(self, draft: InvoiceDraft) -> Invoice:
        """Store the draft and return the invoice with status "draft"."""


def invoice_payload(draft: InvoiceDraft) -> dict:
    """Build the backend row for a draft, including computed totals."""
    totals = draft.totals()
    return {
        "invoice_number": draft.invoice_number,
        "customer_id": draft.customer_id,
        "date": draft.issue_date.isoformat(),
        "due_date": draft.due_date.isoformat() if draft.due_date else None,
        "items": [
            {
                "item_id": line.item_id,
                "description": line.description,
                "quantity": line.quantity,
                "unit_price": line.unit_price,
                "amount": line.amount,
            }
            for line in draft.line_items
        ],
        "subtotal": totals.subtotal,
        "tax_amount": totals.tax,
        "total": totals.total,
        "status": STATUS_DRAFT,
        "currency": draft.currency,
        "notes": draft.notes,
        "terms": draft.terms,
        "additional_charges": draft.additional_charges,
        "discount": draft.discount,
    }
