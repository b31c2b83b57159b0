"""
Invoice draft models and serialization helpers.

The create-invoice screen builds an InvoiceDraft; items chosen in the
picker become DraftLineItems. The hierarchy is:

    InvoiceDraft
    ├── header fields (number, customer, dates, currency, notes, terms)
    ├── adjustments (additional charges, discount, tax rate)
    └── DraftLineItem[] (description, quantity, unit price)

Totals are derived, never stored, so they can not drift from the lines.
"""

import uuid
from dataclasses import asdict, dataclass, field, replace
from datetime import date, timedelta
from typing import Any, Mapping, Sequence

from invoice_builder.models.catalog import CatalogItem
from invoice_builder.utils import format_currency, parse_date

DEFAULT_CURRENCY = "USD"
DEFAULT_DUE_DAYS = 30
STATUS_DRAFT = "draft"


@dataclass(slots=True)
class DraftLineItem:
    """A single line on the invoice being built."""

    line_id: str
    description: str
    quantity: float = 1
    unit_price: float = 0.0
    item_id: str | None = None

    @property
    def amount(self) -> float:
        """Return quantity multiplied by unit price."""
        return round(self.quantity * self.unit_price, 2)

    @classmethod
    def from_catalog_item(cls, item: CatalogItem) -> "DraftLineItem":
        """Build a line from a picked catalog item, quantity 1."""
        description = item.name
        if item.description:
            description = f"{item.name} - {item.description}"
        return cls(
            line_id=uuid.uuid4().hex,
            description=description,
            quantity=1,
            unit_price=item.display_price or 0.0,
            item_id=item.id,
        )


@dataclass(slots=True)
class Totals:
    """Aggregated monetary data for a draft."""

    subtotal: float
    tax: float
    additional_charges: float
    discount: float
    total: float
    currency: str

    def as_money(self, value: float) -> str:
        """Format the provided numeric value in the invoice currency."""
        return format_currency(value, self.currency)


@dataclass(slots=True)
class InvoiceDraft:
    """Primary dataclass for an invoice under construction."""

    invoice_number: str = ""
    customer_id: str | None = None
    issue_date: date = field(default_factory=date.today)
    due_date: date | None = None
    currency: str = DEFAULT_CURRENCY
    notes: str = ""
    terms: str = ""
    additional_charges: float = 0.0
    discount: float = 0.0
    tax_rate: float = 0.0
    line_items: Sequence[DraftLineItem] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.due_date is None:
            self.due_date = self.issue_date + timedelta(days=DEFAULT_DUE_DAYS)

    def with_item(self, item: CatalogItem) -> "InvoiceDraft":
        """Return a copy with a new line appended for the catalog item."""
        lines = list(self.line_items) + [DraftLineItem.from_catalog_item(item)]
        return replace(self, line_items=lines)

    def without_line(self, line_id: str) -> "InvoiceDraft":
        """Return a copy with the given line removed."""
        lines = [line for line in self.line_items if line.line_id != line_id]
        return replace(self, line_items=lines)

    def with_quantity(self, line_id: str, quantity: float) -> "InvoiceDraft":
        """Return a copy with the given line's quantity updated (minimum 0)."""
        lines = [
            replace(line, quantity=max(quantity, 0))
            if line.line_id == line_id
            else line
            for line in self.line_items
        ]
        return replace(self, line_items=lines)

    def problems(self) -> list[str]:
        """Return the reasons this draft can not be saved yet."""
        problems = []
        if not self.invoice_number.strip():
            problems.append("Invoice number is required.")
        if not self.customer_id:
            problems.append("Select a customer.")
        if not self.line_items:
            problems.append("Add at least one item.")
        return problems

    def totals(self) -> Totals:
        """Compute subtotal, tax and total for the current lines."""
        subtotal = round(sum(line.amount for line in self.line_items), 2)
        tax = round(subtotal * self.tax_rate / 100, 2)
        total = subtotal + tax + self.additional_charges - self.discount
        return Totals(
            subtotal=subtotal,
            tax=tax,
            additional_charges=self.additional_charges,
            discount=self.discount,
            total=round(max(total, 0.0), 2),
            currency=self.currency,
        )


@dataclass(slots=True)
class Invoice:
    """An invoice as stored by the backend."""

    id: str
    invoice_number: str
    customer_id: str | None
    issue_date: date
    due_date: date | None
    currency: str
    subtotal: float
    tax_amount: float
    total: float
    status: str = STATUS_DRAFT


def serialize_draft(draft: InvoiceDraft) -> dict:
    """Convert an InvoiceDraft into a JSON serializable dictionary."""
    data = asdict(draft)
    data["issue_date"] = draft.issue_date.isoformat()
    data["due_date"] = draft.due_date.isoformat() if draft.due_date else None
    return data


def deserialize_draft(payload: Mapping[str, Any] | None) -> InvoiceDraft:
    """Convert a dictionary structure back into an InvoiceDraft."""
    if not payload:
        return InvoiceDraft()
    issue_date = _to_date(payload.get("issue_date")) or date.today()
    return InvoiceDraft(
        invoice_number=payload.get("invoice_number", ""),
        customer_id=payload.get("customer_id"),
        issue_date=issue_date,
        due_date=_to_date(payload.get("due_date")),
        currency=payload.get("currency") or DEFAULT_CURRENCY,
        notes=payload.get("notes", ""),
        terms=payload.get("terms", ""),
        additional_charges=float(payload.get("additional_charges") or 0),
        discount=float(payload.get("discount") or 0),
        tax_rate=float(payload.get("tax_rate") or 0),
        line_items=[DraftLineItem(**line) for line in payload.get("line_items", [])],
    )


def _to_date(value: str | None) -> date | None:
    parsed = parse_date(value)
    return parsed.date() if parsed else None
