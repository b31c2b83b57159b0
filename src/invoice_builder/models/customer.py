"""Customer domain model and dcc.Store serialization helpers."""

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Sequence

DEFAULT_COUNTRY = "New Zealand"


@dataclass(slots=True)
class Customer:
    """A customer that invoices are addressed to."""

    id: str
    name: str
    email: str | None = None
    phone: str | None = None
    address: str | None = None
    city: str | None = None
    state: str | None = None
    zip: str | None = None
    country: str | None = DEFAULT_COUNTRY
    is_vip: bool = False

    @property
    def label(self) -> str:
        """Return the dropdown label, starring VIP customers."""
        return f"{self.name} ★" if self.is_vip else self.name


def serialize_customers(customers: Sequence[Customer]) -> list[dict]:
    return [asdict(customer) for customer in customers]


def deserialize_customers(
    payload: Sequence[Mapping[str, Any]] | None,
) -> list[Customer]:
    return [
        Customer(
            id=str(c["id"]),
            name=c.get("name", ""),
            email=c.get("email"),
            phone=c.get("phone"),
            address=c.get("address"),
            city=c.get("city"),
            state=c.get("state"),
            zip=c.get("zip"),
            country=c.get("country"),
            is_vip=bool(c.get("is_vip", False)),
        )
        for c in payload or []
    ]
