"""REST-backed implementation of CustomerService (`customers` resource)."""

from typing import Sequence

import httpx
from benedict import benedict

from invoice_builder.lib import clients, logs
from invoice_builder.models.customer import Customer
from invoice_builder.models.forms import CustomerForm
from invoice_builder.services.customer_service import CustomerService

LOG = logs.logger(__file__)


def _parse_customer(b: benedict) -> Customer:
    """Parse a benedict row into a Customer."""
    return Customer(
        id=str(b.get("id")),
        name=b.get("name", "") or "",
        email=b.get("email"),
        phone=b.get("phone"),
        address=b.get("address"),
        city=b.get("city"),
        state=b.get("state"),
        zip=b.get("zip"),
        country=b.get("country"),
        is_vip=bool(b.get("is_vip", False)),
    )


class CustomerServiceImpl(CustomerService):
    """Production customer service using the hosted REST backend."""

    def __init__(self, client: httpx.Client | None = None) -> None:
        self._client = client

    @property
    def client(self) -> httpx.Client:
        if self._client is None:
            self._client = clients.backend_client()
        return self._client

    def list_customers(self) -> Sequence[Customer]:
        rows = clients.request_json(
            self.client, "GET", "/customers", params={"select": "*", "order": "name.asc"}
        )
        return [_parse_customer(benedict(row)) for row in rows]

    def create_customer(self, form: CustomerForm) -> Customer:
        data = clients.request_json(
            self.client, "POST", "/customers", json=form.model_dump()
        )
        customer = _parse_customer(benedict(clients.first_row(data)))
        LOG.info("create_customer - id:%s", customer.id)
        return customer

    def update_customer(self, customer_id: str, form: CustomerForm) -> Customer:
        data = clients.request_json(
            self.client,
            "PATCH",
            "/customers",
            params={"id": f"eq.{customer_id}"},
            json=form.model_dump(),
        )
        return _parse_customer(benedict(clients.first_row(data)))

    def delete_customer(self, customer_id: str) -> None:
        clients.request_json(
            self.client, "DELETE", "/customers", params={"id": f"eq.{customer_id}"}
        )
        LOG.info("delete_customer - id:%s", customer_id)
