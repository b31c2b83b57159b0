"""Demo implementation of CustomerService using in-memory data."""

import uuid
from typing import Sequence

from invoice_builder.data.demo_customers import DEMO_CUSTOMERS
from invoice_builder.lib.clients import BackendError
from invoice_builder.models.customer import Customer
from invoice_builder.models.forms import CustomerForm
from invoice_builder.services.customer_service import CustomerService


class DemoCustomerService(CustomerService):
    """Provides in memory customer storage backed by the demo dataset."""

    def __init__(self, customers: Sequence[Customer] | None = None) -> None:
        """Initialize the service with the provided customers or the default set."""
        self._customers: list[Customer] = list(
            customers if customers is not None else DEMO_CUSTOMERS
        )

    def list_customers(self) -> Sequence[Customer]:
        return sorted(self._customers, key=lambda c: c.name.lower())

    def create_customer(self, form: CustomerForm) -> Customer:
        customer = Customer(id=f"cust-{uuid.uuid4().hex[:8]}", **form.model_dump())
        self._customers.append(customer)
        return customer

    def update_customer(self, customer_id: str, form: CustomerForm) -> Customer:
        index = self._index(customer_id)
        customer = Customer(id=customer_id, **form.model_dump())
        self._customers[index] = customer
        return customer

    def delete_customer(self, customer_id: str) -> None:
        del self._customers[self._index(customer_id)]

    def _index(self, customer_id: str) -> int:
        for index, customer in enumerate(self._customers):
            if customer.id == customer_id:
                return index
        raise BackendError(f"Unknown customer: {customer_id}")
