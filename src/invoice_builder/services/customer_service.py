"""Abstract base class defining the customer data access contract."""

from abc import ABC, abstractmethod
from typing import Sequence

from invoice_builder.models.customer import Customer
from invoice_builder.models.forms import CustomerForm


class CustomerService(ABC):
    """Contract for listing and maintaining customers."""

    @abstractmethod
    def list_customers(self) -> Sequence[Customer]:
        """Return all customers ordered by name."""

    @abstractmethod
    def create_customer(self, form: CustomerForm) -> Customer:
        """Create a customer from validated form values."""

    @abstractmethod
    def update_customer(self, customer_id: str, form: CustomerForm) -> Customer:
        """Replace an existing customer's fields."""

    @abstractmethod
    def delete_customer(self, customer_id: str) -> None:
        """Delete a customer."""
