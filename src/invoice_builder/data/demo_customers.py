"""Demo customers."""

from invoice_builder.models.customer import Customer

DEMO_CUSTOMERS = [
    Customer(
        id="cust-001",
        name="Harbourside Dental",
        email="accounts@harboursidedental.co.nz",
        phone="+64 9 555 0101",
        address="12 Quay Street",
        city="Auckland",
        zip="1010",
        country="New Zealand",
        is_vip=True,
    ),
    Customer(
        id="cust-002",
        name="Kowhai Architects",
        email="admin@kowhai.example",
        city="Wellington",
        country="New Zealand",
    ),
    Customer(
        id="cust-003",
        name="Pine Ridge Brewing Co.",
        email="office@pineridge.example",
        phone="+1 503 555 0199",
        address="400 Mill Road",
        city="Portland",
        state="OR",
        zip="97201",
        country="United States",
    ),
]
