"""
Static and demo data for the Invoice Builder UI.

This package contains fixture data used by the demo services for
development, testing, and demonstrations without a hosted backend.

Modules:
- demo_catalog: Catalog items and categories
- demo_customers: Customers for the invoice customer dropdown
"""
