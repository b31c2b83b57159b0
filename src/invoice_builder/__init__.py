"""
Invoice Builder UI: A Dash application for building invoices from a catalog.

This package provides the create-invoice screen of a small-business
invoicing app. Its core is the item picker: a searchable, filterable
dialog (or drawer on narrow screens) that loads the catalog, filters it by
free text, type and category, and hands the chosen item to the invoice
draft.

Subpackages:
- components: Reusable Dash UI components
- models: Data models, form schemas and serialization
- services: Data access layer (demo and REST implementations)
- lib: Logging, HTTP client and catalog cache
- data: Static demo fixtures

Main entry points:
- app.main(): Start the development server
- app.app: The Dash application instance (for WSGI deployment)
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
