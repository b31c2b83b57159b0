"""
Service factories for the Invoice Builder UI.

This module provides factory functions that return the configured
implementation of each data access service.

Available Implementations:
- demo: In-memory services with static data (no backend required)
- impl: REST services talking to the hosted backend

Services are cached at the module level, so the same instance is reused
across all requests. Configure via INVOICE_BUILDER_SERVICE environment variable.
"""

import os
from functools import cache
from typing import Callable, Dict, TypeVar

from invoice_builder.lib import logs
from invoice_builder.services.catalog_service import CatalogService
from invoice_builder.services.catalog_service_demo import DemoCatalogService
from invoice_builder.services.catalog_service_impl import CatalogServiceImpl
from invoice_builder.services.customer_service import CustomerService
from invoice_builder.services.customer_service_demo import DemoCustomerService
from invoice_builder.services.customer_service_impl import CustomerServiceImpl
from invoice_builder.services.invoice_service import InvoiceService
from invoice_builder.services.invoice_service_demo import DemoInvoiceService
from invoice_builder.services.invoice_service_impl import InvoiceServiceImpl

LOG = logs.logger(__file__)

T = TypeVar("T")

_CATALOG_REGISTRY: Dict[str, Callable[[], CatalogService]] = {
    "demo": lambda: DemoCatalogService(),
    "impl": lambda: CatalogServiceImpl(),
}

_CUSTOMER_REGISTRY: Dict[str, Callable[[], CustomerService]] = {
    "demo": lambda: DemoCustomerService(),
    "impl": lambda: CustomerServiceImpl(),
}

_INVOICE_REGISTRY: Dict[str, Callable[[], InvoiceService]] = {
    "demo": lambda: DemoInvoiceService(),
    "impl": lambda: InvoiceServiceImpl(),
}


def _resolve(registry: Dict[str, Callable[[], T]], name: str, kind: str | None) -> T:
    resolved_kind = (kind or os.getenv("INVOICE_BUILDER_SERVICE", "demo")).lower()
    LOG.info("get_%s_service - kind:%s resolved_kind:%s", name, kind, resolved_kind)
    try:
        factory = registry[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown {name} service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


@cache
def get_catalog_service(kind: str | None = None) -> CatalogService:
    """Return the configured catalog service implementation."""
    return _resolve(_CATALOG_REGISTRY, "catalog", kind)


@cache
def get_customer_service(kind: str | None = None) -> CustomerService:
    """Return the configured customer service implementation."""
    return _resolve(_CUSTOMER_REGISTRY, "customer", kind)


@cache
def get_invoice_service(kind: str | None = None) -> InvoiceService:
    """Return the configured invoice service implementation."""
    return _resolve(_INVOICE_REGISTRY, "invoice", kind)


__all__ = [
    "CatalogService",
    "CustomerService",
    "InvoiceService",
    "get_catalog_service",
    "get_customer_service",
    "get_invoice_service",
]
