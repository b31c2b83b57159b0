"""
Local library modules for the Invoice Builder UI.

Modules:
    logs: Logging utilities
    clients: Backend HTTP client factory
    caches: Catalog snapshot cache with stale-response guard
"""

from invoice_builder.lib import caches, clients, logs

__all__ = ["caches", "clients", "logs"]
