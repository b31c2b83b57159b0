"""
HTTP client factory for the hosted invoicing backend.

The backend exposes a PostgREST style API (one resource per table, JSON
rows, filters as query parameters). This module provides a singleton
httpx.Client configured with the base URL and API key.

Environment variables used:
- INVOICE_BUILDER_BACKEND_URL: Base URL of the REST API
- INVOICE_BUILDER_BACKEND_KEY: API key sent as apikey and bearer token
- INVOICE_BUILDER_TIMEOUT: Request timeout in seconds (default 10)
"""

import functools
import os

import httpx

BACKEND_URL_KEY = "INVOICE_BUILDER_BACKEND_URL"
BACKEND_KEY_KEY = "INVOICE_BUILDER_BACKEND_KEY"
_TIMEOUT = float(os.getenv("INVOICE_BUILDER_TIMEOUT", "10"))


class BackendError(Exception):
    """Raised when the backend can not be reached or rejects a request."""


def build_client(
    base_url: str,
    api_key: str | None = None,
    transport: httpx.BaseTransport | None = None,
) -> httpx.Client:
    """
    Build a client for the backend REST API.

    Args:
        base_url: API root, e.g. https://example.supabase.co/rest/v1
        api_key: Optional key sent in the apikey and Authorization headers.
        transport: Optional transport override (tests use MockTransport).

    Returns:
        Configured httpx.Client instance.
    """
    headers = {"Accept": "application/json", "Prefer": "return=representation"}
    if api_key:
        headers["apikey"] = api_key
        headers["Authorization"] = f"Bearer {api_key}"
    return httpx.Client(
        base_url=base_url,
        headers=headers,
        timeout=_TIMEOUT,
        transport=transport,
    )


@functools.cache
def backend_client() -> httpx.Client:
    """
    Return the shared backend client.

    Raises:
        BackendError: If INVOICE_BUILDER_BACKEND_URL is not configured.
    """
    base_url = os.getenv(BACKEND_URL_KEY)
    if not base_url:
        raise BackendError(f"{BACKEND_URL_KEY} is required for the live services")
    return build_client(base_url, os.getenv(BACKEND_KEY_KEY))


def request_json(client: httpx.Client, method: str, path: str, **kwargs) -> list | dict:
    """
    Send a request and return the decoded JSON body.

    Transport failures and non-2xx responses are raised as BackendError,
    chained to the original httpx exception. A body that is not JSON is
    raised the same way.
    """
    try:
        response = client.request(method, path, **kwargs)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        msg = f"{method} {path} failed with status {exc.response.status_code}"
        raise BackendError(msg) from exc
    except httpx.HTTPError as exc:
        raise BackendError(f"{method} {path} failed: {exc}") from exc
    if not response.content:
        return []
    try:
        return response.json()
    except ValueError as exc:
        raise BackendError(f"{method} {path} returned invalid JSON") from exc


def first_row(data: list | dict) -> dict:
    """Return the single row of a `return=representation` write."""
    if isinstance(data, list):
        if not data:
            raise BackendError("Backend returned no rows")
        return data[0]
    return data
