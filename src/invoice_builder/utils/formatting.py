"""
Formatting and parsing helpers shared by the UI and the services.

Provides helpers for:
- Date parsing (ISO and m/d/y formats supported)
- Currency formatting
"""

from datetime import datetime


def parse_date(date_str: str | None) -> datetime | None:
    """
    Parse a date string to a datetime object.

    Args:
        date_str: Date string in ISO format (e.g., "2024-12-25") or m/d/y
            format (e.g., "12/25/2024").

    Returns:
        datetime object if parsing succeeds, None otherwise
    """
    if date_str:
        date_str = date_str.strip()
    if not date_str:
        return None

    try:
        return datetime.fromisoformat(date_str)
    except (ValueError, TypeError):
        pass

    # Backend exports sometimes carry US style dates
    for fmt in ("%m/%d/%Y", "%m/%d/%y"):
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue

    return None


def format_currency(value: float, currency: str) -> str:
    """
    Format a currency amount with the currency code prefix.

    Args:
        value: Numeric amount to format.
        currency: Currency code (e.g., 'USD', 'EUR').

    Returns:
        Formatted string like 'USD 1,234.56'.
    """
    return f"{currency} {value:,.2f}"
