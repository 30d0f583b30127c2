"""Display formatting shared by the renderer and the summarizer."""

from datetime import date, datetime
from typing import Any

from form_builder.config import get_config


def format_number(value: int | float) -> str:
    """Render a number the way it was written: ``18`` not ``18.0``."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_charge(amount: float, price_type: str = "fixed") -> str:
    """
    Format an option charge, e.g. ``+10.00€`` or ``+15%``.

    Percentage charges show the percentage, not the resolved amount.
    """
    sign = "+" if amount > 0 else ""
    if price_type == "percentage":
        return f"{sign}{format_number(amount)}%"
    config = get_config()
    return f"{sign}{amount:.{config.price_decimals}f}{config.currency_symbol}"


def parse_date(value: Any) -> date | None:
    """Parse an ISO date or datetime string; None when it is not one."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value:
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text).date()
    except ValueError:
        return None


def format_date(value: Any) -> str:
    """Format a date value for display, falling back to its text."""
    parsed = parse_date(value)
    if parsed is None:
        return str(value)
    return parsed.strftime(get_config().summary_date_format)


def format_value(value: Any) -> str:
    """Natural text form of a submitted value."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "Yes" if value else "No"
    if isinstance(value, (list, tuple)):
        return ", ".join(format_value(item) for item in value)
    if isinstance(value, (int, float)):
        return format_number(value)
    return str(value)
