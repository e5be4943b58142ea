"""
Utility functions for the back office.
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

DEFAULT_DATE_FORMAT = "%Y-%m-%d"
GRID_DATETIME_FORMAT = "%m/%d/%Y %H:%M:%S"


def decimal_to_str(value: Optional[Decimal]) -> str:
    """Render a decimal without trailing zeros: Decimal('10.500000') -> '10.5'."""
    if value is None:
        return "0"
    value = Decimal(value)
    if value == value.to_integral_value():
        return format(value.quantize(Decimal(1)), "f")
    return format(value.normalize(), "f")


def parse_decimal(value: Any) -> Optional[Decimal]:
    if value is None:
        return None
    if isinstance(value, Decimal):
        return value
    if isinstance(value, (int, float)):
        return Decimal(str(value))
    cleaned = str(value).replace(",", ".").strip()
    if not cleaned:
        return None
    try:
        return Decimal(cleaned)
    except InvalidOperation:
        raise ValueError(f"'{value}' is not a valid number")


def format_price(value: Optional[Decimal], currency_sign: str = "€") -> str:
    amount = Decimal(value or 0).quantize(Decimal("0.01"))
    return f"{currency_sign}{amount}"


def format_date(value: Optional[date]) -> str:
    return value.strftime(DEFAULT_DATE_FORMAT) if value else ""


def parse_date(value: Any) -> Optional[date]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value).strip(), DEFAULT_DATE_FORMAT).date()


def localized(values: Optional[Dict[Any, Any]]) -> Dict[int, Any]:
    """JSON columns come back with string keys; language ids are integers."""
    if not values:
        return {}
    return {int(language_id): value for language_id, value in values.items()}
