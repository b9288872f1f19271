from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import Any, Optional


def iso_date(value: Any) -> Optional[str]:
    """Render a DATE column as YYYY-MM-DD.

    Drivers return ``datetime.date``; the Supabase client returns strings,
    sometimes with a time part.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    text = str(value)
    return text[:10] if len(text) >= 10 and text[4] == "-" else text


def as_number(value: Any) -> Any:
    """NUMERIC columns come back as Decimal or str; expose them as floats."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, (Decimal, int, float)):
        return float(value)
    try:
        return float(value)
    except (TypeError, ValueError):
        return value


def as_int(value: Any) -> Any:
    if value is None or isinstance(value, bool):
        return value
    try:
        return int(value)
    except (TypeError, ValueError):
        return value


def as_bool(value: Any) -> Optional[bool]:
    # MySQL BOOLEAN is TINYINT(1).
    if value is None:
        return None
    if isinstance(value, str):
        return value.strip().lower() in {"1", "true", "t", "yes"}
    return bool(value)
