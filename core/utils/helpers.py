"""
Nutrition utility functions
"""

from __future__ import annotations
import math
import re
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Optional


# Time utilities

def utc_timestamp(now: Optional[datetime] = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2025-01-05T09:30:00.123Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


_EXTENDED_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}(T.+)?$")


def parse_iso_date(value: Any) -> Optional[date]:
    """
    Calendar date of an extended-form ISO string (YYYY-MM-DD, optionally
    followed by a THH:MM[:SS[.fff]][Z|+HH:MM] time), or None.

    Basic (20250115) and week (2025-W03-3) forms are refused. For a datetime
    the written date is taken, without timezone conversion.
    """
    if not isinstance(value, str):
        return None
    text = value.strip()
    if not _EXTENDED_DATE.match(text):
        return None
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def is_iso_date(value: Any) -> bool:
    """True when value is a string holding an extended ISO date or datetime."""
    return parse_iso_date(value) is not None


def to_iso_date(value: Any) -> str:
    """Canonical YYYY-MM-DD form, so stored dates sort as text in date order.

    Raises:
        ValueError: value is not an extended ISO date or datetime
    """
    parsed = parse_iso_date(value)
    if parsed is None:
        raise ValueError("must be an ISO-8601 date (YYYY-MM-DD)")
    return parsed.isoformat()


def is_number(value: Any) -> bool:
    """True for finite int/float/Decimal values; bool is not a number here."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return False
    if isinstance(value, int):
        return True
    return math.isfinite(value)


# Serialization utilities

def to_jsonable(obj: Any) -> Any:
    from pydantic import BaseModel

    if obj is None:
        return None
    if isinstance(obj, float):
        # Float columns read back 2 as 2.0; answer with the integer form
        return int(obj) if obj.is_integer() else obj
    if isinstance(obj, (str, int, bool)):
        return obj
    if isinstance(obj, Decimal):
        return int(obj) if obj == obj.to_integral_value() else float(obj)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, exclude_none=True)
    if hasattr(obj, "to_dict") and callable(getattr(obj, "to_dict")):
        return obj.to_dict()
    if isinstance(obj, dict):
        return {k: to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [to_jsonable(v) for v in obj]
    return str(obj)
