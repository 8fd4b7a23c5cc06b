from __future__ import annotations
import math
from typing import Any, Mapping, Optional, Sequence
from datetime import date, datetime, timezone
from decimal import Decimal, ROUND_HALF_UP, InvalidOperation

from pydantic.alias_generators import to_camel


def field(entry: Any, name: str, default: Any = None) -> Any:
    """Read ``name`` from a pydantic model or a JSON-shaped mapping.

    Mappings are looked up by the snake_case name first, then by its
    camelCase spelling (``missed_doses`` / ``missedDoses``).
    """
    if entry is None:
        return default
    if isinstance(entry, Mapping):
        if name in entry:
            return entry[name]
        return entry.get(to_camel(name), default)
    return getattr(entry, name, default)


def path(obj: Any, *names: str) -> Any:
    """Follow nested fields, returning None as soon as a link is missing."""
    for name in names:
        obj = field(obj, name)
        if obj is None:
            return None
    return obj


def as_list(entries: Any) -> Optional[list]:
    """Return entries as a list, or None when they are not a sequence."""
    if isinstance(entries, (str, bytes)) or not isinstance(entries, Sequence):
        return None
    return list(entries)


def safe_float(val: Any) -> Optional[float]:
    try:
        if val is None or isinstance(val, bool):
            return None
        return float(val)
    except (TypeError, ValueError):
        return None


def point_value(point: Any) -> Optional[float]:
    """Numeric value of a series entry: a number or a {value, date} point."""
    if isinstance(point, (int, float, Decimal)) and not isinstance(point, bool):
        return float(point)
    return safe_float(field(point, "value"))


def round_half_up(value: float, digits: int = 0) -> float:
    """Round half away from zero, e.g. 0.25 -> 0.3 and -2.5 -> -3."""
    try:
        quantum = Decimal(1).scaleb(-digits)
        return float(Decimal(repr(float(value))).quantize(quantum, rounding=ROUND_HALF_UP))
    except InvalidOperation:
        return float(value)


def round_int(value: float) -> int:
    """Nearest integer, half away from zero; 0 for infinite or NaN input."""
    if not math.isfinite(value):
        return 0
    return int(round_half_up(value, 0))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    """Naive datetimes are taken to be UTC."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_datetime(val: Any) -> Optional[datetime]:
    """Parse an ISO string, date or datetime into an aware UTC datetime.

    Plain dates map to midnight UTC. Unparseable input, or a time that falls outside
    the datetime range once shifted to UTC, yields None.
    """
    if val is None:
        return None
    if isinstance(val, datetime):
        try:
            return to_utc(val)
        except OverflowError:
            return None
    if isinstance(val, date):
        return datetime(val.year, val.month, val.day, tzinfo=timezone.utc)
    s = str(val).strip()
    if not s:
        return None
    try:
        return to_utc(datetime.fromisoformat(s.replace("Z", "+00:00")))
    except (ValueError, OverflowError):
        pass
    try:
        from dateutil import parser as _parser
        return to_utc(_parser.parse(s))
    except (ValueError, OverflowError):
        return None


def calendar_day(val: Any) -> Any:
    """Calendar date of a usage timestamp; unparseable values are kept as-is."""
    if isinstance(val, datetime):
        return val.date()
    if isinstance(val, date):
        return val
    s = str(val)
    try:
        return date.fromisoformat(s[:10])
    except ValueError:
        return s


def is_overdue(entry: Any, now: datetime) -> bool:
    """Not completed and due on or before ``now``."""
    if field(entry, "completed"):
        return False
    due = parse_datetime(field(entry, "due_date"))
    return due is not None and due <= now
