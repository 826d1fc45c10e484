from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes as UTC; convert aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_timestamp(value: datetime) -> str:
    return as_utc(value).isoformat()


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def any_blank(*values: str | None) -> bool:
    return any(is_blank(v) for v in values)


def is_after(value: datetime, reference: datetime) -> bool:
    return as_utc(value) > as_utc(reference)


def parse_positive_amount(amount: str | None) -> Decimal | None:
    """Return the amount as a Decimal when it is a finite number above zero."""
    if is_blank(amount):
        return None
    try:
        parsed = Decimal(amount.strip())
    except InvalidOperation:
        return None
    if not parsed.is_finite() or parsed <= 0:
        return None
    return parsed
