from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from fleet.validation import any_blank, as_utc, is_after, parse_positive_amount, to_timestamp


@pytest.mark.parametrize("amount", ["0", "-1", "abc", "", "   ", "NaN", "Infinity", None])
def test_parse_positive_amount_rejects(amount):
    assert parse_positive_amount(amount) is None


def test_parse_positive_amount_accepts_decimal_string():
    assert parse_positive_amount("5.5") == Decimal("5.5")


def test_any_blank():
    assert any_blank("a", "  ")
    assert any_blank("a", None)
    assert not any_blank("a", "b")


def test_naive_datetimes_are_read_as_utc():
    naive = datetime(2030, 1, 1, 12, 0)
    assert as_utc(naive) == datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
    assert to_timestamp(naive) == "2030-01-01T12:00:00+00:00"


def test_is_after_is_strict():
    now = datetime.now(timezone.utc)
    assert is_after(now + timedelta(seconds=1), now)
    assert not is_after(now, now)
    assert not is_after(now - timedelta(seconds=1), now)
