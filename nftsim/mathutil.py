"""Small numeric and date helpers."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

MARKET_TZ = timezone(timedelta(hours=7), "GMT+7")


def int_div_ceil(number: int, divisor: int) -> int:
    """Quotient truncated toward zero, then raised by one if there was a remainder."""
    if divisor == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(number) // abs(divisor)
    if (number < 0) != (divisor < 0):
        quotient = -quotient
    if number - quotient * divisor != 0:
        quotient += 1
    return quotient


def truncate_float(num: float) -> float:
    """Cut a number to two decimal places, rounding toward zero."""
    return int(num * 100) / 100


def current_date(now: datetime | None = None) -> str:
    """Date in the market's time zone, written like 'Sunday May 18, 2025'."""
    moment = (now or datetime.now(MARKET_TZ)).astimezone(MARKET_TZ)
    return f"{moment:%A %B} {moment.day}, {moment.year}"