"""Stamp duty calculation on a progressive band schedule.

Each band taxes only the part of the price that falls inside it:

    up to £125,000            0%
    £125,001 - £250,000       2%
    £250,001 - £925,000       5%
    £925,001 - £1,500,000    10%
    above £1,500,000         12%

Duty is therefore continuous at every threshold and never decreases as the
price rises.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple, Optional, Union

from househunt.services.locale_service import format_amount
from househunt.services.parsers import parse_amount

PENCE = Decimal("0.01")


class Band(NamedTuple):
    """A slice of the price between `lower` and `upper` taxed at `rate`."""

    lower: Decimal
    upper: Optional[Decimal]
    rate: Decimal


BANDS: tuple[Band, ...] = (
    Band(Decimal("0"), Decimal("125000"), Decimal("0")),
    Band(Decimal("125000"), Decimal("250000"), Decimal("0.02")),
    Band(Decimal("250000"), Decimal("925000"), Decimal("0.05")),
    Band(Decimal("925000"), Decimal("1500000"), Decimal("0.10")),
    Band(Decimal("1500000"), None, Decimal("0.12")),
)

Amount = Union[Decimal, int, float, str]


def stamp_duty(value: Amount) -> Decimal:
    """Calculate stamp duty for a property price.

    Args:
        value: Property price (Decimal, int, float or numeric string)

    Returns:
        Duty rounded to pence

    Raises:
        ValueError: If value is missing, malformed or negative

    Examples:
        >>> stamp_duty(300000)
        Decimal('5000.00')
        >>> stamp_duty(1000000)
        Decimal('43750.00')
    """
    price = parse_amount(value)
    if price is None:
        raise ValueError("A price is required to calculate stamp duty")
    if price < 0:
        raise ValueError(f"Price cannot be negative: {price}")

    duty = Decimal("0")
    for band in BANDS:
        if price <= band.lower:
            break
        top = price if band.upper is None else min(price, band.upper)
        duty += (top - band.lower) * band.rate

    return duty.quantize(PENCE, rounding=ROUND_HALF_UP)


def stamp_duty_range(
    min_cost: Optional[Amount], max_cost: Optional[Amount]
) -> Optional[tuple[Decimal, Decimal]]:
    """Duty at both ends of a price range.

    Bounds given in the wrong order are swapped. With only one bound the duty
    for that bound is returned twice. With neither, None.
    """
    low = parse_amount(min_cost)
    high = parse_amount(max_cost)

    if low is None and high is None:
        return None
    if low is None:
        low = high
    elif high is None:
        high = low
    elif low > high:
        low, high = high, low

    return stamp_duty(low), stamp_duty(high)


def format_stamp_duty(low: Decimal, high: Optional[Decimal] = None) -> str:
    """Format a duty or a duty range for display: '£5,000.00' or '£4,000.00 - £6,000.00'."""
    if high is None or low == high:
        return format_amount(low)
    return f"{format_amount(low)} - {format_amount(high)}"


def _plain(amount: Decimal) -> str:
    # 280000.00 -> "280000", 280000.50 -> "280000.5"
    return format(amount.normalize(), "f")


def format_cost_range(min_cost: Optional[Decimal], max_cost: Optional[Decimal]) -> Optional[str]:
    """Store a range as 'min - max', or as a single value when only one bound is known.

    Examples:
        >>> format_cost_range(Decimal("280000"), Decimal("320000"))
        '280000 - 320000'
        >>> format_cost_range(None, Decimal("320000"))
        '320000'
    """
    if min_cost is None and max_cost is None:
        return None
    if min_cost is None or max_cost is None or min_cost == max_cost:
        single = min_cost if min_cost is not None else max_cost
        return _plain(single)
    if min_cost > max_cost:
        min_cost, max_cost = max_cost, min_cost
    return f"{_plain(min_cost)} - {_plain(max_cost)}"


__all__ = [
    "BANDS",
    "stamp_duty",
    "stamp_duty_range",
    "format_stamp_duty",
    "format_cost_range",
]
