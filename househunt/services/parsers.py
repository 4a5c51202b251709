"""Parsing utilities for values coming from the data-entry form.

Form fields arrive as strings (or as numbers from JSON clients):
- Identifiers: "12", 12, "" or None
- Amounts: "350000", "£350,000.00", 350000.5
- Cost ranges: "280000 - 320000" or a single value

Example:
    >>> parse_id("12")
    12

    >>> parse_amount("£350,000")
    Decimal('350000')

    >>> parse_cost_range("280000 - 320000")
    (Decimal('280000'), Decimal('320000'))
"""

import re
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

from househunt.services.locale_service import parse_decimal

# A hyphen after a digit separates the bounds; a leading hyphen is a minus sign
RANGE_SEPARATOR = re.compile(r"(?<=\d)\s*-\s*")


def parse_id(value: Union[int, str, None]) -> Optional[int]:
    """
    Parse a row identifier.

    Args:
        value: Integer, numeric string, or None/empty

    Returns:
        int or None if input is empty/None

    Raises:
        ValueError: If value is not an integer

    Examples:
        >>> parse_id(" 7 ")
        7
        >>> parse_id("")
        None
        >>> parse_id("abc")
        Traceback (most recent call last):
        ValueError: Cannot parse id 'abc'
    """
    if value is None:
        return None
    # bool is an int subclass; True is not a row id
    if isinstance(value, bool):
        raise ValueError(f"Cannot parse id {value!r}")
    if isinstance(value, int):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Cannot parse id {value!r}")

    value = value.strip()
    if not value:
        return None

    try:
        return int(value)
    except ValueError as e:
        raise ValueError(f"Cannot parse id '{value}'") from e


def parse_amount(value: Union[Decimal, int, float, str, None]) -> Optional[Decimal]:
    """
    Parse a monetary amount to Decimal.

    Args:
        value: Number or locale-formatted string (currency symbol allowed)

    Returns:
        Decimal or None if input is empty/None

    Raises:
        ValueError: If value is not a finite number
    """
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Cannot parse amount {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, (int, float)):
        amount = Decimal(str(value))
    else:
        value = value.strip()
        if not value:
            return None
        try:
            amount = parse_decimal(value)
        except (ValueError, InvalidOperation) as e:
            raise ValueError(f"Cannot parse amount '{value}': {e}") from e

    if not amount.is_finite():
        raise ValueError(f"Cannot parse amount {value!r}: not a finite number")
    return amount


def parse_cost_range(value: Optional[str]) -> tuple[Optional[Decimal], Optional[Decimal]]:
    """Parse a stored cost range into (min, max).

    A single value gives the same bound twice. "-300000" is one negative
    value, not an open range.

    Raises:
        ValueError: If the string has more than one separator or a bad amount

    Examples:
        >>> parse_cost_range("280000 - 320000")
        (Decimal('280000'), Decimal('320000'))
        >>> parse_cost_range("300000")
        (Decimal('300000'), Decimal('300000'))
        >>> parse_cost_range(None)
        (None, None)
    """
    if not value or not value.strip():
        return None, None

    parts = RANGE_SEPARATOR.split(value.strip())
    if len(parts) == 1:
        amount = parse_amount(parts[0])
        return amount, amount
    if len(parts) == 2:
        return parse_amount(parts[0]), parse_amount(parts[1])

    raise ValueError(f"Cannot parse cost range '{value}' (expected 'min - max')")


def parse_flag(value: Union[bool, int, str, None]) -> bool:
    """
    Parse a yes/no form value to bool.

    Examples:
        >>> parse_flag("yes")
        True
        >>> parse_flag(0)
        False
        >>> parse_flag(None)
        False
    """
    if value is None:
        return False
    if isinstance(value, (bool, int)):
        return bool(value)

    return value.strip().lower() in {"1", "true", "yes", "on"}
