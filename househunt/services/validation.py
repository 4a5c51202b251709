"""Field checks shared by the lookup and plot services.

Turn parser failures into ValidationError with the message the UI shows.
"""

from typing import Union

from househunt.services.errors import ValidationError
from househunt.services.parsers import parse_id


def parse_id_field(value: Union[int, str, None], label: str) -> int | None:
    """Parse an id, rejecting malformed input with "Invalid <label> ID."."""
    try:
        return parse_id(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {label} ID.") from e


def require_id_field(value: Union[int, str, None], label: str) -> int:
    """Parse an id that must be present."""
    parsed = parse_id_field(value, label)
    if parsed is None:
        raise ValidationError(f"{label} ID is required.")
    return parsed


def clean_name(value: str | None, label: str) -> str:
    """Trim a display name; empty names are rejected."""
    name = (value or "").strip()
    if not name:
        raise ValidationError(f"{label} name is required.")
    return name
