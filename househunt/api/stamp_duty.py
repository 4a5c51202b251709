"""Stamp duty calculator route, for live display while the form is edited."""

from fastapi import APIRouter, Query

from househunt.schemas.plots import StampDutyResponse
from househunt.services.errors import ValidationError
from househunt.services.stamp_duty import format_stamp_duty, stamp_duty_range

router = APIRouter(prefix="/api/stamp-duty", tags=["stamp-duty"])


@router.get("", response_model=StampDutyResponse)
async def calculate(
    value: str | None = Query(None, description="Known price"),
    min_cost: str | None = Query(None, description="Lower bound of a price range"),
    max_cost: str | None = Query(None, description="Upper bound of a price range"),
) -> StampDutyResponse:
    """Duty for a price, or for both ends of a price range."""
    try:
        if value is not None:
            duties = stamp_duty_range(value, value)
        else:
            duties = stamp_duty_range(min_cost, max_cost)
    except ValueError as e:
        raise ValidationError(str(e)) from e

    if duties is None:
        raise ValidationError("Provide a value, or a minimum or maximum cost.")

    low, high = duties
    return StampDutyResponse(low=low, high=high, display=format_stamp_duty(low, high))
