"""Pydantic schemas for plot and stamp duty endpoints."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PlotPayload(BaseModel):
    """Request payload for POST /api/plots. With `id` the plot is updated.

    Identifiers are accepted as strings or integers, as posted by the form;
    the plot service rejects anything that is not an integer.
    """

    id: int | str | None = None
    plot_number: str | None = None
    entrance_facing: str | None = None

    cost_known: bool = False
    cost_value: Decimal | str | None = Field(None, description="Price when the cost is known")
    cost_range: str | None = Field(None, description="'min - max' or single value")
    min_cost: Decimal | str | None = Field(None, description="Lower bound when cost is unknown")
    max_cost: Decimal | str | None = Field(None, description="Upper bound when cost is unknown")

    location_id: int | str | None = None
    development_id: int | str | None = None
    builder_id: int | str | None = None
    house_model_id: int | str | None = None


class PlotResponse(BaseModel):
    """A plot joined with the names of its lookups. Orphaned references give null names."""

    id: int
    plot_number: str
    entrance_facing: str | None = None
    cost_known: bool
    cost_value: Decimal | None = None
    cost_range: str | None = None
    stamp_duty: str | None = None

    location_id: int | None = None
    location_name: str | None = None
    development_id: int | None = None
    development_name: str | None = None
    builder_id: int | None = None
    builder_name: str | None = None
    house_model_id: int | None = None
    house_model_name: str | None = None

    rooms: list[dict[str, Any]] = Field(default_factory=list)
    features: list[dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(from_attributes=True)


class StampDutyResponse(BaseModel):
    """Stamp duty for a price or a price range."""

    low: Decimal
    high: Decimal
    display: str
