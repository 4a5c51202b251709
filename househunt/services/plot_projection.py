"""Read-side view of plots joined with their lookup names.

Uses LEFT OUTER JOINs: a plot whose location, development, builder or house
model was deleted still appears, with a null name for the missing lookup.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from househunt.models import Builder, Development, HouseModel, Location, Plot

NOT_AVAILABLE = "N/A"


@dataclass
class PlotView:
    """A plot row with denormalized lookup names for list/detail display."""

    id: int
    plot_number: str
    entrance_facing: str | None
    cost_known: bool
    cost_value: Decimal | None
    cost_range: str | None
    stamp_duty: str | None
    location_id: int | None
    location_name: str | None
    development_id: int | None
    development_name: str | None
    builder_id: int | None
    builder_name: str | None
    house_model_id: int | None
    house_model_name: str | None
    rooms: list[dict[str, Any]] = field(default_factory=list)
    features: list[dict[str, Any]] = field(default_factory=list)

    def label(self, name: str | None) -> str:
        """Display text for a lookup name that may be missing."""
        return name if name else NOT_AVAILABLE


def _plot_view_query() -> Select:
    return (
        select(
            Plot,
            Location.name.label("location_name"),
            Development.name.label("development_name"),
            Builder.name.label("builder_name"),
            HouseModel.name.label("house_model_name"),
            HouseModel.rooms_data,
            HouseModel.features_data,
        )
        .outerjoin(Location, Plot.location_id == Location.id)
        .outerjoin(Development, Plot.development_id == Development.id)
        .outerjoin(Builder, Plot.builder_id == Builder.id)
        .outerjoin(HouseModel, Plot.house_model_id == HouseModel.id)
    )


def _to_view(row: Any) -> PlotView:
    plot: Plot = row.Plot
    return PlotView(
        id=plot.id,
        plot_number=plot.plot_number,
        entrance_facing=plot.entrance_facing,
        cost_known=plot.cost_known,
        cost_value=plot.cost_value,
        cost_range=plot.cost_range,
        stamp_duty=plot.stamp_duty,
        location_id=plot.location_id,
        location_name=row.location_name,
        development_id=plot.development_id,
        development_name=row.development_name,
        builder_id=plot.builder_id,
        builder_name=row.builder_name,
        house_model_id=plot.house_model_id,
        house_model_name=row.house_model_name,
        rooms=row.rooms_data or [],
        features=row.features_data or [],
    )


def list_plot_views(db: Session) -> list[PlotView]:
    """All plots ordered by plot number."""
    rows = db.execute(_plot_view_query().order_by(Plot.plot_number, Plot.id)).all()
    return [_to_view(row) for row in rows]


def get_plot_view(db: Session, plot_id: int) -> PlotView | None:
    """One plot, or None if there is no plot with this id."""
    row = db.execute(_plot_view_query().where(Plot.id == plot_id)).first()
    return _to_view(row) if row is not None else None


__all__ = ["NOT_AVAILABLE", "PlotView", "list_plot_views", "get_plot_view"]
