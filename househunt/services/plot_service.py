"""Plot repository: create, update, delete and read plots."""

import logging
from decimal import Decimal
from typing import Any, Mapping

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from househunt.models import Builder, Development, HouseModel, Location, Plot
from househunt.services.errors import ConflictError, NotFoundError, ValidationError
from househunt.services.parsers import parse_amount, parse_cost_range, parse_flag
from househunt.services.plot_projection import PlotView, get_plot_view, list_plot_views
from househunt.services.stamp_duty import (
    format_cost_range,
    format_stamp_duty,
    stamp_duty,
    stamp_duty_range,
)
from househunt.services.validation import parse_id_field, require_id_field

logger = logging.getLogger(__name__)

# (plot field, label used in messages, lookup model)
REFERENCE_FIELDS: tuple[tuple[str, str, type], ...] = (
    ("location_id", "Location", Location),
    ("development_id", "Development", Development),
    ("builder_id", "Builder", Builder),
    ("house_model_id", "House Model", HouseModel),
)


def duplicate_plot_message(plot_number: str) -> str:
    return f"Plot number '{plot_number}' already exists in the selected development."


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_cost(value: Any, label: str) -> Decimal | None:
    try:
        amount = parse_amount(value)
    except ValueError as e:
        raise ValidationError(f"Invalid {label}.") from e
    if amount is not None and amount < 0:
        raise ValidationError(f"{label.capitalize()} cannot be negative.")
    return amount


def resolve_cost(plot: Mapping[str, Any]) -> dict[str, Any]:
    """
    Work out the stored cost columns and stamp duty for a plot.

    A known cost keeps cost_value and clears cost_range. An unknown cost is
    taken from min_cost/max_cost when either is given, otherwise from a
    cost_range string, and clears cost_value.

    Returns:
        Dict with cost_known, cost_value, cost_range, stamp_duty

    Raises:
        ValidationError: Missing, malformed or negative cost
    """
    cost_known = parse_flag(plot.get("cost_known"))

    if cost_known:
        cost_value = _parse_cost(plot.get("cost_value"), "cost value")
        if cost_value is None:
            raise ValidationError("Cost value is required when the cost is known.")
        return {
            "cost_known": True,
            "cost_value": cost_value,
            "cost_range": None,
            "stamp_duty": format_stamp_duty(stamp_duty(cost_value)),
        }

    if not _is_blank(plot.get("min_cost")) or not _is_blank(plot.get("max_cost")):
        low = _parse_cost(plot.get("min_cost"), "minimum cost")
        high = _parse_cost(plot.get("max_cost"), "maximum cost")
    else:
        try:
            low, high = parse_cost_range(plot.get("cost_range"))
        except ValueError as e:
            raise ValidationError("Invalid cost range.") from e
        if (low is not None and low < 0) or (high is not None and high < 0):
            raise ValidationError("Cost range cannot be negative.")

    duties = stamp_duty_range(low, high)
    if duties is None:
        raise ValidationError(
            "A minimum or maximum cost is required when the cost is not known."
        )

    return {
        "cost_known": False,
        "cost_value": None,
        "cost_range": format_cost_range(low, high),
        "stamp_duty": format_stamp_duty(*duties),
    }


class PlotService:
    """Service for plot CRUD with (plot_number, development) uniqueness."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def list_plots(self) -> list[PlotView]:
        """All plots with lookup names, ordered by plot number."""
        return list_plot_views(self.db)

    def get_plot(self, plot_id: int | str | None) -> PlotView | None:
        """
        Get one plot with lookup names.

        Returns:
            PlotView or None if not found
        """
        parsed_id = parse_id_field(plot_id, "Plot")
        if parsed_id is None:
            return None
        return get_plot_view(self.db, parsed_id)

    def _find_clash(
        self, plot_number: str, development_id: int, exclude_id: int | None = None
    ) -> Any:
        query = select(Plot.id).where(
            Plot.plot_number == plot_number,
            Plot.development_id == development_id,
        )
        if exclude_id is not None:
            query = query.where(Plot.id != exclude_id)
        return self.db.execute(query).first()

    def _validated_values(self, plot: Mapping[str, Any]) -> dict[str, Any]:
        values: dict[str, Any] = {}

        raw_number = plot.get("plot_number")
        plot_number = str(raw_number).strip() if raw_number is not None else ""
        if not plot_number:
            raise ValidationError("Plot number is required.")
        values["plot_number"] = plot_number

        entrance = plot.get("entrance_facing")
        if isinstance(entrance, str):
            entrance = entrance.strip()
        values["entrance_facing"] = entrance or None

        # Parse every id first so a malformed one is reported before a missing one
        parsed = {
            field: parse_id_field(plot.get(field), label) for field, label, _ in REFERENCE_FIELDS
        }
        for field, label, model in REFERENCE_FIELDS:
            ref_id = parsed[field]
            if ref_id is None:
                raise ValidationError(f"{label} is required.")
            if self.db.get(model, ref_id) is None:
                raise ValidationError(f"{label} {ref_id} does not exist.")
            values[field] = ref_id

        values.update(resolve_cost(plot))
        return values

    def save_plot(self, plot: Mapping[str, Any]) -> int:
        """
        Insert a plot, or update it when `id` is given.

        Args:
            plot: Form fields: id, plot_number, entrance_facing, cost_known,
                cost_value, cost_range or min_cost/max_cost, and the four
                lookup ids

        Returns:
            Plot ID

        Raises:
            ValidationError: Malformed id, missing field, bad cost
            ConflictError: Plot number already used in the development
            NotFoundError: Update of a plot that does not exist
        """
        plot_id = parse_id_field(plot.get("id"), "Plot")
        values = self._validated_values(plot)
        plot_number = values["plot_number"]
        message = duplicate_plot_message(plot_number)

        if plot_id is not None:
            existing = self.db.get(Plot, plot_id)
            if existing is None:
                raise NotFoundError(f"Plot {plot_id} not found.")
            if self._find_clash(plot_number, values["development_id"], exclude_id=plot_id):
                logger.warning(f"Update of plot {plot_id} rejected: {message}")
                raise ConflictError(message)
            for key, value in values.items():
                setattr(existing, key, value)
            target = existing
        else:
            if self._find_clash(plot_number, values["development_id"]):
                logger.warning(f"Insert rejected: {message}")
                raise ConflictError(message)
            target = Plot(**values)
            self.db.add(target)

        # The table constraint backs up the pre-check
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.error(f"IntegrityError saving plot {plot_number!r}: {e.orig}")
            raise ConflictError(message) from e

        self.db.refresh(target)
        logger.info(
            f"{'Updated' if plot_id is not None else 'Inserted'} plot {target.id}: "
            f"{plot_number!r} in development {target.development_id}"
        )
        return target.id

    def delete_plot(self, plot_id: int | str | None) -> bool:
        """
        Delete a plot. Deleting a missing plot is a no-op.

        Returns:
            True if a row was deleted
        """
        parsed_id = require_id_field(plot_id, "Plot")
        result = self.db.execute(delete(Plot).where(Plot.id == parsed_id))
        self.db.commit()

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted plot {parsed_id}")
        return deleted


__all__ = ["PlotService", "REFERENCE_FIELDS", "duplicate_plot_message", "resolve_cost"]
