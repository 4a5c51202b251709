"""Plot API routes."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from househunt.schemas.lookups import ActionResponse, CreatedResponse
from househunt.schemas.plots import PlotPayload, PlotResponse
from househunt.services import get_db
from househunt.services.errors import NotFoundError
from househunt.services.plot_service import PlotService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/plots", tags=["plots"])


@router.get("", response_model=list[PlotResponse])
async def list_plots(db: Session = Depends(get_db)) -> list[PlotResponse]:
    """All plots with lookup names, ordered by plot number."""
    plots = PlotService(db).list_plots()
    logger.debug(f"plots.list: count={len(plots)}")
    return [PlotResponse.model_validate(plot) for plot in plots]


@router.get("/{plot_id}", response_model=PlotResponse)
async def get_plot(plot_id: str, db: Session = Depends(get_db)) -> PlotResponse:
    """One plot, 404 when it does not exist."""
    plot = PlotService(db).get_plot(plot_id)
    if plot is None:
        raise NotFoundError(f"Plot {plot_id} not found.")
    return PlotResponse.model_validate(plot)


@router.post("", response_model=CreatedResponse)
async def save_plot(payload: PlotPayload, db: Session = Depends(get_db)) -> CreatedResponse:
    """
    Save a plot (insert without id, update with id).

    Returns:
        200: id of the saved plot
        400: Invalid or missing field
        404: Update of a missing plot
        409: Plot number already exists in the development
    """
    is_update = payload.id not in (None, "")
    plot_id = PlotService(db).save_plot(payload.model_dump())
    return CreatedResponse(
        id=plot_id,
        message="Plot updated successfully." if is_update else "Plot saved successfully.",
    )


@router.delete("/{plot_id}", response_model=ActionResponse)
async def delete_plot(plot_id: str, db: Session = Depends(get_db)) -> ActionResponse:
    """Delete a plot; deleting a missing plot is not an error."""
    PlotService(db).delete_plot(plot_id)
    return ActionResponse(message="Plot deleted successfully.")
