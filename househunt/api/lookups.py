"""Lookup API routes: locations, developments, builders, house models."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from househunt.schemas.house_model import HouseModelDetails, HouseModelDetailsPayload
from househunt.schemas.lookups import (
    ActionResponse,
    AddLookupItemPayload,
    CreatedResponse,
    LinkBuilderPayload,
    LookupItemResponse,
    UpdateNamePayload,
)
from househunt.services import get_db
from househunt.services.errors import NotFoundError
from househunt.services.lookup_service import LookupService

router = APIRouter(prefix="/api", tags=["lookups"])


@router.get("/lookups/{kind}", response_model=list[LookupItemResponse])
async def list_all(kind: str, db: Session = Depends(get_db)) -> list[LookupItemResponse]:
    """List every item of a kind (location, development, builder, houseModel), by name."""
    items = LookupService(db).list_all(kind)
    return [LookupItemResponse.model_validate(item) for item in items]


@router.get("/lookups/{kind}/children", response_model=list[LookupItemResponse])
async def list_children(
    kind: str,
    parent_id: str | None = Query(None, description="Location ID or Builder ID"),
    db: Session = Depends(get_db),
) -> list[LookupItemResponse]:
    """Developments of a location, or house models of a builder."""
    items = LookupService(db).list_children(kind, parent_id)
    return [LookupItemResponse.model_validate(item) for item in items]


@router.post(
    "/lookups/{kind}", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED
)
async def add_item(
    kind: str, payload: AddLookupItemPayload, db: Session = Depends(get_db)
) -> CreatedResponse:
    """
    Add a lookup item.

    Returns:
        201: id of the new item
        400: Missing name or parent
        409: Name already exists in scope
    """
    item_id = LookupService(db).add_item(
        kind,
        payload.name,
        parent_id=payload.parent_id,
        rooms=payload.rooms,
        features=payload.features,
    )
    return CreatedResponse(id=item_id, message=f"{payload.name.strip()} added successfully.")


@router.patch("/lookups/{kind}/{item_id}", response_model=ActionResponse)
async def update_name(
    kind: str, item_id: str, payload: UpdateNamePayload, db: Session = Depends(get_db)
) -> ActionResponse:
    """Rename a lookup item."""
    LookupService(db).update_name(kind, item_id, payload.name)
    return ActionResponse(message="Item renamed successfully.")


@router.delete("/lookups/{kind}/{item_id}", response_model=ActionResponse)
async def delete_item(kind: str, item_id: str, db: Session = Depends(get_db)) -> ActionResponse:
    """Delete a lookup item; children cascade and plots keep a null reference."""
    deleted = LookupService(db).delete_item(kind, item_id)
    return ActionResponse(message="Item deleted successfully." if deleted else "Nothing to delete.")


@router.get("/developments/{development_id}/builders", response_model=list[LookupItemResponse])
async def list_linked_builders(
    development_id: str, db: Session = Depends(get_db)
) -> list[LookupItemResponse]:
    """Builders linked to a development."""
    builders = LookupService(db).list_linked_builders(development_id)
    return [LookupItemResponse.model_validate(builder) for builder in builders]


@router.post(
    "/developments/{development_id}/builders",
    response_model=ActionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def link_builder(
    development_id: str, payload: LinkBuilderPayload, db: Session = Depends(get_db)
) -> ActionResponse:
    """Link a builder to a development."""
    LookupService(db).link_builder_to_development(development_id, payload.builder_id)
    return ActionResponse(message="Builder linked to development successfully.")


@router.get("/house-models/{house_model_id}/details", response_model=HouseModelDetails)
async def get_house_model_details(
    house_model_id: str, db: Session = Depends(get_db)
) -> HouseModelDetails:
    """Rooms and features of a house model."""
    details = LookupService(db).get_house_model_details(house_model_id)
    if details is None:
        raise NotFoundError(f"House Model {house_model_id} not found.")
    return details


@router.put("/house-models/{house_model_id}/details", response_model=ActionResponse)
async def update_house_model_details(
    house_model_id: str, payload: HouseModelDetailsPayload, db: Session = Depends(get_db)
) -> ActionResponse:
    """Replace the rooms and features of a house model."""
    LookupService(db).update_house_model_details(house_model_id, payload.rooms, payload.features)
    return ActionResponse(message="House Model details updated successfully.")
