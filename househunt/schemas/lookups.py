"""Pydantic schemas for lookup (master data) endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from househunt.schemas.house_model import Feature, Room


class LookupItemResponse(BaseModel):
    """A selectable lookup option."""

    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class AddLookupItemPayload(BaseModel):
    """Request payload for POST /api/lookups/{kind}."""

    name: str = Field(..., description="Display name; trimmed before saving")
    parent_id: int | str | None = Field(
        None, description="Location ID for developments, Builder ID for house models"
    )
    rooms: list[Room] | None = Field(None, description="Initial rooms (house models only)")
    features: list[Feature] | None = Field(None, description="Initial features (house models only)")


class UpdateNamePayload(BaseModel):
    """Request payload for PATCH /api/lookups/{kind}/{id}."""

    name: str


class LinkBuilderPayload(BaseModel):
    """Request payload for POST /api/developments/{id}/builders."""

    builder_id: int | str


class CreatedResponse(BaseModel):
    """Response for a created row."""

    id: int
    message: str


class ActionResponse(BaseModel):
    """Response for an update/delete/link action."""

    success: bool = True
    message: str
