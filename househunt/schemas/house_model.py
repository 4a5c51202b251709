"""Room and feature value objects embedded in a house model."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Room(BaseModel):
    """A room in a house model, e.g. {"name": "Kitchen", "has_room": true, "size": "10x12ft"}."""

    name: str = Field(..., description="Room name")
    has_room: bool = Field(False, description="Whether the model has this room")
    size: str | None = Field(None, description="Free-text size, e.g. '10x12ft'")

    model_config = ConfigDict(extra="ignore")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Room name cannot be empty")
        return value

    @field_validator("size")
    @classmethod
    def blank_size_is_none(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None


class Feature(BaseModel):
    """A feature of a house model, e.g. {"name": "EV Charger", "has_feature": true}."""

    name: str = Field(..., description="Feature name")
    has_feature: bool = Field(True, description="Whether the model has this feature")

    model_config = ConfigDict(extra="ignore")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Feature name cannot be empty")
        return value


class HouseModelDetails(BaseModel):
    """A house model with its rooms and features."""

    id: int
    name: str
    builder_id: int
    rooms: list[Room] = Field(default_factory=list)
    features: list[Feature] = Field(default_factory=list)


class HouseModelDetailsPayload(BaseModel):
    """Request payload for PUT /api/house-models/{id}/details. Replaces both lists."""

    rooms: list[Room] = Field(default_factory=list)
    features: list[Feature] = Field(default_factory=list)
