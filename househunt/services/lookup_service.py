"""Lookup store: locations, developments, builders and house models.

All four kinds are scoped unique-name catalogs. Locations and builders are
unique across the whole table; developments are unique per location and
house models per builder. Names are compared case-insensitively.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from househunt.models import Builder, Development, DevelopmentBuilderLink, HouseModel, Location
from househunt.schemas.house_model import Feature, HouseModelDetails, Room
from househunt.services.errors import ConflictError, NotFoundError, ValidationError
from househunt.services.validation import clean_name, parse_id_field, require_id_field

logger = logging.getLogger(__name__)

# Table names used by older clients
_TABLE_ALIASES = {
    "locations": "location",
    "developments": "development",
    "builders": "builder",
    "house_models": "houseModel",
}


class LookupKind(str, Enum):
    """Lookup kinds exposed to the UI."""

    LOCATION = "location"
    DEVELOPMENT = "development"
    BUILDER = "builder"
    HOUSE_MODEL = "houseModel"

    @classmethod
    def _missing_(cls, value: object) -> Optional["LookupKind"]:
        alias = _TABLE_ALIASES.get(value) if isinstance(value, str) else None
        return cls(alias) if alias else None

    @classmethod
    def parse(cls, value: "str | LookupKind") -> "LookupKind":
        """Parse a kind, rejecting unknown values with ValidationError."""
        try:
            return cls(value)
        except ValueError as e:
            raise ValidationError(f"Invalid lookup kind: {value}") from e


@dataclass(frozen=True)
class ScopedCatalog:
    """How one lookup kind is stored and where its names must be unique."""

    model: type
    label: str
    scope_column: str | None = None
    parent_kind: LookupKind | None = None

    @property
    def scope(self):
        return getattr(self.model, self.scope_column)


CATALOGS: dict[LookupKind, ScopedCatalog] = {
    LookupKind.LOCATION: ScopedCatalog(Location, "Location"),
    LookupKind.DEVELOPMENT: ScopedCatalog(
        Development, "Development", "location_id", LookupKind.LOCATION
    ),
    LookupKind.BUILDER: ScopedCatalog(Builder, "Builder"),
    LookupKind.HOUSE_MODEL: ScopedCatalog(
        HouseModel, "House Model", "builder_id", LookupKind.BUILDER
    ),
}


def _validate_document(items: Any, item_type: type, label: str) -> list[dict[str, Any]]:
    """Validate a rooms/features list and return it as plain dicts for storage.

    Accepts value objects, dicts, or the JSON text older clients send.
    """
    if items is None:
        return []
    if isinstance(items, str):
        try:
            items = json.loads(items) if items.strip() else []
        except json.JSONDecodeError as e:
            raise ValidationError(f"Invalid {label} data: {e.msg}") from e
    if not isinstance(items, (list, tuple)):
        raise ValidationError(f"Invalid {label} data: expected a list")

    try:
        validated = [
            item if isinstance(item, item_type) else item_type.model_validate(item)
            for item in items
        ]
    except PydanticValidationError as e:
        first = e.errors()[0]
        raise ValidationError(f"Invalid {label} data: {first['msg']}") from e

    return [item.model_dump() for item in validated]


class LookupService:
    """Service for master-data operations."""

    def __init__(self, db_session: Session):
        self.db = db_session

    def _catalog(self, kind: "str | LookupKind") -> tuple[LookupKind, ScopedCatalog]:
        parsed = LookupKind.parse(kind)
        return parsed, CATALOGS[parsed]

    def _find_duplicate(
        self,
        catalog: ScopedCatalog,
        name: str,
        scope_value: int | None,
        exclude_id: int | None = None,
    ) -> Any:
        query = select(catalog.model.id).where(func.lower(catalog.model.name) == name.lower())
        if catalog.scope_column is not None:
            query = query.where(catalog.scope == scope_value)
        if exclude_id is not None:
            query = query.where(catalog.model.id != exclude_id)
        return self.db.execute(query).first()

    def _commit_or_conflict(self, message: str) -> None:
        """Commit; a uniqueness violation from the database becomes ConflictError."""
        try:
            self.db.commit()
        except IntegrityError as e:
            self.db.rollback()
            logger.warning(f"IntegrityError on lookup write: {e.orig}")
            raise ConflictError(message) from e

    def list_all(self, kind: "str | LookupKind") -> list[Any]:
        """
        List every row of a lookup kind.

        Returns:
            Rows ordered by name
        """
        _, catalog = self._catalog(kind)
        return list(
            self.db.execute(select(catalog.model).order_by(catalog.model.name)).scalars()
        )

    def list_children(self, kind: "str | LookupKind", parent_id: int | str | None) -> list[Any]:
        """
        List developments of a location or house models of a builder.

        Args:
            kind: Child kind (development or houseModel)
            parent_id: Location ID or Builder ID; absent gives an empty list

        Returns:
            Rows ordered by name
        """
        _, catalog = self._catalog(kind)
        if catalog.parent_kind is None:
            raise ValidationError(f"{catalog.label} has no parent lookup.")

        parent_label = CATALOGS[catalog.parent_kind].label
        scope_value = parse_id_field(parent_id, parent_label)
        if scope_value is None:
            return []

        return list(
            self.db.execute(
                select(catalog.model)
                .where(catalog.scope == scope_value)
                .order_by(catalog.model.name)
            ).scalars()
        )

    def list_linked_builders(self, development_id: int | str | None) -> list[Builder]:
        """Builders linked to a development, ordered by name. Empty when no development."""
        parsed = parse_id_field(development_id, "Development")
        if parsed is None:
            return []

        return list(
            self.db.execute(
                select(Builder)
                .join(DevelopmentBuilderLink, DevelopmentBuilderLink.builder_id == Builder.id)
                .where(DevelopmentBuilderLink.development_id == parsed)
                .order_by(Builder.name)
            ).scalars()
        )

    def add_item(
        self,
        kind: "str | LookupKind",
        name: str | None,
        parent_id: int | str | None = None,
        rooms: Iterable[Room | dict] | str | None = None,
        features: Iterable[Feature | dict] | str | None = None,
    ) -> int:
        """
        Create a lookup row.

        Args:
            kind: Lookup kind
            name: Display name (trimmed; compared case-insensitively)
            parent_id: Required for developments (Location ID) and house models (Builder ID)
            rooms: Initial rooms, house models only
            features: Initial features, house models only

        Returns:
            ID of the created row

        Raises:
            ValidationError: Missing name or parent, unknown parent, bad rooms/features
            ConflictError: Name already used within the same scope
        """
        parsed_kind, catalog = self._catalog(kind)
        name = clean_name(name, catalog.label)

        scope_value = None
        if catalog.parent_kind is not None:
            parent = CATALOGS[catalog.parent_kind]
            scope_value = parse_id_field(parent_id, parent.label)
            if scope_value is None:
                raise ValidationError(f"{catalog.label} requires a parent {parent.label} ID.")
            if self.db.get(parent.model, scope_value) is None:
                raise ValidationError(f"{parent.label} {scope_value} does not exist.")

        if parsed_kind is not LookupKind.HOUSE_MODEL and (rooms or features):
            raise ValidationError("Rooms and features can only be set on house models.")

        duplicate_message = f"{catalog.label} '{name}' already exists."
        if self._find_duplicate(catalog, name, scope_value):
            logger.warning(f"Duplicate {catalog.label} rejected: {name!r} (scope={scope_value})")
            raise ConflictError(duplicate_message)

        values: dict[str, Any] = {"name": name}
        if catalog.scope_column is not None:
            values[catalog.scope_column] = scope_value
        if parsed_kind is LookupKind.HOUSE_MODEL:
            # Details go in with the row so a failed insert leaves nothing behind
            if rooms is not None:
                values["rooms_data"] = _validate_document(rooms, Room, "rooms")
            if features is not None:
                values["features_data"] = _validate_document(features, Feature, "features")

        item = catalog.model(**values)
        self.db.add(item)
        self._commit_or_conflict(duplicate_message)
        self.db.refresh(item)

        logger.info(f"Added {catalog.label} {item.id}: {name!r}")
        return item.id

    def update_name(self, kind: "str | LookupKind", item_id: int | str | None, new_name: str | None) -> None:
        """
        Rename a lookup row in place, applying the same scoped uniqueness as add_item.

        Raises:
            ValidationError: Malformed id or empty name
            NotFoundError: No row with this id
            ConflictError: Another row in the same scope already has the name
        """
        _, catalog = self._catalog(kind)
        parsed_id = require_id_field(item_id, catalog.label)
        name = clean_name(new_name, catalog.label)

        item = self.db.get(catalog.model, parsed_id)
        if item is None:
            raise NotFoundError(f"{catalog.label} {parsed_id} not found.")

        scope_value = getattr(item, catalog.scope_column) if catalog.scope_column else None
        duplicate_message = f"{catalog.label} '{name}' already exists."
        if self._find_duplicate(catalog, name, scope_value, exclude_id=parsed_id):
            logger.warning(f"Rename of {catalog.label} {parsed_id} to {name!r} rejected: duplicate")
            raise ConflictError(duplicate_message)

        item.name = name
        self._commit_or_conflict(duplicate_message)
        logger.info(f"Renamed {catalog.label} {parsed_id} to {name!r}")

    def delete_item(self, kind: "str | LookupKind", item_id: int | str | None) -> bool:
        """
        Delete a lookup row. The database cascades to children and links and
        sets plot references to null.

        Returns:
            True if a row was deleted, False if there was nothing to delete
        """
        _, catalog = self._catalog(kind)
        parsed_id = require_id_field(item_id, catalog.label)

        result = self.db.execute(delete(catalog.model).where(catalog.model.id == parsed_id))
        self.db.commit()
        # Cascades happened in the database; drop anything stale from the session
        self.db.expire_all()

        deleted = result.rowcount > 0
        if deleted:
            logger.info(f"Deleted {catalog.label} {parsed_id}")
        return deleted

    def link_builder_to_development(
        self, development_id: int | str | None, builder_id: int | str | None
    ) -> None:
        """
        Record that a builder builds in a development.

        Raises:
            ValidationError: Malformed or unknown ids
            ConflictError: The pair is already linked
        """
        dev_id = require_id_field(development_id, "Development")
        build_id = require_id_field(builder_id, "Builder")

        if self.db.get(Development, dev_id) is None:
            raise ValidationError(f"Development {dev_id} does not exist.")
        if self.db.get(Builder, build_id) is None:
            raise ValidationError(f"Builder {build_id} does not exist.")

        message = "This builder is already linked to this development."
        if self.db.get(DevelopmentBuilderLink, (dev_id, build_id)) is not None:
            logger.warning(f"Duplicate link rejected: development={dev_id} builder={build_id}")
            raise ConflictError(message)

        self.db.add(DevelopmentBuilderLink(development_id=dev_id, builder_id=build_id))
        self._commit_or_conflict(message)
        logger.info(f"Linked builder {build_id} to development {dev_id}")

    def get_house_model_details(self, house_model_id: int | str | None) -> HouseModelDetails | None:
        """
        Get a house model with its rooms and features.

        Returns:
            HouseModelDetails or None if not found
        """
        parsed_id = parse_id_field(house_model_id, "House Model")
        if parsed_id is None:
            return None

        model = self.db.get(HouseModel, parsed_id)
        if model is None:
            return None

        return HouseModelDetails(
            id=model.id,
            name=model.name,
            builder_id=model.builder_id,
            rooms=model.rooms_data or [],
            features=model.features_data or [],
        )

    def update_house_model_details(
        self,
        house_model_id: int | str | None,
        rooms: Iterable[Room | dict] | str | None,
        features: Iterable[Feature | dict] | str | None,
    ) -> None:
        """
        Replace the rooms and features of a house model wholesale.

        Raises:
            ValidationError: Malformed id or invalid rooms/features
            NotFoundError: No house model with this id
        """
        parsed_id = require_id_field(house_model_id, "House Model")
        rooms_data = _validate_document(rooms, Room, "rooms")
        features_data = _validate_document(features, Feature, "features")

        model = self.db.get(HouseModel, parsed_id)
        if model is None:
            raise NotFoundError(f"House Model {parsed_id} not found.")

        model.rooms_data = rooms_data
        model.features_data = features_data
        self.db.commit()
        logger.info(
            f"Replaced details of house model {parsed_id}: "
            f"{len(rooms_data)} rooms, {len(features_data)} features"
        )


__all__ = ["LookupKind", "ScopedCatalog", "CATALOGS", "LookupService"]
