"""HouseModel ORM model, owned by a Builder, with embedded rooms/features documents."""

from typing import Any

from sqlalchemy import JSON, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from househunt.models import Base, BaseModel


class HouseModel(Base, BaseModel):
    """A house type offered by a builder.

    rooms_data and features_data hold JSON lists of plain dicts
    (see househunt.schemas.house_model.Room / Feature). They are always
    replaced as a whole, never patched.
    """

    __tablename__ = "house_models"

    builder_id: Mapped[int] = mapped_column(
        ForeignKey("builders.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    rooms_data: Mapped[list[dict[str, Any]] | None] = mapped_column(
        JSON,
        nullable=True,
        comment="Ordered list of {name, has_room, size}",
    )
    features_data: Mapped[list[dict[str, Any]] | None] = mapped_column(
        JSON,
        nullable=True,
        comment="Ordered list of {name, has_feature}",
    )

    # Relationships
    builder: Mapped["Builder"] = relationship(  # noqa: F821
        "Builder",
        back_populates="house_models",
    )

    __table_args__ = (UniqueConstraint("builder_id", "name", name="uq_house_model_builder_name"),)

    def __repr__(self) -> str:
        return f"<HouseModel(id={self.id}, builder_id={self.builder_id}, name={self.name!r})>"


__all__ = ["HouseModel"]
