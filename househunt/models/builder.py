"""Builder ORM model: top of the Builder → HouseModel hierarchy."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from househunt.models import Base, BaseModel


class Builder(Base, BaseModel):
    """A house builder. Names are unique, compared case-insensitively."""

    __tablename__ = "builders"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    # Relationships
    house_models: Mapped[list["HouseModel"]] = relationship(  # noqa: F821
        "HouseModel",
        back_populates="builder",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Builder(id={self.id}, name={self.name!r})>"


__all__ = ["Builder"]
