"""Location ORM model: top of the Location → Development hierarchy."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from househunt.models import Base, BaseModel


class Location(Base, BaseModel):
    """A town or area being searched. Names are unique, compared case-insensitively."""

    __tablename__ = "locations"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
    )

    # Developments are removed by the database (ON DELETE CASCADE)
    developments: Mapped[list["Development"]] = relationship(  # noqa: F821
        "Development",
        back_populates="location",
        passive_deletes=True,
    )

    def __repr__(self) -> str:
        return f"<Location(id={self.id}, name={self.name!r})>"


__all__ = ["Location"]
