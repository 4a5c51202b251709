"""Development ORM model, owned by a Location."""

from sqlalchemy import ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from househunt.models import Base, BaseModel


class Development(Base, BaseModel):
    """A housing development inside a location.

    Names are unique per location only: two towns can each have a
    "Green Meadows".
    """

    __tablename__ = "developments"

    location_id: Mapped[int] = mapped_column(
        ForeignKey("locations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )

    # Relationships
    location: Mapped["Location"] = relationship(  # noqa: F821
        "Location",
        back_populates="developments",
    )

    __table_args__ = (UniqueConstraint("location_id", "name", name="uq_development_location_name"),)

    def __repr__(self) -> str:
        return (
            f"<Development(id={self.id}, location_id={self.location_id}, name={self.name!r})>"
        )


__all__ = ["Development"]
