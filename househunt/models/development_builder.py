"""Many-to-many link: which builders build in which developments."""

from sqlalchemy import ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from househunt.models import Base


class DevelopmentBuilderLink(Base):
    """Join row (development_id, builder_id); the pair is the primary key."""

    __tablename__ = "development_builders"

    development_id: Mapped[int] = mapped_column(
        ForeignKey("developments.id", ondelete="CASCADE"),
        primary_key=True,
    )
    builder_id: Mapped[int] = mapped_column(
        ForeignKey("builders.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )

    def __repr__(self) -> str:
        return (
            f"<DevelopmentBuilderLink(development_id={self.development_id}, "
            f"builder_id={self.builder_id})>"
        )


__all__ = ["DevelopmentBuilderLink"]
