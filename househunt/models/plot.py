"""Plot ORM model: a candidate property purchase."""

from decimal import Decimal

from sqlalchemy import Boolean, ForeignKey, Numeric, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from househunt.models import Base, BaseModel


class Plot(Base, BaseModel):
    """Model representing a tracked plot.

    Exactly one of cost_value (cost_known=True) or cost_range
    (cost_known=False) is populated. stamp_duty is a display string derived
    from whichever is set.

    All four lookup references are nullable at the storage layer: deleting a
    lookup orphans the plot (ON DELETE SET NULL) instead of removing it.
    """

    __tablename__ = "plots"

    plot_number: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
    )
    entrance_facing: Mapped[str | None] = mapped_column(
        String(50),
        nullable=True,
    )

    # Cost
    cost_known: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
    )
    cost_value: Mapped[Decimal | None] = mapped_column(
        Numeric(12, 2),
        nullable=True,
        comment="Price when cost_known",
    )
    cost_range: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="'min - max' or single value when cost is not known",
    )
    stamp_duty: Mapped[str | None] = mapped_column(
        String(100),
        nullable=True,
        comment="Formatted stamp duty, e.g. '£7,500.00' or '£4,000.00 - £6,000.00'",
    )

    # Lookup references
    location_id: Mapped[int | None] = mapped_column(
        ForeignKey("locations.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    development_id: Mapped[int | None] = mapped_column(
        ForeignKey("developments.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    builder_id: Mapped[int | None] = mapped_column(
        ForeignKey("builders.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    house_model_id: Mapped[int | None] = mapped_column(
        ForeignKey("house_models.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("plot_number", "development_id", name="uq_plot_number_development"),
    )

    def __repr__(self) -> str:
        return (
            f"<Plot(id={self.id}, plot_number={self.plot_number!r}, "
            f"development_id={self.development_id}, cost_known={self.cost_known}, "
            f"cost_value={self.cost_value}, cost_range={self.cost_range!r}, "
            f"stamp_duty={self.stamp_duty!r})>"
        )


__all__ = ["Plot"]
