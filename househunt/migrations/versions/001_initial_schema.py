"""Initial schema: lookups, development-builder links and plots.

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=False,
            server_default=sa.func.current_timestamp(),
        ),
    ]


def upgrade() -> None:
    # Create locations table
    op.create_table(
        "locations",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # Create builders table
    op.create_table(
        "builders",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )

    # Create developments table (owned by a location)
    op.create_table(
        "developments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("location_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("location_id", "name", name="uq_development_location_name"),
        sa.Index("ix_developments_location_id", "location_id"),
    )

    # Create house_models table (owned by a builder)
    op.create_table(
        "house_models",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("builder_id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column(
            "rooms_data",
            sa.JSON(),
            nullable=True,
            comment="Ordered list of {name, has_room, size}",
        ),
        sa.Column(
            "features_data",
            sa.JSON(),
            nullable=True,
            comment="Ordered list of {name, has_feature}",
        ),
        *_timestamps(),
        sa.ForeignKeyConstraint(["builder_id"], ["builders.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("builder_id", "name", name="uq_house_model_builder_name"),
        sa.Index("ix_house_models_builder_id", "builder_id"),
    )

    # Create development_builders link table
    op.create_table(
        "development_builders",
        sa.Column("development_id", sa.Integer(), nullable=False),
        sa.Column("builder_id", sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(["development_id"], ["developments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["builder_id"], ["builders.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("development_id", "builder_id"),
        sa.Index("ix_development_builders_builder_id", "builder_id"),
    )

    # Create plots table
    op.create_table(
        "plots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("plot_number", sa.String(length=50), nullable=False),
        sa.Column("entrance_facing", sa.String(length=50), nullable=True),
        sa.Column("cost_known", sa.Boolean(), nullable=False, server_default="0"),
        sa.Column(
            "cost_value",
            sa.Numeric(precision=12, scale=2),
            nullable=True,
            comment="Price when cost_known",
        ),
        sa.Column(
            "cost_range",
            sa.String(length=100),
            nullable=True,
            comment="'min - max' or single value when cost is not known",
        ),
        sa.Column(
            "stamp_duty",
            sa.String(length=100),
            nullable=True,
            comment="Formatted stamp duty, e.g. '£7,500.00' or '£4,000.00 - £6,000.00'",
        ),
        sa.Column("location_id", sa.Integer(), nullable=True),
        sa.Column("development_id", sa.Integer(), nullable=True),
        sa.Column("builder_id", sa.Integer(), nullable=True),
        sa.Column("house_model_id", sa.Integer(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["location_id"], ["locations.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["development_id"], ["developments.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["builder_id"], ["builders.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(["house_model_id"], ["house_models.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("plot_number", "development_id", name="uq_plot_number_development"),
        sa.Index("ix_plots_location_id", "location_id"),
        sa.Index("ix_plots_development_id", "development_id"),
        sa.Index("ix_plots_builder_id", "builder_id"),
        sa.Index("ix_plots_house_model_id", "house_model_id"),
    )


def downgrade() -> None:
    op.drop_table("plots")
    op.drop_table("development_builders")
    op.drop_table("house_models")
    op.drop_table("developments")
    op.drop_table("builders")
    op.drop_table("locations")
