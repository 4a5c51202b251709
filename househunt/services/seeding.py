"""Demonstration dataset for an empty store.

Seeds four locations, four builders, four developments, eight house models
(two with rooms and features), five builder links and two plots that share
the number "Plot 5" in different developments. Runs only when every
seeded table is empty, in a single transaction.
"""

import logging
from dataclasses import dataclass

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from househunt.models import Builder, Development, DevelopmentBuilderLink, HouseModel, Location, Plot
from househunt.services.plot_service import resolve_cost

LOCATIONS = ["London", "Manchester", "Birmingham", "Leeds"]
BUILDERS = ["Barratt Homes", "Taylor Wimpey", "Redrow", "Persimmon"]

# development -> location
DEVELOPMENTS = {
    "Green Meadows": "London",
    "City Views": "London",
    "Riverside Heights": "Manchester",
    "The Orchards": "Manchester",
}

ROSE_ROOMS = [
    {"name": "Kitchen", "has_room": True, "size": "10x12ft"},
    {"name": "Living Room", "has_room": True, "size": "15x18ft"},
    {"name": "Bedroom 1", "has_room": True, "size": "12x14ft"},
    {"name": "Ensuite 1", "has_room": True, "size": "5x7ft"},
]
ROSE_FEATURES = [
    {"name": "EV Charger", "has_feature": True},
    {"name": "Turfed Garden", "has_feature": True},
]
GOSFORD_ROOMS = [
    {"name": "Kitchen/Dining", "has_room": True, "size": "14x16ft"},
    {"name": "Lounge", "has_room": True, "size": "12x15ft"},
    {"name": "Bedroom 1", "has_room": True, "size": "11x13ft"},
    {"name": "Bedroom 2", "has_room": True, "size": "9x11ft"},
    {"name": "Bathroom", "has_room": True, "size": "7x7ft"},
]
GOSFORD_FEATURES = [
    {"name": "Integrated Appliances", "has_feature": True},
    {"name": "Fitted Wardrobes", "has_feature": False},
]

# (builder, model name, rooms, features)
HOUSE_MODELS = [
    ("Barratt Homes", "The Rose", ROSE_ROOMS, ROSE_FEATURES),
    ("Barratt Homes", "The Cherry", None, None),
    ("Taylor Wimpey", "The Gosford", GOSFORD_ROOMS, GOSFORD_FEATURES),
    ("Taylor Wimpey", "The Dadford", None, None),
    ("Redrow", "The Cambridge", None, None),
    ("Redrow", "The Oxford", None, None),
    ("Persimmon", "The Rufford", None, None),
    ("Persimmon", "The Hadleigh", None, None),
]

# (development, builder)
LINKS = [
    ("Green Meadows", "Barratt Homes"),
    ("City Views", "Barratt Homes"),
    ("Riverside Heights", "Taylor Wimpey"),
    ("Green Meadows", "Taylor Wimpey"),
    ("The Orchards", "Redrow"),
]

# Any row in one of these means the store is in use
SEEDED_MODELS = (Location, Builder, Development, HouseModel, DevelopmentBuilderLink, Plot)

PLOTS = [
    {
        "plot_number": "Plot 5",
        "entrance_facing": "North",
        "cost_known": True,
        "cost_value": 350000,
        "location": "London",
        "development": "Green Meadows",
        "builder": "Barratt Homes",
        "house_model": "The Rose",
    },
    {
        "plot_number": "Plot 5",
        "entrance_facing": "South East",
        "cost_known": False,
        "cost_range": "280000 - 320000",
        "location": "Manchester",
        "development": "Riverside Heights",
        "builder": "Taylor Wimpey",
        "house_model": "The Gosford",
    },
]


@dataclass
class SeedResult:
    """Result of a seeding run."""

    seeded: bool
    """False when the store already held data"""

    locations_created: int = 0
    builders_created: int = 0
    developments_created: int = 0
    house_models_created: int = 0
    links_created: int = 0
    plots_created: int = 0

    def __str__(self) -> str:
        if not self.seeded:
            return "Store already populated; nothing seeded"
        return (
            f"Seeded {self.locations_created} locations, {self.builders_created} builders, "
            f"{self.developments_created} developments, {self.house_models_created} house models, "
            f"{self.links_created} links, {self.plots_created} plots"
        )


def seed_demo_data(session: Session, logger: logging.Logger | None = None) -> SeedResult:
    """
    Seed the demonstration dataset if the store is empty.

    Args:
        session: SQLAlchemy database session
        logger: Optional logger instance

    Returns:
        SeedResult describing what was created
    """
    logger = logger or logging.getLogger(__name__)

    populated = [
        model.__tablename__
        for model in SEEDED_MODELS
        if session.scalar(select(func.count()).select_from(model))
    ]
    if populated:
        logger.info(f"Store already holds {', '.join(populated)}; skipping demonstration data")
        return SeedResult(seeded=False)

    logger.info("Seeding demonstration data into empty store...")
    try:
        locations = {name: Location(name=name) for name in LOCATIONS}
        builders = {name: Builder(name=name) for name in BUILDERS}
        developments = {
            name: Development(name=name, location=locations[location])
            for name, location in DEVELOPMENTS.items()
        }
        house_models = {
            name: HouseModel(
                name=name,
                builder=builders[builder],
                rooms_data=rooms,
                features_data=features,
            )
            for builder, name, rooms, features in HOUSE_MODELS
        }
        session.add_all([*locations.values(), *builders.values()])
        session.add_all([*developments.values(), *house_models.values()])
        session.flush()

        for development, builder in LINKS:
            session.add(
                DevelopmentBuilderLink(
                    development_id=developments[development].id,
                    builder_id=builders[builder].id,
                )
            )

        for row in PLOTS:
            session.add(
                Plot(
                    plot_number=row["plot_number"],
                    entrance_facing=row["entrance_facing"],
                    location_id=locations[row["location"]].id,
                    development_id=developments[row["development"]].id,
                    builder_id=builders[row["builder"]].id,
                    house_model_id=house_models[row["house_model"]].id,
                    **resolve_cost(row),
                )
            )

        session.commit()
    except Exception:
        session.rollback()
        logger.error("Seeding failed; rolled back", exc_info=True)
        raise

    result = SeedResult(
        seeded=True,
        locations_created=len(locations),
        builders_created=len(builders),
        developments_created=len(developments),
        house_models_created=len(house_models),
        links_created=len(LINKS),
        plots_created=len(PLOTS),
    )
    logger.info(str(result))
    return result


__all__ = ["SeedResult", "seed_demo_data"]
