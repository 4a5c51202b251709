"""Pytest configuration: in-memory SQLite database, services and API client."""

import os

# Set test settings BEFORE any imports from househunt
# so the module-level engine never touches a real database file
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["SEED_DEMO_DATA"] = "false"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from househunt.main import app  # noqa: E402
from househunt.models import Base  # noqa: E402
from househunt.services import create_db_engine, get_db  # noqa: E402
from househunt.services.lookup_service import LookupService  # noqa: E402
from househunt.services.plot_service import PlotService  # noqa: E402


@pytest.fixture
def engine():
    """Fresh in-memory database with all tables, foreign keys enforced."""
    test_engine = create_db_engine("sqlite://")
    Base.metadata.create_all(bind=test_engine)
    yield test_engine
    Base.metadata.drop_all(bind=test_engine)
    test_engine.dispose()


@pytest.fixture
def db(engine):
    """Provide a database session for tests."""
    TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(db):
    """Provide a FastAPI test client bound to the test session."""

    def override_get_db():
        yield db

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def lookup_service(db) -> LookupService:
    return LookupService(db)


@pytest.fixture
def plot_service(db) -> PlotService:
    return PlotService(db)


@pytest.fixture
def sample_lookups(lookup_service: LookupService) -> dict[str, int]:
    """Two locations with one development each, two builders with one model each."""
    london = lookup_service.add_item("location", "London")
    manchester = lookup_service.add_item("location", "Manchester")
    barratt = lookup_service.add_item("builder", "Barratt Homes")
    taylor = lookup_service.add_item("builder", "Taylor Wimpey")
    return {
        "london": london,
        "manchester": manchester,
        "green_meadows": lookup_service.add_item("development", "Green Meadows", london),
        "riverside": lookup_service.add_item("development", "Riverside Heights", manchester),
        "barratt": barratt,
        "taylor": taylor,
        "rose": lookup_service.add_item(
            "houseModel",
            "The Rose",
            barratt,
            rooms=[{"name": "Kitchen", "has_room": True, "size": "10x12ft"}],
            features=[{"name": "EV Charger", "has_feature": True}],
        ),
        "gosford": lookup_service.add_item("houseModel", "The Gosford", taylor),
    }


@pytest.fixture
def plot_form(sample_lookups):
    """Build a plot form for Green Meadows / Barratt / The Rose; override any field."""

    def _build(**overrides) -> dict:
        form = {
            "plot_number": "Plot 5",
            "entrance_facing": "North",
            "cost_known": True,
            "cost_value": "350000",
            "location_id": sample_lookups["london"],
            "development_id": sample_lookups["green_meadows"],
            "builder_id": sample_lookups["barratt"],
            "house_model_id": sample_lookups["rose"],
        }
        form.update(overrides)
        return form

    return _build
