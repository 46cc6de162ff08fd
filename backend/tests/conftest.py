"""Shared fixtures: stores, sample records and API clients."""

from datetime import date

import pytest
from fastapi.testclient import TestClient

from civicview import models  # noqa: F401  registers tables on Base.metadata
from civicview.config import Settings
from civicview.database import Base, create_db_engine, create_session_factory
from civicview.main import create_app
from civicview.schemas import BillCreate, PoliticianCreate, PromiseCreate, VotingRecordCreate
from civicview.storage import MemoryStorage, MemoryStorageProvider, SqlStorage

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "test-password"


@pytest.fixture
def storage():
    """Fresh in-memory store."""
    return MemoryStorage()


@pytest.fixture
def db_session():
    """SQLAlchemy session on a private in-memory SQLite database."""
    engine = create_db_engine("sqlite://")
    Base.metadata.create_all(engine)
    session = create_session_factory(engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def sql_storage(db_session):
    return SqlStorage(db_session)


@pytest.fixture(params=["memory", "sql"])
def any_storage(request):
    """Runs a test once against each store implementation."""
    if request.param == "memory":
        return MemoryStorage()
    return SqlStorage(request.getfixturevalue("db_session"))


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        storage_backend="memory",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        seed_sample_data=False,
    )


@pytest.fixture
def client(settings, storage):
    """API client whose app shares the `storage` fixture."""
    app = create_app(settings, storage_provider=MemoryStorageProvider(storage))
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_auth():
    return (ADMIN_USERNAME, ADMIN_PASSWORD)


@pytest.fixture
def make_politician():
    """Factory creating a politician in the given store."""

    def _make(store, name="Jane Smith", party="Democratic", parish="St. Peter Port", **extra):
        return store.create_politician(
            PoliticianCreate(name=name, party=party, parish=parish, **extra)
        )

    return _make


@pytest.fixture
def make_promise():
    def _make(store, politician_id, status="InProgress", title="Build a library"):
        return store.create_promise(
            PromiseCreate(
                politician_id=politician_id,
                title=title,
                description=f"{title} in the parish.",
                status=status,
            )
        )

    return _make


@pytest.fixture
def make_bill():
    def _make(store, title="Climate Protection Act", date_voted=date(2023, 6, 12)):
        return store.create_bill(
            BillCreate(title=title, description=f"{title} description", date_voted=date_voted)
        )

    return _make


@pytest.fixture
def cast_vote():
    def _cast(store, politician_id, bill_id, vote):
        return store.create_voting_record(
            VotingRecordCreate(politician_id=politician_id, bill_id=bill_id, vote=vote)
        )

    return _cast


@pytest.fixture
def approved_rating():
    """Submit a rating and approve it directly in the store."""

    def _rate(store, politician_id, value, user_id=None):
        rating = store.create_rating(
            politician_id=politician_id,
            user_id=user_id or f"user-{len(store.get_ratings_by_politician_id(politician_id))}",
            rating=value,
        )
        return store.update_rating_status(rating.id, "Approved")

    return _rate
