"""Tests for application wiring, sample data and migrations."""

from pathlib import Path

import pytest
from alembic import command
from alembic.config import Config
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, inspect

from civicview.config import Settings
from civicview.main import create_app
from civicview.security import hash_password, verify_password
from civicview.seed import ensure_admin_user, seed_sample_data
from civicview.services.comparison import build_comparison
from civicview.services.profile import build_profile
from civicview.storage import MemoryStorage, SqlStorageProvider, build_storage_provider

BACKEND_DIR = Path(__file__).resolve().parents[1]


class TestHealth:
    def test_health_check(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "environment": "test"}


class TestPasswords:
    def test_round_trip(self):
        stored = hash_password("s3cret")

        assert stored.startswith("pbkdf2_sha256$")
        assert verify_password("s3cret", stored)
        assert not verify_password("wrong", stored)

    def test_salts_differ(self):
        assert hash_password("same") != hash_password("same")

    def test_malformed_hash(self):
        assert verify_password("anything", "not-a-hash") is False


class TestSampleData:
    def test_seeds_politicians_promises_bills_votes(self, storage):
        assert seed_sample_data(storage) is True

        assert len(storage.politicians) == 3
        assert len(storage.bills) == 4
        assert len(storage.voting_records) == 12

        jane = storage.get_politician_by_name("Jane Smith")
        profile = build_profile(storage, jane.id)
        assert profile.fulfillment_stats.total == 4
        assert profile.fulfillment_rate == 50

    def test_sample_alignment(self, storage):
        seed_sample_data(storage)
        jane = storage.get_politician_by_name("Jane Smith")
        john = storage.get_politician_by_name("John Doe")
        maria = storage.get_politician_by_name("Maria Rodriguez")

        assert build_comparison(storage, [jane.id, maria.id]).alignment.alignment_percentage == 100
        assert build_comparison(storage, [jane.id, john.id]).alignment.alignment_percentage == 50

    def test_does_not_reseed(self, storage):
        seed_sample_data(storage)

        assert seed_sample_data(storage) is False
        assert len(storage.politicians) == 3

    def test_ensure_admin_user_is_idempotent(self, storage):
        first = ensure_admin_user(storage, "admin", "pw")
        second = ensure_admin_user(storage, "admin", "other")

        assert first.id == second.id
        assert len(storage.users) == 1

    def test_app_seeds_on_startup(self):
        settings = Settings(environment="test", storage_backend="memory", seed_sample_data=True)
        app = create_app(settings)

        with TestClient(app) as test_client:
            data = test_client.get("/api/politicians").json()

        assert data["total"] == 3


class TestStorageProviders:
    def test_memory_backend_from_settings(self):
        provider = build_storage_provider(Settings(storage_backend="memory"))

        with provider.session() as storage:
            assert isinstance(storage, MemoryStorage)

    def test_sql_backed_app(self, admin_auth):
        settings = Settings(
            environment="test",
            storage_backend="sql",
            database_url="sqlite://",
            auto_create_tables=True,
            admin_password=admin_auth[1],
        )
        app = create_app(settings)

        with TestClient(app) as test_client:
            created = test_client.post(
                "/api/admin/politicians",
                json={"name": "Jane Smith", "party": "Democratic", "parish": "Vale"},
                auth=admin_auth,
            )
            assert created.status_code == 201
            politician_id = created.json()["id"]

            rating = {"politician_id": politician_id, "user_id": "u1", "rating": 4}
            assert test_client.post("/api/ratings", json=rating).status_code == 201
            assert test_client.post("/api/ratings", json=rating).status_code == 400

            profile = test_client.get(f"/api/politicians/{politician_id}").json()
            assert profile["politician"]["name"] == "Jane Smith"

    def test_sql_provider_closes_sessions(self):
        provider = SqlStorageProvider("sqlite://", create_tables=True)
        try:
            with provider.session() as storage:
                storage.create_user("admin", "hash", is_admin=True)
            with provider.session() as storage:
                assert storage.get_user_by_username("admin") is not None
        finally:
            provider.close()


class TestMigrations:
    def test_upgrade_creates_schema(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'migrated.db'}"
        config = Config(str(BACKEND_DIR / "alembic.ini"))
        config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
        config.set_main_option("sqlalchemy.url", url)

        command.upgrade(config, "head")

        engine = create_engine(url)
        try:
            inspector = inspect(engine)
            assert {
                "users", "politicians", "promises", "bills",
                "voting_records", "ratings", "admin_logs",
            } <= set(inspector.get_table_names())
            unique = inspector.get_unique_constraints("ratings")
            assert any(set(c["column_names"]) == {"user_id", "politician_id"} for c in unique)
        finally:
            engine.dispose()

    @pytest.mark.parametrize("table", ["politicians", "ratings"])
    def test_downgrade_drops_tables(self, tmp_path, table):
        url = f"sqlite:///{tmp_path / 'migrated.db'}"
        config = Config(str(BACKEND_DIR / "alembic.ini"))
        config.set_main_option("script_location", str(BACKEND_DIR / "alembic"))
        config.set_main_option("sqlalchemy.url", url)

        command.upgrade(config, "head")
        command.downgrade(config, "base")

        engine = create_engine(url)
        try:
            assert table not in inspect(engine).get_table_names()
        finally:
            engine.dispose()
