"""Database engine and session factory helpers."""

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker
from sqlalchemy.pool import StaticPool


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


def create_db_engine(database_url: str) -> Engine:
    """
    Create an engine for the given URL.

    SQLite URLs (used by tests and local development) get a single shared
    connection when in-memory, since each new connection would otherwise see
    an empty database.
    """
    if database_url.startswith("sqlite"):
        kwargs = {"connect_args": {"check_same_thread": False}}
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        return create_engine(database_url, **kwargs)

    return create_engine(
        database_url,
        pool_pre_ping=True,
        pool_size=10,
        max_overflow=20,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Build the per-request session factory bound to an engine."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine, expire_on_commit=False)
