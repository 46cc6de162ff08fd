"""Entity store port, implementations, and per-request providers."""

from collections.abc import Iterator
from contextlib import contextmanager

from civicview.config import Settings
from civicview.database import Base, create_db_engine, create_session_factory
from civicview.storage.base import Storage
from civicview.storage.memory import MemoryStorage
from civicview.storage.sql import SqlStorage


class MemoryStorageProvider:
    """Hands every request the same in-process store."""

    def __init__(self, storage: MemoryStorage | None = None):
        self.storage = storage or MemoryStorage()

    @contextmanager
    def session(self) -> Iterator[Storage]:
        yield self.storage

    def close(self) -> None:
        pass


class SqlStorageProvider:
    """Opens one SQLAlchemy session per request."""

    def __init__(self, database_url: str, create_tables: bool = False):
        self.engine = create_db_engine(database_url)
        self.session_factory = create_session_factory(self.engine)
        if create_tables:
            Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self) -> Iterator[Storage]:
        db = self.session_factory()
        try:
            yield SqlStorage(db)
        finally:
            db.close()

    def close(self) -> None:
        self.engine.dispose()


StorageProvider = MemoryStorageProvider | SqlStorageProvider


def build_storage_provider(settings: Settings) -> StorageProvider:
    """Pick the storage backend named in settings."""
    if settings.storage_backend == "memory":
        return MemoryStorageProvider()
    return SqlStorageProvider(settings.database_url, create_tables=settings.auto_create_tables)


__all__ = [
    "Storage",
    "MemoryStorage",
    "SqlStorage",
    "MemoryStorageProvider",
    "SqlStorageProvider",
    "StorageProvider",
    "build_storage_provider",
]
