"""
Record stores — the persistence boundary for whole collections.

A store loads and saves one collection (users or developers) wholesale:

  - load() returns every record, freshly decoded
  - save(records) overwrites the entire collection

There is no indexing, no partial update, and no transaction. Services
mutate with a read-modify-write cycle, so two concurrent writers can lose
one of their changes (last write wins on the whole document).

Backends:
  - JsonFileStore: one pretty-printed JSON array per file (default)
  - SqlDocumentStore: one JSON array per row in a SQL table
  - InMemoryStore: process-local, used by unit tests and demos

Failure handling:
  Any I/O, decode, or database error is logged with its traceback and
  re-raised as StorageError. Nothing is retried.

Route handlers receive stores through get_user_store / get_developer_store,
which tests override with in-memory or temporary-file stores.
"""

import logging
from abc import ABC, abstractmethod
from functools import lru_cache
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import TypeAdapter
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from app.config import settings
from app.database import engine as default_engine, create_tables
from app.exceptions import StorageError
from app.models.base import CamelModel
from app.models.developer import Developer
from app.models.document import CollectionDocument
from app.models.user import User


logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=CamelModel)


class RecordStore(ABC, Generic[RecordT]):
    """
    Abstract whole-collection store.

    Args:
        name: Collection name, used in error messages and as the SQL row key.
        model: The record class every entry is validated against.
    """

    def __init__(self, name: str, model: type[RecordT]):
        self.name = name
        self.model = model
        self._adapter = TypeAdapter(list[model])

    async def initialize(self) -> None:
        """Prepare the backing resource so the first load() sees an empty collection."""

    @abstractmethod
    async def load(self) -> list[RecordT]:
        """Return every record in the collection."""

    @abstractmethod
    async def save(self, records: list[RecordT]) -> None:
        """Replace the whole collection with `records`."""

    def _encode(self, records: list[RecordT]) -> bytes:
        return self._adapter.dump_json(records, by_alias=True, exclude_none=True, indent=2)

    def _decode(self, raw: bytes | str) -> list[RecordT]:
        # An empty document is treated as an empty collection
        if not raw.strip():
            return []
        return self._adapter.validate_json(raw)

    def _load_failed(self, exc: Exception) -> StorageError:
        logger.error("Failed to load %s", self.name, exc_info=exc)
        return StorageError(f"Failed to load {self.name}", self.name)

    def _save_failed(self, exc: Exception) -> StorageError:
        logger.error("Failed to save %s", self.name, exc_info=exc)
        return StorageError(f"Failed to save {self.name}", self.name)


class JsonFileStore(RecordStore[RecordT]):
    """Collection kept as a JSON array in a single UTF-8 file."""

    def __init__(self, path: str | Path, name: str, model: type[RecordT]):
        super().__init__(name, model)
        self.path = Path(path)

    def _ensure_file(self) -> None:
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text("[]", encoding="utf-8")
            logger.info("Initialized empty %s collection at %s", self.name, self.path)

    async def initialize(self) -> None:
        try:
            self._ensure_file()
        except OSError as exc:
            raise self._save_failed(exc) from exc

    async def load(self) -> list[RecordT]:
        try:
            self._ensure_file()
            return self._decode(self.path.read_bytes())
        except (OSError, ValueError) as exc:
            raise self._load_failed(exc) from exc

    async def save(self, records: list[RecordT]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_bytes(self._encode(records))
        except (OSError, ValueError) as exc:
            raise self._save_failed(exc) from exc


class InMemoryStore(RecordStore[RecordT]):
    """
    Collection kept in process memory.

    Records are held in their encoded form so that load() always hands out
    fresh copies, exactly like the file backend: mutating a loaded record
    has no effect until save() is called.
    """

    def __init__(self, name: str, model: type[RecordT], records: list[RecordT] | None = None):
        super().__init__(name, model)
        self._document = self._encode(records or [])

    async def load(self) -> list[RecordT]:
        return self._decode(self._document)

    async def save(self, records: list[RecordT]) -> None:
        self._document = self._encode(records)


class SqlDocumentStore(RecordStore[RecordT]):
    """Collection kept as one JSON document row in the collection_documents table."""

    def __init__(self, name: str, model: type[RecordT], engine: AsyncEngine = default_engine):
        super().__init__(name, model)
        self.engine = engine
        self._sessions = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def initialize(self) -> None:
        try:
            await create_tables(self.engine)
        except SQLAlchemyError as exc:
            raise self._save_failed(exc) from exc

    async def load(self) -> list[RecordT]:
        try:
            async with self._sessions() as session:
                document = await session.get(CollectionDocument, self.name)
                if document is None:
                    return []
                return self._decode(document.payload)
        except (SQLAlchemyError, ValueError) as exc:
            raise self._load_failed(exc) from exc

    async def save(self, records: list[RecordT]) -> None:
        try:
            payload = self._encode(records).decode("utf-8")
            async with self._sessions() as session:
                document = await session.get(CollectionDocument, self.name)
                if document is None:
                    session.add(CollectionDocument(name=self.name, payload=payload))
                else:
                    document.payload = payload
                await session.commit()
        except (SQLAlchemyError, ValueError) as exc:
            raise self._save_failed(exc) from exc


def build_store(name: str, filename: str, model: type[RecordT]) -> RecordStore[RecordT]:
    """Create the store for one collection according to STORAGE_BACKEND."""
    if settings.STORAGE_BACKEND == "sql":
        return SqlDocumentStore(name, model)
    if settings.STORAGE_BACKEND == "memory":
        return InMemoryStore(name, model)
    return JsonFileStore(Path(settings.DATA_DIR) / filename, name, model)


# ---------------------------------------------------------------------------
# FastAPI dependencies
# ---------------------------------------------------------------------------

@lru_cache
def get_user_store() -> RecordStore[User]:
    """
    FastAPI dependency that provides the users collection.

    Usage in a route:
        @router.post("/signup")
        async def signup(users: RecordStore[User] = Depends(get_user_store)):
            ...
    """
    return build_store("users", settings.USERS_FILE, User)


@lru_cache
def get_developer_store() -> RecordStore[Developer]:
    """FastAPI dependency that provides the developers collection."""
    return build_store("developers", settings.DEVELOPERS_FILE, Developer)
