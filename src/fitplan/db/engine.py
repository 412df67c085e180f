"""Storage backends and database initialization.

All state lives in a small key-value store. Each key holds one JSON
document:

- ``accounts``: array of User objects
- ``plan_records``: array of AdminRecord objects, newest first
- ``schema_version``: integer layout version
"""

import asyncio
import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable

import aiosqlite

from ..errors import StorageUnavailableError
from ..utils.passwords import hash_password, is_password_hash

ACCOUNTS_KEY = "accounts"
RECORDS_KEY = "plan_records"
SCHEMA_VERSION_KEY = "schema_version"
SCHEMA_VERSION = 2

logger = logging.getLogger(__name__)


def _decode(key: str, raw: str) -> Any:
    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        raise StorageUnavailableError(f"Stored value for {key!r} is corrupt: {e}") from e


class KeyValueStore(ABC):
    """Durable store of JSON documents addressed by key."""

    @abstractmethod
    async def get(self, key: str, default: Any = None) -> Any:
        """Return the decoded document for a key, or default."""

    @abstractmethod
    async def set(self, key: str, value: Any) -> None:
        """Replace the document for a key."""

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""

    @abstractmethod
    async def update(self, key: str, mutate: Callable[[Any], Any], default: Any = None) -> Any:
        """Atomically read, transform and write a document.

        Args:
            key: Document key
            mutate: Receives the current document (or default) and returns the new one
            default: Value passed to mutate when the key is absent

        Returns:
            The new document
        """


class SQLiteKeyValueStore(KeyValueStore):
    """Key-value store backed by a single SQLite table."""

    def __init__(self, db_path: Path):
        self.db_path = db_path

    async def initialize(self) -> None:
        """Create the backing table."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("""
                    CREATE TABLE IF NOT EXISTS kv_store (
                        key TEXT PRIMARY KEY,
                        value TEXT NOT NULL,
                        updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
                    )
                """)
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise StorageUnavailableError(f"Cannot initialize {self.db_path}: {e}") from e

    async def get(self, key: str, default: Any = None) -> Any:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
                row = await cursor.fetchone()
        except (aiosqlite.Error, OSError) as e:
            raise StorageUnavailableError(f"Cannot read {key!r}: {e}") from e
        if row is None:
            return default
        return _decode(key, row[0])

    async def set(self, key: str, value: Any) -> None:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await self._write(db, key, value)
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise StorageUnavailableError(f"Cannot write {key!r}: {e}") from e

    async def delete(self, key: str) -> None:
        try:
            async with aiosqlite.connect(self.db_path) as db:
                await db.execute("DELETE FROM kv_store WHERE key = ?", (key,))
                await db.commit()
        except (aiosqlite.Error, OSError) as e:
            raise StorageUnavailableError(f"Cannot delete {key!r}: {e}") from e

    async def update(self, key: str, mutate: Callable[[Any], Any], default: Any = None) -> Any:
        try:
            async with aiosqlite.connect(self.db_path, isolation_level=None) as db:
                # Write lock before reading; closing without COMMIT rolls back
                await db.execute("BEGIN IMMEDIATE")
                cursor = await db.execute("SELECT value FROM kv_store WHERE key = ?", (key,))
                row = await cursor.fetchone()
                current = _decode(key, row[0]) if row is not None else default
                new_value = mutate(current)
                await self._write(db, key, new_value)
                await db.execute("COMMIT")
        except (aiosqlite.Error, OSError) as e:
            raise StorageUnavailableError(f"Cannot update {key!r}: {e}") from e
        return new_value

    @staticmethod
    async def _write(db: aiosqlite.Connection, key: str, value: Any) -> None:
        await db.execute(
            """
            INSERT INTO kv_store (key, value, updated_at) VALUES (?, ?, CURRENT_TIMESTAMP)
            ON CONFLICT(key) DO UPDATE SET value = excluded.value, updated_at = CURRENT_TIMESTAMP
            """,
            (key, json.dumps(value)),
        )


class MemoryKeyValueStore(KeyValueStore):
    """In-process store. Documents are kept JSON-encoded so reads return fresh copies."""

    def __init__(self):
        self._data: dict[str, str] = {}
        self._lock = asyncio.Lock()

    async def get(self, key: str, default: Any = None) -> Any:
        if key not in self._data:
            return default
        return json.loads(self._data[key])

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = json.dumps(value)

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    async def update(self, key: str, mutate: Callable[[Any], Any], default: Any = None) -> Any:
        async with self._lock:
            current = json.loads(self._data[key]) if key in self._data else default
            new_value = mutate(current)
            self._data[key] = json.dumps(new_value)
            return new_value


async def run_migrations(store: KeyValueStore) -> None:
    """Upgrade stored documents to the current layout."""
    version = await store.get(SCHEMA_VERSION_KEY, 1)
    if version >= SCHEMA_VERSION:
        return

    # v1 -> v2: accounts stored plaintext "password"; replace with a salted hash
    def upgrade_accounts(accounts: list[dict]) -> list[dict]:
        upgraded = []
        for account in accounts:
            account = dict(account)
            if "passwordHash" not in account:
                password = account.pop("password", "")
                if is_password_hash(password):
                    account["passwordHash"] = password
                else:
                    account["passwordHash"] = hash_password(password)
            upgraded.append(account)
        return upgraded

    accounts = await store.update(ACCOUNTS_KEY, upgrade_accounts, default=[])
    await store.set(SCHEMA_VERSION_KEY, SCHEMA_VERSION)
    logger.info("Migrated store to schema v%s (%d accounts)", SCHEMA_VERSION, len(accounts))


async def init_db(db_path: Path) -> SQLiteKeyValueStore:
    """Initialize the database schema and run migrations."""
    store = SQLiteKeyValueStore(db_path)
    await store.initialize()
    await run_migrations(store)
    return store
