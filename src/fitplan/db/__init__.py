"""Database layer for fitplan."""

from .engine import (
    KeyValueStore,
    MemoryKeyValueStore,
    SQLiteKeyValueStore,
    init_db,
)
from .repositories import AccountRepository, PlanHistoryRepository

__all__ = [
    "AccountRepository",
    "init_db",
    "KeyValueStore",
    "MemoryKeyValueStore",
    "PlanHistoryRepository",
    "SQLiteKeyValueStore",
]
