"""Record persistence: the RecordStore contract, an in-memory store, and
the aiosqlite-backed store with its connection manager.
"""

from badger.storage.base import InMemoryRecordStore, Record, RecordStore
from badger.storage.database import BadgeDatabase
from badger.storage.store import SqliteRecordStore

__all__ = [
    "BadgeDatabase",
    "InMemoryRecordStore",
    "Record",
    "RecordStore",
    "SqliteRecordStore",
]
