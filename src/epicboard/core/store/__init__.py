"""Persistence: storage backends and the TrackerDatabase entity store."""

from epicboard.core.store.database import TrackerDatabase
from epicboard.core.store.storage import JSONFileStorage, MemoryStorage, Storage

__all__ = ["JSONFileStorage", "MemoryStorage", "Storage", "TrackerDatabase"]
