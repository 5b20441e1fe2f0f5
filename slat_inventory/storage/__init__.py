"""Storage: key-value port, its backends, and the inventory repository."""

from slat_inventory.config import DATABASE_URL, STORAGE_BACKEND, STORE_PATH
from slat_inventory.storage.json_file import JsonFileStorage
from slat_inventory.storage.memory import MemoryStorage
from slat_inventory.storage.protocol import KeyValueStorage
from slat_inventory.storage.repository import InventoryRepository
from slat_inventory.storage.sql import SqlKeyValueStorage


def build_storage(backend: str = STORAGE_BACKEND) -> KeyValueStorage:
    """Return the configured storage backend ("json" or "sql"). Raises ValueError if unknown."""
    if backend == "json":
        return JsonFileStorage(STORE_PATH)
    if backend == "sql":
        return SqlKeyValueStorage(DATABASE_URL)
    raise ValueError(f"Unknown storage backend: {backend!r}. Expected 'json' or 'sql'")


def get_repository(backend: str = STORAGE_BACKEND) -> InventoryRepository:
    return InventoryRepository(build_storage(backend))


__all__ = [
    "KeyValueStorage",
    "JsonFileStorage",
    "SqlKeyValueStorage",
    "MemoryStorage",
    "InventoryRepository",
    "build_storage",
    "get_repository",
]
