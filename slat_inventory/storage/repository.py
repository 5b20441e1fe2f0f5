"""Inventory repository: create, list and delete records kept under one storage key.

Every mutation is a full snapshot cycle: load the whole list, change it in
memory, write the whole list back. There is no locking; two writers racing on
the same storage can lose each other's changes.
"""

import json
import time
import uuid
from collections.abc import Callable, Mapping
from typing import Any

from pydantic import ValidationError

from slat_inventory.config import STORAGE_KEY
from slat_inventory.models.inventory import InventoryRecord, NewInventoryRecord
from slat_inventory.storage.protocol import KeyValueStorage
from slat_inventory.utils.logger import get_logger

logger = get_logger("slat_inventory.storage.repository")


def _now_ms() -> int:
    return int(time.time() * 1000)


def _new_id() -> str:
    return str(uuid.uuid4())


class InventoryRepository:
    """Record store over a KeyValueStorage."""

    def __init__(
        self,
        storage: KeyValueStorage,
        key: str = STORAGE_KEY,
        clock: Callable[[], int] = _now_ms,
        id_factory: Callable[[], str] = _new_id,
    ):
        self._storage = storage
        self._key = key
        self._clock = clock
        self._id_factory = id_factory

    @property
    def storage(self) -> KeyValueStorage:
        return self._storage

    def _load(self) -> list[InventoryRecord]:
        """Read the stored list. Missing, unreadable or corrupt state reads as empty."""
        try:
            raw = self._storage.get_item(self._key)
        except Exception as e:
            logger.warning("repository.load_error", key=self._key, error=str(e))
            return []
        if raw is None:
            return []
        try:
            data = json.loads(raw)
        except ValueError as e:
            logger.warning("repository.load_corrupt", key=self._key, error=str(e))
            return []
        if not isinstance(data, list):
            logger.warning("repository.load_not_a_list", key=self._key, type=type(data).__name__)
            return []
        records: list[InventoryRecord] = []
        for index, item in enumerate(data):
            try:
                records.append(InventoryRecord.model_validate(item))
            except ValidationError as e:
                logger.warning(
                    "repository.record_skipped",
                    key=self._key,
                    index=index,
                    errors=e.error_count(),
                )
        return records

    def _store(self, records: list[InventoryRecord]) -> None:
        """Write the full list back. Storage errors propagate."""
        payload = json.dumps([r.to_storage() for r in records])
        self._storage.set_item(self._key, payload)

    def list_records(self) -> list[InventoryRecord]:
        """Return all stored records in insertion order."""
        return self._load()

    def create_record(self, fields: NewInventoryRecord | Mapping[str, Any]) -> InventoryRecord:
        """Validate fields, assign id and timestamp, append and persist. Returns the new record.

        Raises pydantic.ValidationError (a ValueError) on invalid fields; nothing is written then.
        """
        if not isinstance(fields, NewInventoryRecord):
            fields = NewInventoryRecord.model_validate(fields)
        record = InventoryRecord(
            **fields.model_dump(),
            id=self._id_factory(),
            timestamp=self._clock(),
        )
        records = self._load()
        records.append(record)
        self._store(records)
        logger.info(
            "repository.record_created",
            record_id=record.id,
            category=record.category.value,
            production_step=record.production_step.value,
            quantity=record.quantity,
        )
        return record

    def delete_record(self, record_id: str) -> bool:
        """Remove the record with this id. Returns False (and writes nothing) if absent."""
        records = self._load()
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            logger.debug("repository.delete_missing", record_id=record_id)
            return False
        self._store(remaining)
        logger.info("repository.record_deleted", record_id=record_id)
        return True
