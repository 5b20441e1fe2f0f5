"""File-backed key-value storage: every key lives in one JSON object on disk.

The whole file is read on each get and rewritten on each set, mirroring how a
browser's local storage behaves for a single device.
"""

import json
from pathlib import Path

from slat_inventory.utils.logger import get_logger

logger = get_logger("slat_inventory.storage.json_file")


class JsonFileStorage:
    """Local-storage stand-in backed by a JSON file of {key: string value}."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        logger.debug("storage.json_file.init", path=str(self._path))

    @property
    def path(self) -> Path:
        return self._path

    def _read_all(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self._path} does not hold a JSON object")
        return data

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        try:
            data = self._read_all()
        except ValueError as e:
            # Corrupt file: start over from an empty object.
            logger.warning("storage.json_file.overwrite_corrupt", path=str(self._path), error=str(e))
            data = {}
        data[key] = value
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        logger.debug("storage.json_file.written", path=str(self._path), key=key, size=len(value))
