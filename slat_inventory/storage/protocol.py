"""Storage port (local-storage-like interface)."""

from typing import Protocol


class KeyValueStorage(Protocol):
    """Abstract string key -> string value store, one value per key."""

    def get_item(self, key: str) -> str | None:
        """Return the stored value, or None if the key was never set."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Replace the value under key. Write errors propagate."""
        ...
