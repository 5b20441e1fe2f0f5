"""HTTP API over the inventory store."""

from slat_inventory.api.server import create_app

__all__ = ["create_app"]
