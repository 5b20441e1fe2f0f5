"""Pydantic models for slat inventory."""

from slat_inventory.models.inventory import (
    InventoryFilter,
    InventoryRecord,
    NewInventoryRecord,
)
from slat_inventory.models.summary import SummaryGroup, SummaryKey

__all__ = [
    "InventoryRecord",
    "NewInventoryRecord",
    "InventoryFilter",
    "SummaryKey",
    "SummaryGroup",
]
