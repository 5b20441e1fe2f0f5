"""Summary models: derived per view, never stored."""

from typing import NamedTuple

from pydantic import BaseModel

from slat_inventory.catalog import Category, Color, PositionType, ProductionStep
from slat_inventory.models.inventory import InventoryRecord


class SummaryKey(NamedTuple):
    """Group key: records sharing all five fields land in one group."""

    category: Category
    color: Color
    length: int
    position_type: PositionType
    production_step: ProductionStep

    @classmethod
    def of(cls, record: InventoryRecord) -> "SummaryKey":
        return cls(
            record.category,
            record.color,
            record.length,
            record.position_type,
            record.production_step,
        )


class SummaryGroup(BaseModel):
    """Count and total quantity of one group, plus its records in input order."""

    count: int = 0
    total_quantity: int = 0
    members: list[InventoryRecord] = []
