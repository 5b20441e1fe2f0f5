"""Inventory record, create-form and filter models.

Records are persisted in camelCase (positionType, productionStep, ...); the
Python side uses snake_case. Both spellings are accepted on input.
"""

from datetime import date, datetime, timezone
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from slat_inventory.catalog import Category, Color, PositionType, ProductionStep
from slat_inventory.photos import check_photo_url
from slat_inventory.rules import available_lengths, positions_for

# Still converts to a local calendar date under every UTC offset
MAX_TIMESTAMP_MS = int(datetime(9999, 12, 30, tzinfo=timezone.utc).timestamp() * 1000)


class _RecordFields(BaseModel):
    """Fields shared by stored records and the create form, with the rule-table checks."""

    category: Category
    color: Color
    length: int
    position_type: PositionType = Field(..., alias="positionType")
    production_step: ProductionStep = Field(..., alias="productionStep")
    quantity: int = Field(..., gt=0)
    pallet_id: Optional[str] = Field(None, alias="palletId")
    photo_url: Optional[str] = Field(None, alias="photoUrl")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("pallet_id", "photo_url", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str):
            v = v.strip()
            return v or None
        return v

    @field_validator("length", "quantity", mode="before")
    @classmethod
    def _reject_bool(cls, v):
        if isinstance(v, bool):
            raise ValueError("must be an integer, not a boolean")
        return v

    @model_validator(mode="after")
    def _check_length_and_position(self):
        lengths = available_lengths(self.category)
        if self.length not in lengths:
            raise ValueError(
                f"Length {self.length} is not valid for {self.category.value}; "
                f"expected one of {list(lengths)}"
            )
        positions = positions_for(self.category, self.length, self.production_step)
        if self.position_type not in positions:
            raise ValueError(
                f"Position {self.position_type.value!r} is not valid for "
                f"{self.category.value} {self.length} at {self.production_step.value}; "
                f"expected one of {[p.value for p in positions]}"
            )
        return self


class NewInventoryRecord(_RecordFields):
    """Fields collected by the entry form; id and timestamp are assigned on save."""

    @field_validator("photo_url")
    @classmethod
    def _photo_within_limit(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return check_photo_url(v)


class InventoryRecord(_RecordFields):
    """One stored inventory observation. Immutable."""

    id: str
    timestamp: int = Field(..., ge=0, le=MAX_TIMESTAMP_MS)  # ms since epoch

    model_config = {"populate_by_name": True, "extra": "ignore", "frozen": True}

    def to_storage(self) -> dict:
        """JSON-ready dict in the persisted camelCase layout."""
        return self.model_dump(mode="json", by_alias=True)


class InventoryFilter(BaseModel):
    """Browse criteria. Absent fields impose no constraint; dates are inclusive."""

    category: Optional[Category] = None
    color: Optional[Color] = None
    production_step: Optional[ProductionStep] = Field(None, alias="productionStep")
    date_from: Optional[date] = Field(None, alias="dateFrom")
    date_to: Optional[date] = Field(None, alias="dateTo")

    model_config = {"populate_by_name": True, "extra": "ignore"}

    @field_validator("*", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
