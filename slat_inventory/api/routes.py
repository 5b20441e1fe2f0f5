"""Inventory API routes: records, summary, rule lookups."""

from datetime import date
from typing import Any, Optional

from fastapi import APIRouter, HTTPException, Query, Request
from fastapi.encoders import jsonable_encoder
from pydantic import ValidationError

from slat_inventory.catalog import Category, Color, ProductionStep
from slat_inventory.models.inventory import InventoryFilter
from slat_inventory.rules import LENGTHS, available_lengths, positions_for
from slat_inventory.storage.repository import InventoryRepository
from slat_inventory.summary import filter_records, summarize
from slat_inventory.utils.logger import get_logger

logger = get_logger("slat_inventory.api.routes")

router = APIRouter(tags=["inventory"])


def _repository(request: Request) -> InventoryRepository:
    return request.app.state.repository


def _criteria(
    category: Optional[Category],
    color: Optional[Color],
    step: Optional[ProductionStep],
    from_: Optional[date],
    to: Optional[date],
) -> InventoryFilter:
    return InventoryFilter(
        category=category,
        color=color,
        production_step=step,
        date_from=from_,
        date_to=to,
    )


@router.get("/records")
def list_records(
    request: Request,
    category: Optional[Category] = None,
    color: Optional[Color] = None,
    step: Optional[ProductionStep] = None,
    from_: Optional[date] = Query(None, alias="from", description="ISO date (inclusive)"),
    to: Optional[date] = Query(None, description="ISO date (inclusive)"),
) -> dict[str, Any]:
    """Return stored records matching the optional filters, oldest first."""
    records = filter_records(
        _repository(request).list_records(),
        _criteria(category, color, step, from_, to),
    )
    return {"items": [r.to_storage() for r in records]}


@router.post("/records", status_code=201)
def create_record(request: Request, body: dict[str, Any]) -> dict[str, Any]:
    """Validate and store a new entry; returns it with its assigned id and timestamp."""
    try:
        record = _repository(request).create_record(body)
    except ValidationError as e:
        logger.info("api.create_record.rejected", errors=e.error_count())
        raise HTTPException(
            status_code=400,
            detail=jsonable_encoder(e.errors(include_url=False, include_context=False)),
        ) from e
    return record.to_storage()


@router.delete("/records/{record_id}")
def delete_record(request: Request, record_id: str) -> dict[str, bool]:
    """Delete by id. Unknown ids are not an error: deleted is False."""
    return {"deleted": _repository(request).delete_record(record_id)}


@router.get("/summary")
def inventory_summary(
    request: Request,
    category: Optional[Category] = None,
    color: Optional[Color] = None,
    step: Optional[ProductionStep] = None,
    from_: Optional[date] = Query(None, alias="from", description="ISO date (inclusive)"),
    to: Optional[date] = Query(None, description="ISO date (inclusive)"),
) -> dict[str, Any]:
    """Grouped counts and quantities over the filtered records, groups in first-seen order."""
    records = filter_records(
        _repository(request).list_records(),
        _criteria(category, color, step, from_, to),
    )
    groups = []
    for key, group in summarize(records).items():
        groups.append({
            "category": key.category.value,
            "color": key.color.value,
            "length": key.length,
            "positionType": key.position_type.value,
            "productionStep": key.production_step.value,
            "count": group.count,
            "totalQuantity": group.total_quantity,
            "members": [r.to_storage() for r in group.members],
        })
    return {
        "groups": groups,
        "totalQuantity": sum(g["totalQuantity"] for g in groups),
    }


@router.get("/rules/lengths/{category}")
async def category_lengths(category: Category) -> dict[str, list[int]]:
    """All lengths for the category (front/back first), and which of them are side lengths."""
    return {
        "lengths": list(available_lengths(category)),
        "side": list(LENGTHS[category].side),
    }


@router.get("/rules/positions")
async def category_positions(
    category: Category,
    length: int,
    step: ProductionStep,
) -> dict[str, list[str]]:
    """Valid position labels for a slat of this category and length at this step."""
    if length not in available_lengths(category):
        raise HTTPException(
            status_code=404,
            detail=f"Length {length} is not configured for {category.value}",
        )
    return {"positions": [p.value for p in positions_for(category, length, step)]}
