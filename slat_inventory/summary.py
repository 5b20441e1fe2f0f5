"""Filter and group-by over in-memory inventory records."""

from collections.abc import Iterable
from datetime import date, datetime, tzinfo
from typing import Optional

from slat_inventory.models.inventory import InventoryFilter, InventoryRecord
from slat_inventory.models.summary import SummaryGroup, SummaryKey


def record_date(record: InventoryRecord, tz: Optional[tzinfo] = None) -> date:
    """Calendar date the record was created on (local time unless tz is given)."""
    return datetime.fromtimestamp(record.timestamp / 1000, tz=tz).date()


def _matches(record: InventoryRecord, criteria: InventoryFilter, tz: Optional[tzinfo]) -> bool:
    if criteria.category is not None and record.category != criteria.category:
        return False
    if criteria.color is not None and record.color != criteria.color:
        return False
    if criteria.production_step is not None and record.production_step != criteria.production_step:
        return False
    if criteria.date_from is not None or criteria.date_to is not None:
        created = record_date(record, tz)
        if criteria.date_from is not None and created < criteria.date_from:
            return False
        if criteria.date_to is not None and created > criteria.date_to:
            return False
    return True


def filter_records(
    records: Iterable[InventoryRecord],
    criteria: Optional[InventoryFilter] = None,
    tz: Optional[tzinfo] = None,
) -> list[InventoryRecord]:
    """Records passing every criterion present in the filter, in input order."""
    if criteria is None:
        return list(records)
    return [r for r in records if _matches(r, criteria, tz)]


def summarize(records: Iterable[InventoryRecord]) -> dict[SummaryKey, SummaryGroup]:
    """Group by (category, color, length, position, step); groups in first-seen order."""
    summary: dict[SummaryKey, SummaryGroup] = {}
    for record in records:
        group = summary.setdefault(SummaryKey.of(record), SummaryGroup())
        group.count += 1
        group.total_quantity += record.quantity
        group.members.append(record)
    return summary
