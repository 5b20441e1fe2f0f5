"""Factory-floor slat inventory: position rules, record store, filtered summaries."""

from slat_inventory.catalog import Category, Color, PositionType, ProductionStep
from slat_inventory.rules import available_lengths, is_side_length, positions_for
from slat_inventory.summary import filter_records, record_date, summarize

__all__ = [
    "Category",
    "Color",
    "PositionType",
    "ProductionStep",
    "available_lengths",
    "is_side_length",
    "positions_for",
    "filter_records",
    "record_date",
    "summarize",
]
