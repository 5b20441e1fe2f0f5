"""Position rule table: valid cut lengths per category and valid positions per step.

Both lookups are pure functions of the static tables below. String labels are
accepted and coerced through the enums, so an unknown label raises ValueError.
"""

from types import MappingProxyType
from typing import NamedTuple

from slat_inventory.catalog import Category, PositionType, ProductionStep


class CategoryLengths(NamedTuple):
    """Lengths (mm) of one category, split by where the slat goes."""

    front_back: tuple[int, ...]
    side: tuple[int, ...]


LENGTHS: MappingProxyType[Category, CategoryLengths] = MappingProxyType(
    {
        Category.CLOTHES: CategoryLengths(front_back=(961, 711, 461), side=(531, 301)),
        Category.TROUSERS: CategoryLengths(front_back=(926, 676, 426), side=(531, 301)),
        Category.PULL_OUT: CategoryLengths(front_back=(926, 676, 426), side=(531, 301)),
    }
)

FRONT_BACK_POSITIONS = (PositionType.FRONT, PositionType.BACK)
FIRST_CYCLE_SIDE_POSITIONS = (
    PositionType.LEFT,
    PositionType.LEFT_HS,
    PositionType.RIGHT,
    PositionType.RIGHT_HS,
)

# Steps after first cycle where both side slats are handled as one pair
_PAIRED_SIDE_STEPS = frozenset(
    {ProductionStep.HOTSTAMPING, ProductionStep.MILLING, ProductionStep.POST_WHEELS}
)


def available_lengths(category: Category | str) -> tuple[int, ...]:
    """Front/back lengths followed by side lengths, in table order (not sorted)."""
    lengths = LENGTHS[Category(category)]
    return lengths.front_back + lengths.side


def is_side_length(category: Category | str, length: int) -> bool:
    return length in LENGTHS[Category(category)].side


def positions_for(
    category: Category | str,
    length: int,
    production_step: ProductionStep | str,
) -> tuple[PositionType, ...]:
    """Return the position labels a slat may carry at the given step.

    After Pile slats have no position yet. Otherwise the answer depends on
    whether the length is one of the category's side lengths: first-cycle side
    slats are told apart left/right and with/without hotstamp, later steps
    only know them as "Sides".
    """
    step = ProductionStep(production_step)
    if step is ProductionStep.AFTER_PILE:
        return (PositionType.DEFAULT,)

    side = is_side_length(category, length)
    if step is ProductionStep.FIRST_CYCLE:
        return FIRST_CYCLE_SIDE_POSITIONS if side else FRONT_BACK_POSITIONS
    if step in _PAIRED_SIDE_STEPS:
        return (PositionType.SIDES,) if side else FRONT_BACK_POSITIONS
    return FRONT_BACK_POSITIONS
