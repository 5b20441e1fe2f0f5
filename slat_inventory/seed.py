"""Sample entries for an empty store. Labels are taken from the rule table, so every entry is valid."""

from slat_inventory.catalog import Category, Color, PositionType, ProductionStep
from slat_inventory.models.inventory import InventoryRecord, NewInventoryRecord
from slat_inventory.storage.repository import InventoryRepository
from slat_inventory.utils.logger import get_logger

logger = get_logger("slat_inventory.seed")

SAMPLE_ENTRIES: tuple[NewInventoryRecord, ...] = (
    NewInventoryRecord(
        category=Category.CLOTHES,
        color=Color.WH,
        length=961,
        position_type=PositionType.FRONT,
        production_step=ProductionStep.HOTSTAMPING,
        quantity=150,
        pallet_id="P001",
    ),
    NewInventoryRecord(
        category=Category.CLOTHES,
        color=Color.GREY,
        length=531,
        position_type=PositionType.LEFT_HS,
        production_step=ProductionStep.FIRST_CYCLE,
        quantity=75,
        pallet_id="P002",
    ),
    NewInventoryRecord(
        category=Category.TROUSERS,
        color=Color.BEIGE,
        length=926,
        position_type=PositionType.BACK,
        production_step=ProductionStep.MILLING,
        quantity=200,
        pallet_id="P003",
    ),
    NewInventoryRecord(
        category=Category.PULL_OUT,
        color=Color.WSO,
        length=676,
        position_type=PositionType.DEFAULT,
        production_step=ProductionStep.AFTER_PILE,
        quantity=120,
        pallet_id="P004",
    ),
)


def seed_sample_data(repository: InventoryRepository) -> list[InventoryRecord]:
    """Create the sample entries if the store is empty. Returns the records created."""
    if repository.list_records():
        logger.debug("seed.skipped_non_empty")
        return []
    created = [repository.create_record(entry) for entry in SAMPLE_ENTRIES]
    logger.info("seed.created", count=len(created))
    return created
