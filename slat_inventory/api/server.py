"""FastAPI app exposing the inventory store and rule table to a browser front end."""

from fastapi import FastAPI

from slat_inventory.api.routes import router as inventory_router
from slat_inventory.storage import get_repository
from slat_inventory.storage.repository import InventoryRepository
from slat_inventory.utils.logger import get_logger

logger = get_logger("slat_inventory.api.server")


def create_app(repository: InventoryRepository | None = None) -> FastAPI:
    """Create FastAPI app. Without a repository, the configured storage backend is used."""
    app = FastAPI(title="Slat Inventory", version="0.1.0")
    app.state.repository = repository if repository is not None else get_repository()
    logger.info(
        "api.create_app",
        storage=type(app.state.repository.storage).__name__,
    )

    app.include_router(inventory_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    return app
