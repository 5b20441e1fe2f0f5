"""Configuration and settings."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _project_root(package_dir: Path, cwd: Path) -> Path:
    """Checkout root when running from source (pyproject.toml beside the package), else cwd."""
    checkout = package_dir.parent
    if (checkout / "pyproject.toml").is_file():
        return checkout
    return cwd


# Paths (created on first write, not at import)
PROJECT_ROOT = _project_root(Path(__file__).resolve().parent, Path.cwd())
DATA_DIR = Path(os.getenv("INVENTORY_DATA_DIR", "") or PROJECT_ROOT / "data")
OUTPUT_DIR = Path(os.getenv("INVENTORY_OUTPUT_DIR", "") or PROJECT_ROOT / "output")

# Storage backend: "json" (single local-storage file) or "sql" (SQLAlchemy key-value table)
STORAGE_BACKEND = os.getenv("INVENTORY_STORAGE_BACKEND", "json").strip().lower()
STORE_PATH = Path(os.getenv("INVENTORY_STORE_PATH", "") or DATA_DIR / "local_storage.json")
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{(DATA_DIR / 'inventory.db').as_posix()}")

# Key under which the whole record list is stored
STORAGE_KEY = os.getenv("INVENTORY_STORAGE_KEY", "factory-slat-inventory")

# Photo intake cap (bytes of the source file)
MAX_PHOTO_BYTES = int(os.getenv("MAX_PHOTO_BYTES", str(5 * 1024 * 1024)))

# Logging
LOG_DIR = OUTPUT_DIR / "logs"
LOG_FILE = LOG_DIR / "app.jsonl"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
VERBOSE_LOGGING = os.getenv("VERBOSE_LOGGING", "false").lower() == "true"

# HTTP API
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
