"""SQLAlchemy-backed key-value storage: one row per key in kv_items."""

from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Generator

from sqlalchemy import String, Text, create_engine, make_url, select
from sqlalchemy.orm import DeclarativeBase, Mapped, Session, mapped_column, sessionmaker

from slat_inventory.utils.logger import get_logger

logger = get_logger("slat_inventory.storage.sql")


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class KeyValueItem(Base):
    """A stored value (the record list lives in one row)."""

    __tablename__ = "kv_items"

    key: Mapped[str] = mapped_column(String(256), primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )


def _engine_for(url: str):
    """Create engine with check_same_thread=False so the API worker threads can share it."""
    if url.startswith("sqlite"):
        database = make_url(url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)
        if "?" in url:
            url += "&check_same_thread=False"
        else:
            url += "?check_same_thread=False"
    return create_engine(url, echo=False)


class SqlKeyValueStorage:
    """Key-value storage on any SQLAlchemy database; creates its table on first use."""

    def __init__(self, url: str):
        self._engine = _engine_for(url)
        Base.metadata.create_all(bind=self._engine)
        self._session_factory = sessionmaker(bind=self._engine, autocommit=False, autoflush=False)
        logger.debug("storage.sql.init", url=self._engine.url.render_as_string(hide_password=True))

    @contextmanager
    def _session(self) -> Generator[Session, None, None]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def get_item(self, key: str) -> str | None:
        with self._session() as session:
            return session.scalars(select(KeyValueItem.value).where(KeyValueItem.key == key)).first()

    def set_item(self, key: str, value: str) -> None:
        with self._session() as session:
            row = session.get(KeyValueItem, key)
            if row is None:
                session.add(KeyValueItem(key=key, value=value))
            else:
                row.value = value
        logger.debug("storage.sql.written", key=key, size=len(value))

    def dispose(self) -> None:
        self._engine.dispose()
