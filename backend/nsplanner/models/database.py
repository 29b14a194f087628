"""Database engine and key-value table backing the plan store."""

from datetime import datetime, timezone
from pathlib import Path

from sqlalchemy import DateTime, Engine, String, Text, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    pass


class KeyValueEntry(Base):
    """One stored value, e.g. the serialized current plan snapshot."""

    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(100), primary_key=True)
    value: Mapped[str] = mapped_column(Text)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=_utcnow,
        onupdate=_utcnow,
    )

    def __repr__(self) -> str:
        return f"<KeyValueEntry(key={self.key}, size={len(self.value)})>"


def create_storage_engine(url: str) -> Engine:
    """Create an engine for the storage URL.

    SQLite files get their parent directory created; in-memory SQLite
    shares one connection so every session sees the same tables.
    """
    parsed = make_url(url)

    if parsed.get_backend_name() != "sqlite":
        return create_engine(url)

    database = parsed.database
    if not database or database == ":memory:":
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    Path(database).parent.mkdir(parents=True, exist_ok=True)
    return create_engine(url, connect_args={"check_same_thread": False})
