"""Plan snapshot persistence.

The calculation services never touch storage. Callers inject a
``KeyValueStore`` into ``PlanStore``, which keeps a single versioned
snapshot of the current user's input, paces and block.
"""

import logging
from datetime import datetime, timezone
from typing import Callable, Optional, Protocol

from pydantic import ValidationError
from sqlalchemy import Engine, delete
from sqlalchemy.orm import sessionmaker

from nsplanner.core.config import get_settings
from nsplanner.i18n import LOCALES
from nsplanner.models.database import Base, KeyValueEntry, create_storage_engine
from nsplanner.models.plan import TrainingBlock
from nsplanner.models.schemas import Paces
from nsplanner.models.user import SNAPSHOT_VERSION, UserData, UserInput

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Protocol defining the key-value store interface."""

    def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""
        ...

    def delete(self, key: str) -> None:
        """Remove a key. Missing keys are ignored."""
        ...


class InMemoryStore:
    """Dict-backed store for tests and throwaway sessions."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class SqlKeyValueStore:
    """Store backed by the ``kv_entries`` table."""

    def __init__(self, engine: Engine) -> None:
        self._engine = engine
        self._session_maker = sessionmaker(bind=engine, expire_on_commit=False)
        Base.metadata.create_all(engine)

    @classmethod
    def from_url(cls, url: str) -> "SqlKeyValueStore":
        return cls(create_storage_engine(url))

    def get(self, key: str) -> Optional[str]:
        with self._session_maker() as session:
            entry = session.get(KeyValueEntry, key)
            return entry.value if entry is not None else None

    def set(self, key: str, value: str) -> None:
        with self._session_maker.begin() as session:
            entry = session.get(KeyValueEntry, key)
            if entry is None:
                session.add(KeyValueEntry(key=key, value=value))
            else:
                entry.value = value

    def delete(self, key: str) -> None:
        with self._session_maker.begin() as session:
            session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == key))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class PlanStore:
    """Current-user plan snapshot on top of a key-value store."""

    def __init__(
        self,
        store: KeyValueStore,
        key: str = "ns-user-data",
        locale_key: str = "ns-locale",
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._key = key
        self._locale_key = locale_key
        self._clock = clock

    def get_user_data(self) -> Optional[UserData]:
        """Load the snapshot.

        Returns:
            UserData, or None if nothing is stored or the stored snapshot is
            unreadable or from another snapshot version.
        """
        raw = self._store.get(self._key)
        if raw is None:
            return None

        try:
            data = UserData.model_validate_json(raw)
        except ValidationError as e:
            logger.warning(f"Ignoring unreadable plan snapshot: {e.error_count()} error(s)")
            return None

        if data.version != SNAPSHOT_VERSION:
            logger.warning(
                f"Ignoring plan snapshot version {data.version} (expected {SNAPSHOT_VERSION})"
            )
            return None

        return data

    def save_user_data(
        self,
        *,
        input: Optional[UserInput] = None,
        vdot: Optional[float] = None,
        paces: Optional[Paces] = None,
        current_block: Optional[TrainingBlock] = None,
    ) -> UserData:
        """Merge the given fields into the snapshot and store it.

        Fields left as None keep their stored value. ``created_at`` is kept
        from the existing snapshot, ``updated_at`` is refreshed.
        """
        updates = {
            name: value
            for name, value in (
                ("input", input),
                ("vdot", vdot),
                ("paces", paces),
                ("current_block", current_block),
            )
            if value is not None
        }
        now = self._clock()
        existing = self.get_user_data()

        if existing is None:
            data = UserData(created_at=now, updated_at=now, **updates)
        else:
            data = existing.model_copy(update={**updates, "updated_at": now})

        self._store.set(self._key, data.model_dump_json())
        logger.info(f"Saved plan snapshot fields: {', '.join(sorted(updates)) or '(none)'}")
        return data

    def save_input(self, user_input: UserInput, vdot: float, paces: Paces) -> UserData:
        return self.save_user_data(input=user_input, vdot=vdot, paces=paces)

    def save_block(self, block: TrainingBlock) -> UserData:
        return self.save_user_data(current_block=block)

    def clear_user_data(self) -> None:
        self._store.delete(self._key)
        logger.info("Cleared plan snapshot")

    def has_user_data(self) -> bool:
        return self.get_user_data() is not None

    def get_saved_locale(self) -> Optional[str]:
        locale = self._store.get(self._locale_key)
        return locale if locale in LOCALES else None

    def save_locale(self, locale: str) -> None:
        if locale not in LOCALES:
            raise ValueError(f"Unsupported locale: {locale}")
        self._store.set(self._locale_key, locale)


def get_plan_store() -> PlanStore:
    """Build a PlanStore on the configured database."""
    settings = get_settings()
    return PlanStore(
        SqlKeyValueStore.from_url(settings.storage_url),
        key=settings.storage_key,
        locale_key=settings.locale_key,
    )
