"""Key-value storage capability and typed slot views over it."""

import logging
from typing import Any, Callable, Generic, Optional, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from backend.app.crud.crud_kv_slot import kv_slot_crud

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PersistenceReadError(ValueError):
    """A stored slot value could not be decoded."""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Slot {key!r} holds an unreadable value: {reason}")
        self.key = key


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[str]: ...

    def set(self, key: str, value: str) -> None: ...


class InMemoryKeyValueStore:
    def __init__(self, initial: dict[str, str] | None = None):
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def set(self, key: str, value: str) -> None:
        self._values[key] = value


class SqlKeyValueStore:
    """Slots stored as rows of the kv_slots table; every write is committed."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, key: str) -> Optional[str]:
        slot = kv_slot_crud.get(self.db, key=key)
        return slot.value if slot is not None else None

    def set(self, key: str, value: str) -> None:
        kv_slot_crud.upsert(self.db, key=key, value=value)


class JsonSlot(Generic[T]):
    """Typed JSON view over a single key.

    Absent or unreadable values resolve to the slot default so callers never
    have to deal with a corrupt slot.
    """

    def __init__(self, store: KeyValueStore, key: str, type_: Any, default: Callable[[], T]):
        self.store = store
        self.key = key
        self._adapter = TypeAdapter(type_)
        self._default = default

    def load(self) -> Optional[T]:
        raw = self.store.get(self.key)
        if raw is None:
            return None
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as exc:
            raise PersistenceReadError(self.key, str(exc)) from exc

    def get(self) -> T:
        try:
            value = self.load()
        except PersistenceReadError as exc:
            logger.warning("%s; falling back to default", exc)
            return self._default()
        if value is None:
            return self._default()
        return value

    def set(self, value: T) -> None:
        self.store.set(self.key, self._adapter.dump_json(value, by_alias=True).decode("utf-8"))
