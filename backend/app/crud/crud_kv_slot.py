"""CRUD operations for key-value slots."""

from typing import Optional

from sqlalchemy.orm import Session

from backend.app.models.kv_slot import KeyValueSlot


class CRUDKeyValueSlot:
    def get(self, db: Session, *, key: str) -> Optional[KeyValueSlot]:
        return db.query(KeyValueSlot).filter(KeyValueSlot.key == key).first()

    def upsert(self, db: Session, *, key: str, value: str) -> KeyValueSlot:
        obj = self.get(db, key=key)
        if obj is None:
            obj = KeyValueSlot(key=key, value=value)
            db.add(obj)
        else:
            obj.value = value
        db.commit()
        db.refresh(obj)
        return obj


kv_slot_crud = CRUDKeyValueSlot()
