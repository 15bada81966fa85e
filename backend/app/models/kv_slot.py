"""Key-value slot model backing the persisted application state."""

from sqlalchemy import Column, DateTime, String, Text

from backend.app.core.time import utc_now
from backend.app.db.base_class import Base


class KeyValueSlot(Base):
    __tablename__ = "kv_slots"

    key = Column(String, primary_key=True)
    value = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False, default=utc_now)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=utc_now, onupdate=utc_now)
