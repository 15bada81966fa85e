"""Selected operating mode (admin or employee) for the billing desk."""

import logging

from backend.app.schemas.role import UserRole
from backend.app.services.storage import JsonSlot, KeyValueStore

logger = logging.getLogger(__name__)


class RoleStore:
    def __init__(self, store: KeyValueStore, key: str):
        self.slot = JsonSlot(store, key, UserRole, lambda: UserRole.ADMIN)

    def get(self) -> UserRole:
        return self.slot.get()

    def set(self, role: UserRole) -> None:
        self.slot.set(role)
        logger.info("Switched to %s mode", role.value)
