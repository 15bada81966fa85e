"""Persisted institute-level configuration used on invoices."""

import logging

from backend.app.schemas.institute_settings import InstituteSettings, default_institute_settings
from backend.app.services.storage import JsonSlot, KeyValueStore

logger = logging.getLogger(__name__)


class InstituteSettingsStore:
    def __init__(self, store: KeyValueStore, key: str):
        self.slot = JsonSlot(store, key, InstituteSettings, default_institute_settings)

    def get(self) -> InstituteSettings:
        return self.slot.get()

    def set(self, new_settings: InstituteSettings) -> None:
        self.slot.set(new_settings)
        logger.info("Institute settings saved for %s", new_settings.institute_name)
