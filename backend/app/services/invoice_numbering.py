"""Sequential invoice number generation backed by a persisted counter."""

import logging
from datetime import datetime
from typing import Callable

from pydantic import NonNegativeInt

from backend.app.core.time import utc_now
from backend.app.services.storage import JsonSlot, KeyValueStore

logger = logging.getLogger(__name__)


def format_invoice_number(prefix: str, year: int, sequence: int) -> str:
    return f"{prefix}-{year}-{sequence:04d}"


class InvoiceNumberService:
    """Hands out PREFIX-YEAR-NNNN numbers.

    The counter slot is the only state. It assumes a single writer; two
    processes sharing a slot can hand out the same number.
    """

    def __init__(self, store: KeyValueStore, key: str, prefix: str, clock: Callable[[], datetime] = utc_now):
        self.counter = JsonSlot(store, key, NonNegativeInt, lambda: 0)
        self.prefix = prefix
        self.clock = clock

    def current(self) -> int:
        return self.counter.get()

    def next_invoice_number(self) -> str:
        value = self.counter.get() + 1
        self.counter.set(value)
        logger.info("Invoice counter advanced to %d", value)
        return format_invoice_number(self.prefix, self.clock().year, value)
