"""Persisted collection of student billing records."""

import logging
import uuid
from datetime import datetime
from typing import Callable

from backend.app.core.time import utc_now
from backend.app.schemas.student import StudentForm, StudentRecord
from backend.app.services.invoice_numbering import InvoiceNumberService
from backend.app.services.storage import JsonSlot, KeyValueStore
from backend.app.services.student_validation import clean_student_form, validate_student_form

logger = logging.getLogger(__name__)


class StudentNotFound(LookupError):
    def __init__(self, student_id: str):
        super().__init__(f"Student {student_id} not found")
        self.student_id = student_id


class StudentFormInvalid(ValueError):
    def __init__(self, errors: dict[str, str]):
        super().__init__("Student form is invalid")
        self.errors = errors


class StudentRecordStore:
    """Source of truth for student records.

    Every mutation rewrites the whole collection slot. Validation happens
    before anything is written, so a rejected form leaves both the collection
    and the invoice counter untouched.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str,
        numbering: InvoiceNumberService,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = lambda: str(uuid.uuid4()),
    ):
        self.slot = JsonSlot(store, key, list[StudentRecord], list)
        self.numbering = numbering
        self.clock = clock
        self.id_factory = id_factory

    def list(self) -> list[StudentRecord]:
        return self.slot.get()

    def get(self, student_id: str) -> StudentRecord:
        for record in self.slot.get():
            if record.id == student_id:
                return record
        raise StudentNotFound(student_id)

    def _clean(self, form: StudentForm):
        errors = validate_student_form(form)
        if errors:
            raise StudentFormInvalid(errors)
        return clean_student_form(form)

    def create(self, form: StudentForm) -> StudentRecord:
        fields = self._clean(form)
        record = StudentRecord(
            id=self.id_factory(),
            invoice_number=self.numbering.next_invoice_number(),
            date_added=self.clock(),
            **fields.model_dump(),
        )
        self.slot.set([record, *self.slot.get()])
        logger.info("Created student %s with invoice %s", record.id, record.invoice_number)
        return record

    def update(self, student_id: str, form: StudentForm) -> StudentRecord:
        records = self.slot.get()
        index = next((i for i, r in enumerate(records) if r.id == student_id), None)
        if index is None:
            raise StudentNotFound(student_id)
        fields = self._clean(form)
        updated = records[index].model_copy(update=fields.model_dump())
        records[index] = updated
        self.slot.set(records)
        logger.info("Updated student %s", student_id)
        return updated

    def delete(self, student_id: str) -> None:
        records = self.slot.get()
        remaining = [r for r in records if r.id != student_id]
        if len(remaining) == len(records):
            raise StudentNotFound(student_id)
        self.slot.set(remaining)
        logger.info("Deleted student %s", student_id)
