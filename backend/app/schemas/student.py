"""Student record schemas."""

from datetime import datetime
from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, computed_field, field_validator
from pydantic.alias_generators import to_camel

StatusFilter = Literal["all", "paid", "pending"]


class StudentFields(BaseModel):
    """Editable fields of a student record."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str
    email: str
    whats_app_number: str
    address: str
    course: str
    amount_paid: Decimal
    pending_amount: Decimal


class StudentRecord(StudentFields):
    id: str
    invoice_number: str
    date_added: datetime

    @property
    def is_paid(self) -> bool:
        return self.pending_amount == 0

    @property
    def payment_status(self) -> str:
        return "Paid" if self.is_paid else "Pending"


class StudentRead(StudentRecord):
    @computed_field
    @property
    def status(self) -> str:
        return self.payment_status


class StudentForm(BaseModel):
    """Raw, unvalidated form input; numbers are kept as text, anything else reads as blank."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    name: str = ""
    email: str = ""
    whats_app_number: str = ""
    address: str = ""
    course: str = ""
    amount_paid: str = ""
    pending_amount: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _coerce_to_text(cls, value):
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float, Decimal)) and not isinstance(value, bool):
            return str(value)
        # lists, objects, booleans and null read as a blank field
        return ""
