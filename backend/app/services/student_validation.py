"""Validation and normalization of submitted student forms."""

import re
from decimal import Decimal, InvalidOperation

from backend.app.schemas.student import StudentFields, StudentForm

EMAIL_RE = re.compile(r"^\S+@\S+\.\S+$")
PHONE_RE = re.compile(r"^\+?[1-9]\d{1,14}$")


def normalize_whatsapp_number(value: str) -> str:
    """Keep a leading '+' and digits only."""
    value = value.strip()
    if value.startswith("+"):
        return "+" + re.sub(r"\D", "", value[1:])
    return re.sub(r"\D", "", value)


def parse_amount(value: str) -> Decimal | None:
    """Return a non-negative amount with two decimals, or None if invalid."""
    try:
        amount = Decimal(value.strip())
        if not amount.is_finite() or amount < 0:
            return None
        # abs() folds "-0" into 0.00
        return abs(amount.quantize(Decimal("0.01")))
    except InvalidOperation:
        return None


def validate_student_form(form: StudentForm) -> dict[str, str]:
    """Return a map of camelCase field name to message; empty when valid."""
    errors: dict[str, str] = {}
    if not form.name.strip():
        errors["name"] = "Name is required."
    if not form.email.strip():
        errors["email"] = "Email is required."
    elif not EMAIL_RE.match(form.email.strip()):
        errors["email"] = "Invalid email format."
    if not form.whats_app_number.strip():
        errors["whatsAppNumber"] = "WhatsApp number is required."
    elif not PHONE_RE.match(re.sub(r"\s+", "", form.whats_app_number)):
        errors["whatsAppNumber"] = "Invalid WhatsApp number (e.g., +919876543210 or 9876543210)."
    if not form.address.strip():
        errors["address"] = "Address is required."
    if not form.course.strip():
        errors["course"] = "Course is required."
    if parse_amount(form.amount_paid) is None:
        errors["amountPaid"] = "Valid amount paid is required."
    if parse_amount(form.pending_amount) is None:
        errors["pendingAmount"] = "Valid pending amount is required."
    return errors


def clean_student_form(form: StudentForm) -> StudentFields:
    """Build validated fields from a form that passed validate_student_form."""
    return StudentFields(
        name=form.name.strip(),
        email=form.email.strip(),
        whats_app_number=normalize_whatsapp_number(form.whats_app_number),
        address=form.address.strip(),
        course=form.course.strip(),
        amount_paid=parse_amount(form.amount_paid),
        pending_amount=parse_amount(form.pending_amount),
    )
