"""Display, CSV and share-link formatting for student records."""

import csv
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from io import StringIO
from typing import Iterable
from urllib.parse import quote
from zoneinfo import ZoneInfo

from backend.app.core.constants import CSV_HEADERS
from backend.app.core.settings import get_settings
from backend.app.schemas.institute_settings import InstituteSettings
from backend.app.schemas.student import StudentRecord

CURRENCY_SYMBOLS = {"INR": "₹"}

# Characters encodeURIComponent leaves alone, beyond the ones quote() always keeps.
_URI_COMPONENT_SAFE = "!~*'()"


def _group_indian(digits: str) -> str:
    """Group an integer digit string the en-IN way: 12,34,56,789."""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def format_amount(amount: Decimal | float | int) -> str:
    """Two decimal places, no grouping, as written to CSV."""
    return str(Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def format_currency(amount: Decimal | float | int, currency: str | None = None) -> str:
    currency = currency or get_settings().currency_code
    value = Decimal(str(amount)).quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    whole, fraction = str(abs(value)).split(".")
    symbol = CURRENCY_SYMBOLS.get(currency, f"{currency} ")
    return f"{sign}{symbol}{_group_indian(whole)}.{fraction}"


def format_date(value: datetime | date, tz_name: str | None = None) -> str:
    """Long en-IN date, e.g. '1 March 2024', in the institute timezone."""
    if isinstance(value, datetime) and value.tzinfo is not None:
        value = value.astimezone(ZoneInfo(tz_name or get_settings().display_timezone))
    return f"{value.day} {value.strftime('%B')} {value.year}"


def build_students_csv(records: Iterable[StudentRecord]) -> str:
    buffer = StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for record in records:
        writer.writerow(
            [
                record.invoice_number,
                record.name,
                record.email,
                record.whats_app_number,
                record.address,
                record.course,
                format_amount(record.amount_paid),
                format_amount(record.pending_amount),
                format_date(record.date_added),
                record.payment_status,
            ]
        )
    return buffer.getvalue()


def csv_export_filename(prefix: str, day: date) -> str:
    return f"{prefix}_students_{day.isoformat()}.csv"


def build_whatsapp_message(record: StudentRecord, settings: InstituteSettings) -> str:
    return (
        f"Dear {record.name},\n\n"
        f"Thank you for your payment at {settings.institute_name}.\n\n"
        "Invoice Details:\n"
        f"Number: {record.invoice_number}\n"
        f"Course: {record.course}\n"
        f"Amount Paid: {format_currency(record.amount_paid)}\n"
        f"Pending Amount: {format_currency(record.pending_amount)}\n\n"
        f"Regards,\n{settings.institute_name}"
    )


def build_whatsapp_link(record: StudentRecord, settings: InstituteSettings) -> str:
    number = record.whats_app_number
    if number.startswith("+"):
        number = number[1:]
    message = quote(build_whatsapp_message(record, settings), safe=_URI_COMPONENT_SAFE)
    return f"https://wa.me/{number}?text={message}"
