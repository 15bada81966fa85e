"""Printable plain-text invoice for a student record."""

from backend.app.schemas.institute_settings import InstituteSettings
from backend.app.schemas.student import StudentRecord
from backend.app.services.formatting import format_currency, format_date


def invoice_document_filename(record: StudentRecord) -> str:
    return f"Invoice-{record.invoice_number}.txt"


def invoice_pdf_filename(record: StudentRecord) -> str:
    return f"Invoice-{record.invoice_number}.pdf"


def build_invoice_text(record: StudentRecord, settings: InstituteSettings) -> str:
    total = record.amount_paid + record.pending_amount

    lines = []
    lines.append(settings.institute_name)
    lines.append(settings.institute_address)
    lines.append(settings.institute_contact)
    lines.append("")
    lines.append("== INVOICE ==")
    lines.append(f"Invoice Number: {record.invoice_number}")
    lines.append(f"Date: {format_date(record.date_added)}")
    lines.append(f"Status: {record.payment_status}")
    lines.append("")
    lines.append("== Billed To ==")
    lines.append(record.name)
    lines.append(record.address)
    lines.append(f"Email: {record.email}")
    lines.append(f"WhatsApp: {record.whats_app_number}")
    lines.append("")
    lines.append("== Course ==")
    lines.append(f"{record.course}: {format_currency(total)}")
    lines.append("")
    lines.append("== Payment Summary ==")
    lines.append(f"Total Fee: {format_currency(total)}")
    lines.append(f"Amount Paid: {format_currency(record.amount_paid)}")
    lines.append(f"Pending Amount: {format_currency(record.pending_amount)}")
    lines.append("")
    lines.append("== Terms & Conditions ==")
    lines.extend(settings.terms_and_conditions.splitlines())
    lines.append("")
    lines.append("Authorized Signature")
    lines.append(f"For {settings.institute_name}")
    lines.append("")

    return "\n".join(lines)
