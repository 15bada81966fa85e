from datetime import date, datetime, timezone
from decimal import Decimal
from urllib.parse import unquote

from backend.app.core.constants import CSV_HEADERS
from backend.app.schemas.institute_settings import default_institute_settings
from backend.app.schemas.student import StudentRecord
from backend.app.services.formatting import (
    build_students_csv,
    build_whatsapp_link,
    csv_export_filename,
    format_currency,
    format_date,
)


def _record(**overrides) -> StudentRecord:
    data = dict(
        id="rec-1",
        invoice_number="SA-2024-0001",
        name="Asha Rao",
        email="asha@example.com",
        whats_app_number="+919876543210",
        address="Pune",
        course="MERN Stack Development",
        amount_paid=Decimal("15000.00"),
        pending_amount=Decimal("2500.50"),
        date_added=datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc),
    )
    data.update(overrides)
    return StudentRecord(**data)


def test_format_currency_uses_indian_grouping():
    assert format_currency(Decimal("0")) == "₹0.00"
    assert format_currency(Decimal("999.5")) == "₹999.50"
    assert format_currency(Decimal("1234.5")) == "₹1,234.50"
    assert format_currency(Decimal("123456.5")) == "₹1,23,456.50"
    assert format_currency(Decimal("12345678")) == "₹1,23,45,678.00"


def test_format_date_long_month():
    assert format_date(datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)) == "1 March 2024"
    assert format_date(date(2023, 12, 25)) == "25 December 2023"


def test_format_date_uses_institute_timezone():
    # 20:00 UTC is already the next day in India
    assert format_date(datetime(2024, 1, 31, 20, 0, tzinfo=timezone.utc)) == "1 February 2024"


def test_csv_header_and_row():
    content = build_students_csv([_record()])
    lines = content.splitlines()
    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[0] == (
        "Invoice Number,Name,Email,WhatsApp Number,Address,Course,"
        "Amount Paid (INR),Pending Amount (INR),Date Added,Status"
    )
    assert lines[1] == (
        "SA-2024-0001,Asha Rao,asha@example.com,+919876543210,Pune,"
        "MERN Stack Development,15000.00,2500.50,1 March 2024,Pending"
    )


def test_csv_escapes_quotes_and_commas():
    content = build_students_csv([_record(address='123 "Main" St', name="Rao, Asha", pending_amount=Decimal("0.00"))])
    row = content.splitlines()[1]
    assert '"123 ""Main"" St"' in row
    assert '"Rao, Asha"' in row
    assert row.endswith(",Paid")


def test_csv_keeps_given_order():
    first = _record(id="a", invoice_number="SA-2024-0002")
    second = _record(id="b", invoice_number="SA-2024-0001")
    lines = build_students_csv([first, second]).splitlines()
    assert lines[1].startswith("SA-2024-0002")
    assert lines[2].startswith("SA-2024-0001")


def test_csv_export_filename():
    assert csv_export_filename("swamy_academy", date(2024, 5, 9)) == "swamy_academy_students_2024-05-09.csv"


def test_whatsapp_link_strips_plus_and_encodes_message():
    link = build_whatsapp_link(_record(), default_institute_settings())
    assert link.startswith("https://wa.me/919876543210?text=")
    encoded = link.split("?text=", 1)[1]
    assert " " not in encoded
    assert "\n" not in encoded
    assert "%0A" in encoded
    message = unquote(encoded)
    assert message.startswith("Dear Asha Rao,")
    assert "Thank you for your payment at Swamy Academy." in message
    assert "Number: SA-2024-0001" in message
    assert "Course: MERN Stack Development" in message
    assert "Amount Paid: ₹15,000.00" in message
    assert "Pending Amount: ₹2,500.50" in message


def test_whatsapp_link_without_plus():
    link = build_whatsapp_link(_record(whats_app_number="9876543210"), default_institute_settings())
    assert link.startswith("https://wa.me/9876543210?text=")
