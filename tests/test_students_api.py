from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from backend.app.db.base import Base
from backend.app.db.session import engine
from backend.app.main import app


@pytest.fixture(autouse=True)
def setup_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


def student_payload(**overrides) -> dict:
    payload = {
        "name": "Asha Rao",
        "email": "asha@example.com",
        "whatsAppNumber": "+919876543210",
        "address": "12 MG Road, Pune",
        "course": "MERN Stack Development",
        "amountPaid": 15000,
        "pendingAmount": "2500.50",
    }
    payload.update(overrides)
    return payload


def create_student(client: TestClient, **overrides) -> dict:
    resp = client.post("/students", json=student_payload(**overrides))
    assert resp.status_code == 201
    return resp.json()


def test_create_student_basic():
    client = TestClient(app)
    data = create_student(client)
    assert data["name"] == "Asha Rao"
    assert data["invoiceNumber"] == f"SA-{datetime.now(timezone.utc).year}-0001"
    assert data["amountPaid"] == "15000.00"
    assert data["pendingAmount"] == "2500.50"
    assert data["status"] == "Pending"
    assert data["id"]
    assert data["dateAdded"]


def test_create_student_numbers_are_sequential():
    client = TestClient(app)
    first = create_student(client)
    second = create_student(client, name="Ravi")
    assert first["invoiceNumber"].endswith("-0001")
    assert second["invoiceNumber"].endswith("-0002")


def test_create_student_validation_errors_are_field_keyed():
    client = TestClient(app)
    resp = client.post("/students", json=student_payload(name="", email="nope", amountPaid=-5))
    assert resp.status_code == 422
    errors = resp.json()["detail"]["errors"]
    assert set(errors) == {"name", "email", "amountPaid"}

    resp = client.get("/students")
    assert resp.json() == []


def test_rejected_form_does_not_consume_invoice_number():
    client = TestClient(app)
    client.post("/students", json=student_payload(email="bad"))
    data = create_student(client)
    assert data["invoiceNumber"].endswith("-0001")


def test_list_students_filters_and_orders():
    client = TestClient(app)
    paid = create_student(client, name="Paid One", course="Digital Marketing", pendingAmount=0)
    pending = create_student(client, name="Pending One", course="MERN Stack Development")

    resp = client.get("/students")
    assert resp.status_code == 200
    assert [s["id"] for s in resp.json()] == [pending["id"], paid["id"]]

    resp = client.get("/students", params={"status": "paid"})
    assert [s["id"] for s in resp.json()] == [paid["id"]]

    resp = client.get("/students", params={"status": "pending", "search": "MERN"})
    assert [s["id"] for s in resp.json()] == [pending["id"]]

    resp = client.get("/students", params={"search": "nobody"})
    assert resp.status_code == 200
    assert resp.json() == []


def test_list_students_rejects_unknown_status():
    client = TestClient(app)
    resp = client.get("/students", params={"status": "overdue"})
    assert resp.status_code == 422


def test_get_student_and_not_found():
    client = TestClient(app)
    created = create_student(client)
    resp = client.get(f"/students/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created

    resp = client.get("/students/does-not-exist")
    assert resp.status_code == 404
    assert resp.json()["detail"] == "Student not found"


def test_update_student_preserves_invoice_number_and_date():
    client = TestClient(app)
    created = create_student(client)
    resp = client.put(f"/students/{created['id']}", json=student_payload(name="Asha R.", pendingAmount=0))
    assert resp.status_code == 200
    data = resp.json()
    assert data["id"] == created["id"]
    assert data["invoiceNumber"] == created["invoiceNumber"]
    assert data["dateAdded"] == created["dateAdded"]
    assert data["name"] == "Asha R."
    assert data["status"] == "Paid"


def test_update_student_ignores_identity_fields_in_body():
    client = TestClient(app)
    created = create_student(client)
    payload = student_payload(invoiceNumber="SA-1999-9999", dateAdded="1999-01-01T00:00:00Z", id="other")
    resp = client.put(f"/students/{created['id']}", json=payload)
    assert resp.status_code == 200
    assert resp.json()["invoiceNumber"] == created["invoiceNumber"]
    assert resp.json()["dateAdded"] == created["dateAdded"]


def test_update_missing_student_returns_404():
    client = TestClient(app)
    resp = client.put("/students/missing", json=student_payload())
    assert resp.status_code == 404


def test_update_invalid_form_returns_errors():
    client = TestClient(app)
    created = create_student(client)
    resp = client.put(f"/students/{created['id']}", json=student_payload(whatsAppNumber="abc"))
    assert resp.status_code == 422
    assert "whatsAppNumber" in resp.json()["detail"]["errors"]


def test_delete_student():
    client = TestClient(app)
    keep = create_student(client, name="Keep")
    drop = create_student(client, name="Drop")

    resp = client.delete(f"/students/{drop['id']}")
    assert resp.status_code == 204

    ids = [s["id"] for s in client.get("/students").json()]
    assert ids == [keep["id"]]


def test_delete_missing_student_returns_404_and_keeps_records():
    client = TestClient(app)
    keep = create_student(client)
    resp = client.delete("/students/missing")
    assert resp.status_code == 404
    assert [s["id"] for s in client.get("/students").json()] == [keep["id"]]


def test_update_without_amounts_is_rejected_and_keeps_balance():
    client = TestClient(app)
    created = create_student(client, pendingAmount="500")
    payload = student_payload()
    del payload["amountPaid"]
    del payload["pendingAmount"]

    resp = client.put(f"/students/{created['id']}", json=payload)
    assert resp.status_code == 422
    assert set(resp.json()["detail"]["errors"]) == {"amountPaid", "pendingAmount"}

    stored = client.get(f"/students/{created['id']}").json()
    assert stored["pendingAmount"] == "500.00"
    assert stored["status"] == "Pending"


def test_create_with_non_text_values_returns_field_keyed_errors():
    client = TestClient(app)
    resp = client.post("/students", json=student_payload(name=["x"], amountPaid=True))
    assert resp.status_code == 422
    errors = resp.json()["detail"]["errors"]
    assert set(errors) == {"name", "amountPaid"}
    assert client.get("/students").json() == []
