import pytest

from booking_app.domain.payments.repository import PaymentRepository
from booking_app.models import Appointment, Customer, Payment, SmsNotification


@pytest.fixture
def booking_payload(package, customer_payload):
    return {
        "customer": customer_payload,
        "packageId": package.id,
        "appointmentDate": "2025-03-10T11:00:00+03:00",
        "notes": "Online görüşme",
    }


def test_booking_writes_every_row(client, booking_payload, session_factory):
    response = client.post("/api/bookings", json=booking_payload)

    assert response.status_code == 201
    body = response.json()
    assert body["customer"]["email"] == "ayse@example.com"
    assert body["appointment"]["status"] == "pending"
    assert body["appointment"]["appointmentDate"] == "2025-03-10T11:00:00"
    assert body["payment"]["amount"] == "299.00"
    assert body["payment"]["paymentMethod"] == "bank_transfer"
    assert body["payment"]["paymentStatus"] == "pending"
    assert body["payment"]["appointmentId"] == body["appointment"]["id"]
    assert body["smsNotificationId"] is not None

    with session_factory() as db:
        assert db.query(Customer).count() == 1
        assert db.query(Appointment).count() == 1
        assert db.query(Payment).count() == 1
        sms = db.query(SmsNotification).one()
    assert "10.03.2025" in sms.message


def test_booking_reuses_existing_customer(client, customer, booking_payload, session_factory):
    response = client.post("/api/bookings", json=booking_payload)

    assert response.status_code == 201
    assert response.json()["customer"]["id"] == customer["id"]
    with session_factory() as db:
        assert db.query(Customer).count() == 1


def test_failed_payment_rolls_back_whole_booking(client, booking_payload, session_factory, monkeypatch):
    def broken_payment(*args, **kwargs):
        raise RuntimeError("payment table unavailable")

    monkeypatch.setattr(PaymentRepository, "create_payment", staticmethod(broken_payment))

    response = client.post("/api/bookings", json=booking_payload)

    assert response.status_code == 500
    assert response.json() == {"message": "Rezervasyon başarısız"}
    with session_factory() as db:
        assert db.query(Customer).count() == 0
        assert db.query(Appointment).count() == 0
        assert db.query(SmsNotification).count() == 0
        assert db.query(Payment).count() == 0


def test_inactive_package_is_rejected(client, package, booking_payload):
    client.put(f"/api/packages/{package.id}", json={"isActive": False})

    response = client.post("/api/bookings", json=booking_payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Paket şu anda aktif değil"}


def test_unknown_package_is_404(client, booking_payload):
    booking_payload["packageId"] = 999

    response = client.post("/api/bookings", json=booking_payload)

    assert response.status_code == 404
    assert response.json() == {"message": "Paket bulunamadı"}


def test_invalid_customer_is_400(client, booking_payload):
    booking_payload["customer"]["email"] = "not-an-email"

    response = client.post("/api/bookings", json=booking_payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Rezervasyon başarısız"}
