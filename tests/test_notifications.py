from datetime import datetime

from booking_app.domain.notifications.service import compose_confirmation
from booking_app.models import Customer, ServicePackage


def create_sms(client, customer, package, when="2025-03-10T09:00:00"):
    appointment = client.post(
        "/api/appointments",
        json={"customerId": customer["id"], "packageId": package.id, "appointmentDate": when},
    ).json()
    rows = client.get(f"/api/sms-notifications?appointmentId={appointment['id']}").json()
    assert len(rows) == 1
    return rows[0]


def test_compose_confirmation():
    customer = Customer(first_name="Mehmet", last_name="Kaya", email="m@example.com", phone="+905551112233")
    pkg = ServicePackage(name="Kariyer Koçluğu", price=450, duration=45)

    text = compose_confirmation(customer, pkg, datetime(2025, 1, 5, 15, 30))

    assert text == "Merhaba Mehmet! Kariyer Koçluğu için randevunuz 05.01.2025 tarihinde oluşturuldu. Teşekkürler!"


def test_list_sms_notifications(client, customer, package):
    sms = create_sms(client, customer, package)

    assert sms["status"] == "pending"
    assert sms["phoneNumber"] == "+905321234567"
    assert sms["sentAt"] is None
    assert client.get("/api/sms-notifications?status=sent").json() == []


def test_mark_sent_stamps_time(client, customer, package):
    sms = create_sms(client, customer, package)

    response = client.put(f"/api/sms-notifications/{sms['id']}", json={"status": "sent"})

    assert response.status_code == 200
    assert response.json()["status"] == "sent"
    assert response.json()["sentAt"] is not None


def test_mark_failed_keeps_given_time(client, customer, package):
    sms = create_sms(client, customer, package)

    response = client.put(
        f"/api/sms-notifications/{sms['id']}",
        json={"status": "failed", "sentAt": "2025-03-09T08:00:00"},
    )

    assert response.json()["status"] == "failed"
    assert response.json()["sentAt"] == "2025-03-09T08:00:00"


def test_unknown_sms_status_is_400(client, customer, package):
    sms = create_sms(client, customer, package)

    response = client.put(f"/api/sms-notifications/{sms['id']}", json={"status": "delivered"})

    assert response.status_code == 400
    assert response.json() == {"message": "SMS güncelleme başarısız"}


def test_update_missing_sms_is_404(client):
    response = client.put("/api/sms-notifications/31", json={"status": "sent"})

    assert response.status_code == 404
    assert response.json() == {"message": "SMS kaydı bulunamadı"}


def test_sent_stamp_uses_business_timezone(client, customer, package, host_timezone, assert_business_now):
    sms = create_sms(client, customer, package)

    response = client.put(f"/api/sms-notifications/{sms['id']}", json={"status": "sent"})

    assert_business_now(response.json()["sentAt"])
    assert_business_now(response.json()["createdAt"])
