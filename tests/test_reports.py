import pytest


@pytest.fixture
def make_appointment(client, customer, package):
    def make(when, status="completed", package_id=package.id):
        return client.post(
            "/api/appointments",
            json={
                "customerId": customer["id"],
                "packageId": package_id,
                "appointmentDate": when,
                "status": status,
            },
        ).json()

    return make


def pay(client, appointment, amount="299.00", status="completed"):
    return client.post(
        "/api/payments",
        json={
            "appointmentId": appointment["id"],
            "amount": amount,
            "paymentMethod": "eft",
            "paymentStatus": status,
        },
    ).json()


def report(client, year=2025, month=3):
    response = client.get(f"/api/reports/monthly?year={year}&month={month}")
    assert response.status_code == 200
    return response.json()


def test_empty_month(client):
    assert report(client) == {
        "totalAppointments": 0,
        "totalRevenue": 0.0,
        "completedAppointments": 0,
        "pendingAppointments": 0,
        "appointmentsByPackage": [],
    }


def test_completed_payment_counts_as_revenue(client, make_appointment):
    done = make_appointment("2025-03-10T10:00:00")
    pay(client, done)
    waiting = make_appointment("2025-03-12T10:00:00", status="pending")
    pay(client, waiting, status="pending")

    result = report(client)

    assert result["totalAppointments"] == 2
    assert result["totalRevenue"] == 299.0
    assert result["completedAppointments"] == 1
    assert result["pendingAppointments"] == 1
    assert result["appointmentsByPackage"] == [
        {"packageName": "Temel Danışmanlık", "count": 1, "revenue": 299.0}
    ]


def test_breakdown_counts_each_appointment_once(client, make_appointment):
    appointment = make_appointment("2025-03-10T10:00:00")
    pay(client, appointment, amount="100.00")
    pay(client, appointment, amount="199.00")

    result = report(client)

    assert result["totalRevenue"] == 299.0
    assert result["appointmentsByPackage"][0]["count"] == 1
    assert result["appointmentsByPackage"][0]["revenue"] == 299.0


def test_appointment_without_package_is_labelled_unknown(client, make_appointment):
    pay(client, make_appointment("2025-03-10T10:00:00", package_id=None), amount="50.00")

    stats = report(client)["appointmentsByPackage"]

    assert stats == [{"packageName": "Bilinmeyen Paket", "count": 1, "revenue": 50.0}]


def test_month_edges_are_inclusive(client, make_appointment):
    make_appointment("2025-03-01T00:00:00")
    make_appointment("2025-03-31T23:59:59")
    make_appointment("2025-02-28T23:59:59")
    make_appointment("2025-04-01T00:00:00")

    assert report(client)["totalAppointments"] == 2
    assert report(client, month=2)["totalAppointments"] == 1


def test_month_out_of_range_is_400(client):
    response = client.get("/api/reports/monthly?year=2025&month=13")

    assert response.status_code == 400
    assert response.json() == {"message": "Yıl ve ay parametreleri gerekli"}


def test_missing_parameters_is_400(client):
    response = client.get("/api/reports/monthly?year=2025")

    assert response.status_code == 400
    assert response.json() == {"message": "Yıl ve ay parametreleri gerekli"}
