def record(client, **overrides):
    payload = {"appointmentId": None, "amount": "299.00", "paymentMethod": "bank_transfer"}
    payload.update(overrides)
    return client.post("/api/payments", json=payload)


def test_payment_defaults_to_pending(client):
    response = record(client)

    assert response.status_code == 201
    body = response.json()
    assert body["paymentStatus"] == "pending"
    assert body["amount"] == "299.00"
    assert body["transactionId"] is None


def test_unknown_method_is_400(client):
    response = record(client, paymentMethod="cash")

    assert response.status_code == 400
    assert response.json() == {"message": "Ödeme kaydı başarısız"}


def test_list_filters(client):
    record(client, paymentMethod="eft")
    record(client, paymentMethod="paytr", paymentStatus="completed")
    record(client, paymentMethod="eft", paymentStatus="failed")

    assert len(client.get("/api/payments").json()) == 3
    assert len(client.get("/api/payments?method=eft").json()) == 2
    completed = client.get("/api/payments?status=completed").json()
    assert [p["paymentMethod"] for p in completed] == ["paytr"]


def test_list_is_newest_first(client):
    first = record(client).json()
    second = record(client).json()

    ids = [p["id"] for p in client.get("/api/payments").json()]

    assert ids == [second["id"], first["id"]]


def test_update_payment(client):
    payment_id = record(client).json()["id"]

    response = client.put(
        f"/api/payments/{payment_id}",
        json={"paymentStatus": "completed", "transactionId": "TX-1001", "paymentDate": "2025-03-10T12:00:00"},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["paymentStatus"] == "completed"
    assert body["transactionId"] == "TX-1001"
    assert body["paymentDate"] == "2025-03-10T12:00:00"


def test_get_and_update_missing_payment(client):
    assert client.get("/api/payments/5").status_code == 404
    response = client.put("/api/payments/5", json={"paymentStatus": "refunded"})

    assert response.status_code == 404
    assert response.json() == {"message": "Ödeme bulunamadı"}


def test_unknown_appointment_is_400(client):
    response = record(client, appointmentId=999)

    assert response.status_code == 400
    assert response.json() == {"message": "Ödeme kaydı başarısız"}
    assert client.get("/api/payments").json() == []


def test_update_to_unknown_appointment_is_400(client):
    payment_id = record(client).json()["id"]

    response = client.put(f"/api/payments/{payment_id}", json={"appointmentId": 999})

    assert response.status_code == 400
    assert response.json() == {"message": "Ödeme güncelleme başarısız"}


def test_payment_for_existing_appointment(client, customer, package):
    appointment = client.post(
        "/api/appointments",
        json={"customerId": customer["id"], "packageId": package.id, "appointmentDate": "2025-03-10T09:00:00"},
    ).json()

    response = record(client, appointmentId=appointment["id"])

    assert response.status_code == 201
    assert response.json()["appointmentId"] == appointment["id"]
