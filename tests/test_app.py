from booking_app.domain.payments.repository import PaymentRepository


def test_root_and_health(client):
    assert client.get("/").status_code == 200
    assert client.get("/health").json() == {"status": "healthy"}


def test_security_headers(client):
    response = client.get("/health")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
    assert response.headers["Cache-Control"] == "no-store"


def test_unknown_route_uses_message_body(client):
    response = client.get("/api/does-not-exist")

    assert response.status_code == 404
    assert "message" in response.json()


def test_server_error_keeps_cors_headers(client, package, customer_payload, monkeypatch):
    def broken_payment(*args, **kwargs):
        raise RuntimeError("payment table unavailable")

    monkeypatch.setattr(PaymentRepository, "create_payment", staticmethod(broken_payment))

    response = client.post(
        "/api/bookings",
        json={"customer": customer_payload, "packageId": package.id, "appointmentDate": "2025-03-10T11:00:00"},
        headers={"Origin": "http://localhost:5173"},
    )

    assert response.status_code == 500
    assert response.json() == {"message": "Rezervasyon başarısız"}
    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["X-Frame-Options"] == "DENY"
