def test_create_customer_normalizes_contact_details(client, customer):
    assert customer["email"] == "ayse@example.com"
    assert customer["phone"] == "+905321234567"
    assert customer["firstName"] == "Ayşe"


def test_existing_email_returns_existing_customer(client, customer, customer_payload):
    customer_payload["email"] = "  AYSE@example.com "
    customer_payload["firstName"] = "Başka"

    response = client.post("/api/customers", json=customer_payload)

    assert response.status_code == 200
    assert response.json()["id"] == customer["id"]
    assert response.json()["firstName"] == "Ayşe"


def test_get_customer(client, customer):
    response = client.get(f"/api/customers/{customer['id']}")

    assert response.status_code == 200
    assert response.json()["lastName"] == "Yılmaz"


def test_get_missing_customer_is_404(client):
    response = client.get("/api/customers/123")

    assert response.status_code == 404
    assert response.json() == {"message": "Müşteri bulunamadı"}


def test_invalid_email_is_400(client, customer_payload):
    customer_payload["email"] = "not-an-email"

    response = client.post("/api/customers", json=customer_payload)

    assert response.status_code == 400
    assert response.json() == {"message": "Müşteri kaydı başarısız"}


def test_invalid_phone_is_400(client, customer_payload):
    customer_payload["phone"] = "12ab"

    response = client.post("/api/customers", json=customer_payload)

    assert response.status_code == 400
