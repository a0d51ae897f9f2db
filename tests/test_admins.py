from booking_app.models import Admin


def register(client, **overrides):
    payload = {"email": "admin@example.com", "password": "s3cret-pass", "name": "Yönetici"}
    payload.update(overrides)
    return client.post("/api/admin/register", json=payload)


def test_register_returns_public_fields_only(client):
    response = register(client)

    assert response.status_code == 201
    body = response.json()
    assert set(body) == {"id", "email", "name"}
    assert body["email"] == "admin@example.com"


def test_password_is_stored_hashed(client, session_factory):
    register(client)

    with session_factory() as db:
        admin = db.query(Admin).one()
    assert admin.password != "s3cret-pass"
    assert admin.password.startswith("$2")
    assert admin.role == "admin"


def test_duplicate_email_is_rejected(client):
    register(client)
    response = register(client, email="ADMIN@example.com")

    assert response.status_code == 400
    assert response.json() == {"message": "Admin oluşturma başarısız"}


def test_register_with_missing_fields_is_400(client):
    response = client.post("/api/admin/register", json={"email": "admin@example.com"})

    assert response.status_code == 400
    assert response.json()["message"] == "Admin oluşturma başarısız"


def test_login_with_valid_credentials(client):
    admin_id = register(client).json()["id"]

    response = client.post(
        "/api/admin/login", json={"email": "admin@example.com", "password": "s3cret-pass"}
    )

    assert response.status_code == 200
    assert response.json() == {"id": admin_id, "email": "admin@example.com", "name": "Yönetici"}


def test_login_failure_does_not_reveal_whether_email_exists(client):
    register(client)

    wrong_password = client.post(
        "/api/admin/login", json={"email": "admin@example.com", "password": "nope-nope"}
    )
    unknown_email = client.post(
        "/api/admin/login", json={"email": "ghost@example.com", "password": "s3cret-pass"}
    )

    assert wrong_password.status_code == unknown_email.status_code == 401
    assert wrong_password.json() == unknown_email.json() == {"message": "Geçersiz email veya şifre"}
