def create(client, **overrides):
    payload = {"name": "Premium", "description": "90 dk", "price": "499.90", "duration": 90}
    payload.update(overrides)
    return client.post("/api/packages", json=payload)


def test_create_package(client):
    response = create(client)

    assert response.status_code == 201
    body = response.json()
    assert body["name"] == "Premium"
    assert body["price"] == "499.90"
    assert body["duration"] == 90
    assert body["isActive"] is True


def test_list_is_ordered_by_name_and_filters_active(client):
    create(client, name="Zirve")
    create(client, name="Başlangıç", isActive=False)
    create(client, name="Aile")

    names = [p["name"] for p in client.get("/api/packages").json()]
    active_names = [p["name"] for p in client.get("/api/packages?active=true").json()]

    assert names == sorted(names)
    assert len(names) == 3
    assert "Başlangıç" not in active_names
    assert len(active_names) == 2


def test_get_missing_package_is_404(client):
    response = client.get("/api/packages/999")

    assert response.status_code == 404
    assert response.json() == {"message": "Paket bulunamadı"}


def test_non_numeric_id_is_400(client):
    response = client.get("/api/packages/abc")

    assert response.status_code == 400


def test_invalid_package_is_rejected(client):
    response = create(client, duration=0)

    assert response.status_code == 400
    assert response.json() == {"message": "Paket oluşturma başarısız"}


def test_partial_update(client, package):
    response = client.put(f"/api/packages/{package.id}", json={"price": 349, "isActive": False})

    assert response.status_code == 200
    body = response.json()
    assert body["price"] == "349.00"
    assert body["isActive"] is False
    assert body["name"] == package.name


def test_update_cannot_null_required_field(client, package):
    response = client.put(f"/api/packages/{package.id}", json={"price": None})

    assert response.status_code == 400
    assert response.json() == {"message": "Paket güncelleme başarısız"}


def test_update_missing_package_is_404(client):
    response = client.put("/api/packages/42", json={"name": "X"})

    assert response.status_code == 404
