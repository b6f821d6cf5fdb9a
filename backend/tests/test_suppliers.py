def test_create_and_fetch_supplier(client):
    created = client.post(
        "/api/suppliers",
        json={"name": "Buggies Unlimited", "contactEmail": "sales@example.com", "location": "Georgia"},
    )

    assert created.status_code == 201
    supplier = created.json()
    assert supplier["contactEmail"] == "sales@example.com"

    assert client.get(f"/api/suppliers/{supplier['id']}").json() == supplier
    assert client.get("/api/suppliers").json() == [supplier]


def test_duplicate_supplier_name_is_a_conflict(client):
    client.post("/api/suppliers", json={"name": "Golf Cart King"})

    response = client.post("/api/suppliers", json={"name": "Golf Cart King"})

    assert response.status_code == 409
    assert len(client.get("/api/suppliers").json()) == 1


def test_missing_supplier_is_not_found(client):
    response = client.get("/api/suppliers/7")

    assert response.status_code == 404
    assert response.json()["error"] == "Supplier not found"
