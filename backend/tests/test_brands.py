def test_list_brands_empty(client):
    response = client.get("/api/brands")

    assert response.status_code == 200
    assert response.json() == []


def test_create_then_get_returns_same_brand(client):
    created = client.post(
        "/api/brands",
        json={
            "name": "ClubCar",
            "keyFeatures": ["Aluminum frame", "48V AC drive"],
            "websiteUrl": "https://www.clubcar.com",
        },
    )

    assert created.status_code == 201
    brand = created.json()
    assert isinstance(brand["id"], int)
    assert brand["keyFeatures"] == ["Aluminum frame", "48V AC drive"]

    fetched = client.get(f"/api/brands/{brand['id']}")
    assert fetched.status_code == 200
    assert fetched.json() == brand


def test_duplicate_brand_name_is_a_conflict(client):
    assert client.post("/api/brands", json={"name": "ClubCar"}).status_code == 201

    response = client.post("/api/brands", json={"name": "ClubCar"})

    assert response.status_code == 409
    assert response.json()["error"] == "Failed to create brand"
    assert response.json()["kind"] == "conflict"
    assert len(client.get("/api/brands").json()) == 1


def test_missing_brand_is_not_found(client):
    response = client.get("/api/brands/999")

    assert response.status_code == 404
    assert response.json() == {"error": "Brand not found", "kind": "not_found"}


def test_non_numeric_id_is_not_found(client):
    response = client.get("/api/brands/abc")

    assert response.status_code == 404
    assert response.json()["kind"] == "not_found"


def test_brand_without_name_is_rejected(client):
    response = client.post("/api/brands", json={"description": "nameless"})

    assert response.status_code == 400
    assert response.json()["kind"] == "validation"
    assert client.get("/api/brands").json() == []
