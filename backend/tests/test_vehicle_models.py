import pytest


@pytest.fixture
def models(client, brand):
    other = client.post("/api/brands", json={"name": "Yamaha"}).json()
    payloads = [
        {"brandId": brand["id"], "modelName": "Onward", "vehicleType": "LSV", "seatingCapacity": 4},
        {"brandId": brand["id"], "modelName": "Precedent", "vehicleType": "NEV"},
        {"brandId": other["id"], "modelName": "Drive2", "vehicleType": "LSV", "voltage": "48V"},
    ]
    created = []
    for payload in payloads:
        response = client.post("/api/models", json=payload)
        assert response.status_code == 201
        created.append(response.json())
    return created


def test_list_without_filters_returns_every_model(client, models):
    response = client.get("/api/models")

    assert response.status_code == 200
    assert {m["id"] for m in response.json()} == {m["id"] for m in models}


def test_filter_by_brand(client, brand, models):
    response = client.get("/api/models", params={"brandId": brand["id"]})

    rows = response.json()
    assert len(rows) == 2
    assert all(m["brandId"] == brand["id"] for m in rows)


def test_filter_by_vehicle_type(client, models):
    rows = client.get("/api/models", params={"vehicleType": "LSV"}).json()

    assert sorted(m["modelName"] for m in rows) == ["Drive2", "Onward"]


def test_get_model_round_trip(client, models):
    model = models[0]

    response = client.get(f"/api/models/{model['id']}")

    assert response.status_code == 200
    assert response.json() == model
    assert response.json()["seatingCapacity"] == 4


def test_missing_model_is_not_found(client):
    response = client.get("/api/models/42")

    assert response.status_code == 404
    assert response.json()["error"] == "Model not found"


def test_model_requires_brand(client):
    response = client.post("/api/models", json={"modelName": "Orphan"})

    assert response.status_code == 400


def test_model_for_unknown_brand_is_rejected(client):
    response = client.post("/api/models", json={"brandId": 999, "modelName": "Phantom"})

    assert response.status_code == 400
    assert response.json()["error"] == "Failed to create model"
    assert response.json()["kind"] == "validation"
    assert client.get("/api/models").json() == []
