from golfcartly.core.config import settings


def test_new_session_gets_cookie_and_empty_cart(client):
    response = client.get("/api/cart")

    assert response.status_code == 200
    assert response.json() == []
    assert settings.SESSION_COOKIE_NAME in response.cookies


def test_add_item_defaults_quantity_to_one(client, part):
    response = client.post("/api/cart", json={"partId": part["id"]})

    assert response.status_code == 201
    item = response.json()
    assert item["partId"] == part["id"]
    assert item["quantity"] == 1
    assert item["addedAt"] is not None
    assert client.get("/api/cart").json() == [item]


def test_session_id_is_stable_across_requests(client, part):
    first = client.post("/api/cart", json={"partId": part["id"], "quantity": 2}).json()
    second = client.post("/api/cart", json={"partId": part["id"]}).json()

    assert first["sessionId"] == second["sessionId"]
    assert len(client.get("/api/cart").json()) == 2


def test_adding_unknown_part_is_not_found(client):
    response = client.post("/api/cart", json={"partId": 404})

    assert response.status_code == 404
    assert response.json()["error"] == "Failed to add item to cart"
    assert client.get("/api/cart").json() == []


def test_sessions_do_not_see_each_other(client, other_client, part):
    client.post("/api/cart", json={"partId": part["id"]})

    assert other_client.get("/api/cart").json() == []
    assert len(client.get("/api/cart").json()) == 1


def test_update_quantity(client, part):
    item = client.post("/api/cart", json={"partId": part["id"]}).json()

    response = client.put(f"/api/cart/{item['id']}", json={"quantity": 3})

    assert response.status_code == 200
    assert response.json()["quantity"] == 3


def test_quantity_must_be_positive(client, part):
    item = client.post("/api/cart", json={"partId": part["id"]}).json()

    response = client.put(f"/api/cart/{item['id']}", json={"quantity": 0})

    assert response.status_code == 400
    assert client.get("/api/cart").json()[0]["quantity"] == 1


def test_other_session_cannot_modify_item(client, other_client, part):
    item = client.post("/api/cart", json={"partId": part["id"]}).json()

    update = other_client.put(f"/api/cart/{item['id']}", json={"quantity": 9})
    delete = other_client.delete(f"/api/cart/{item['id']}")

    assert update.status_code == 404
    assert delete.status_code == 404
    assert client.get("/api/cart").json() == [item]


def test_remove_item(client, part):
    keep = client.post("/api/cart", json={"partId": part["id"]}).json()
    drop = client.post("/api/cart", json={"partId": part["id"], "quantity": 5}).json()

    response = client.delete(f"/api/cart/{drop['id']}")

    assert response.status_code == 204
    assert response.content == b""
    assert client.get("/api/cart").json() == [keep]


def test_clear_cart_only_touches_own_session(client, other_client, part):
    client.post("/api/cart", json={"partId": part["id"]})
    client.post("/api/cart", json={"partId": part["id"]})
    other_client.post("/api/cart", json={"partId": part["id"]})

    response = client.delete("/api/cart")

    assert response.status_code == 204
    assert client.get("/api/cart").json() == []
    assert len(other_client.get("/api/cart").json()) == 1
