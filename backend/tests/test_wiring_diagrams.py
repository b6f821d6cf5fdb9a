import base64
import json

from starlette.datastructures import UploadFile as StarletteUploadFile

from golfcartly.core.config import settings
from golfcartly.models.wiring import WiringDiagram

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + bytes(range(256)) * 4


def upload(client, files=None, **fields):
    data = {"title": "48V Solenoid Wiring"}
    data.update(fields)
    return client.post("/api/wiring-diagrams", data=data, files=files)


def test_upload_stores_file_inline(client, brand):
    response = upload(
        client,
        files={"file": ("solenoid.jpg", PNG_BYTES, "image/jpeg")},
        brandId=str(brand["id"]),
        year="2019",
        isCustomDrawing="true",
        tags=json.dumps(["solenoid", "48v"]),
    )

    assert response.status_code == 201
    diagram = response.json()
    assert diagram["brandId"] == brand["id"]
    assert diagram["modelId"] is None
    assert diagram["year"] == 2019
    assert diagram["isCustomDrawing"] is True
    assert diagram["tags"] == ["solenoid", "48v"]
    assert diagram["fileName"] == "solenoid.jpg"
    assert diagram["fileType"] == "image/jpeg"
    assert diagram["fileSize"] == len(PNG_BYTES)
    assert base64.b64decode(diagram["imageData"]) == PNG_BYTES
    assert diagram["uploadedAt"] is not None


def test_image_endpoint_returns_uploaded_bytes(client):
    diagram = upload(client, files={"file": ("solenoid.jpg", PNG_BYTES, "image/jpeg")}).json()

    response = client.get(f"/api/wiring-diagrams/{diagram['id']}/image")

    assert response.status_code == 200
    assert response.content == PNG_BYTES
    assert response.headers["content-type"] == "image/jpeg"


def test_image_content_type_defaults_to_png(client, db):
    diagram = WiringDiagram(title="Scanned sheet", image_data=base64.b64encode(b"raw").decode())
    db.add(diagram)
    db.commit()

    response = client.get(f"/api/wiring-diagrams/{diagram.id}/image")

    assert response.status_code == 200
    assert response.content == b"raw"
    assert response.headers["content-type"] == "image/png"


def test_diagram_with_url_only(client):
    response = upload(client, imageUrl="https://example.com/d.png", isCustomDrawing="yes")

    assert response.status_code == 201
    diagram = response.json()
    assert diagram["imageUrl"] == "https://example.com/d.png"
    assert diagram["imageData"] is None
    assert diagram["isCustomDrawing"] is False

    image = client.get(f"/api/wiring-diagrams/{diagram['id']}/image")
    assert image.status_code == 404
    assert image.json()["error"] == "No image data available"


def test_image_of_missing_diagram_is_not_found(client):
    response = client.get("/api/wiring-diagrams/12/image")

    assert response.status_code == 404
    assert response.json()["error"] == "Wiring diagram not found"


def test_malformed_tags_are_rejected(client):
    response = upload(client, tags="[not json")

    assert response.status_code == 400
    assert response.json()["error"] == "Failed to upload wiring diagram"
    assert client.get("/api/wiring-diagrams").json() == []


def test_non_numeric_year_is_rejected(client):
    response = upload(client, year="twenty")

    assert response.status_code == 400
    assert response.json()["kind"] == "validation"


def test_upload_over_size_limit_is_rejected(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 16)
    reads = []
    original_read = StarletteUploadFile.read

    async def recording_read(self, size=-1):
        data = await original_read(self, size)
        reads.append((size, len(data)))
        return data

    monkeypatch.setattr(StarletteUploadFile, "read", recording_read)

    response = upload(client, files={"file": ("big.png", b"x" * 5000, "image/png")})

    assert response.status_code == 400
    assert "too large" in response.json()["detail"]
    assert reads == [(17, 17)]
    assert client.get("/api/wiring-diagrams").json() == []


def test_upload_at_size_limit_is_accepted(client, monkeypatch):
    monkeypatch.setattr(settings, "MAX_UPLOAD_SIZE", 16)

    response = upload(client, files={"file": ("exact.png", b"x" * 16, "image/png")})

    assert response.status_code == 201
    assert response.json()["fileSize"] == 16


def test_title_is_required(client):
    response = client.post("/api/wiring-diagrams", data={"description": "untitled"})

    assert response.status_code == 400


def test_filters_combine_with_and(client, brand):
    model = client.post("/api/models", json={"brandId": brand["id"], "modelName": "Onward"}).json()
    upload(client, title="Brand generic", brandId=str(brand["id"]))
    upload(client, title="Onward harness", brandId=str(brand["id"]), modelId=str(model["id"]))
    upload(client, title="Unrelated")

    by_brand = client.get("/api/wiring-diagrams", params={"brandId": brand["id"]}).json()
    by_both = client.get(
        "/api/wiring-diagrams", params={"brandId": brand["id"], "modelId": model["id"]}
    ).json()

    assert sorted(d["title"] for d in by_brand) == ["Brand generic", "Onward harness"]
    assert [d["title"] for d in by_both] == ["Onward harness"]
    assert len(client.get("/api/wiring-diagrams").json()) == 3


def test_get_diagram_round_trip(client):
    diagram = upload(client, description="Headlight circuit").json()

    response = client.get(f"/api/wiring-diagrams/{diagram['id']}")

    assert response.status_code == 200
    assert response.json() == diagram
