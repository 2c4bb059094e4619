from app.routes import travel


def _agency(**overrides):
    agency = {
        "id": 3,
        "logo": None,
        "name": "Safar Tours",
        "email": "desk@safar.example.com",
        "contactNo": "9999999999",
        "city": "Pune",
        "state": "MH",
        "address": "MG Road",
        "country": "India",
        "pincode": "411001",
        "travelUserId": 1,
    }
    agency.update(overrides)
    return agency


def test_travel_requires_login(client):
    resp = client.get("/travel")
    assert resp.status_code == 401
    assert resp.json() == {"message": "Authorization header missing"}


def test_create_agency_with_logo(client, auth_headers, storage, monkeypatch):
    captured = {}

    def fake_create(owner_id, data):
        captured["owner"] = owner_id
        captured["data"] = data
        return _agency(travelUserId=owner_id, logo=data["logo"])

    monkeypatch.setattr(travel, "create_travel_agency", fake_create)
    resp = client.post(
        "/travel",
        data={
            "name": "Safar Tours",
            "email": "desk@safar.example.com",
            "contactNo": "9999999999",
            "travelUserId": "1",
        },
        files={"logo": ("logo.png", b"png", "image/png")},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    assert captured["owner"] == 1
    assert captured["data"]["contactNo"] == "9999999999"
    assert "/images/travel-logos/" in captured["data"]["logo"]
    assert resp.json()["logo"] == captured["data"]["logo"]


def test_create_agency_without_logo(client, auth_headers, storage, monkeypatch):
    monkeypatch.setattr(travel, "create_travel_agency", lambda owner, data: _agency(travelUserId=owner))
    resp = client.post(
        "/travel",
        data={"name": "Safar Tours", "email": "desk@safar.example.com", "travelUserId": "7"},
        headers=auth_headers,
    )
    assert resp.status_code == 201
    assert resp.json()["travelUserId"] == 7
    assert storage.stored == []


def test_create_agency_requires_owner(client, auth_headers, monkeypatch):
    created = []
    monkeypatch.setattr(travel, "create_travel_agency", lambda owner, data: created.append(owner))
    resp = client.post("/travel", data={"name": "Safar Tours", "email": "desk@example.com"}, headers=auth_headers)

    assert resp.status_code == 422
    assert "travelUserId" in resp.json()["message"]
    assert created == []


def test_create_agency_store_failure_is_400(client, auth_headers, monkeypatch):
    def broken(owner, data):
        raise RuntimeError("insert failed")

    monkeypatch.setattr(travel, "create_travel_agency", broken)
    resp = client.post("/travel", data={"name": "X", "email": "x@example.com", "travelUserId": "1"}, headers=auth_headers)
    assert resp.status_code == 400
    assert resp.json() == {"message": "insert failed"}


def test_list_and_filter_agencies(client, auth_headers, monkeypatch):
    monkeypatch.setattr(travel, "get_all_travel_agencies", lambda: [_agency(), _agency(id=4)])
    monkeypatch.setattr(travel, "get_travel_agencies_by_user", lambda uid: [_agency()] if uid == 1 else [])

    assert len(client.get("/travel", headers=auth_headers).json()) == 2
    assert client.get("/travel/1", headers=auth_headers).status_code == 200

    resp = client.get("/travel/2", headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "No travel agencies found for this user"}


def test_update_agency_replaces_logo(client, auth_headers, storage, monkeypatch):
    old_logo = "https://res.cloudinary.com/demo/image/upload/v1/images/travel-logos/old.png"
    captured = {}

    def fake_update(uid, data):
        captured.update(data)
        return _agency(**{k: v for k, v in data.items() if v is not None})

    monkeypatch.setattr(travel, "get_travel_agencies_by_user", lambda uid: [_agency(logo=old_logo)])
    monkeypatch.setattr(travel, "update_travel_agency_by_user", fake_update)

    resp = client.put(
        "/travel/1",
        data={"city": "Mumbai"},
        files={"logo": ("new.png", b"png", "image/png")},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert storage.deleted == [old_logo]
    assert captured["city"] == "Mumbai"
    assert captured["name"] is None
    assert resp.json()["logo"] == storage.stored[0][0]


def test_update_agency_missing(client, auth_headers, monkeypatch):
    monkeypatch.setattr(travel, "get_travel_agencies_by_user", lambda uid: [])
    resp = client.put("/travel/1", data={"city": "Mumbai"}, headers=auth_headers)
    assert resp.status_code == 404
    assert resp.json() == {"message": "Travel agency not found for this user"}


def test_update_agency_survives_failed_logo_delete(client, auth_headers, storage, monkeypatch):
    def broken_delete(url):
        raise RuntimeError("Failed to delete file")

    monkeypatch.setattr(storage, "delete", broken_delete)
    monkeypatch.setattr(
        travel,
        "get_travel_agencies_by_user",
        lambda uid: [_agency(logo="https://res.cloudinary.com/demo/image/upload/v1/images/travel-logos/old.png")],
    )
    monkeypatch.setattr(travel, "update_travel_agency_by_user", lambda uid, data: _agency(logo=data["logo"]))

    resp = client.put(
        "/travel/1",
        files={"logo": ("new.png", b"png", "image/png")},
        headers=auth_headers,
    )
    assert resp.status_code == 200
    assert resp.json()["logo"] == storage.stored[0][0]
