"""Tests for the HTTP surface."""

import base64

from fastapi.testclient import TestClient

from accommodation_booking.api.app import create_app

_PHOTO = base64.b64encode(b"fake-image-bytes").decode()


def _login(client: TestClient, role: str) -> None:
    response = client.post(
        "/session/login",
        json={"username": f"{role}-user", "password": "pw", "role": role},
    )
    assert response.status_code == 200


def test_health(container) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.json() == {"status": "ok"}


def test_welcome_login_and_logout(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/session").json()["show_welcome"] is True
    client.post("/session/role", json={"role": "student"})
    assert client.get("/session").json()["selected_role"] == "student"

    _login(client, "owner")
    session = client.get("/session").json()
    assert session["user"] == {"username": "owner-user", "role": "owner"}
    assert session["selected_role"] is None

    client.post("/session/logout")
    assert client.get("/session").json()["user"] is None


def test_login_without_password_is_rejected(container) -> None:
    client = TestClient(create_app(container))

    response = client.post(
        "/session/login", json={"username": "sam", "role": "student"}
    )

    assert response.status_code == 422
    assert response.json()["detail"]["kind"] == "validation"


def test_booking_lifecycle_over_http(container) -> None:
    client = TestClient(create_app(container))

    _login(client, "owner")
    created = client.post(
        "/properties",
        json={
            "name": "Flat A",
            "price": 100,
            "photo": _PHOTO,
            "photo_content_type": "image/png",
        },
    )
    assert created.status_code == 201
    listing = created.json()["property"]
    assert listing["id"] == 1
    assert listing["amenities"] == "N/A"
    assert listing["capacity"] == 1
    assert listing["photo"]["size"] == len(b"fake-image-bytes")

    client.post("/session/logout")
    _login(client, "student")
    reserved = client.post("/properties/1/reserve")
    assert reserved.status_code == 201
    assert reserved.json()["booking"]["status"] == "pending"
    assert reserved.json()["reservation_fee_hint"] == 10

    client.post("/session/logout")
    _login(client, "owner")
    assert client.get("/bookings/pending").json()["bookings"][0]["id"] == 1
    approved = client.post("/bookings/1/approve")
    assert approved.json()["booking"]["status"] == "approved"
    assert client.get("/bookings/pending").json()["bookings"] == []

    client.post("/session/logout")
    _login(client, "student")
    assert client.get("/bookings/check-in").json()["bookings"][0]["id"] == 1
    checked_in = client.post("/bookings/1/check-in")
    assert checked_in.status_code == 200
    assert checked_in.json()["checked_in"] == {"id": 1, "property_id": 1, "fee": 10}

    records = client.get("/bookings/checked-in").json()["bookings"]
    assert records == [{"id": 1, "property_id": 1, "fee": 10}]

    events = [
        (item["event"], item["success"])
        for item in client.get("/notifications").json()["notifications"]
    ]
    assert events == [
        ("add_property", True),
        ("reserve", True),
        ("approve", True),
        ("check_in", True),
    ]

    state = client.get("/state").json()
    assert state["check_in_fee"] == 10
    assert state["reservation_fee_hint"] == 10
    assert state["bookings"][0]["checked_in"] is True


def test_add_property_without_photo_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    _login(client, "owner")

    response = client.post("/properties", json={"name": "Flat A", "price": 100})

    assert response.status_code == 422
    assert response.json()["detail"]["details"]["missing"] == ["photo"]
    assert client.get("/properties").json()["properties"] == []


def test_error_status_codes(container) -> None:
    client = TestClient(create_app(container))

    assert client.post("/bookings/1/approve").status_code == 403

    _login(client, "owner")
    assert client.post("/bookings/1/approve").status_code == 404
    denied = client.post("/bookings/2/deny")
    assert denied.status_code == 200
    assert denied.json() == {"booking_id": 2, "removed": False}

    client.post("/session/logout")
    _login(client, "student")
    assert client.post("/bookings/99/check-in").status_code == 404
    assert client.post("/properties/3/reserve").status_code == 404


def test_check_in_before_approval_conflicts(container) -> None:
    client = TestClient(create_app(container))
    _login(client, "owner")
    client.post("/properties", json={"name": "Flat A", "price": 100, "photo": _PHOTO})
    client.post("/session/logout")
    _login(client, "student")
    client.post("/properties/1/reserve")

    response = client.post("/bookings/1/check-in")

    assert response.status_code == 409
    assert response.json()["detail"]["kind"] == "precondition"


def test_rating_is_listed_with_property(container) -> None:
    client = TestClient(create_app(container))
    _login(client, "owner")
    client.post("/properties", json={"name": "Flat A", "price": 100, "photo": _PHOTO})
    client.post("/session/logout")
    _login(client, "student")

    assert client.post("/properties/1/rating", json={"stars": 4}).status_code == 200
    assert client.post("/properties/1/rating", json={"stars": 0}).status_code == 422

    listing = client.get("/properties").json()["properties"][0]
    assert listing["rating"] == 4


def test_welcome_accepts_house_owner_label(container) -> None:
    client = TestClient(create_app(container))

    accepted = client.post("/session/role", json={"role": "House Owner"})
    rejected = client.post("/session/role", json={"role": "landlord"})

    assert accepted.json() == {"selected_role": "owner", "show_welcome": False}
    assert rejected.status_code == 422


def test_add_property_with_non_image_photo_is_rejected(container) -> None:
    client = TestClient(create_app(container))
    _login(client, "owner")

    response = client.post(
        "/properties",
        json={
            "name": "Flat A",
            "price": 100,
            "photo": _PHOTO,
            "photo_content_type": "application/pdf",
        },
    )

    assert response.status_code == 422
    assert response.json()["detail"]["details"]["content_type"] == "application/pdf"
    assert client.get("/properties").json()["properties"] == []


def test_notifications_report_latest_message(container) -> None:
    client = TestClient(create_app(container))

    assert client.get("/notifications").json() == {
        "notifications": [],
        "latest": None,
    }

    _login(client, "owner")
    client.post("/bookings/1/approve")

    body = client.get("/notifications").json()
    assert body["latest"] == body["notifications"][-1]
    assert body["latest"]["event"] == "approve"
    assert body["latest"]["success"] is False
