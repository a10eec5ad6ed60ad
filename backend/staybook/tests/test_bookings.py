"""
Tests for booking endpoints.
"""
import pytest


@pytest.fixture()
def host_and_guest(make_client, signup):
    client_a, client_b = make_client(), make_client()
    host = signup(client_a, "Alice", "a@x.com")
    guest = signup(client_b, "Bob", "b@x.com")
    place = client_a.post("/api/places", json={"title": "Lake Cabin", "price": 120}).json()
    return client_a, client_b, host, guest, place


def _booking(place_id, **extra):
    return {
        "place_id": place_id,
        "check_in": "2026-07-01",
        "check_out": "2026-07-04",
        "number_of_guests": 2,
        "name": "Bob",
        "phone": "555-0100",
        "price": 360,
        **extra,
    }


def test_create_booking(host_and_guest):
    client_a, client_b, host, guest, place = host_and_guest
    response = client_b.post("/api/bookings", json=_booking(place["id"]))
    assert response.status_code == 201
    data = response.json()
    assert data["user_id"] == guest["id"]
    assert data["place_id"] == place["id"]
    assert data["check_in"] == "2026-07-01"


def test_booking_user_cannot_be_spoofed(host_and_guest):
    """A supplied user_id is always replaced with the session's user."""
    client_a, client_b, host, guest, place = host_and_guest
    response = client_b.post("/api/bookings", json=_booking(place["id"], user_id=host["id"]))
    assert response.status_code == 201
    assert response.json()["user_id"] == guest["id"]

    assert client_a.get("/api/bookings").json() == []
    assert len(client_b.get("/api/bookings").json()) == 1


def test_list_bookings_embeds_place(host_and_guest):
    client_a, client_b, host, guest, place = host_and_guest
    client_b.post("/api/bookings", json=_booking(place["id"]))

    bookings = client_b.get("/api/bookings").json()
    assert len(bookings) == 1
    assert bookings[0]["place"]["title"] == "Lake Cabin"
    assert bookings[0]["place"]["owner_id"] == host["id"]


def test_booking_unknown_place(client, signup):
    signup(client, "Bob", "b@x.com")
    response = client.post("/api/bookings", json=_booking(999))
    assert response.status_code == 404


def test_bookings_require_session(client):
    assert client.post("/api/bookings", json=_booking(1)).status_code == 401
    assert client.get("/api/bookings").status_code == 401
