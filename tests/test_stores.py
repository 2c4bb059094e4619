import pytest

from core.database import (
    PostgresUserStore,
    create_booking,
    create_car,
    create_travel_agency,
    create_user,
    delete_car,
    get_all_bookings,
    get_cars_by_user,
    get_travel_agencies_by_user,
    update_booking_status,
    update_car,
    update_travel_agency_by_user,
)
from core.errors import StoreConflict


def test_user_store_create_find_and_save(pg):
    store = PostgresUserStore()
    user = store.create("alice", "A@X.com", "hash1")

    assert user["email"] == "a@x.com"
    assert store.find_by_email("a@x.com")["id"] == user["id"]
    assert store.find_by_id(user["id"])["username"] == "alice"
    assert store.find_by_id("nope") is None

    store.save(dict(user, password_hash="hash2"))
    assert store.find_by_email("a@x.com")["password_hash"] == "hash2"


def test_user_store_unique_violation_is_conflict(pg):
    create_user("alice", "a@x.com", "h")
    with pytest.raises(StoreConflict):
        create_user("alice2", "a@x.com", "h")
    with pytest.raises(StoreConflict):
        create_user("alice", "b@x.com", "h")


def test_cars_crud(pg):
    owner = create_user("agency", "agency@example.com", "h")
    car = create_car(owner["id"], image="https://img/1.jpg", car_type="SUV", price=2500.0)
    assert car["travelUserId"] == owner["id"]
    assert car["carName"] is None

    updated = update_car(car["id"], {"carName": "XUV", "price": None})
    assert updated["carName"] == "XUV"
    assert updated["price"] == 2500.0
    assert update_car(9999, {"carName": "x"}) is None

    assert [c["id"] for c in get_cars_by_user(owner["id"])] == [car["id"]]
    assert delete_car(car["id"]) is True
    assert delete_car(car["id"]) is False


def test_travel_agency_update_only_given_fields(pg):
    owner = create_user("agency", "agency@example.com", "h")
    create_travel_agency(owner["id"], {"name": "Safar", "email": "desk@example.com", "city": "Pune"})

    agency = update_travel_agency_by_user(owner["id"], {"city": "Mumbai", "name": None})
    assert agency["name"] == "Safar"
    assert agency["city"] == "Mumbai"
    assert len(get_travel_agencies_by_user(owner["id"])) == 1
    assert update_travel_agency_by_user(owner["id"] + 1, {"city": "Goa"}) is None


def test_booking_defaults_to_pending(pg):
    booking = create_booking(
        {
            "name": "Jane",
            "email": "jane@example.com",
            "mobileNo": "1",
            "pickupAdd": "A",
            "dropAdd": "B",
            "carType": "Sedan",
            "tripType": "One way",
            "from": "Pune",
            "to": "Mumbai",
        }
    )
    assert booking["bookingStatus"] == "Pending"
    assert booking["from"] == "Pune"

    assert update_booking_status(booking["id"], "Confirmed")["bookingStatus"] == "Confirmed"
    assert update_booking_status(booking["id"] + 1, "Confirmed") is None
    assert len(get_all_bookings()) == 1
