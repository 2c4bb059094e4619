"""
Single import point for the storage helpers used by routes.
"""
from core.db.bookings import (
    DEFAULT_BOOKING_STATUS,
    create_booking,
    get_all_bookings,
    update_booking_status,
)
from core.db.cars import create_car, delete_car, get_car, get_cars_by_user, update_car
from core.db.schema import init_db
from core.db.travel import (
    create_travel_agency,
    get_all_travel_agencies,
    get_travel_agencies_by_user,
    update_travel_agency_by_user,
)
from core.db.users import (
    PostgresUserStore,
    create_user,
    get_user_by_email,
    get_user_by_id,
    hash_password,
    update_user_password_hash,
    verify_password,
)

__all__ = [
    "DEFAULT_BOOKING_STATUS",
    "create_booking",
    "get_all_bookings",
    "update_booking_status",
    "create_car",
    "delete_car",
    "get_car",
    "get_cars_by_user",
    "update_car",
    "init_db",
    "create_travel_agency",
    "get_all_travel_agencies",
    "get_travel_agencies_by_user",
    "update_travel_agency_by_user",
    "PostgresUserStore",
    "create_user",
    "get_user_by_email",
    "get_user_by_id",
    "hash_password",
    "update_user_password_hash",
    "verify_password",
]
