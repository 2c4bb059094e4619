"""
Booking storage re-exports.
"""
from core.db.bookings.bookings_store import (
    DEFAULT_BOOKING_STATUS,
    create_booking,
    get_all_bookings,
    update_booking_status,
)

__all__ = [
    "DEFAULT_BOOKING_STATUS",
    "create_booking",
    "get_all_bookings",
    "update_booking_status",
]
