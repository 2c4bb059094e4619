"""
Customer trip bookings.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from core.db.base import get_conn, now_iso

DEFAULT_BOOKING_STATUS = "Pending"

_SELECT = """
    SELECT id, name, email, mobile_no AS "mobileNo", pickup_add AS "pickupAdd",
           drop_add AS "dropAdd", car_type AS "carType", trip_type AS "tripType",
           from_place AS "from", to_place AS "to", distance, fare,
           date_of_booking AS "dateOfBooking", booking_status AS "bookingStatus",
           created_at AS "createdAt", updated_at AS "updatedAt"
    FROM travel_bookings
"""


def create_booking(data: Dict) -> Dict:
    """Insert a booking; ``data`` uses API field names."""
    now = now_iso()
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO travel_bookings (
            name, email, mobile_no, pickup_add, drop_add, car_type, trip_type,
            from_place, to_place, distance, fare, date_of_booking, booking_status,
            created_at, updated_at
        )
        VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?, ?)
        RETURNING id
        """,
        (
            data["name"],
            data["email"],
            data["mobileNo"],
            data["pickupAdd"],
            data["dropAdd"],
            data["carType"],
            data["tripType"],
            data["from"],
            data["to"],
            data.get("distance"),
            data.get("fare"),
            data.get("dateOfBooking") or now,
            data.get("bookingStatus") or DEFAULT_BOOKING_STATUS,
            now,
            now,
        ),
    )
    booking_id = int(cur.fetchone()["id"])
    cur.execute(_SELECT + " WHERE id = ?", (booking_id,))
    row = cur.fetchone()
    conn.commit()
    conn.close()
    return dict(row)


def get_all_bookings() -> List[Dict]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(_SELECT + " ORDER BY id")
    rows = cur.fetchall()
    conn.close()
    return [dict(r) for r in rows]


def update_booking_status(booking_id: int, booking_status: str) -> Optional[Dict]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        "UPDATE travel_bookings SET booking_status = ?, updated_at = ? WHERE id = ?",
        (booking_status, now_iso(), booking_id),
    )
    if cur.rowcount == 0:
        conn.close()
        return None
    cur.execute(_SELECT + " WHERE id = ?", (booking_id,))
    row = cur.fetchone()
    conn.commit()
    conn.close()
    return dict(row)


__all__ = [
    "DEFAULT_BOOKING_STATUS",
    "create_booking",
    "get_all_bookings",
    "update_booking_status",
]
