"""
Schema helpers for Postgres.
"""
from __future__ import annotations

import logging

from core.db.base import get_conn

log = logging.getLogger(__name__)

TABLES = ["travel_bookings", "cars", "travel_agencies", "users"]


def init_db() -> None:
    """Create the users, travel_agencies, cars and travel_bookings tables if they don't exist."""
    conn = get_conn()
    cur = conn.cursor()

    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS users(
            id SERIAL PRIMARY KEY,
            username TEXT NOT NULL UNIQUE,
            email TEXT NOT NULL UNIQUE,
            password_hash TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS travel_agencies(
            id SERIAL PRIMARY KEY,
            travel_user_id INTEGER NOT NULL,
            logo TEXT,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            contact_no TEXT,
            city TEXT,
            state TEXT,
            address TEXT,
            country TEXT,
            pincode TEXT,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            FOREIGN KEY(travel_user_id) REFERENCES users(id)
        )
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS cars(
            id SERIAL PRIMARY KEY,
            travel_user_id INTEGER NOT NULL,
            image TEXT NOT NULL,
            car_name TEXT,
            car_type TEXT NOT NULL,
            price DOUBLE PRECISION NOT NULL,
            price_per_km DOUBLE PRECISION,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL,
            FOREIGN KEY(travel_user_id) REFERENCES users(id)
        )
        """
    )
    cur.execute(
        """
        CREATE TABLE IF NOT EXISTS travel_bookings(
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL,
            mobile_no TEXT NOT NULL,
            pickup_add TEXT NOT NULL,
            drop_add TEXT NOT NULL,
            car_type TEXT NOT NULL,
            trip_type TEXT NOT NULL,
            from_place TEXT NOT NULL,
            to_place TEXT NOT NULL,
            distance DOUBLE PRECISION,
            fare DOUBLE PRECISION,
            date_of_booking TEXT NOT NULL,
            booking_status TEXT NOT NULL,
            created_at TEXT NOT NULL,
            updated_at TEXT NOT NULL
        )
        """
    )
    cur.execute("CREATE INDEX IF NOT EXISTS idx_cars_travel_user ON cars(travel_user_id)")
    cur.execute(
        "CREATE INDEX IF NOT EXISTS idx_travel_agencies_user ON travel_agencies(travel_user_id)"
    )

    conn.commit()
    conn.close()
    log.info("Database tables checked/created.")


__all__ = ["TABLES", "init_db"]
