"""
Car listing storage helpers.
"""
from __future__ import annotations

from typing import Dict, List, Optional

from core.db.base import get_conn, now_iso

CAR_FIELDS = {
    "image": "image",
    "carName": "car_name",
    "carType": "car_type",
    "price": "price",
    "pricePerKm": "price_per_km",
}

_SELECT = """
    SELECT id, image, car_name AS "carName", car_type AS "carType", price,
           price_per_km AS "pricePerKm", travel_user_id AS "travelUserId",
           created_at AS "createdAt", updated_at AS "updatedAt"
    FROM cars
"""


def create_car(
    travel_user_id: int,
    image: str,
    car_type: str,
    price: float,
    car_name: str | None = None,
    price_per_km: float | None = None,
) -> Dict:
    now = now_iso()
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        """
        INSERT INTO cars (travel_user_id, image, car_name, car_type, price, price_per_km, created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, ?, ?, ?)
        RETURNING id
        """,
        (travel_user_id, image, car_name, car_type, price, price_per_km, now, now),
    )
    car_id = int(cur.fetchone()["id"])
    cur.execute(_SELECT + " WHERE id = ?", (car_id,))
    row = cur.fetchone()
    conn.commit()
    conn.close()
    return dict(row)


def get_car(car_id: int) -> Optional[Dict]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(_SELECT + " WHERE id = ?", (car_id,))
    row = cur.fetchone()
    conn.close()
    return dict(row) if row else None


def get_cars_by_user(travel_user_id: int) -> List[Dict]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(_SELECT + " WHERE travel_user_id = ? ORDER BY id", (travel_user_id,))
    rows = cur.fetchall()
    conn.close()
    return [dict(r) for r in rows]


def update_car(car_id: int, data: Dict) -> Optional[Dict]:
    """Apply the non-None API fields in ``data`` and return the updated car."""
    assignments = ["updated_at = ?"]
    values: list = [now_iso()]
    for key, column in CAR_FIELDS.items():
        if data.get(key) is not None:
            assignments.append(f"{column} = ?")
            values.append(data[key])
    values.append(car_id)

    conn = get_conn()
    cur = conn.cursor()
    cur.execute(f"UPDATE cars SET {', '.join(assignments)} WHERE id = ?", values)
    if cur.rowcount == 0:
        conn.close()
        return None
    cur.execute(_SELECT + " WHERE id = ?", (car_id,))
    row = cur.fetchone()
    conn.commit()
    conn.close()
    return dict(row)


def delete_car(car_id: int) -> bool:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute("DELETE FROM cars WHERE id = ?", (car_id,))
    deleted = cur.rowcount
    conn.commit()
    conn.close()
    return deleted > 0


__all__ = [
    "CAR_FIELDS",
    "create_car",
    "get_car",
    "get_cars_by_user",
    "update_car",
    "delete_car",
]
