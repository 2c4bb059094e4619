"""
Travel agency storage helpers (data-level only).
"""
from __future__ import annotations

from typing import Dict, List, Optional

from core.db.base import get_conn, now_iso

# API field name -> column
AGENCY_FIELDS = {
    "logo": "logo",
    "name": "name",
    "email": "email",
    "contactNo": "contact_no",
    "city": "city",
    "state": "state",
    "address": "address",
    "country": "country",
    "pincode": "pincode",
}

_SELECT = """
    SELECT id, logo, name, email, contact_no AS "contactNo", city, state, address,
           country, pincode, travel_user_id AS "travelUserId",
           created_at AS "createdAt", updated_at AS "updatedAt"
    FROM travel_agencies
"""


def create_travel_agency(travel_user_id: int, data: Dict) -> Dict:
    """Insert an agency owned by ``travel_user_id``; ``data`` uses API field names."""
    now = now_iso()
    columns = ["travel_user_id", "created_at", "updated_at"]
    values: list = [travel_user_id, now, now]
    for key, column in AGENCY_FIELDS.items():
        if data.get(key) is not None:
            columns.append(column)
            values.append(data[key])

    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        f"""
        INSERT INTO travel_agencies ({", ".join(columns)})
        VALUES ({", ".join("?" for _ in columns)})
        RETURNING id
        """,
        values,
    )
    agency_id = int(cur.fetchone()["id"])
    cur.execute(_SELECT + " WHERE id = ?", (agency_id,))
    row = cur.fetchone()
    conn.commit()
    conn.close()
    return dict(row)


def get_all_travel_agencies() -> List[Dict]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(_SELECT + " ORDER BY id")
    rows = cur.fetchall()
    conn.close()
    return [dict(r) for r in rows]


def get_travel_agencies_by_user(travel_user_id: int) -> List[Dict]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(_SELECT + " WHERE travel_user_id = ? ORDER BY id", (travel_user_id,))
    rows = cur.fetchall()
    conn.close()
    return [dict(r) for r in rows]


def update_travel_agency_by_user(travel_user_id: int, data: Dict) -> Optional[Dict]:
    """
    Update the user's (first) agency with the non-None fields in ``data``.
    Returns the updated agency, or None if the user has none.
    """
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        "SELECT id FROM travel_agencies WHERE travel_user_id = ? ORDER BY id LIMIT 1",
        (travel_user_id,),
    )
    row = cur.fetchone()
    if not row:
        conn.close()
        return None
    agency_id = row["id"]

    assignments = ["updated_at = ?"]
    values: list = [now_iso()]
    for key, column in AGENCY_FIELDS.items():
        if data.get(key) is not None:
            assignments.append(f"{column} = ?")
            values.append(data[key])
    values.append(agency_id)

    cur.execute(f"UPDATE travel_agencies SET {', '.join(assignments)} WHERE id = ?", values)
    cur.execute(_SELECT + " WHERE id = ?", (agency_id,))
    updated = cur.fetchone()
    conn.commit()
    conn.close()
    return dict(updated)


__all__ = [
    "AGENCY_FIELDS",
    "create_travel_agency",
    "get_all_travel_agencies",
    "get_travel_agencies_by_user",
    "update_travel_agency_by_user",
]
