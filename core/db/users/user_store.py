"""
User records: the credential store behind the account lifecycle.
"""
from __future__ import annotations

from typing import Dict, Optional

import psycopg

from core.db.base import get_conn, now_iso
from core.errors import StoreConflict

_USER_COLUMNS = "id, username, email, password_hash, created_at, updated_at"


def normalize_email(email: str) -> str:
    return (email or "").strip().lower()


def create_user(username: str, email: str, password_hash: str) -> Dict:
    """
    Insert a user row and return it.
    Raises StoreConflict when the username or email is already taken.
    """
    conn = get_conn()
    cur = conn.cursor()
    now = now_iso()
    try:
        cur.execute(
            f"""
            INSERT INTO users (username, email, password_hash, created_at, updated_at)
            VALUES (?, ?, ?, ?, ?)
            RETURNING {_USER_COLUMNS}
            """,
            (username.strip(), normalize_email(email), password_hash, now, now),
        )
        row = cur.fetchone()
        conn.commit()
    except psycopg.errors.UniqueViolation as exc:
        conn.rollback()
        raise StoreConflict(str(exc)) from exc
    finally:
        conn.close()
    return dict(row)


def get_user_by_email(email: str) -> Optional[Dict]:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        f"SELECT {_USER_COLUMNS} FROM users WHERE email = ?",
        (normalize_email(email),),
    )
    row = cur.fetchone()
    conn.close()
    return dict(row) if row else None


def get_user_by_id(user_id: int) -> Optional[Dict]:
    """Look up a user by numeric id. Returns dict or None."""
    try:
        user_id = int(user_id)
    except (TypeError, ValueError):
        return None

    conn = get_conn()
    cur = conn.cursor()
    cur.execute(f"SELECT {_USER_COLUMNS} FROM users WHERE id = ?", (user_id,))
    row = cur.fetchone()
    conn.close()
    return dict(row) if row else None


def update_user_password_hash(user_id: int, password_hash: str) -> None:
    conn = get_conn()
    cur = conn.cursor()
    cur.execute(
        "UPDATE users SET password_hash = ?, updated_at = ? WHERE id = ?",
        (password_hash, now_iso(), user_id),
    )
    conn.commit()
    conn.close()


class PostgresUserStore:
    """Credential store over the ``users`` table."""

    def find_by_email(self, email: str) -> Optional[Dict]:
        return get_user_by_email(email)

    def find_by_id(self, user_id: int) -> Optional[Dict]:
        return get_user_by_id(user_id)

    def create(self, username: str, email: str, password_hash: str) -> Dict:
        return create_user(username, email, password_hash)

    def save(self, user: Dict) -> None:
        update_user_password_hash(user["id"], user["password_hash"])


__all__ = [
    "normalize_email",
    "create_user",
    "get_user_by_email",
    "get_user_by_id",
    "update_user_password_hash",
    "PostgresUserStore",
]
