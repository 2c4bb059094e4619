"""
User-related storage helpers, split by responsibility.
"""
from core.db.users.auth import hash_password, verify_password
from core.db.users.user_store import (
    PostgresUserStore,
    create_user,
    get_user_by_email,
    get_user_by_id,
    normalize_email,
    update_user_password_hash,
)

__all__ = [
    "hash_password",
    "verify_password",
    "PostgresUserStore",
    "create_user",
    "get_user_by_email",
    "get_user_by_id",
    "normalize_email",
    "update_user_password_hash",
]
