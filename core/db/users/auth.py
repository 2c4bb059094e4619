"""
Password hashing and verification.
"""
from __future__ import annotations

import bcrypt

BCRYPT_ROUNDS = 10


def hash_password(raw_password: str) -> str:
    salt = bcrypt.gensalt(rounds=BCRYPT_ROUNDS)
    return bcrypt.hashpw(raw_password.encode("utf-8"), salt).decode("utf-8")


def verify_password(raw_password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(raw_password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # malformed stored hash
        return False


__all__ = ["BCRYPT_ROUNDS", "hash_password", "verify_password"]
