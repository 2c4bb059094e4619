"""
Account and store errors surfaced to the HTTP layer.
"""
from __future__ import annotations


class AccountError(Exception):
    """Base for every outcome the account lifecycle reports to its caller."""

    status_code = 500
    default_message = "Something went wrong"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class DuplicateAccount(AccountError):
    status_code = 400
    default_message = "User already exists"


class InvalidOrExpiredToken(AccountError):
    status_code = 400
    default_message = "Invalid or expired token"


class InvalidCredentials(AccountError):
    status_code = 400
    default_message = "Invalid email or password"


class AccountNotFound(AccountError):
    status_code = 404
    default_message = "User not found"


class CollaboratorUnavailable(AccountError):
    status_code = 500


class StoreConflict(Exception):
    """A write was rejected by a unique constraint."""


__all__ = [
    "AccountError",
    "DuplicateAccount",
    "InvalidOrExpiredToken",
    "InvalidCredentials",
    "AccountNotFound",
    "CollaboratorUnavailable",
    "StoreConflict",
]
