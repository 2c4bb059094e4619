"""
Account lifecycle: registration, email verification, login and password reset.

A user row is written only once the emailed verification link comes back; until then
the pending registration lives entirely inside a signed registration token.
"""
from __future__ import annotations

import logging
from typing import Callable, Dict, Optional, Protocol, TypeVar

from core.db.users.auth import hash_password, verify_password
from core.errors import (
    AccountError,
    AccountNotFound,
    CollaboratorUnavailable,
    DuplicateAccount,
    InvalidCredentials,
    InvalidOrExpiredToken,
    StoreConflict,
)
from core.tokens import (
    InvalidToken,
    RegistrationClaims,
    ResetClaims,
    SessionClaims,
    TokenService,
)

log = logging.getLogger(__name__)

T = TypeVar("T")


class CredentialStore(Protocol):
    def find_by_email(self, email: str) -> Optional[Dict]: ...

    def find_by_id(self, user_id: int) -> Optional[Dict]: ...

    def create(self, username: str, email: str, password_hash: str) -> Dict: ...

    def save(self, user: Dict) -> None: ...


class Mailer(Protocol):
    def send(self, to_email: str, subject: str, body: str) -> None: ...


def verification_email(link: str) -> tuple[str, str]:
    return "Email Verification", f"Please verify your email by clicking the link: {link}"


def reset_email(link: str) -> tuple[str, str]:
    body = (
        "You have requested to reset your password. "
        "Please click the following link to reset your password:\n\n"
        f"{link}\n\n"
        "If you did not request this, please ignore this email."
    )
    return "Password Reset Request", body


class AccountManager:
    def __init__(
        self,
        store: CredentialStore,
        tokens: TokenService,
        mailer: Mailer,
        frontend_url: str,
    ):
        self.store = store
        self.tokens = tokens
        self.mailer = mailer
        self.frontend_url = frontend_url.rstrip("/")

    def _call(self, what: str, fn: Callable[..., T], *args) -> T:
        """Run a collaborator call; infrastructure failures become CollaboratorUnavailable."""
        try:
            return fn(*args)
        except (AccountError, StoreConflict):
            raise
        except Exception as exc:
            log.error("%s failed: %s", what, exc)
            raise CollaboratorUnavailable(f"{what} failed") from exc

    def _link(self, path: str, token: str) -> str:
        return f"{self.frontend_url}/{path}?token={token}"

    def register(self, username: str, email: str, password: str) -> None:
        """Email a verification link; nothing is stored until it is followed."""
        if self._call("user lookup", self.store.find_by_email, email):
            log.info("Registration refused, email already in use: %s", email)
            raise DuplicateAccount()

        claims = RegistrationClaims(username=username, email=email, password=password)
        token = self._call("token signing", self.tokens.issue, claims)
        subject, body = verification_email(self._link("verify", token))
        self._call("verification email", self.mailer.send, email, subject, body)
        log.info("Verification email sent to %s", email)

    def verify(self, token: str) -> Dict:
        try:
            claims = self.tokens.verify(token, RegistrationClaims)
        except InvalidToken as exc:
            log.info("Verification token rejected: %s", exc)
            raise InvalidOrExpiredToken() from exc

        if self._call("user lookup", self.store.find_by_email, claims.email):
            raise DuplicateAccount()

        password_hash = self._call("password hashing", hash_password, claims.password)
        try:
            user = self._call(
                "user create", self.store.create, claims.username, claims.email, password_hash
            )
        except StoreConflict as exc:
            # lost the race with another verification for the same email or username
            raise DuplicateAccount() from exc
        log.info("User %s verified and saved", user.get("id"))
        return user

    def login(self, email: str, password: str) -> str:
        user = self._call("user lookup", self.store.find_by_email, email)
        if not user or not verify_password(password, user["password_hash"]):
            raise InvalidCredentials()

        claims = SessionClaims(userId=user["id"], username=user["username"], email=user["email"])
        return self._call("token signing", self.tokens.issue, claims)

    def forgot_password(self, email: str) -> None:
        user = self._call("user lookup", self.store.find_by_email, email)
        if not user:
            raise AccountNotFound("User with this email does not exist")

        token = self._call(
            "token signing", self.tokens.issue, ResetClaims(userId=user["id"], email=user["email"])
        )
        subject, body = reset_email(self._link("reset-password", token))
        self._call("reset email", self.mailer.send, user["email"], subject, body)
        log.info("Password reset link sent for user %s", user["id"])

    def reset_password(self, token: str, new_password: str) -> None:
        """Replace the password hash. Sessions issued earlier stay valid until they expire."""
        try:
            claims = self.tokens.verify(token, ResetClaims)
        except InvalidToken as exc:
            log.info("Reset token rejected: %s", exc)
            raise InvalidOrExpiredToken() from exc

        user = self._call("user lookup", self.store.find_by_id, claims.userId)
        if not user:
            raise AccountNotFound()

        user = dict(user, password_hash=self._call("password hashing", hash_password, new_password))
        self._call("user save", self.store.save, user)
        log.info("Password reset for user %s", user["id"])


__all__ = [
    "CredentialStore",
    "Mailer",
    "AccountManager",
    "verification_email",
    "reset_email",
]
