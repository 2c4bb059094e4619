"""
Signed, self-expiring tokens (HS256 JWT) for registration, sessions and password resets.

Every token carries a ``kind`` claim so the three payload shapes never get mixed up.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime, timedelta, timezone
from typing import Dict, Optional, Type, TypeVar, Union

from jose import JWTError, jwt

ALGORITHM = "HS256"

REGISTRATION_TOKEN_HOURS = 24
SESSION_TOKEN_MINUTES = 60
RESET_TOKEN_MINUTES = 60


class InvalidToken(Exception):
    """Signature mismatch, malformed token, unknown kind, or expired."""


@dataclass(frozen=True)
class RegistrationClaims:
    username: str
    email: str
    password: str

    kind = "registration"
    default_ttl = timedelta(hours=REGISTRATION_TOKEN_HOURS)


@dataclass(frozen=True)
class SessionClaims:
    userId: int
    username: str
    email: str

    kind = "session"
    default_ttl = timedelta(minutes=SESSION_TOKEN_MINUTES)


@dataclass(frozen=True)
class ResetClaims:
    userId: int
    email: str

    kind = "reset"
    default_ttl = timedelta(minutes=RESET_TOKEN_MINUTES)


TokenClaims = Union[RegistrationClaims, SessionClaims, ResetClaims]
C = TypeVar("C", RegistrationClaims, SessionClaims, ResetClaims)

_KINDS: Dict[str, type] = {
    cls.kind: cls for cls in (RegistrationClaims, SessionClaims, ResetClaims)
}


class TokenService:
    def __init__(self, secret: str, algorithm: str = ALGORITHM):
        if not secret:
            raise ValueError("Token secret must not be empty")
        self._secret = secret
        self._algorithm = algorithm

    def issue(self, claims: TokenClaims, ttl: Optional[timedelta] = None) -> str:
        """Sign ``claims`` with an expiry ``ttl`` from now (the variant's default if omitted)."""
        now = datetime.now(timezone.utc)
        payload = asdict(claims)
        payload["kind"] = claims.kind
        payload["iat"] = now
        payload["exp"] = now + (ttl if ttl is not None else claims.default_ttl)
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def verify(self, token: str, expected: Optional[Type[C]] = None) -> TokenClaims:
        """
        Decode and check a token.
        Raises InvalidToken when the signature, shape or expiry is wrong, or when the
        token is not of the ``expected`` variant.
        """
        if not token:
            raise InvalidToken("empty token")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise InvalidToken(str(exc)) from exc

        cls = _KINDS.get(payload.get("kind"))
        if cls is None:
            raise InvalidToken("unknown token kind")
        if expected is not None and cls is not expected:
            raise InvalidToken(f"expected a {expected.kind} token, got {cls.kind}")

        fields = cls.__dataclass_fields__
        try:
            return cls(**{name: payload[name] for name in fields})
        except KeyError as exc:
            raise InvalidToken(f"missing claim {exc}") from exc


__all__ = [
    "ALGORITHM",
    "REGISTRATION_TOKEN_HOURS",
    "SESSION_TOKEN_MINUTES",
    "RESET_TOKEN_MINUTES",
    "InvalidToken",
    "RegistrationClaims",
    "SessionClaims",
    "ResetClaims",
    "TokenClaims",
    "TokenService",
]
