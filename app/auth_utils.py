"""
Bearer-token guard for the agency routes.
"""
from __future__ import annotations

import logging

from fastapi import Depends, Header, HTTPException, status

from app.deps import get_token_service
from core.tokens import InvalidToken, SessionClaims, TokenService

log = logging.getLogger(__name__)


def get_current_user(
    authorization: str | None = Header(None),
    tokens: TokenService = Depends(get_token_service),
) -> SessionClaims:
    """
    Read ``Authorization: Bearer <token>`` and return the session claims.
    Raises 401 when the header is missing or the token is not a live session token.
    """
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header missing",
        )
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header missing",
        )
    try:
        return tokens.verify(token.strip(), SessionClaims)
    except InvalidToken as exc:
        log.info("Rejected bearer token: %s", exc)
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token") from exc
