"""
AI Notes Backend — Caller Identity
==================================

What:  Resolves the caller's identity from the request for every procedure.
How:   The client sends `Authorization: Bearer <jwt>`. The token is verified
       with the configured HMAC secret; its `sub` claim is the owner id that
       every query is scoped by.
Who:   `get_current_user` is injected into each route via Depends().

Token issuance (sign-up, login, sessions) belongs to the identity provider
in front of this service. `create_access_token` exists so development
tooling and the test suite can mint tokens with the shared secret.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from ainotes.config import settings
from ainotes.exceptions import UnauthenticatedError

logger = logging.getLogger(__name__)

# auto_error=False: a missing header must surface as our 401 body, not
# FastAPI's default 403
bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """The authenticated caller. `id` is compared against owner_id columns."""
    id: str


def create_access_token(user_id: str, expires_delta: Optional[timedelta] = None) -> str:
    """Mint a signed access token whose `sub` is `user_id`."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    expire = datetime.now(timezone.utc) + expires_delta
    claims = {"sub": user_id, "exp": expire}
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str) -> Optional[str]:
    """
    Verify a token and return its `sub` claim.

    Returns None for a bad signature, an expired token, or a token without
    a non-empty string `sub`.
    """
    try:
        payload = jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        logger.debug("Rejected access token: %s", str(e))
        return None
    subject = payload.get("sub")
    if not isinstance(subject, str) or not subject:
        return None
    return subject


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> CurrentUser:
    """
    FastAPI dependency: the caller, or UnauthenticatedError (→ 401).

    Runs before the handler touches the database, so an anonymous request
    never issues a query.
    """
    if credentials is None:
        raise UnauthenticatedError(context={"reason": "missing_credentials"})
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise UnauthenticatedError(context={"reason": "invalid_token"})
    return CurrentUser(id=user_id)
