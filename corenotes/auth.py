"""
Session token verification.

Tokens are issued by the passwordless login service; this API only checks
them. A token is an HS256 JWT whose ``sub`` claim is the user id, sent either
as ``Authorization: Bearer <token>`` or in the session cookie.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError, jwt

from corenotes.config import Settings, get_settings

logger = logging.getLogger(__name__)

bearer = HTTPBearer(auto_error=False)

DEFAULT_TOKEN_TTL_SECONDS = 30 * 24 * 3600


def create_access_token(
    user_id: str,
    *,
    settings: Optional[Settings] = None,
    ttl_seconds: int = DEFAULT_TOKEN_TTL_SECONDS,
) -> str:
    settings = settings or get_settings()
    exp = int(time.time()) + ttl_seconds
    return jwt.encode(
        {"sub": user_id, "exp": exp},
        settings.auth_secret,
        algorithm=settings.auth_algorithm,
    )


def _unauthorized() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="unauthorized",
        headers={"WWW-Authenticate": "Bearer"},
    )


def require_user(
    request: Request,
    creds: HTTPAuthorizationCredentials | None = Depends(bearer),
    settings: Settings = Depends(get_settings),
) -> str:
    """Return the authenticated user id or reject the request with 401."""
    token = None
    if creds and creds.credentials:
        token = creds.credentials
    elif request.cookies.get(settings.auth_cookie_name):
        token = request.cookies.get(settings.auth_cookie_name)
    if not token:
        raise _unauthorized()
    try:
        payload = jwt.decode(
            token, settings.auth_secret, algorithms=[settings.auth_algorithm]
        )
    except JWTError as exc:
        logger.debug("Rejected session token: %s", exc)
        raise _unauthorized() from exc
    user_id = payload.get("sub")
    if not user_id or not isinstance(user_id, str):
        logger.debug("Rejected session token without subject")
        raise _unauthorized()
    return user_id
