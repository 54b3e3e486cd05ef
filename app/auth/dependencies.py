# app/auth/dependencies.py
"""
Authentication dependencies for FastAPI.
Verifies the bearer JWT issued by the hosted auth provider and turns it
into an AuthContext. The token subject is the owner identity.
"""

import jwt as pyjwt
from fastapi import Header, HTTPException, status

from app.auth.context import AuthContext
from app.config import settings
from app.utils.logger import get_logger

logger = get_logger(__name__)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def decode_token(token: str) -> AuthContext:
    """Decode and verify a JWT. Raises pyjwt.InvalidTokenError on any problem."""
    payload = pyjwt.decode(
        token,
        settings.JWT_SECRET,
        algorithms=[settings.JWT_ALGORITHM],
        audience=settings.JWT_AUDIENCE,
    )
    sub = payload.get("sub")
    if not sub:
        raise pyjwt.InvalidTokenError("token has no subject")
    return AuthContext(user_id=sub, email=payload.get("email"))


async def get_auth_context(authorization: str = Header(None)) -> AuthContext:
    if not authorization:
        raise _unauthorized("Authorization header missing")

    try:
        scheme, token = authorization.split()
    except ValueError:
        raise _unauthorized("Invalid authorization header format")
    if scheme.lower() != "bearer":
        raise _unauthorized("Invalid authentication scheme")

    try:
        return decode_token(token)
    except pyjwt.ExpiredSignatureError:
        raise _unauthorized("Token expired")
    except pyjwt.InvalidTokenError as e:
        logger.warning(f"Rejected token: {e}")
        raise _unauthorized("Invalid token")
