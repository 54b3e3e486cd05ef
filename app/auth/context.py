# app/auth/context.py
"""
Explicit authentication context.
Every core operation receives an AuthContext instead of reading a global
session; require_auth() is the hard precondition check.
"""

from dataclasses import dataclass
from typing import Optional

from app.exceptions import AuthenticationRequired


@dataclass(frozen=True)
class AuthContext:
    user_id: str
    email: Optional[str] = None


def require_auth(auth: Optional[AuthContext]) -> AuthContext:
    """Return auth unchanged, or raise AuthenticationRequired if there is no session."""
    if auth is None or not auth.user_id:
        raise AuthenticationRequired()
    return auth
