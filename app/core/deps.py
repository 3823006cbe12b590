# /app/core/deps.py

from typing import Optional

from fastapi import Cookie, Header

from app.core import security
from app.core.config import settings
from app.core.exceptions import UnauthenticatedError
from app.models.auth_model import Principal


def _bearer_token(authorization: Optional[str]) -> Optional[str]:
    if authorization and authorization.lower().startswith("bearer "):
        return authorization[7:].strip()
    return None


def get_current_principal(
    token: Optional[str] = Cookie(default=None, alias=settings.SESSION_COOKIE_NAME),
    authorization: Optional[str] = Header(default=None),
) -> Principal:
    """
    Resolves the caller from a Bearer header (non-browser clients) or the
    session cookie. An explicit header takes precedence over the cookie.
    Runs before any handler touches the database and rejects with 401 when
    there is no valid session.
    """
    principal = security.resolve_token(_bearer_token(authorization) or token)
    if principal is None:
        raise UnauthenticatedError()
    return principal
