# /app/routers/auth_router.py

"""
This module defines the public-facing API for session handling.

It includes endpoints for:
- Logging in and receiving the session cookie (`/login`)
- Logging out, which clears the cookie (`/logout`)
- Retrieving the current principal (`/me`)

The session token is an HTTP-only cookie; its contents are opaque to every
other part of the application, which only sees the resolved `Principal`.
"""

from fastapi import APIRouter, Depends, Response

from app.core import security
from app.core.config import settings
from app.core.deps import get_current_principal
from app.core.exceptions import UnauthenticatedError
from app.models.auth_model import LoginRequest, LoginResponse, MessageResponse, Principal
from app.services import auth_service
from app.services.database_service import DatabaseService, get_db_service

# --- Router Initialization ---
router = APIRouter()

INVALID_CREDENTIALS = "Invalid username or password"


@router.post("/login", response_model=LoginResponse, summary="Log In")
def login(
    credentials: LoginRequest,
    response: Response,
    db: DatabaseService = Depends(get_db_service)
):
    """
    Checks the credentials and, on success, sets the signed session cookie.
    Unknown users and wrong passwords get the same 401 response.
    """
    principal = auth_service.authenticate(db, username=credentials.username, password=credentials.password)
    if principal is None:
        raise UnauthenticatedError(INVALID_CREDENTIALS)

    response.set_cookie(
        key=settings.SESSION_COOKIE_NAME,
        value=security.create_access_token(principal),
        max_age=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60,
        httponly=True,
        secure=settings.COOKIE_SECURE or settings.is_production,
        samesite="strict",
    )
    return LoginResponse(user=principal)


@router.post("/logout", response_model=MessageResponse, summary="Log Out")
def logout(response: Response):
    response.delete_cookie(key=settings.SESSION_COOKIE_NAME)
    return MessageResponse(message="Logged out successfully")


@router.get("/me", response_model=LoginResponse, summary="Get the Current User")
def read_current_user(principal: Principal = Depends(get_current_principal)):
    """Protected endpoint: returns the principal carried by the session cookie."""
    return LoginResponse(user=principal)
