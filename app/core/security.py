# /app/core/security.py

"""
Cryptographic helpers: the credential hasher and the session token codec.

Stored credentials use the legacy three-field layout

    pbkdf2:sha256:<iterations>$<salt>$<hexdigest>

where the salt is used verbatim (UTF-8) as the PBKDF2 salt and the digest is
the 32-byte PBKDF2-HMAC-SHA256 output as lowercase hex. Existing rows written
by the previous system verify unchanged.

Session tokens are HS256 JWTs carrying the principal's id, name, role and
home school, valid for `ACCESS_TOKEN_EXPIRE_MINUTES`.
"""

import hashlib
import hmac
import secrets
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from pydantic import ValidationError as PydanticValidationError

from app.core.config import settings
from app.models.auth_model import Principal

HASH_METHOD = "pbkdf2:sha256"
HASH_DIGEST = "sha256"
HASH_KEY_LENGTH = 32
SALT_BYTES = 16


# --- Credential Hasher ---

def _derive(password: str, salt: str, iterations: int) -> str:
    return hashlib.pbkdf2_hmac(
        HASH_DIGEST,
        password.encode("utf-8"),
        salt.encode("utf-8"),
        iterations,
        HASH_KEY_LENGTH,
    ).hex()


def hash_password(password: str, salt: Optional[str] = None, iterations: Optional[int] = None) -> str:
    """
    Hashes a password into the `pbkdf2:sha256:<n>$<salt>$<hex>` format.

    A fresh random salt (16 bytes, hex encoded) is generated when none is
    given; with an explicit salt the result is deterministic. An empty
    password is hashed like any other value.
    """
    if not salt:
        salt = secrets.token_hex(SALT_BYTES)
    if iterations is None:
        iterations = settings.PASSWORD_HASH_ITERATIONS
    return f"{HASH_METHOD}:{iterations}${salt}${_derive(password, salt, iterations)}"


def verify_password(password: str, stored_hash: str) -> bool:
    """
    Checks a password against a stored hash. Fails closed: any stored value
    that is not exactly three `$`-separated fields with a `pbkdf2:sha256:<n>`
    header returns False instead of raising.
    """
    if not isinstance(stored_hash, str) or password is None:
        return False

    parts = stored_hash.split("$")
    if len(parts) != 3:
        return False
    header, salt, expected = parts

    method_parts = header.split(":")
    if len(method_parts) != 3 or ":".join(method_parts[:2]) != HASH_METHOD:
        return False
    iterations_text = method_parts[2]
    if not (iterations_text.isascii() and iterations_text.isdigit()):
        return False
    iterations = int(iterations_text)
    if iterations <= 0:
        return False

    computed = _derive(password, salt, iterations)
    return hmac.compare_digest(computed.encode("ascii"), expected.encode("utf-8"))


# --- Session Tokens ---

def create_access_token(principal: Principal, expires_delta: Optional[timedelta] = None) -> str:
    """Signs a session token for the given principal."""
    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    claims = {
        "sub": str(principal.id),
        "name": principal.name,
        "role": principal.role.value,
        "school_id": principal.school_id,
        "exp": datetime.now(timezone.utc) + expires_delta,
    }
    return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def resolve_token(token: Optional[str]) -> Optional[Principal]:
    """
    Turns a session token into a trusted Principal, or None.

    Missing, malformed, tampered and expired tokens all resolve to None; this
    function never raises.
    """
    if not token:
        return None
    try:
        claims = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except JWTError:
        return None

    try:
        principal = Principal(
            id=int(claims.get("sub")),
            name=claims.get("name"),
            role=claims.get("role"),
            school_id=claims.get("school_id"),
        )
    except (TypeError, ValueError, PydanticValidationError):
        return None

    # A monitor without a home school has no scope at all.
    if not principal.is_admin and principal.school_id is None:
        return None
    return principal
