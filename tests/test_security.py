# /tests/test_security.py

import hashlib
from datetime import timedelta

import pytest

from app.core import security
from app.models.auth_model import Principal, Role


def _legacy_hash(password: str, salt: str, iterations: int) -> str:
    digest = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt.encode("utf-8"), iterations, 32).hex()
    return f"pbkdf2:sha256:{iterations}${salt}${digest}"


# --- Credential Hasher ---

def test_hash_then_verify_accepts_the_same_password():
    stored = security.hash_password("s3cret!", iterations=1000)
    assert security.verify_password("s3cret!", stored) is True
    assert security.verify_password("s3cret?", stored) is False


def test_hash_uses_the_three_field_layout():
    stored = security.hash_password("pw", salt="abc", iterations=1000)
    header, salt, digest = stored.split("$")
    assert header == "pbkdf2:sha256:1000"
    assert salt == "abc"
    assert len(digest) == 64
    assert digest == digest.lower()


def test_hash_uses_a_fresh_salt_each_time():
    first = security.hash_password("same", iterations=1000)
    second = security.hash_password("same", iterations=1000)
    assert first != second
    assert security.verify_password("same", first)
    assert security.verify_password("same", second)


def test_hash_is_deterministic_with_an_explicit_salt():
    assert security.hash_password("pw", salt="fixed", iterations=1000) == \
        security.hash_password("pw", salt="fixed", iterations=1000)


def test_hash_defaults_to_configured_iterations():
    stored = security.hash_password("pw")
    assert stored.startswith(f"pbkdf2:sha256:{security.settings.PASSWORD_HASH_ITERATIONS}$")


def test_verify_accepts_a_hash_written_by_the_previous_system():
    """
    GIVEN a stored value in the legacy format with 600000 iterations
    WHEN the matching password is verified
    THEN it is accepted, and any other password is rejected.
    """
    stored = _legacy_hash("hunter2", "abc123", 600000)
    assert security.verify_password("hunter2", stored) is True
    assert security.verify_password("hunter3", stored) is False


def test_empty_password_is_hashed_like_any_other():
    stored = security.hash_password("", iterations=1000)
    assert security.verify_password("", stored) is True
    assert security.verify_password(" ", stored) is False


@pytest.mark.parametrize("stored", [
    "",
    "not-a-hash",
    "pbkdf2:sha256:1000$salt",
    "pbkdf2:sha256:1000$salt$digest$extra",
    "pbkdf2:sha1:1000$salt$abcd",
    "bcrypt:sha256:1000$salt$abcd",
    "pbkdf2:sha256$salt$abcd",
    "pbkdf2:sha256:abc$salt$abcd",
    "pbkdf2:sha256:0$salt$abcd",
    "pbkdf2:sha256:-5$salt$abcd",
    "pbkdf2:sha256:1000:9$salt$abcd",
])
def test_verify_fails_closed_on_malformed_hashes(stored):
    assert security.verify_password("anything", stored) is False


def test_verify_rejects_non_string_hash():
    assert security.verify_password("anything", None) is False


# --- Session Tokens ---

def test_token_round_trip_preserves_the_principal():
    principal = Principal(id=7, name="Lara", role=Role.MONITOR, school_id=3)
    resolved = security.resolve_token(security.create_access_token(principal))
    assert resolved == principal
    assert resolved.is_admin is False


def test_admin_token_has_no_school():
    principal = Principal(id=1, name="Admin", role=Role.ADMIN, school_id=None)
    resolved = security.resolve_token(security.create_access_token(principal))
    assert resolved.is_admin is True
    assert resolved.school_id is None


def test_expired_token_resolves_to_none():
    principal = Principal(id=1, name="Admin", role=Role.ADMIN)
    token = security.create_access_token(principal, expires_delta=timedelta(seconds=-10))
    assert security.resolve_token(token) is None


def test_tampered_token_resolves_to_none():
    principal = Principal(id=1, name="Admin", role=Role.ADMIN)
    token = security.create_access_token(principal)
    head, payload, signature = token.split(".")
    tampered = ".".join([head, payload, signature[:-2] + ("AA" if signature[-2:] != "AA" else "BB")])
    assert security.resolve_token(tampered) is None


@pytest.mark.parametrize("token", [None, "", "garbage", "a.b.c"])
def test_missing_or_malformed_token_resolves_to_none(token):
    assert security.resolve_token(token) is None


def test_monitor_token_without_school_resolves_to_none():
    principal = Principal(id=4, name="Orphan", role=Role.MONITOR, school_id=None)
    assert security.resolve_token(security.create_access_token(principal)) is None
