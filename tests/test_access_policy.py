# /tests/test_access_policy.py

import pytest

from app.core.exceptions import NotFoundOrOutOfScopeError, ValidationError
from app.models.auth_model import Principal, Role
from app.services import access_policy

ADMIN = Principal(id=1, name="Admin", role=Role.ADMIN)
MONITOR = Principal(id=2, name="Lara", role=Role.MONITOR, school_id=5)


def test_school_scope():
    assert access_policy.school_scope(ADMIN) is None
    assert access_policy.school_scope(MONITOR) == 5


def test_school_filter_is_only_honoured_for_admins():
    assert access_policy.filter_school_for(ADMIN, 9) == 9
    assert access_policy.filter_school_for(MONITOR, 9) is None


def test_resolve_target_school():
    assert access_policy.resolve_target_school(MONITOR, 9) == 5
    assert access_policy.resolve_target_school(MONITOR, None) == 5
    assert access_policy.resolve_target_school(ADMIN, 9) == 9
    with pytest.raises(ValidationError) as exc_info:
        access_policy.resolve_target_school(ADMIN, None)
    assert exc_info.value.field == "school_id"


def test_require_admin():
    access_policy.require_admin(ADMIN, "Monitor")
    with pytest.raises(NotFoundOrOutOfScopeError) as exc_info:
        access_policy.require_admin(MONITOR, "Monitor")
    assert exc_info.value.to_dict() == {
        "error": "Monitor not found or not within your scope",
        "category": "not_found_or_out_of_scope",
    }


def test_ensure_school_in_scope():
    access_policy.ensure_school_in_scope(ADMIN, 9, "Subject")
    access_policy.ensure_school_in_scope(MONITOR, 5, "Subject")
    with pytest.raises(NotFoundOrOutOfScopeError):
        access_policy.ensure_school_in_scope(MONITOR, 9, "Subject")


def test_found_in_scope():
    row = object()
    assert access_policy.found_in_scope(row, "Student") is row
    with pytest.raises(NotFoundOrOutOfScopeError):
        access_policy.found_in_scope(None, "Student")
