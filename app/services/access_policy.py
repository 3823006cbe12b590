# /app/services/access_policy.py

"""
Authorization rules shared by every entity service.

The model is small:

- an administrator acts on rows of every school;
- a monitor acts only on rows whose school (direct, or through the parent
  student) is its home school.

Read paths turn the principal into a *scope* (`None` = all schools, or one
school id) that the repositories apply as a row filter. Write paths first
re-load the target row under that scope; a row that is missing and a row
that is out of scope both raise the same `NotFoundOrOutOfScopeError`.
"""

from typing import Optional

from app.core.app_logger import get_logger
from app.core.exceptions import NotFoundOrOutOfScopeError, ValidationError
from app.models.auth_model import Principal

logger = get_logger("access_policy")


def school_scope(principal: Principal) -> Optional[int]:
    """The school a principal is restricted to, or None when unrestricted."""
    if principal.is_admin:
        return None
    return principal.school_id


def filter_school_for(principal: Principal, requested_school_id: Optional[int]) -> Optional[int]:
    """
    An optional `school_id` list filter. Honoured for administrators; a
    monitor is already restricted to its own school, so the value is ignored.
    """
    return requested_school_id if principal.is_admin else None


def require_admin(principal: Principal, entity: str) -> None:
    """Rejects every non-admin principal with the unified scope error."""
    if not principal.is_admin:
        logger.warning("Principal %s (role=%s) denied admin-only access to %s",
                       principal.id, principal.role.value, entity)
        raise NotFoundOrOutOfScopeError(entity)


def resolve_target_school(principal: Principal, requested_school_id: Optional[int]) -> int:
    """
    Decides which school a new row is created in.

    A monitor always writes into its home school, whatever was requested.
    An administrator must name the school explicitly.
    """
    if not principal.is_admin:
        return principal.school_id
    if requested_school_id is None:
        raise ValidationError("School is required", field="school_id")
    return requested_school_id


def ensure_school_in_scope(principal: Principal, school_id: int, entity: str) -> None:
    """Rejects a write that targets a school other than the monitor's own."""
    if not principal.is_admin and principal.school_id != school_id:
        logger.warning("Principal %s (school=%s) denied write to %s in school %s",
                       principal.id, principal.school_id, entity, school_id)
        raise NotFoundOrOutOfScopeError(entity)


def found_in_scope(row, entity: str):
    """Returns `row` or raises the unified error when it is None."""
    if row is None:
        raise NotFoundOrOutOfScopeError(entity)
    return row
