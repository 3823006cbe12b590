# /app/services/monitor_service.py

"""
Business logic for staff accounts. Every operation here is admin-only; a
monitor cannot read or change any account through this path, its own
included.

Account rules:
- the national ID is unique across all accounts (checked before every
  write, excluding the account being updated, and backed by a constraint);
- an `admin` account has no school; a `monitor` account must have one, and
  that school must exist;
- the password is hashed with `core.security.hash_password` and only
  re-hashed on update when a new one is supplied.
"""

from typing import Dict, List, Optional

from app.core import security
from app.core.app_logger import get_logger
from app.core.exceptions import ConflictError, NotFoundOrOutOfScopeError, ValidationError
from app.models import monitor_model
from app.models.auth_model import Principal, Role
from app.models.common_model import DeleteResult, MutationResult
from . import access_policy
from .database_service import DatabaseService

logger = get_logger("monitor_service")

ENTITY = "Monitor"


def _resolve_school(payload: monitor_model.MonitorBase, db: DatabaseService) -> Optional[int]:
    if payload.role == Role.ADMIN:
        return None
    if payload.school_id is None:
        raise ValidationError("School is required for monitors", field="school_id")
    if db.get_school_by_id(payload.school_id) is None:
        raise NotFoundOrOutOfScopeError("School")
    return payload.school_id


def _ensure_national_id_is_free(db: DatabaseService, national_id: str, exclude_id: Optional[int] = None) -> None:
    if db.find_monitor_by_national_id(national_id, exclude_id=exclude_id):
        raise ConflictError("A monitor with this national ID already exists")


def list_monitors(
    principal: Principal,
    db: DatabaseService,
    role: Optional[Role] = None,
    school_id: Optional[int] = None,
    search: Optional[str] = None,
) -> List[monitor_model.Monitor]:
    access_policy.require_admin(principal, ENTITY)
    rows = db.get_all_monitors(role=role.value if role else None, school_id=school_id, search=search)
    return [monitor_model.Monitor.model_validate(row) for row in rows]


def get_monitor(principal: Principal, monitor_id: int, db: DatabaseService) -> monitor_model.Monitor:
    access_policy.require_admin(principal, ENTITY)
    row = access_policy.found_in_scope(db.get_monitor_by_id(monitor_id), ENTITY)
    return monitor_model.Monitor.model_validate(row)


def create_monitor(
    principal: Principal, monitor_data: monitor_model.MonitorCreate, db: DatabaseService
) -> MutationResult:
    access_policy.require_admin(principal, ENTITY)
    school_id = _resolve_school(monitor_data, db)
    _ensure_national_id_is_free(db, monitor_data.national_id)

    record: Dict = {
        "name": monitor_data.name,
        "national_id": monitor_data.national_id,
        "role": monitor_data.role.value,
        "school_id": school_id,
        "password_hash": security.hash_password(monitor_data.password),
    }
    monitor = db.add_monitor(record)
    logger.info("Monitor %s (role=%s) created by %s", monitor.id, monitor.role, principal.id)
    return MutationResult(
        id=monitor.id,
        message="Monitor created successfully",
        data=monitor_model.Monitor.model_validate(monitor),
    )


def update_monitor(
    principal: Principal, monitor_id: int, monitor_update: monitor_model.MonitorUpdate, db: DatabaseService
) -> MutationResult:
    access_policy.require_admin(principal, ENTITY)
    monitor = access_policy.found_in_scope(db.get_monitor_by_id(monitor_id), ENTITY)
    school_id = _resolve_school(monitor_update, db)
    _ensure_national_id_is_free(db, monitor_update.national_id, exclude_id=monitor.id)

    data: Dict = {
        "name": monitor_update.name,
        "national_id": monitor_update.national_id,
        "role": monitor_update.role.value,
        "school_id": school_id,
    }
    if monitor_update.password:
        data["password_hash"] = security.hash_password(monitor_update.password)

    monitor = db.update_monitor(monitor, data)
    logger.info("Monitor %s updated by %s", monitor.id, principal.id)
    return MutationResult(
        id=monitor.id,
        message="Monitor updated successfully",
        data=monitor_model.Monitor.model_validate(monitor),
    )


def delete_monitor(principal: Principal, monitor_id: int, db: DatabaseService) -> DeleteResult:
    access_policy.require_admin(principal, ENTITY)
    monitor = access_policy.found_in_scope(db.get_monitor_by_id(monitor_id), ENTITY)
    db.delete_monitor(monitor)
    logger.info("Monitor %s deleted by %s", monitor_id, principal.id)
    return DeleteResult(message="Monitor deleted successfully")
