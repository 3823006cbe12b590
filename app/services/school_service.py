# /app/services/school_service.py

"""
Business logic for schools.

Administrators have full CRUD. A monitor may only read, and only its own
school.
"""

from typing import List, Optional

from app.core.app_logger import get_logger
from app.models import school_model
from app.models.auth_model import Principal
from app.models.common_model import DeleteResult, MutationResult
from . import access_policy
from .database_service import DatabaseService

logger = get_logger("school_service")

ENTITY = "School"


def list_schools(principal: Principal, db: DatabaseService, search: Optional[str] = None) -> List[school_model.School]:
    rows = db.get_all_schools(school_id=access_policy.school_scope(principal), search=search)
    return [school_model.School.model_validate(row) for row in rows]


def get_school(principal: Principal, school_id: int, db: DatabaseService) -> school_model.School:
    row = db.get_school_by_id(school_id, scope_school_id=access_policy.school_scope(principal))
    return school_model.School.model_validate(access_policy.found_in_scope(row, ENTITY))


def create_school(principal: Principal, school_data: school_model.SchoolCreate, db: DatabaseService) -> MutationResult:
    access_policy.require_admin(principal, ENTITY)
    school = db.add_school(school_data.model_dump())
    logger.info("School %s created by %s", school.id, principal.id)
    return MutationResult(
        id=school.id,
        message="School created successfully",
        data=school_model.School.model_validate(school),
    )


def update_school(
    principal: Principal, school_id: int, school_update: school_model.SchoolUpdate, db: DatabaseService
) -> MutationResult:
    access_policy.require_admin(principal, ENTITY)
    school = access_policy.found_in_scope(db.get_school_by_id(school_id), ENTITY)
    school = db.update_school(school, school_update.model_dump())
    logger.info("School %s renamed by %s", school.id, principal.id)
    return MutationResult(
        id=school.id,
        message="School updated successfully",
        data=school_model.School.model_validate(school),
    )


def delete_school(principal: Principal, school_id: int, db: DatabaseService) -> DeleteResult:
    # No cascade and no dependency check: an enforcing database decides.
    access_policy.require_admin(principal, ENTITY)
    school = access_policy.found_in_scope(db.get_school_by_id(school_id), ENTITY)
    db.delete_school(school)
    logger.info("School %s deleted by %s", school_id, principal.id)
    return DeleteResult(message="School deleted successfully")
