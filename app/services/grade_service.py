# /app/services/grade_service.py

"""
Business logic for grades.

A grade is visible to whoever can see its student. Its `school_id` is a
denormalized copy of the student's school, resolved from the student row at
creation time; the client never supplies it. A monitor may therefore only
grade students that are already enrolled in its home school.
"""

from typing import List, Optional

from app.core.app_logger import get_logger
from app.core.exceptions import NotFoundOrOutOfScopeError
from app.models import grade_model
from app.models.auth_model import Principal
from app.models.common_model import DeleteResult, MutationResult
from . import access_policy
from .database_service import DatabaseService

logger = get_logger("grade_service")

ENTITY = "Grade"


def list_grades(
    principal: Principal,
    db: DatabaseService,
    student_id: Optional[int] = None,
    subject_id: Optional[int] = None,
) -> List[grade_model.Grade]:
    rows = db.get_all_grades(
        scope_school_id=access_policy.school_scope(principal),
        student_id=student_id,
        subject_id=subject_id,
    )
    return [grade_model.Grade.model_validate(row) for row in rows]


def get_grade(principal: Principal, grade_id: int, db: DatabaseService) -> grade_model.Grade:
    row = db.get_grade_by_id(grade_id, scope_school_id=access_policy.school_scope(principal))
    return grade_model.Grade.model_validate(access_policy.found_in_scope(row, ENTITY))


def create_grade(principal: Principal, grade_data: grade_model.GradeCreate, db: DatabaseService) -> MutationResult:
    scope = access_policy.school_scope(principal)

    # 1. The student must exist within the caller's scope.
    student = access_policy.found_in_scope(db.get_student_by_id(grade_data.student_id, scope_school_id=scope), "Student")

    # 2. The subject must be taught at the student's school.
    subject = db.get_subject_by_id(grade_data.subject_id, scope_school_id=student.school_id)
    if subject is None:
        raise NotFoundOrOutOfScopeError("Subject")

    record = grade_data.model_dump()
    record["school_id"] = student.school_id
    grade = db.add_grade(record)
    logger.info("Grade %s recorded for student %s by %s", grade.id, student.id, principal.id)
    return MutationResult(
        id=grade.id,
        message="Grade recorded successfully",
        data=grade_model.Grade.model_validate(grade),
    )


def update_grade(
    principal: Principal, grade_id: int, grade_update: grade_model.GradeUpdate, db: DatabaseService
) -> MutationResult:
    """Changes a grade's value (and optionally its date). Student and school stay fixed."""
    grade = access_policy.found_in_scope(
        db.get_grade_by_id(grade_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    data = grade_update.model_dump(exclude_none=True)
    grade = db.update_grade(grade, data)
    logger.info("Grade %s updated by %s", grade.id, principal.id)
    return MutationResult(
        id=grade.id,
        message="Grade updated successfully",
        data=grade_model.Grade.model_validate(grade),
    )


def delete_grade(principal: Principal, grade_id: int, db: DatabaseService) -> DeleteResult:
    grade = access_policy.found_in_scope(
        db.get_grade_by_id(grade_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    db.delete_grade(grade)
    logger.info("Grade %s deleted by %s", grade_id, principal.id)
    return DeleteResult(message="Grade deleted successfully")
