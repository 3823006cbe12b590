# /app/services/student_service.py

"""
This service module is the business logic layer for students.

Every function takes the authenticated `Principal` and derives the row scope
from it through `access_policy`:

- administrators see and manage students of every school and must choose
  the school of a new student;
- monitors see and manage only the students of their home school, and every
  student they create is enrolled there regardless of the request.

The enrollment number is unique within a school. That rule is checked before
every insert and update (excluding the row being updated, so re-saving an
unchanged record never conflicts with itself) and is also backed by a
database constraint.
"""

from typing import List, Optional

import pandas as pd

from app.core.app_logger import get_logger
from app.core.exceptions import ConflictError, NotFoundOrOutOfScopeError
from app.models import student_model
from app.models.auth_model import Principal
from app.models.common_model import DeleteResult, MutationResult
from . import access_policy
from .database_service import DatabaseService

logger = get_logger("student_service")

ENTITY = "Student"
EXPORT_COLUMNS = ["Student Name", "Number", "Class", "Year", "School"]


def _ensure_number_is_free(db: DatabaseService, number: str, school_id: int, exclude_id: Optional[int] = None) -> None:
    if db.find_student_by_number(number, school_id, exclude_id=exclude_id):
        raise ConflictError("A student with this number already exists in this school")


# --- Read Operations ---

def list_students(
    principal: Principal,
    db: DatabaseService,
    school_id: Optional[int] = None,
    class_label: Optional[str] = None,
    year: Optional[int] = None,
    search: Optional[str] = None,
) -> List[student_model.Student]:
    """Lists the students visible to the principal, ordered by school then name."""
    rows = db.get_all_students(
        scope_school_id=access_policy.school_scope(principal),
        school_id=access_policy.filter_school_for(principal, school_id),
        class_label=class_label,
        year=year,
        search=search,
    )
    return [student_model.Student.model_validate(row) for row in rows]


def get_student(principal: Principal, student_id: int, db: DatabaseService) -> student_model.Student:
    row = db.get_student_by_id(student_id, scope_school_id=access_policy.school_scope(principal))
    return student_model.Student.model_validate(access_policy.found_in_scope(row, ENTITY))


# --- Write Operations ---

def create_student(
    principal: Principal, student_data: student_model.StudentCreate, db: DatabaseService
) -> MutationResult:
    """
    Enrolls a new student.

    The target school comes from `access_policy.resolve_target_school`: the
    monitor's own school, or the explicit school an administrator chose
    (which must exist).
    """
    school_id = access_policy.resolve_target_school(principal, student_data.school_id)
    if db.get_school_by_id(school_id) is None:
        raise NotFoundOrOutOfScopeError("School")

    _ensure_number_is_free(db, student_data.number, school_id)

    record = student_data.model_dump(exclude={"school_id"})
    record["school_id"] = school_id
    student = db.add_student(record)
    logger.info("Student %s created in school %s by %s", student.id, school_id, principal.id)
    return MutationResult(
        id=student.id,
        message="Student created successfully",
        data=student_model.Student.model_validate(student),
    )


def update_student(
    principal: Principal, student_id: int, student_update: student_model.StudentUpdate, db: DatabaseService
) -> MutationResult:
    """
    Updates a student's name, number, class and year. The school is never
    changed here.
    """
    student = access_policy.found_in_scope(
        db.get_student_by_id(student_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    _ensure_number_is_free(db, student_update.number, student.school_id, exclude_id=student.id)

    student = db.update_student(student, student_update.model_dump())
    logger.info("Student %s updated by %s", student.id, principal.id)
    return MutationResult(
        id=student.id,
        message="Student updated successfully",
        data=student_model.Student.model_validate(student),
    )


def delete_student(principal: Principal, student_id: int, db: DatabaseService) -> DeleteResult:
    student = access_policy.found_in_scope(
        db.get_student_by_id(student_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    db.delete_student(student)
    logger.info("Student %s deleted by %s", student_id, principal.id)
    return DeleteResult(message="Student deleted successfully")


# --- Export ---

def export_students_as_csv(principal: Principal, db: DatabaseService, **filters) -> str:
    """Renders the principal's (filtered) student list as CSV."""
    students = list_students(principal, db, **filters)
    export_data = [
        {
            "Student Name": s.name,
            "Number": s.number,
            "Class": s.class_label,
            "Year": s.year,
            "School": s.school_name,
        } for s in students
    ]
    df = pd.DataFrame(export_data) if export_data else pd.DataFrame(columns=EXPORT_COLUMNS)
    return df.to_csv(index=False)
