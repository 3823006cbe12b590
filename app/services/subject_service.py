# /app/services/subject_service.py

from typing import List, Optional

from app.core.app_logger import get_logger
from app.core.exceptions import ConflictError, NotFoundOrOutOfScopeError
from app.models import subject_model
from app.models.auth_model import Principal
from app.models.common_model import DeleteResult, MutationResult
from . import access_policy
from .database_service import DatabaseService

logger = get_logger("subject_service")

ENTITY = "Subject"


def list_subjects(
    principal: Principal,
    db: DatabaseService,
    school_id: Optional[int] = None,
    search: Optional[str] = None,
) -> List[subject_model.Subject]:
    rows = db.get_all_subjects(
        scope_school_id=access_policy.school_scope(principal),
        school_id=access_policy.filter_school_for(principal, school_id),
        search=search,
    )
    return [subject_model.Subject.model_validate(row) for row in rows]


def get_subject(principal: Principal, subject_id: int, db: DatabaseService) -> subject_model.Subject:
    row = db.get_subject_by_id(subject_id, scope_school_id=access_policy.school_scope(principal))
    return subject_model.Subject.model_validate(access_policy.found_in_scope(row, ENTITY))


def create_subject(
    principal: Principal, subject_data: subject_model.SubjectCreate, db: DatabaseService
) -> MutationResult:
    """
    Creates a subject in a school. A monitor may only target its own school
    (omitting the school means its own); the school must exist.
    """
    if principal.is_admin:
        school_id = access_policy.resolve_target_school(principal, subject_data.school_id)
    else:
        school_id = subject_data.school_id if subject_data.school_id is not None else principal.school_id
        access_policy.ensure_school_in_scope(principal, school_id, ENTITY)

    if db.get_school_by_id(school_id) is None:
        raise NotFoundOrOutOfScopeError("School")

    subject = db.add_subject({"name": subject_data.name, "school_id": school_id})
    logger.info("Subject %s created in school %s by %s", subject.id, school_id, principal.id)
    return MutationResult(
        id=subject.id,
        message="Subject created successfully",
        data=subject_model.Subject.model_validate(subject),
    )


def update_subject(
    principal: Principal, subject_id: int, subject_update: subject_model.SubjectUpdate, db: DatabaseService
) -> MutationResult:
    """Renames a subject. Its school is fixed at creation."""
    subject = access_policy.found_in_scope(
        db.get_subject_by_id(subject_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    subject = db.update_subject(subject, {"name": subject_update.name})
    logger.info("Subject %s updated by %s", subject.id, principal.id)
    return MutationResult(
        id=subject.id,
        message="Subject updated successfully",
        data=subject_model.Subject.model_validate(subject),
    )


def delete_subject(principal: Principal, subject_id: int, db: DatabaseService) -> DeleteResult:
    """
    Deletes a subject unless an observation still refers to it. Observations
    reference subjects by name, so the check is a textual match.
    """
    subject = access_policy.found_in_scope(
        db.get_subject_by_id(subject_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    if db.count_observations_for_discipline(subject.name) > 0:
        raise ConflictError("This subject cannot be deleted because it is used in observations")

    db.delete_subject(subject)
    logger.info("Subject %s deleted by %s", subject_id, principal.id)
    return DeleteResult(message="Subject deleted successfully")
