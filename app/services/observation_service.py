# /app/services/observation_service.py

from typing import List, Optional

from app.core.app_logger import get_logger
from app.models import observation_model
from app.models.auth_model import Principal
from app.models.common_model import DeleteResult, MutationResult
from . import access_policy
from .database_service import DatabaseService

logger = get_logger("observation_service")

ENTITY = "Observation"


def list_observations(
    principal: Principal,
    db: DatabaseService,
    student_id: Optional[int] = None,
    polarity: Optional[observation_model.Polarity] = None,
    discipline: Optional[str] = None,
) -> List[observation_model.Observation]:
    """Observations visible through the parent student's school; newest first per student."""
    rows = db.get_all_observations(
        scope_school_id=access_policy.school_scope(principal),
        student_id=student_id,
        polarity=polarity.value if polarity else None,
        discipline=discipline,
    )
    return [observation_model.Observation.model_validate(row) for row in rows]


def get_observation(principal: Principal, observation_id: int, db: DatabaseService) -> observation_model.Observation:
    row = db.get_observation_by_id(observation_id, scope_school_id=access_policy.school_scope(principal))
    return observation_model.Observation.model_validate(access_policy.found_in_scope(row, ENTITY))


def create_observation(
    principal: Principal, observation_data: observation_model.ObservationCreate, db: DatabaseService
) -> MutationResult:
    access_policy.found_in_scope(
        db.get_student_by_id(observation_data.student_id, scope_school_id=access_policy.school_scope(principal)),
        "Student",
    )
    record = observation_data.model_dump()
    record["polarity"] = observation_data.polarity.value
    record["consequence"] = observation_data.consequence or None
    observation = db.add_observation(record)
    logger.info("Observation %s recorded for student %s by %s",
                observation.id, observation_data.student_id, principal.id)
    return MutationResult(
        id=observation.id,
        message="Observation recorded successfully",
        data=observation_model.Observation.model_validate(observation),
    )


def update_observation(
    principal: Principal,
    observation_id: int,
    observation_update: observation_model.ObservationUpdate,
    db: DatabaseService,
) -> MutationResult:
    observation = access_policy.found_in_scope(
        db.get_observation_by_id(observation_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    data = observation_update.model_dump()
    data["polarity"] = observation_update.polarity.value
    data["consequence"] = observation_update.consequence or None
    observation = db.update_observation(observation, data)
    logger.info("Observation %s updated by %s", observation.id, principal.id)
    return MutationResult(
        id=observation.id,
        message="Observation updated successfully",
        data=observation_model.Observation.model_validate(observation),
    )


def delete_observation(principal: Principal, observation_id: int, db: DatabaseService) -> DeleteResult:
    observation = access_policy.found_in_scope(
        db.get_observation_by_id(observation_id, scope_school_id=access_policy.school_scope(principal)),
        ENTITY,
    )
    db.delete_observation(observation)
    logger.info("Observation %s deleted by %s", observation_id, principal.id)
    return DeleteResult(message="Observation deleted successfully")
