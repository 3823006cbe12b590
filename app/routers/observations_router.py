# /app/routers/observations_router.py

from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ..core.deps import get_current_principal
from ..models import observation_model
from ..models.auth_model import Principal
from ..models.common_model import DeleteResult, MutationResult
from ..services import observation_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[observation_model.Observation], summary="List Observations")
def list_observations(
    student_id: Optional[int] = None,
    polarity: Optional[observation_model.Polarity] = None,
    discipline: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return observation_service.list_observations(
        principal, db, student_id=student_id, polarity=polarity, discipline=discipline
    )


@router.post("", response_model=MutationResult[observation_model.Observation], status_code=status.HTTP_201_CREATED, summary="Record an Observation")
def create_observation(
    observation_create: observation_model.ObservationCreate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return observation_service.create_observation(principal, observation_create, db)


@router.get("/{observation_id}", response_model=observation_model.Observation, summary="Get an Observation")
def get_observation(
    observation_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return observation_service.get_observation(principal, observation_id, db)


@router.put("/{observation_id}", response_model=MutationResult[observation_model.Observation], summary="Update an Observation")
def update_observation(
    observation_id: int,
    observation_update: observation_model.ObservationUpdate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return observation_service.update_observation(principal, observation_id, observation_update, db)


@router.delete("/{observation_id}", response_model=DeleteResult, summary="Delete an Observation")
def delete_observation(
    observation_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return observation_service.delete_observation(principal, observation_id, db)
