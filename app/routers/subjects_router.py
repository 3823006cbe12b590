# /app/routers/subjects_router.py

from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ..core.deps import get_current_principal
from ..models import subject_model
from ..models.auth_model import Principal
from ..models.common_model import DeleteResult, MutationResult
from ..services import subject_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[subject_model.Subject], summary="List Subjects")
def list_subjects(
    school_id: Optional[int] = None,
    search: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return subject_service.list_subjects(principal, db, school_id=school_id, search=search)


@router.post("", response_model=MutationResult[subject_model.Subject], status_code=status.HTTP_201_CREATED, summary="Create a Subject")
def create_subject(
    subject_create: subject_model.SubjectCreate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return subject_service.create_subject(principal, subject_create, db)


@router.get("/{subject_id}", response_model=subject_model.Subject, summary="Get a Subject")
def get_subject(
    subject_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return subject_service.get_subject(principal, subject_id, db)


@router.put("/{subject_id}", response_model=MutationResult[subject_model.Subject], summary="Rename a Subject")
def update_subject(
    subject_id: int,
    subject_update: subject_model.SubjectUpdate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return subject_service.update_subject(principal, subject_id, subject_update, db)


@router.delete(
    "/{subject_id}",
    response_model=DeleteResult,
    summary="Delete a Subject",
    responses={409: {"description": "The subject is still referenced by observations"}},
)
def delete_subject(
    subject_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return subject_service.delete_subject(principal, subject_id, db)
