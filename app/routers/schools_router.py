# /app/routers/schools_router.py

from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ..core.deps import get_current_principal
from ..models import school_model
from ..models.auth_model import Principal
from ..models.common_model import DeleteResult, MutationResult
from ..services import school_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[school_model.School], summary="List Schools")
def list_schools(
    search: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return school_service.list_schools(principal, db, search=search)


@router.post("", response_model=MutationResult[school_model.School], status_code=status.HTTP_201_CREATED, summary="Create a School")
def create_school(
    school_create: school_model.SchoolCreate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return school_service.create_school(principal, school_create, db)


@router.get("/{school_id}", response_model=school_model.School, summary="Get a School")
def get_school(
    school_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return school_service.get_school(principal, school_id, db)


@router.put("/{school_id}", response_model=MutationResult[school_model.School], summary="Rename a School")
def update_school(
    school_id: int,
    school_update: school_model.SchoolUpdate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return school_service.update_school(principal, school_id, school_update, db)


@router.delete("/{school_id}", response_model=DeleteResult, summary="Delete a School")
def delete_school(
    school_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return school_service.delete_school(principal, school_id, db)
