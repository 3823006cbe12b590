# /app/routers/grades_router.py

from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ..core.deps import get_current_principal
from ..models import grade_model
from ..models.auth_model import Principal
from ..models.common_model import DeleteResult, MutationResult
from ..services import grade_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[grade_model.Grade], summary="List Grades")
def list_grades(
    student_id: Optional[int] = None,
    subject_id: Optional[int] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return grade_service.list_grades(principal, db, student_id=student_id, subject_id=subject_id)


@router.post("", response_model=MutationResult[grade_model.Grade], status_code=status.HTTP_201_CREATED, summary="Record a Grade")
def create_grade(
    grade_create: grade_model.GradeCreate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return grade_service.create_grade(principal, grade_create, db)


@router.get("/{grade_id}", response_model=grade_model.Grade, summary="Get a Grade")
def get_grade(
    grade_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return grade_service.get_grade(principal, grade_id, db)


@router.put("/{grade_id}", response_model=MutationResult[grade_model.Grade], summary="Update a Grade")
def update_grade(
    grade_id: int,
    grade_update: grade_model.GradeUpdate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return grade_service.update_grade(principal, grade_id, grade_update, db)


@router.delete("/{grade_id}", response_model=DeleteResult, summary="Delete a Grade")
def delete_grade(
    grade_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return grade_service.delete_grade(principal, grade_id, db)
