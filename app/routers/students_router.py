# /app/routers/students_router.py

from fastapi import APIRouter, Depends, status
from fastapi.responses import StreamingResponse
from typing import List, Optional

from ..core.deps import get_current_principal
from ..models import student_model
from ..models.auth_model import Principal
from ..models.common_model import DeleteResult, MutationResult
from ..services import student_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()

# --- STUDENT COLLECTION ENDPOINTS (/api/students) ---

@router.get("", response_model=List[student_model.Student], summary="List Students")
def list_students(
    school_id: Optional[int] = None,
    class_label: Optional[str] = None,
    year: Optional[int] = None,
    search: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    """
    Lists the students the caller may see, ordered by school then name.
    `school_id` only narrows the list for administrators.
    """
    return student_service.list_students(
        principal, db, school_id=school_id, class_label=class_label, year=year, search=search
    )

@router.post("", response_model=MutationResult[student_model.Student], status_code=status.HTTP_201_CREATED, summary="Enroll a Student")
def create_student(
    student_create: student_model.StudentCreate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return student_service.create_student(principal, student_create, db)

@router.get("/export", summary="Export the Student List as CSV", response_class=StreamingResponse)
def export_students_csv(
    school_id: Optional[int] = None,
    class_label: Optional[str] = None,
    year: Optional[int] = None,
    search: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    csv_string = student_service.export_students_as_csv(
        principal, db, school_id=school_id, class_label=class_label, year=year, search=search
    )
    return StreamingResponse(
        iter([csv_string]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=students.csv"},
    )

# --- INDIVIDUAL STUDENT ENDPOINTS (/api/students/{student_id}) ---

@router.get("/{student_id}", response_model=student_model.Student, summary="Get a Student")
def get_student(
    student_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return student_service.get_student(principal, student_id, db)

@router.put("/{student_id}", response_model=MutationResult[student_model.Student], summary="Update a Student")
def update_student(
    student_id: int,
    student_update: student_model.StudentUpdate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return student_service.update_student(principal, student_id, student_update, db)

@router.delete("/{student_id}", response_model=DeleteResult, summary="Delete a Student")
def delete_student(
    student_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return student_service.delete_student(principal, student_id, db)
