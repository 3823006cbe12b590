# /app/models/grade_model.py

from datetime import date as date_type
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class GradeCreate(BaseModel):
    """
    The model used for recording a grade. There is no school
    field: the grade's school is always taken from the student.
    """
    student_id: int
    subject_id: int
    value: float = Field(..., ge=0)
    date: date_type


class GradeUpdate(BaseModel):
    value: float = Field(..., ge=0)
    date: Optional[date_type] = None


class Grade(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    student_name: Optional[str] = None
    subject_id: int
    subject_name: Optional[str] = None
    value: float
    date: date_type
    school_id: int
    school_name: Optional[str] = None
