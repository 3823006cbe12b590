# /app/models/student_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field, ConfigDict
from typing import Optional

# --- Model Definitions ---

class StudentBase(BaseModel):
    """
    The base model for a Student. Contains the fields a client may set on both
    create and update.
    """
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="The full name of the student.")
    number: str = Field(..., min_length=1, max_length=32, description="The enrollment number, unique within the school.")
    class_label: str = Field(..., min_length=1, max_length=32, description="The class/section label, e.g. '3A'.")
    year: int = Field(..., ge=1900, le=3000, description="The enrollment (school) year.")


class StudentCreate(StudentBase):
    """
    The model used for creating a new student.

    `school_id` is only honoured for administrators. For a monitor the
    student is always enrolled in the monitor's own school.
    """
    school_id: Optional[int] = Field(default=None, description="Target school (administrators only).")


class StudentUpdate(StudentBase):
    """
    The model for updating a student. The school is not part of it: a
    student's school is fixed when it is created.
    """
    pass


class Student(StudentBase):
    """
    The full representation of a Student resource, as stored in the database
    and returned by the API.
    """
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="The server-generated identifier for the student.")
    school_id: int = Field(..., description="The ID of the school this student belongs to.")
    school_name: Optional[str] = None
