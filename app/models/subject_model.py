# /app/models/subject_model.py

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SubjectBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)


class SubjectCreate(SubjectBase):
    # Required for administrators; monitors default to their own school.
    school_id: Optional[int] = None


class SubjectUpdate(SubjectBase):
    pass


class Subject(SubjectBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    school_id: int
    school_name: Optional[str] = None
