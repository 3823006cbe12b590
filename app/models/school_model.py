# /app/models/school_model.py

from pydantic import BaseModel, ConfigDict, Field


class SchoolBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="The school's display name.")


class SchoolCreate(SchoolBase):
    pass


class SchoolUpdate(SchoolBase):
    pass


class School(SchoolBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
