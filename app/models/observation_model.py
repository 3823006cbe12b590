# /app/models/observation_model.py

from datetime import date as date_type
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Polarity(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


class ObservationBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    date: date_type
    discipline: str = Field(..., min_length=1, max_length=255, description="Subject name the note refers to.")
    polarity: Polarity
    description: str = Field(..., min_length=1)
    consequence: Optional[str] = None


class ObservationCreate(ObservationBase):
    student_id: int


class ObservationUpdate(ObservationBase):
    pass


class Observation(ObservationBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    student_name: Optional[str] = None
    student_class_label: Optional[str] = None
    school_id: Optional[int] = None
