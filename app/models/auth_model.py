# /app/models/auth_model.py

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    ADMIN = "admin"
    MONITOR = "monitor"


class Principal(BaseModel):
    """
    The authenticated caller, as decoded from a verified session token.

    `school_id` is the home-school affiliation. It is None for administrators,
    who are not bound to any school.
    """
    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
    role: Role
    school_id: Optional[int] = None

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN


class LoginRequest(BaseModel):
    username: str = Field(..., min_length=1, description="The monitor's display name.")
    password: str = Field(..., description="The plain-text password.")


class LoginResponse(BaseModel):
    user: Principal


class MessageResponse(BaseModel):
    message: str
