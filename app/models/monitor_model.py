# /app/models/monitor_model.py

"""
Pydantic models for staff (monitor) accounts.

The stored password hash never leaves the service layer: responses are built
from `Monitor`, which has no credential field.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .auth_model import Role


class MonitorBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="Display name, also the login username.")
    national_id: str = Field(..., min_length=1, max_length=32, description="National ID, unique across all monitors.")
    role: Role = Field(default=Role.MONITOR)
    school_id: Optional[int] = Field(default=None, description="Home school. Required unless role is 'admin'.")


class MonitorCreate(MonitorBase):
    password: str = Field(..., min_length=1)


class MonitorUpdate(MonitorBase):
    # Leave empty to keep the current password.
    password: Optional[str] = None


class Monitor(MonitorBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    school_name: Optional[str] = None
