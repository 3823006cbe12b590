# /app/models/dashboard_model.py

# --- Core Imports ---
from pydantic import BaseModel, Field

# --- Model Definition ---

class DashboardStats(BaseModel):
    """
    Defines the data contract for the dashboard statistics endpoint. Counts
    are scoped to the caller: a monitor only sees its own school.
    """

    total_students: int = Field(
        ...,
        description="Students visible to the caller.",
        examples=[112]
    )

    total_schools: int = Field(
        ...,
        description="Number of schools; only counted for administrators (0 for a monitor).",
        examples=[4]
    )

    total_monitors: int = Field(
        ...,
        description="Staff accounts in the caller's scope.",
        examples=[9]
    )
