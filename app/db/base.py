# /app/db/base.py

# This file acts as a central registry for all our SQLAlchemy models.
# Importing them here ensures Base.metadata knows every table, both for
# `create_all` at startup and for Alembic's auto-generation scan.

from .base_class import Base

from .models.school_models import School, Monitor
from .models.student_models import Student
from .models.academic_models import Subject, Grade, Observation
