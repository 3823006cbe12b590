# /app/db/models/school_models.py

"""
SQLAlchemy ORM models for the `School` and `Monitor` entities.

A School is the tenant boundary of the application. A Monitor is a staff
account; non-admin monitors are bound to exactly one school, which decides
every row they may see or touch.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base


class School(Base):
    """
    SQLAlchemy model representing a school.

    No collection relationships are declared here: deleting a
    school issues a plain DELETE, and whether dependents block it is left to
    the database's foreign keys.
    """
    __tablename__ = "schools"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)


class Monitor(Base):
    """
    SQLAlchemy model representing a staff account.

    `school_id` is null for administrators and required for monitors; the
    service layer enforces that rule before every write.
    """
    __tablename__ = "monitors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    national_id = Column(String(32), nullable=False, unique=True, index=True)
    role = Column(String(16), nullable=False, default="monitor")
    school_id = Column(Integer, ForeignKey("schools.id"), nullable=True, index=True)
    password_hash = Column(String(255), nullable=False)

    school = relationship("School")

    @property
    def school_name(self):
        return self.school.name if self.school else None
