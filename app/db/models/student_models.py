# /app/db/models/student_models.py

from sqlalchemy import Column, ForeignKey, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship

from ..base_class import Base


class Student(Base):
    """
    SQLAlchemy model representing a single enrolled student.

    The enrollment number is unique per school, not globally: the same number
    may exist once in every school.
    """
    __tablename__ = "students"
    __table_args__ = (
        UniqueConstraint("number", "school_id", name="uq_students_number_school"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    number = Column(String(32), nullable=False)
    class_label = Column(String(32), nullable=False)
    year = Column(Integer, nullable=False)

    # Set once at creation and never reassigned afterwards.
    school_id = Column(Integer, ForeignKey("schools.id"), nullable=False, index=True)

    school = relationship("School")

    # A student's grades and observations go with it when it is deleted.
    grades = relationship("Grade", back_populates="student", cascade="all, delete-orphan")
    observations = relationship("Observation", back_populates="student", cascade="all, delete-orphan")

    @property
    def school_name(self):
        return self.school.name if self.school else None
