# /app/db/models/academic_models.py

"""
SQLAlchemy ORM models for the academic records attached to a student:
`Subject`, `Grade` and `Observation`.
"""

from sqlalchemy import Column, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from ..base_class import Base


class Subject(Base):
    """A subject taught at exactly one school."""
    __tablename__ = "subjects"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False, index=True)
    school_id = Column(Integer, ForeignKey("schools.id"), nullable=False, index=True)

    school = relationship("School")

    @property
    def school_name(self):
        return self.school.name if self.school else None


class Grade(Base):
    """
    A numeric grade for one student in one subject.

    `school_id` duplicates the parent student's school so that visibility can
    be filtered without a join. It is copied from the student when the grade
    is created and never accepted from the client.
    """
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    subject_id = Column(Integer, ForeignKey("subjects.id"), nullable=False, index=True)
    value = Column(Float, nullable=False)
    date = Column(Date, nullable=False)
    school_id = Column(Integer, ForeignKey("schools.id"), nullable=False, index=True)

    student = relationship("Student", back_populates="grades")
    subject = relationship("Subject")
    school = relationship("School")

    @property
    def student_name(self):
        return self.student.name if self.student else None

    @property
    def subject_name(self):
        return self.subject.name if self.subject else None

    @property
    def school_name(self):
        return self.school.name if self.school else None


class Observation(Base):
    """
    A behavioral note about a student.

    `discipline` is free text matched to `Subject.name` by value; it is not a
    foreign key. Visibility is derived from the parent student's school.
    """
    __tablename__ = "observations"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    date = Column(Date, nullable=False)
    discipline = Column(String(255), nullable=False, index=True)
    polarity = Column(String(16), nullable=False)  # 'positive' or 'negative'
    description = Column(Text, nullable=False)
    consequence = Column(Text, nullable=True)

    student = relationship("Student", back_populates="observations")

    @property
    def student_name(self):
        return self.student.name if self.student else None

    @property
    def student_class_label(self):
        return self.student.class_label if self.student else None

    @property
    def school_id(self):
        return self.student.school_id if self.student else None
