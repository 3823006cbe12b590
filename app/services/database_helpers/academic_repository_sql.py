# /app/services/database_helpers/academic_repository_sql.py

"""
Raw SQLAlchemy queries for the Subject, Grade and Observation tables.

Scoping differs per table:
- subjects carry their own `school_id`;
- grades carry a denormalized copy of their student's `school_id`;
- observations have no school column and are scoped through a join to the
  parent student.
"""

from typing import Dict, List, Optional

from sqlalchemy.orm import aliased, contains_eager, joinedload

from app.db.models.academic_models import Grade, Observation, Subject
from app.db.models.school_models import School
from app.db.models.student_models import Student
from .base_repository_sql import BaseRepositorySQL, scope_to_school


class SubjectRepositorySQL(BaseRepositorySQL):

    def _scoped(self, scope_school_id: Optional[int]):
        query = (
            self.db.query(Subject)
            .join(School, Subject.school_id == School.id)
            .options(contains_eager(Subject.school))
        )
        return scope_to_school(query, Subject.school_id, scope_school_id)

    def get_all_subjects(
        self,
        scope_school_id: Optional[int] = None,
        school_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[Subject]:
        query = self._scoped(scope_school_id)
        if school_id is not None:
            query = query.filter(Subject.school_id == school_id)
        if search:
            query = query.filter(Subject.name.icontains(search, autoescape=True))
        return query.order_by(School.name, Subject.name, Subject.id).all()

    def get_subject_by_id(self, subject_id: int, scope_school_id: Optional[int] = None) -> Optional[Subject]:
        return self._scoped(scope_school_id).filter(Subject.id == subject_id).first()

    def add_subject(self, record: Dict) -> Subject:
        return self._save(Subject(**record), "Could not create the subject")

    def update_subject(self, subject: Subject, data: Dict) -> Subject:
        for key, value in data.items():
            setattr(subject, key, value)
        return self._save(subject, "Could not update the subject")

    def delete_subject(self, subject: Subject) -> bool:
        return self._remove(subject, "The subject still has grades recorded against it")

    def count_observations_for_discipline(self, discipline: str) -> int:
        """Counts observations whose discipline label equals `discipline`, across all schools."""
        return self.db.query(Observation).filter(Observation.discipline == discipline).count()


class GradeRepositorySQL(BaseRepositorySQL):

    def get_all_grades(
        self,
        scope_school_id: Optional[int] = None,
        student_id: Optional[int] = None,
        subject_id: Optional[int] = None,
    ) -> List[Grade]:
        grade_student = aliased(Student)
        grade_subject = aliased(Subject)
        query = (
            self.db.query(Grade)
            .join(School, Grade.school_id == School.id)
            .join(grade_student, Grade.student_id == grade_student.id)
            .join(grade_subject, Grade.subject_id == grade_subject.id)
            .options(
                contains_eager(Grade.school),
                contains_eager(Grade.student, alias=grade_student),
                contains_eager(Grade.subject, alias=grade_subject),
            )
        )
        query = scope_to_school(query, Grade.school_id, scope_school_id)
        if student_id is not None:
            query = query.filter(Grade.student_id == student_id)
        if subject_id is not None:
            query = query.filter(Grade.subject_id == subject_id)
        return query.order_by(
            School.name, grade_student.name, grade_subject.name, Grade.date.desc(), Grade.id
        ).all()

    def get_grade_by_id(self, grade_id: int, scope_school_id: Optional[int] = None) -> Optional[Grade]:
        query = self.db.query(Grade).options(
            joinedload(Grade.student), joinedload(Grade.subject), joinedload(Grade.school)
        )
        query = scope_to_school(query, Grade.school_id, scope_school_id)
        return query.filter(Grade.id == grade_id).first()

    def add_grade(self, record: Dict) -> Grade:
        return self._save(Grade(**record), "Could not record the grade")

    def update_grade(self, grade: Grade, data: Dict) -> Grade:
        for key, value in data.items():
            setattr(grade, key, value)
        return self._save(grade, "Could not update the grade")

    def delete_grade(self, grade: Grade) -> bool:
        return self._remove(grade, "Could not delete the grade")


class ObservationRepositorySQL(BaseRepositorySQL):

    def _scoped(self, scope_school_id: Optional[int]):
        query = (
            self.db.query(Observation)
            .join(Student, Observation.student_id == Student.id)
            .join(School, Student.school_id == School.id)
            .options(contains_eager(Observation.student))
        )
        return scope_to_school(query, Student.school_id, scope_school_id)

    def get_all_observations(
        self,
        scope_school_id: Optional[int] = None,
        student_id: Optional[int] = None,
        polarity: Optional[str] = None,
        discipline: Optional[str] = None,
    ) -> List[Observation]:
        query = self._scoped(scope_school_id)
        if student_id is not None:
            query = query.filter(Observation.student_id == student_id)
        if polarity:
            query = query.filter(Observation.polarity == polarity)
        if discipline:
            query = query.filter(Observation.discipline == discipline)
        # Newest first within each student.
        return query.order_by(School.name, Student.name, Observation.date.desc(), Observation.id.desc()).all()

    def get_observation_by_id(self, observation_id: int, scope_school_id: Optional[int] = None) -> Optional[Observation]:
        return self._scoped(scope_school_id).filter(Observation.id == observation_id).first()

    def add_observation(self, record: Dict) -> Observation:
        return self._save(Observation(**record), "Could not record the observation")

    def update_observation(self, observation: Observation, data: Dict) -> Observation:
        for key, value in data.items():
            setattr(observation, key, value)
        return self._save(observation, "Could not update the observation")

    def delete_observation(self, observation: Observation) -> bool:
        return self._remove(observation, "Could not delete the observation")
