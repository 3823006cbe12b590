# /app/services/database_helpers/student_repository_sql.py

"""
Raw SQLAlchemy queries for the Student table.

Every read accepts a `scope_school_id`. When it is set, rows outside that
school are simply invisible, which is how a monitor's view of the roster is
enforced at the database level.
"""

from typing import Dict, List, Optional

from sqlalchemy import String, cast, or_
from sqlalchemy.orm import contains_eager

from app.db.models.school_models import School
from app.db.models.student_models import Student
from .base_repository_sql import BaseRepositorySQL, scope_to_school


class StudentRepositorySQL(BaseRepositorySQL):

    def _scoped(self, scope_school_id: Optional[int]):
        query = (
            self.db.query(Student)
            .join(School, Student.school_id == School.id)
            .options(contains_eager(Student.school))
        )
        return scope_to_school(query, Student.school_id, scope_school_id)

    def get_all_students(
        self,
        scope_school_id: Optional[int] = None,
        school_id: Optional[int] = None,
        class_label: Optional[str] = None,
        year: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[Student]:
        """
        Lists students ordered by school name, then student name.

        `search` is a case-insensitive substring match over the name, number,
        class label, year and school name.
        """
        query = self._scoped(scope_school_id)
        if school_id is not None:
            query = query.filter(Student.school_id == school_id)
        if class_label:
            query = query.filter(Student.class_label == class_label)
        if year is not None:
            query = query.filter(Student.year == year)
        if search:
            query = query.filter(
                or_(
                    Student.name.icontains(search, autoescape=True),
                    Student.number.icontains(search, autoescape=True),
                    Student.class_label.icontains(search, autoescape=True),
                    cast(Student.year, String).icontains(search, autoescape=True),
                    School.name.icontains(search, autoescape=True),
                )
            )
        return query.order_by(School.name, Student.name, Student.id).all()

    def get_student_by_id(self, student_id: int, scope_school_id: Optional[int] = None) -> Optional[Student]:
        return self._scoped(scope_school_id).filter(Student.id == student_id).first()

    def find_student_by_number(self, number: str, school_id: int, exclude_id: Optional[int] = None) -> Optional[Student]:
        """Looks up the student holding `number` in `school_id`, skipping `exclude_id`."""
        query = self.db.query(Student).filter(Student.number == number, Student.school_id == school_id)
        if exclude_id is not None:
            query = query.filter(Student.id != exclude_id)
        return query.first()

    def add_student(self, record: Dict) -> Student:
        return self._save(Student(**record), "A student with this number already exists in this school")

    def update_student(self, student: Student, data: Dict) -> Student:
        for key, value in data.items():
            setattr(student, key, value)
        return self._save(student, "Another student with this number already exists in this school")

    def delete_student(self, student: Student) -> bool:
        # Grades and observations are removed with the student (ORM cascade).
        return self._remove(student, "Could not delete the student")

    def count_students(self, scope_school_id: Optional[int] = None) -> int:
        return scope_to_school(self.db.query(Student), Student.school_id, scope_school_id).count()
