# /app/services/database_service.py

from typing import List, Dict, Optional, Generator
from sqlalchemy.orm import Session
from fastapi import Depends

# --- Core Database Setup ---
from app.db.database import get_db

# --- Repository Imports ---
from .database_helpers.school_repository_sql import SchoolRepositorySQL
from .database_helpers.student_repository_sql import StudentRepositorySQL
from .database_helpers.academic_repository_sql import (
    SubjectRepositorySQL,
    GradeRepositorySQL,
    ObservationRepositorySQL,
)


class DatabaseService:
    def __init__(self, db_session: Session):
        """
        Initializes the DatabaseService on top of one request-scoped session.
        All repositories share that session, so a service's checks and writes
        run in the same transaction.
        """
        if db_session is None:
            raise ValueError("A database session is required.")
        self.session = db_session
        self.school_repo = SchoolRepositorySQL(db_session)
        self.student_repo = StudentRepositorySQL(db_session)
        self.subject_repo = SubjectRepositorySQL(db_session)
        self.grade_repo = GradeRepositorySQL(db_session)
        self.observation_repo = ObservationRepositorySQL(db_session)

    # --- SCHOOL METHODS (DELEGATED) ---
    def get_all_schools(self, school_id: Optional[int] = None, search: Optional[str] = None) -> List: return self.school_repo.get_all_schools(school_id=school_id, search=search)
    def get_school_by_id(self, school_id: int, scope_school_id: Optional[int] = None): return self.school_repo.get_school_by_id(school_id, scope_school_id=scope_school_id)
    def add_school(self, record: Dict): return self.school_repo.add_school(record)
    def update_school(self, school, data: Dict): return self.school_repo.update_school(school, data)
    def delete_school(self, school) -> bool: return self.school_repo.delete_school(school)
    def count_schools(self, school_id: Optional[int] = None) -> int: return self.school_repo.count_schools(school_id=school_id)

    # --- MONITOR METHODS (DELEGATED) ---
    def get_all_monitors(self, role: Optional[str] = None, school_id: Optional[int] = None, search: Optional[str] = None) -> List: return self.school_repo.get_all_monitors(role=role, school_id=school_id, search=search)
    def get_monitor_by_id(self, monitor_id: int): return self.school_repo.get_monitor_by_id(monitor_id)
    def get_monitor_by_name(self, name: str): return self.school_repo.get_monitor_by_name(name)
    def find_monitor_by_national_id(self, national_id: str, exclude_id: Optional[int] = None): return self.school_repo.find_monitor_by_national_id(national_id, exclude_id=exclude_id)
    def add_monitor(self, record: Dict): return self.school_repo.add_monitor(record)
    def update_monitor(self, monitor, data: Dict): return self.school_repo.update_monitor(monitor, data)
    def delete_monitor(self, monitor) -> bool: return self.school_repo.delete_monitor(monitor)
    def count_monitors(self, school_id: Optional[int] = None) -> int: return self.school_repo.count_monitors(school_id=school_id)

    # --- STUDENT METHODS (DELEGATED) ---
    def get_all_students(self, scope_school_id: Optional[int] = None, **filters) -> List: return self.student_repo.get_all_students(scope_school_id=scope_school_id, **filters)
    def get_student_by_id(self, student_id: int, scope_school_id: Optional[int] = None): return self.student_repo.get_student_by_id(student_id, scope_school_id=scope_school_id)
    def find_student_by_number(self, number: str, school_id: int, exclude_id: Optional[int] = None): return self.student_repo.find_student_by_number(number, school_id, exclude_id=exclude_id)
    def add_student(self, record: Dict): return self.student_repo.add_student(record)
    def update_student(self, student, data: Dict): return self.student_repo.update_student(student, data)
    def delete_student(self, student) -> bool: return self.student_repo.delete_student(student)
    def count_students(self, scope_school_id: Optional[int] = None) -> int: return self.student_repo.count_students(scope_school_id=scope_school_id)

    # --- SUBJECT METHODS (DELEGATED) ---
    def get_all_subjects(self, scope_school_id: Optional[int] = None, **filters) -> List: return self.subject_repo.get_all_subjects(scope_school_id=scope_school_id, **filters)
    def get_subject_by_id(self, subject_id: int, scope_school_id: Optional[int] = None): return self.subject_repo.get_subject_by_id(subject_id, scope_school_id=scope_school_id)
    def add_subject(self, record: Dict): return self.subject_repo.add_subject(record)
    def update_subject(self, subject, data: Dict): return self.subject_repo.update_subject(subject, data)
    def delete_subject(self, subject) -> bool: return self.subject_repo.delete_subject(subject)
    def count_observations_for_discipline(self, discipline: str) -> int: return self.subject_repo.count_observations_for_discipline(discipline)

    # --- GRADE METHODS (DELEGATED) ---
    def get_all_grades(self, scope_school_id: Optional[int] = None, **filters) -> List: return self.grade_repo.get_all_grades(scope_school_id=scope_school_id, **filters)
    def get_grade_by_id(self, grade_id: int, scope_school_id: Optional[int] = None): return self.grade_repo.get_grade_by_id(grade_id, scope_school_id=scope_school_id)
    def add_grade(self, record: Dict): return self.grade_repo.add_grade(record)
    def update_grade(self, grade, data: Dict): return self.grade_repo.update_grade(grade, data)
    def delete_grade(self, grade) -> bool: return self.grade_repo.delete_grade(grade)

    # --- OBSERVATION METHODS (DELEGATED) ---
    def get_all_observations(self, scope_school_id: Optional[int] = None, **filters) -> List: return self.observation_repo.get_all_observations(scope_school_id=scope_school_id, **filters)
    def get_observation_by_id(self, observation_id: int, scope_school_id: Optional[int] = None): return self.observation_repo.get_observation_by_id(observation_id, scope_school_id=scope_school_id)
    def add_observation(self, record: Dict): return self.observation_repo.add_observation(record)
    def update_observation(self, observation, data: Dict): return self.observation_repo.update_observation(observation, data)
    def delete_observation(self, observation) -> bool: return self.observation_repo.delete_observation(observation)


def get_db_service(db: Session = Depends(get_db)) -> Generator[DatabaseService, None, None]:
    """FastAPI dependency that provides a DatabaseService bound to the request's session."""
    yield DatabaseService(db_session=db)
