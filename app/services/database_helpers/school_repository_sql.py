# /app/services/database_helpers/school_repository_sql.py

"""
Raw SQLAlchemy queries for the School and Monitor tables.

Reads take an optional `school_id` scope; `None` means every school. The
caller (the service layer) decides the scope from the principal.
"""

from typing import Dict, List, Optional

from sqlalchemy import or_
from sqlalchemy.orm import joinedload

from app.db.models.school_models import Monitor, School
from .base_repository_sql import BaseRepositorySQL, scope_to_school


class SchoolRepositorySQL(BaseRepositorySQL):

    # --- School Methods ---

    def get_all_schools(self, school_id: Optional[int] = None, search: Optional[str] = None) -> List[School]:
        query = scope_to_school(self.db.query(School), School.id, school_id)
        if search:
            query = query.filter(School.name.icontains(search, autoescape=True))
        return query.order_by(School.name, School.id).all()

    def get_school_by_id(self, school_id: int, scope_school_id: Optional[int] = None) -> Optional[School]:
        query = scope_to_school(self.db.query(School), School.id, scope_school_id)
        return query.filter(School.id == school_id).first()

    def add_school(self, record: Dict) -> School:
        return self._save(School(**record), "Could not create the school")

    def update_school(self, school: School, data: Dict) -> School:
        for key, value in data.items():
            setattr(school, key, value)
        return self._save(school, "Could not update the school")

    def delete_school(self, school: School) -> bool:
        # No cascade here: if students, subjects or monitors still point at the
        # school, an enforcing database refuses the delete.
        return self._remove(school, "The school still has dependent records")

    def count_schools(self, school_id: Optional[int] = None) -> int:
        return scope_to_school(self.db.query(School), School.id, school_id).count()

    # --- Monitor Methods ---

    def get_all_monitors(
        self,
        role: Optional[str] = None,
        school_id: Optional[int] = None,
        search: Optional[str] = None,
    ) -> List[Monitor]:
        query = (
            self.db.query(Monitor)
            .outerjoin(School, Monitor.school_id == School.id)
            .options(joinedload(Monitor.school))
        )
        if role:
            query = query.filter(Monitor.role == role)
        if school_id is not None:
            query = query.filter(Monitor.school_id == school_id)
        if search:
            query = query.filter(or_(
                Monitor.name.icontains(search, autoescape=True),
                Monitor.national_id.icontains(search, autoescape=True),
            ))
        # Accounts without a school (administrators) sort first.
        return query.order_by(School.name.is_not(None), School.name, Monitor.name).all()

    def get_monitor_by_id(self, monitor_id: int) -> Optional[Monitor]:
        return self.db.query(Monitor).filter(Monitor.id == monitor_id).first()

    def get_monitor_by_name(self, name: str) -> Optional[Monitor]:
        return self.db.query(Monitor).filter(Monitor.name == name).order_by(Monitor.id).first()

    def find_monitor_by_national_id(self, national_id: str, exclude_id: Optional[int] = None) -> Optional[Monitor]:
        query = self.db.query(Monitor).filter(Monitor.national_id == national_id)
        if exclude_id is not None:
            query = query.filter(Monitor.id != exclude_id)
        return query.first()

    def add_monitor(self, record: Dict) -> Monitor:
        return self._save(Monitor(**record), "A monitor with this national ID already exists")

    def update_monitor(self, monitor: Monitor, data: Dict) -> Monitor:
        for key, value in data.items():
            setattr(monitor, key, value)
        return self._save(monitor, "A monitor with this national ID already exists")

    def delete_monitor(self, monitor: Monitor) -> bool:
        return self._remove(monitor, "Could not delete the monitor")

    def count_monitors(self, school_id: Optional[int] = None) -> int:
        return scope_to_school(self.db.query(Monitor), Monitor.school_id, school_id).count()
