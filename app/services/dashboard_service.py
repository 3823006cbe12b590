# /app/services/dashboard_service.py

from ..models.auth_model import Principal
from ..models.dashboard_model import DashboardStats
from . import access_policy
from .database_service import DatabaseService


def get_stats(principal: Principal, db: DatabaseService) -> DashboardStats:
    """
    Counts the students and staff accounts within the principal's scope.
    Schools are only counted for administrators; a monitor gets 0.

    Args:
        principal: The authenticated caller.
        db: The request's DatabaseService.
    """
    scope = access_policy.school_scope(principal)
    return DashboardStats(
        total_students=db.count_students(scope_school_id=scope),
        total_schools=db.count_schools() if principal.is_admin else 0,
        total_monitors=db.count_monitors(school_id=scope),
    )
