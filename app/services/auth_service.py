# /app/services/auth_service.py

from typing import Optional

from app.core import security
from app.core.app_logger import get_logger
from app.models.auth_model import Principal, Role
from .database_service import DatabaseService

logger = get_logger("auth_service")


def authenticate(db: DatabaseService, username: str, password: str) -> Optional[Principal]:
    """
    Finds the account by display name and checks the password against its
    stored hash. Returns the principal to put in the session, or None when
    either the name or the password does not match.
    """
    monitor = db.get_monitor_by_name(username)
    if monitor is None:
        logger.warning("Login failed: unknown user %r", username)
        return None
    if not security.verify_password(password, monitor.password_hash):
        logger.warning("Login failed: wrong password for monitor %s", monitor.id)
        return None

    if monitor.role != Role.ADMIN.value and monitor.school_id is None:
        # A monitor account without a school could never see anything.
        logger.error("Login refused: monitor %s has no school", monitor.id)
        return None

    logger.info("Monitor %s logged in", monitor.id)
    return Principal(id=monitor.id, name=monitor.name, role=monitor.role, school_id=monitor.school_id)
