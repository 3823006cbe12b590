# /app/routers/dashboard_router.py

from fastapi import APIRouter, Depends

from ..core.deps import get_current_principal
from ..models.auth_model import Principal
from ..models.dashboard_model import DashboardStats
from ..services import dashboard_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get(
    "/stats",
    response_model=DashboardStats,
    summary="Get Dashboard Statistics",
    description="Counts of students, schools and staff accounts within the caller's scope."
)
def get_dashboard_stats(
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return dashboard_service.get_stats(principal=principal, db=db)
