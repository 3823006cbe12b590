# /app/routers/monitors_router.py

"""
Staff account management. Administrator-only; see `monitor_service`.
"""

from fastapi import APIRouter, Depends, status
from typing import List, Optional

from ..core.deps import get_current_principal
from ..models import monitor_model
from ..models.auth_model import Principal, Role
from ..models.common_model import DeleteResult, MutationResult
from ..services import monitor_service
from ..services.database_service import DatabaseService, get_db_service

router = APIRouter()


@router.get("", response_model=List[monitor_model.Monitor], summary="List Monitors")
def list_monitors(
    role: Optional[Role] = None,
    school_id: Optional[int] = None,
    search: Optional[str] = None,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return monitor_service.list_monitors(principal, db, role=role, school_id=school_id, search=search)


@router.post("", response_model=MutationResult[monitor_model.Monitor], status_code=status.HTTP_201_CREATED, summary="Create a Monitor")
def create_monitor(
    monitor_create: monitor_model.MonitorCreate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return monitor_service.create_monitor(principal, monitor_create, db)


@router.get("/{monitor_id}", response_model=monitor_model.Monitor, summary="Get a Monitor")
def get_monitor(
    monitor_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return monitor_service.get_monitor(principal, monitor_id, db)


@router.put("/{monitor_id}", response_model=MutationResult[monitor_model.Monitor], summary="Update a Monitor")
def update_monitor(
    monitor_id: int,
    monitor_update: monitor_model.MonitorUpdate,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return monitor_service.update_monitor(principal, monitor_id, monitor_update, db)


@router.delete("/{monitor_id}", response_model=DeleteResult, summary="Delete a Monitor")
def delete_monitor(
    monitor_id: int,
    principal: Principal = Depends(get_current_principal),
    db: DatabaseService = Depends(get_db_service)
):
    return monitor_service.delete_monitor(principal, monitor_id, db)
