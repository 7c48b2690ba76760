# app/router/logs_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends, Query

from shared.helpers.json_response_helper import success_response
from shared.utils.app_status_code import AppStatusCode
from ..schemas.logs_schemas import LogOut
from ..services.inventory_service import InventoryService
from .dependencies import get_inventory_service

router = APIRouter(prefix="/api/logs", tags=["logs"])


@router.get("", response_model=List[LogOut])
def read_logs(
    limit: Optional[int] = Query(None, ge=1, le=1000),
    service: InventoryService = Depends(get_inventory_service)
):
    return service.list_logs(limit)


@router.delete("")
def clear_logs(service: InventoryService = Depends(get_inventory_service)):
    service.clear_logs()
    return success_response(
        message="Logs cleared",
        status_code=AppStatusCode.DATA_DELETED_SUCCESSFULLY
    )
