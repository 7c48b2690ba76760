# app/router/stats_router.py
from fastapi import APIRouter, Depends

from ..schemas.dashboard_schema import DashboardStatsOut
from ..services.inventory_service import InventoryService
from .dependencies import get_inventory_service

router = APIRouter(prefix="/api/stats", tags=["Dashboard"])


@router.get("", response_model=DashboardStatsOut)
def get_dashboard_stats(service: InventoryService = Depends(get_inventory_service)):
    return service.compute_dashboard_stats()
