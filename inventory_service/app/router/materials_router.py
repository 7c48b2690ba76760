# app/router/materials_router.py
from typing import List, Optional
from fastapi import APIRouter, Depends

from shared.helpers.json_response_helper import error_response, success_response
from shared.utils.app_status_code import AppStatusCode
from ..schemas.materials_schemas import MaterialOut
from ..schemas.bin_transactions_schemas import BinTransactionOut
from ..services.inventory_service import InventoryService
from .dependencies import get_inventory_service

router = APIRouter(prefix="/api/materials", tags=["materials"])


@router.get("", response_model=List[MaterialOut])
def read_materials(
    search: Optional[str] = None,
    service: InventoryService = Depends(get_inventory_service)
):
    return service.list_materials(search)


@router.post("/reset")
def reset_inventory(service: InventoryService = Depends(get_inventory_service)):
    service.reset_inventory()
    return success_response(
        message="Inventory reset",
        status_code=AppStatusCode.DATA_UPDATED_SUCCESSFULLY
    )


@router.get("/{code}", response_model=MaterialOut)
def read_material(
    code: str,
    service: InventoryService = Depends(get_inventory_service)
):
    material = service.get_material(code)
    if not material:
        error_response(
            message="Material not found",
            status_code=AppStatusCode.RECORD_NOT_FOUND,
            http_status=404
        )
    return material


@router.delete("/{code}")
def delete_material(
    code: str,
    service: InventoryService = Depends(get_inventory_service)
):
    service.delete_material(code)
    return success_response(
        message="Material deleted",
        status_code=AppStatusCode.DATA_DELETED_SUCCESSFULLY
    )


@router.get("/{code}/transactions", response_model=List[BinTransactionOut])
def read_bin_transactions(
    code: str,
    service: InventoryService = Depends(get_inventory_service)
):
    return service.list_bin_transactions(code)
