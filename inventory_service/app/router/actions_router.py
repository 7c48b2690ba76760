# app/router/actions_router.py
from fastapi import APIRouter, Depends, Response, status

from ..schemas.actions_schemas import EntryRequest, IssueRequest
from ..schemas.materials_schemas import MaterialOut
from ..services.inventory_service import InventoryService
from .dependencies import get_inventory_service

router = APIRouter(prefix="/api/actions", tags=["actions"])


@router.post("/entry", response_model=MaterialOut)
def record_entry(
    entry: EntryRequest,
    response: Response,
    service: InventoryService = Depends(get_inventory_service)
):
    material, created = service.record_entry(
        entry.material_code,
        entry.quantity,
        entry.rack,
        entry.bin,
        actor=entry.entered_by
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return material


@router.post("/issue", response_model=MaterialOut)
def record_issue(
    issue: IssueRequest,
    service: InventoryService = Depends(get_inventory_service)
):
    return service.record_issue(
        issue.material_code,
        issue.quantity,
        issue.rack,
        issue.bin,
        actor=issue.issued_by
    )
