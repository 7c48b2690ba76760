from fastapi import Depends
from sqlalchemy.orm import Session

from shared.core.database import get_inventory_db as get_db
from ..crud.ledger_store import LedgerStore
from ..services.inventory_service import InventoryService


def get_inventory_service(db: Session = Depends(get_db)) -> InventoryService:
    return InventoryService(LedgerStore(db))
