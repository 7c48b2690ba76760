from datetime import datetime
from typing import Optional

from shared.core.schemas import CamelModel
from ..enum.inventory_enum import LogAction


class LogOut(CamelModel):
    id: int
    material_code: str
    action: LogAction
    quantity: int
    rack: str
    bin: str
    balance_qty: int
    entered_by: Optional[str] = None
    issued_by: Optional[str] = None
    user_id: Optional[str] = None
    timestamp: datetime
