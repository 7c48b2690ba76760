from datetime import datetime
from typing import Optional

from shared.core.schemas import CamelModel


class BinTransactionOut(CamelModel):
    id: int
    material_code: str
    bin_location: str
    received_qty: int
    issued_qty: int
    balance_qty: int
    person_name: Optional[str] = None
    created_at: datetime
