from datetime import datetime

from shared.core.schemas import CamelModel


class MaterialOut(CamelModel):
    code: str
    quantity: int
    rack: str
    bin: str
    last_updated: datetime
