from typing import List

from shared.core.schemas import CamelModel
from .logs_schemas import LogOut


class DashboardStatsOut(CamelModel):
    total_materials: int
    entered_today: int
    issued_today: int
    recent_logs: List[LogOut]
