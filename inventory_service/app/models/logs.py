# app/models/logs.py
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, Enum
from shared.core.database import Base
from ..enum.inventory_enum import LogAction


class Log(Base):
    __tablename__ = "logs"

    id = Column(Integer, primary_key=True, autoincrement=True)
    # not a foreign key: logs outlive deleted materials
    material_code = Column(String(64), nullable=False, index=True)
    action = Column(Enum(LogAction, name="log_action"), nullable=False)
    quantity = Column(Integer, nullable=False)
    rack = Column(String(16), nullable=False)
    bin = Column(String(16), nullable=False)
    balance_qty = Column(Integer, nullable=False, default=0)
    entered_by = Column(String(128))
    issued_by = Column(String(128))
    user_id = Column(String(128))
    timestamp = Column(DateTime, nullable=False, default=datetime.now, index=True)
