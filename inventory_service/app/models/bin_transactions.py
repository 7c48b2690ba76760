# app/models/bin_transactions.py
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime
from shared.core.database import Base


class BinTransaction(Base):
    __tablename__ = "bin_transactions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    material_code = Column(String(64), nullable=False, index=True)
    bin_location = Column(String(40), nullable=False)
    received_qty = Column(Integer, nullable=False, default=0)
    issued_qty = Column(Integer, nullable=False, default=0)
    balance_qty = Column(Integer, nullable=False)
    person_name = Column(String(128))
    created_at = Column(DateTime, nullable=False, default=datetime.now)
