# app/models/materials.py
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime, CheckConstraint
from shared.core.database import Base


class Material(Base):
    __tablename__ = "materials"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_materials_quantity_non_negative"),
    )

    code = Column(String(64), primary_key=True)
    quantity = Column(Integer, nullable=False, default=0)
    rack = Column(String(16), nullable=False)
    bin = Column(String(16), nullable=False)
    last_updated = Column(DateTime, nullable=False, default=datetime.now)
