# app/crud/ledger_store.py
from datetime import datetime
from typing import List, Optional
from sqlalchemy import String, func, or_
from sqlalchemy.orm import Session

from ..enum.inventory_enum import LogAction
from ..models.materials import Material
from ..models.logs import Log
from ..models.bin_transactions import BinTransaction
from ..services.search_parser import ExactRackBin, FreeText, RackPrefix, SearchFilter


def _lower(expr):
    return func.lower(expr, type_=String)


class LedgerStore:
    """
    Table access for materials, logs and bin transactions.

    Writes are only added and flushed here; the caller owns the
    transaction and decides when to commit or roll back.
    """

    def __init__(self, db: Session):
        self.db = db

    # ----------------- Transaction -----------------

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()

    # ----------------- Materials -----------------

    def get_materials(self, search: Optional[SearchFilter] = None) -> List[Material]:
        query = self.db.query(Material)

        if isinstance(search, ExactRackBin):
            query = query.filter(
                _lower(Material.rack) == search.rack,
                _lower(Material.bin) == search.bin
            )
        elif isinstance(search, RackPrefix):
            query = query.filter(
                _lower(Material.rack).startswith(search.prefix, autoescape=True)
            )
        elif isinstance(search, FreeText):
            text = search.text.lower()
            query = query.filter(or_(
                _lower(Material.code).contains(text, autoescape=True),
                _lower(Material.rack).contains(text, autoescape=True),
                _lower(Material.bin).contains(text, autoescape=True),
                _lower(Material.rack + "-" + Material.bin).contains(text, autoescape=True)
            ))

        return query.order_by(Material.last_updated.desc(), Material.code).all()

    def get_material_by_code(self, code: str, for_update: bool = False) -> Optional[Material]:
        query = self.db.query(Material).filter(Material.code == code)
        if for_update:
            # row lock on server databases, ignored by sqlite
            query = query.with_for_update()
        return query.first()

    def create_material(self, code: str, quantity: int, rack: str, bin: str, now: datetime) -> Material:
        db_material = Material(
            code=code,
            quantity=quantity,
            rack=rack,
            bin=bin,
            last_updated=now
        )
        self.db.add(db_material)
        self.db.flush()
        return db_material

    def update_material(self, db_material: Material, now: datetime, **changes) -> Material:
        # Update only the fields that are provided
        for k, v in changes.items():
            setattr(db_material, k, v)
        db_material.last_updated = now
        self.db.flush()
        return db_material

    def delete_material(self, code: str) -> bool:
        db_material = self.get_material_by_code(code, for_update=True)
        if not db_material:
            return False

        self.db.delete(db_material)
        self.db.flush()
        return True

    def reset_quantities(self, now: datetime) -> int:
        return self.db.query(Material).update(
            {"quantity": 0, "last_updated": now})

    def count_materials(self) -> int:
        return self.db.query(func.count(Material.code)).scalar() or 0

    # ----------------- Logs -----------------

    def create_log(self, **values) -> Log:
        db_log = Log(**values)
        self.db.add(db_log)
        self.db.flush()
        return db_log

    def get_logs(self, limit: int) -> List[Log]:
        return (
            self.db.query(Log)
            .order_by(Log.timestamp.desc(), Log.id.desc())
            .limit(limit)
            .all()
        )

    def clear_logs(self) -> int:
        return self.db.query(Log).delete()

    def count_logs_since(self, action: LogAction, since: datetime) -> int:
        return self.db.query(func.count(Log.id)).filter(
            Log.action == action,
            Log.timestamp >= since
        ).scalar() or 0

    # ----------------- Bin Transactions -----------------

    def create_bin_transaction(self, **values) -> BinTransaction:
        db_transaction = BinTransaction(**values)
        self.db.add(db_transaction)
        self.db.flush()
        return db_transaction

    def get_bin_transactions(self, material_code: str) -> List[BinTransaction]:
        return (
            self.db.query(BinTransaction)
            .filter(BinTransaction.material_code == material_code)
            .order_by(BinTransaction.created_at.desc(), BinTransaction.id.desc())
            .all()
        )
