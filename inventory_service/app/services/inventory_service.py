import logging
from contextlib import contextmanager
from datetime import datetime, time
from typing import Any, Callable, Dict, List, Optional, Tuple

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from shared.core.config import settings
from shared.core.exceptions import (
    InsufficientQuantity, LocationMismatch, NotFound, StoreUnavailable, ValidationError)
from ..crud.ledger_store import LedgerStore
from ..enum.inventory_enum import LogAction
from ..models.materials import Material
from ..models.logs import Log
from ..models.bin_transactions import BinTransaction
from .location_rules import bin_location, check_bin, check_rack, same_location
from .material_locks import MaterialLocks, material_locks
from .search_parser import parse_search_term

logger = logging.getLogger(__name__)


class InventoryService:
    """
    Entry / issue workflow over a LedgerStore.

    Every mutation writes the material change, its log and its bin
    transaction in one store transaction, committed once. Business rule
    failures are raised before anything is written.
    """

    def __init__(
        self,
        store: LedgerStore,
        locks: MaterialLocks = material_locks,
        now: Callable[[], datetime] = datetime.now,
    ):
        self.store = store
        self.locks = locks
        self.now = now

    @contextmanager
    def _store_guard(self, operation: str):
        try:
            yield
        except SQLAlchemyError as e:
            self.store.rollback()
            logger.exception("Store failure during %s", operation)
            raise StoreUnavailable() from e

    # ----------------- Materials -----------------

    def list_materials(self, search: Optional[str] = None) -> List[Material]:
        search_filter = parse_search_term(search)
        with self._store_guard("list materials"):
            return self.store.get_materials(search_filter)

    def get_material(self, code: str) -> Optional[Material]:
        with self._store_guard("get material"):
            return self.store.get_material_by_code(code)

    def delete_material(self, code: str) -> bool:
        with self.locks.hold(code), self._store_guard("delete material"):
            deleted = self.store.delete_material(code)
            self.store.commit()
        if deleted:
            logger.info("Material %s deleted", code)
        else:
            logger.info("Delete requested for unknown material %s", code)
        return deleted

    def reset_inventory(self) -> int:
        with self._store_guard("reset inventory"):
            count = self.store.reset_quantities(self.now())
            self.store.commit()
        logger.info("Inventory reset, %s materials set to zero", count)
        return count

    # ----------------- Entry / Issue -----------------

    def record_entry(
        self,
        code: str,
        quantity: int,
        rack: str,
        bin: str,
        actor: Optional[str] = None,
    ) -> Tuple[Material, bool]:
        """Receive stock. Returns the material and whether it was created."""
        code, rack, bin = self._check_action_input(code, quantity, rack, bin)

        with self.locks.hold(code), self._store_guard("entry"):
            try:
                material, created, balance = self._apply_entry(code, quantity, rack, bin, actor)
            except IntegrityError:
                # another process created the code first
                self.store.rollback()
                logger.warning("Concurrent first entry for %s, retrying as update", code)
                material, created, balance = self._apply_entry(code, quantity, rack, bin, actor)

        logger.info("Entry %s qty=%s at %s-%s by %s, balance=%s",
                    code, quantity, rack, bin, actor, balance)
        return material, created

    def _apply_entry(self, code, quantity, rack, bin, actor) -> Tuple[Material, bool, int]:
        now = self.now()
        existing = self.store.get_material_by_code(code, for_update=True)

        if existing:
            material = self.store.update_material(
                existing, now,
                quantity=existing.quantity + quantity,
                rack=rack,
                bin=bin
            )
        else:
            material = self.store.create_material(code, quantity, rack, bin, now)

        balance = self._append_records(LogAction.entry, material, quantity, rack, bin, actor, now)
        self.store.commit()
        return material, existing is None, balance

    def record_issue(
        self,
        code: str,
        quantity: int,
        rack: str,
        bin: str,
        actor: Optional[str] = None,
    ) -> Material:
        """Dispatch stock from the material's recorded rack/bin."""
        code, rack, bin = self._check_action_input(code, quantity, rack, bin)

        with self.locks.hold(code), self._store_guard("issue"):
            existing = self.store.get_material_by_code(code, for_update=True)
            if existing is None:
                self.store.rollback()
                raise NotFound()

            if not same_location(existing.rack, existing.bin, rack, bin):
                self.store.rollback()
                logger.warning("Issue of %s rejected: claimed %s-%s, stored at %s-%s",
                               code, rack, bin, existing.rack, existing.bin)
                raise LocationMismatch(existing.rack, existing.bin)

            if existing.quantity < quantity:
                available = existing.quantity
                self.store.rollback()
                logger.warning("Issue of %s rejected: requested %s, available %s",
                               code, quantity, available)
                raise InsufficientQuantity(available=available, requested=quantity)

            now = self.now()
            # rack/bin stay as recorded
            material = self.store.update_material(
                existing, now, quantity=existing.quantity - quantity)
            balance = self._append_records(LogAction.issue, material, quantity, rack, bin, actor, now)
            self.store.commit()

        logger.info("Issue %s qty=%s from %s-%s by %s, balance=%s",
                    code, quantity, rack, bin, actor, balance)
        return material

    def _append_records(self, action: LogAction, material: Material, quantity: int,
                        rack: str, bin: str, actor: Optional[str], now: datetime) -> int:
        balance = material.quantity
        self.store.create_log(
            material_code=material.code,
            action=action,
            quantity=quantity,
            rack=rack,
            bin=bin,
            balance_qty=balance,
            entered_by=actor if action == LogAction.entry else None,
            issued_by=actor if action == LogAction.issue else None,
            user_id=actor,
            timestamp=now
        )
        self.store.create_bin_transaction(
            material_code=material.code,
            bin_location=bin_location(rack, bin),
            received_qty=quantity if action == LogAction.entry else 0,
            issued_qty=quantity if action == LogAction.issue else 0,
            balance_qty=balance,
            person_name=actor,
            created_at=now
        )
        return balance

    def _check_action_input(self, code, quantity, rack, bin) -> Tuple[str, str, str]:
        if not isinstance(code, str) or not code.strip():
            raise ValidationError("Material code is required", field="materialCode")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise ValidationError("Quantity must be a positive integer", field="quantity")
        try:
            rack = check_rack(rack)
        except ValueError as e:
            raise ValidationError(str(e), field="rack") from e
        try:
            bin = check_bin(bin)
        except ValueError as e:
            raise ValidationError(str(e), field="bin") from e
        return code.strip(), rack, bin

    # ----------------- Logs / Transactions -----------------

    def list_logs(self, limit: Optional[int] = None) -> List[Log]:
        if limit is None:
            limit = settings.LOGS_DEFAULT_LIMIT
        if limit <= 0:
            raise ValidationError("Limit must be a positive integer", field="limit")
        with self._store_guard("list logs"):
            return self.store.get_logs(limit)

    def clear_logs(self) -> int:
        with self._store_guard("clear logs"):
            count = self.store.clear_logs()
            self.store.commit()
        logger.info("Cleared %s logs", count)
        return count

    def list_bin_transactions(self, code: str) -> List[BinTransaction]:
        with self._store_guard("list bin transactions"):
            return self.store.get_bin_transactions(code)

    # ----------------- Dashboard -----------------

    def compute_dashboard_stats(self) -> Dict[str, Any]:
        start_of_day = datetime.combine(self.now().date(), time.min)
        with self._store_guard("dashboard stats"):
            return {
                "total_materials": self.store.count_materials(),
                "entered_today": self.store.count_logs_since(LogAction.entry, start_of_day),
                "issued_today": self.store.count_logs_since(LogAction.issue, start_of_day),
                "recent_logs": self.store.get_logs(settings.RECENT_LOGS_LIMIT),
            }
