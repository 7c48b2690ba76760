import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..crud.ledger_store import LedgerStore

logger = logging.getLogger(__name__)

DEMO_MATERIALS = [
    {"code": "TRIM-001", "quantity": 100, "rack": "A1", "bin": "01"},
    {"code": "TRIM-002", "quantity": 50, "rack": "B2", "bin": "15"},
    {"code": "BUTTON-X", "quantity": 500, "rack": "C1", "bin": "84"},
]


def seed_materials(db: Session, now) -> int:
    """Insert the demo materials into an empty materials table. Returns rows added."""
    store = LedgerStore(db)
    try:
        # ✅ Check if inventory already has data
        if store.count_materials() > 0:
            logger.info("Materials already present, skipping seed")
            return 0

        for material in DEMO_MATERIALS:
            store.create_material(now=now, **material)
        store.commit()
        logger.info("Seeded %s demo materials", len(DEMO_MATERIALS))
        return len(DEMO_MATERIALS)

    except SQLAlchemyError:
        store.rollback()
        logger.exception("Error seeding demo materials")
        return 0
