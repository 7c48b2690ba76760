from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base
from shared.core.config import INVENTORY_DATABASE_URL

Base = declarative_base()

POOL_SIZE = 2
MAX_OVERFLOW = 2


def make_engine(url: str):
    if url.startswith("sqlite"):
        # sqlite ignores pool sizing
        return create_engine(
            url, connect_args={"check_same_thread": False}
        )
    return create_engine(
        url,
        pool_pre_ping=True,
        pool_recycle=300,
        pool_size=POOL_SIZE,          # max idle connections
        max_overflow=MAX_OVERFLOW,      # max temporary extra connections
        pool_timeout=30       # wait time before failing
    )


# Inventory DB
inventory_engine = make_engine(INVENTORY_DATABASE_URL)
# rows keep their committed values after commit; responses report this call's snapshot
InventorySessionLocal = sessionmaker(
    autocommit=False, autoflush=False, expire_on_commit=False, bind=inventory_engine)

# Dependency


def get_inventory_db():
    db = InventorySessionLocal()
    try:
        yield db
    finally:
        db.close()
