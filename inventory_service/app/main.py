# app/main.py
import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from shared.core.config import settings
from shared.core.database import Base, inventory_engine, InventorySessionLocal
from shared.helpers.exception_handler import setup_exception_handlers
from .models import materials, logs, bin_transactions  # noqa: F401  register tables
from .data.seed_materials import seed_materials
from .router import (
    actions_router,
    health_router,
    logs_router,
    materials_router,
    stats_router,
)

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s]: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Create all tables
    Base.metadata.create_all(bind=inventory_engine)

    if settings.SEED_ON_STARTUP:
        db = InventorySessionLocal()
        try:
            seed_materials(db, datetime.now())
        finally:
            db.close()

    logger.info("Inventory service started")
    yield


app = FastAPI(title="Inventory Service API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register exception handlers
setup_exception_handlers(app)

# Include routers
app.include_router(health_router.router)
app.include_router(materials_router.router)
app.include_router(actions_router.router)
app.include_router(logs_router.router)
app.include_router(stats_router.router)
