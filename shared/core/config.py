import os
from typing import List, Optional
from pydantic_settings import BaseSettings
from dotenv import load_dotenv

# Always load .env from root
BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(__file__)))
load_dotenv(os.path.join(BASE_DIR, ".env"))


def split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [part.strip() for part in value.split(",") if part.strip()]


class Settings(BaseSettings):
    # Full URL wins over the DB_* parts
    DATABASE_URL: str | None = os.getenv("DATABASE_URL")

    DB_USER: str | None = os.getenv("DB_USER")
    DB_PASS: str | None = os.getenv("DB_PASS")
    DB_HOST: str | None = os.getenv("DB_HOST")
    DB_PORT: str | None = os.getenv("DB_PORT")
    DB_NAME: str | None = os.getenv("DB_NAME")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    LOGS_DEFAULT_LIMIT: int = int(os.getenv("LOGS_DEFAULT_LIMIT", 50))
    RECENT_LOGS_LIMIT: int = int(os.getenv("RECENT_LOGS_LIMIT", 10))

    SEED_ON_STARTUP: bool = os.getenv(
        "SEED_ON_STARTUP", "True").lower() == "true"

    # Optional location vocabulary, e.g. "A1,A2,B1" / "01,02,03"
    ALLOWED_RACKS: str | None = os.getenv("ALLOWED_RACKS")
    ALLOWED_BINS: str | None = os.getenv("ALLOWED_BINS")

    CORS_ORIGINS: str = os.getenv(
        "CORS_ORIGINS", "http://localhost:8080,http://127.0.0.1:8003")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def allowed_racks(self) -> List[str]:
        return [rack.upper() for rack in split_csv(self.ALLOWED_RACKS)]

    @property
    def allowed_bins(self) -> List[str]:
        return split_csv(self.ALLOWED_BINS)

    @property
    def cors_origins(self) -> List[str]:
        return split_csv(self.CORS_ORIGINS)


settings = Settings()


def build_database_url(cfg: Settings) -> str:
    if cfg.DATABASE_URL:
        return cfg.DATABASE_URL
    if cfg.DB_HOST and cfg.DB_NAME:
        return (
            f"postgresql+psycopg2://{cfg.DB_USER}:{cfg.DB_PASS}@{cfg.DB_HOST}:{cfg.DB_PORT or 5432}/{cfg.DB_NAME}"
        )
    return "sqlite:///./inventory.db"


INVENTORY_DATABASE_URL = build_database_url(settings)
