"""
Configuration helpers for the GTTC records package.

Settings are read from environment variables once and cached, so that
repositories/services do not fetch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data.json"
STORAGE_BACKENDS = ("json", "sql", "memory")


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    storage_backend: str
    data_file: Path
    database_url: str
    students_slot: str
    expenses_slot: str
    backup_dir: Path


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _path(value: str | None, default: Path) -> Path:
        value = (value or "").strip()
        return Path(value) if value else default

    def _slot(value: str | None, default: str) -> str:
        return (value or "").strip() or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        storage_backend=(os.getenv("STORAGE_BACKEND") or "json").strip().lower(),
        data_file=_path(os.getenv("DATA_FILE"), DEFAULT_DATA_FILE),
        database_url=os.getenv("DATABASE_URL", ""),
        students_slot=_slot(os.getenv("STUDENTS_SLOT"), "gttc_students_db"),
        expenses_slot=_slot(os.getenv("EXPENSES_SLOT"), "gttc_expenses_db"),
        backup_dir=_path(os.getenv("BACKUP_DIR"), Path("backups")),
    )
