"""
Configuration helpers for the match tracker backend.

Routers/services should read a Settings instance instead of fetching
os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Tuple
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    persistence_enabled: bool
    host: str
    port: int
    cors_origins: Tuple[str, ...]


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _bool(value: str | None, default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    def _list(value: str | None, default: Tuple[str, ...]) -> Tuple[str, ...]:
        items = tuple(item.strip() for item in (value or "").split(",") if item.strip())
        return items or default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=Path(os.getenv("MATCHES_DATA_FILE") or "matches.json"),
        persistence_enabled=_bool(os.getenv("MATCHES_PERSISTENCE"), True),
        host=os.getenv("HOST", "0.0.0.0"),
        port=_int(os.getenv("PORT", "8080"), 8080),
        cors_origins=_list(os.getenv("CORS_ORIGINS"), ("*",)),
    )
