from datetime import UTC, datetime
from pathlib import Path

from pydantic_settings import BaseSettings


def utcnow() -> datetime:
    """Return the current UTC time as a naive datetime.

    Naive datetimes stay compatible with SQLite, which doesn't store tz info.
    """
    return datetime.now(UTC).replace(tzinfo=None)


class Settings(BaseSettings):
    app_name: str = "Learning app"
    database_url: str = f"sqlite+aiosqlite:///{Path(__file__).resolve().parent.parent / 'data' / 'cardsets.db'}"
    host: str = "0.0.0.0"
    port: int = 4000
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    log_level: str = "INFO"
    debug: bool = False

    model_config = {"env_prefix": "CARDSETS_", "env_file": ".env"}


settings = Settings()
