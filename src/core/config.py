"""Application settings. Values can be overridden through environment variables (or a .env file)."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    database_url: str = os.getenv(
        "SOLITAIRE_DATABASE_URL", "sqlite:///solitaire_chess.db"
    )
    sql_echo: bool = _env_flag("SOLITAIRE_SQL_ECHO")
    log_level: str = os.getenv("SOLITAIRE_LOG_LEVEL", "INFO")


settings = Settings()
