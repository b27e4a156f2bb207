"""
Application settings and configuration.

Values come from the environment (a .env file is loaded by the CLI entry
point before settings are read).
"""
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

DEFAULT_DB_PATH = Path("var/prices.db")


@dataclass
class Settings:
    """
    Application settings.

    Attributes:
        db_path: Path to SQLite database file, or ":memory:"
        database_url: PostgreSQL URL; takes precedence over db_path
        log_level: Root logging level name
    """
    db_path: Union[Path, str] = DEFAULT_DB_PATH
    database_url: Optional[str] = None
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> 'Settings':
        """Build settings from PRICES_DB_PATH, DATABASE_URL and PRICES_LOG_LEVEL"""
        env_path = os.environ.get("PRICES_DB_PATH")
        if env_path == ":memory:":
            db_path: Union[Path, str] = ":memory:"
        elif env_path:
            db_path = Path(env_path)
        else:
            db_path = DEFAULT_DB_PATH

        return cls(
            db_path=db_path,
            database_url=os.environ.get("DATABASE_URL") or None,
            log_level=os.environ.get("PRICES_LOG_LEVEL", "INFO").upper(),
        )

