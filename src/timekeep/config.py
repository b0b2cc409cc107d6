"""Environment-based configuration and logging setup."""

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

DB_PATH_ENV = "TIMEKEEP_DB_PATH"
LOG_LEVEL_ENV = "TIMEKEEP_LOG_LEVEL"
LOCALE_ENV = "TIMEKEEP_LOCALE"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOCALE = "en"


@dataclass(frozen=True)
class Settings:
    """Application settings read from the environment.

    Options given on the command line take precedence over these values.
    """

    database_path: Optional[str]
    log_level: str
    locale: str

    @staticmethod
    def load() -> "Settings":
        return Settings(
            database_path=os.getenv(DB_PATH_ENV) or None,
            log_level=os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL),
            locale=os.getenv(LOCALE_ENV, DEFAULT_LOCALE),
        )


def setup_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Configure application logging to stderr.

    Unknown level names fall back to WARNING.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
