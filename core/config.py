# core/config.py
import logging
from typing import Optional
import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


class Settings:
    def __init__(self):
        """Read settings from the environment.

        CATALOG_HOST / CATALOG_PORT: where the API listens
        CATALOG_SAMPLE_DATA: seed the sample rows when the app is created
        CATALOG_LOG_LEVEL: root log level name
        """
        self.host = os.getenv("CATALOG_HOST", "127.0.0.1")
        self.port = int(os.getenv("CATALOG_PORT", "3000"))
        self.sample_data = _env_flag("CATALOG_SAMPLE_DATA", "true")
        self.log_level = os.getenv("CATALOG_LOG_LEVEL", "INFO").upper()


settings = Settings()


def configure_logging(level: Optional[str] = None) -> None:
    logging.basicConfig(
        level=getattr(logging, level or settings.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
