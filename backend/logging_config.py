import logging
import logging.config
from typing import Dict, Optional

from backend.config import settings


def build_logging_config(level: Optional[str] = None) -> Dict:
    level = (level or settings.log_level).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {
                "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
            }
        },
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "standard",
                "level": level,
            }
        },
        "root": {
            "handlers": ["console"],
            "level": level,
        },
        # httpx logs every request line at INFO
        "loggers": {
            "httpx": {"level": "WARNING"},
        },
    }


def configure_logging(level: Optional[str] = None) -> None:
    logging.config.dictConfig(build_logging_config(level))
