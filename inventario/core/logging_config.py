import logging
import sys
from typing import Optional

from inventario.core.config import settings

LOG_FORMAT = '%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s'

# Per-logger overrides on top of the root level
QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "redis": logging.WARNING,
}


def _level(name: str, default: int = logging.INFO) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else default


def configure_logging(level: Optional[str] = None):
    """Set up stdout logging for the API process and the batch scripts.

    Barcode collisions log at INFO and the timestamp fallback at WARNING from
    ``inventario.utils.barcode``; ``BARCODE_LOG_LEVEL`` raises or lowers that
    logger independently, e.g. WARNING to keep only fallbacks.
    """
    logging.basicConfig(
        level=_level(level or settings.LOG_LEVEL),
        format=LOG_FORMAT,
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger("uvicorn.error").propagate = True
    logging.getLogger("uvicorn.access").disabled = True

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
    logging.getLogger("inventario.utils.barcode").setLevel(_level(settings.BARCODE_LOG_LEVEL))

    return logging.getLogger("inventario")
