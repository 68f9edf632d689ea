# app/utils/logger.py
import logging
import sys

from app.core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logger(nombre: str = "maquinaria_backend") -> logging.Logger:
    log = logging.getLogger(nombre)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        log.addHandler(handler)
    log.setLevel(settings.log_level.upper())
    return log


logger = setup_logger()
