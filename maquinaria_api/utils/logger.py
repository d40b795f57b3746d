# maquinaria_api/utils/logger.py
import logging
import sys

from maquinaria_api.core.config import settings

LOGGER_NAME = "maquinaria_api"


def setup_logger(name: str = LOGGER_NAME) -> logging.Logger:
    """
    Configura el logger de la aplicación una sola vez.
    Los módulos importan `logger` desde aquí.
    """
    log = logging.getLogger(name)
    if not log.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s - %(message)s")
        )
        log.addHandler(handler)
    log.setLevel(settings.log_level.upper())
    log.propagate = False
    return log


logger = setup_logger()
