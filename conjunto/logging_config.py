# conjunto/logging_config.py
"""
Configuración de logging estructurado (JSON) para el cliente.
Cada línea es un objeto JSON, fácil de filtrar cuando se ejecuta desde cron o CI.
"""

import logging
import sys
from pythonjsonlogger import jsonlogger

from conjunto.config import settings


def setup_logging(level: str | None = None):
    """Configura logging estructurado en formato JSON"""

    # Handler hacia stderr para no mezclar con la salida del CLI
    logHandler = logging.StreamHandler(sys.stderr)

    formatter = jsonlogger.JsonFormatter(
        fmt='%(asctime)s %(name)s %(levelname)s %(message)s',
        datefmt='%Y-%m-%dT%H:%M:%S'
    )

    logHandler.setFormatter(formatter)

    # Configurar logger raíz
    logger = logging.getLogger()
    logger.addHandler(logHandler)
    logger.setLevel(level or settings.log_level)

    # Reducir verbosidad de librerías externas
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    return logger
