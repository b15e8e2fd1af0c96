"""
Configuración centralizada de logging para el paquete camt_converter.

- configure_logging(...): agrega UN StreamHandler (stderr) al logger raíz
  del paquete ("camt_converter"). Lo llama el CLI una sola vez al iniciar,
  antes de procesar cualquier archivo. Llamadas posteriores no hacen nada.
- get_logger(name): obtiene un logger; si aún no se configuró, agrega un
  NullHandler para no imprimir avisos de "No handler".

Los módulos del paquete nunca agregan handlers propios. stdout queda
reservado para la salida CSV/Excel.
"""

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "camt_converter"
LOG_LEVEL_ENV = "CAMT_CONVERTER_LOG_LEVEL"
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"

_CONFIGURED = False


def parse_level(level: int | str | None) -> int:
    """Convierte un nivel ('INFO', 'debug', '20', 20, None) a entero.

    Con None se usa la variable de entorno CAMT_CONVERTER_LOG_LEVEL y,
    si no existe, WARNING.
    """
    if isinstance(level, int):
        return level
    if isinstance(level, str):
        level = level.strip().upper()
        if level.isdigit():
            return int(level)
        numeric = getattr(logging, level, None)
        if isinstance(numeric, int):
            return numeric
        raise ValueError(f"Nivel de logging desconocido: '{level}'")
    env_val = os.getenv(LOG_LEVEL_ENV)
    if env_val:
        return parse_level(env_val)
    return logging.WARNING


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] = sys.stderr,
) -> None:
    """Configura el logger raíz del paquete exactamente una vez.

    Args:
        level: Nivel como int o nombre ('INFO'). Ver parse_level().
        fmt: Formato de los mensajes. Por defecto DEFAULT_FORMAT.
        stream: Stream del StreamHandler (stderr por defecto).
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    logger = logging.getLogger(_PKG_LOGGER_NAME)

    for h in list(logger.handlers):
        if isinstance(h, logging.NullHandler):
            logger.removeHandler(h)

    numeric_level = parse_level(level)
    handler = logging.StreamHandler(stream)
    handler.setLevel(numeric_level)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))

    logger.setLevel(numeric_level)
    logger.addHandler(handler)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Devuelve un logger por nombre ("camt_converter.<modulo>")."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
