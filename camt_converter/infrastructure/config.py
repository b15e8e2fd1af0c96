"""
Configuración de una corrida del conversor.

Se construye una sola vez en el CLI (argumentos + variables de entorno) y
no cambia durante la corrida. Los valores por defecto de --locale y
--log-level se pueden fijar con variables de entorno, útil cuando el
conversor se ejecuta desde un script de contabilidad.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from camt_converter.domain.models.formato_salida import OutputFormat

LOCALE_ENV = "CAMT_CONVERTER_LOCALE"
DEFAULT_LOCALE = "de_DE"


def default_locale() -> str:
    return os.getenv(LOCALE_ENV) or DEFAULT_LOCALE


@dataclass(frozen=True)
class Configuracion:
    """Parámetros de una corrida."""

    archivos: tuple[Path, ...]
    """Archivos de entrada, en el orden en que se pasaron. Sin repetidos."""

    formato: OutputFormat = OutputFormat.CSV
    """Formato de salida."""

    locale: str = field(default_factory=default_locale)
    """Locale de la hoja de cálculo: 'de_DE', 'en_US'..."""

    log_level: str | None = None
    """Nivel de logging. None = variable de entorno o WARNING."""

    def __post_init__(self) -> None:
        if not self.archivos:
            raise ValueError("Se requiere al menos un archivo de entrada")
        if len(set(self.archivos)) != len(self.archivos):
            raise ValueError("Hay archivos de entrada repetidos")
