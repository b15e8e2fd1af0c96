"""
Conversión de fechas de los exportes camt.

Los campos BookgDt/Dt y ValDt/Dt usan el tipo ISODate de ISO 20022:
siempre "YYYY-MM-DD", sin hora ni zona horaria. Algunos bancos en cambio
mandan BookgDt/DtTm ("2023-01-05T10:15:00"); ese caso NO se soporta porque
la ruta del campo es otra, y el parser lo reporta como campo faltante.

Siempre devuelve un objeto `date` (no string) para poder ordenar los
movimientos sin parsear strings cada vez.
"""

import re
from datetime import date

_ISO_DATE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def parse_iso_date(date_text: str) -> date:
    """Parsea una fecha ISO "YYYY-MM-DD" a un objeto date.

    Args:
        date_text: Texto de la fecha tal como aparece en el XML.
                   Se toleran espacios alrededor.

    Returns:
        Objeto date de Python.

    Raises:
        ValueError: Si el texto está vacío, no tiene el formato ISO o
                    representa una fecha imposible (2023-02-30).

    Ejemplos:
        >>> parse_iso_date("2023-01-31")
        datetime.date(2023, 1, 31)
        >>> parse_iso_date(" 2023-01-31 ")
        datetime.date(2023, 1, 31)
    """
    text = date_text.strip()

    if not text:
        raise ValueError("El texto de fecha está vacío")

    m = _ISO_DATE.match(text)
    if not m:
        raise ValueError(f"Fecha '{text}' no tiene formato YYYY-MM-DD")

    year, month, day = (int(g) for g in m.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise ValueError(f"Fecha inválida '{text}': {e}") from e


def format_iso_date(value: date) -> str:
    """Formatea una fecha como "YYYY-MM-DD" (columnas Date/Valuta del CSV)."""
    return value.strftime("%Y-%m-%d")
