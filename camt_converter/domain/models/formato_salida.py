"""
Modelo de dominio: Formato de salida.

Conjunto cerrado de formatos. Cada valor tiene exactamente un OutputWriter
registrado en el WriterRegistry; el CLI solo elige el valor.
"""

from enum import Enum


class OutputFormat(str, Enum):
    """Formatos de salida soportados."""

    CSV = "csv"
    XLSX = "xlsx"

    @classmethod
    def from_name(cls, name: str) -> "OutputFormat":
        """Convierte el valor de --format a OutputFormat.

        'ods' se acepta como alias de la hoja de cálculo: la salida es un
        libro xlsx, que LibreOffice abre sin conversión.

        Raises:
            ValueError: Si el nombre no corresponde a ningún formato.
        """
        normalized = name.strip().lower()
        if normalized == "ods":
            return cls.XLSX
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(f.value for f in cls)
            raise ValueError(f"Formato desconocido '{name}'. Formatos válidos: {valid}, ods")
