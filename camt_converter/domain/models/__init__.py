"""
Modelos de dominio del proyecto camt-converter.

Todos los modelos son dataclasses inmutables (frozen=True) que representan
los datos del negocio sin dependencias externas.

Uso:
    from camt_converter.domain.models import Movimiento, Contraparte, Monto
"""

from camt_converter.domain.models.contraparte import Contraparte
from camt_converter.domain.models.documento import Documento
from camt_converter.domain.models.formato_salida import OutputFormat
from camt_converter.domain.models.iban import Iban
from camt_converter.domain.models.monto import Monto
from camt_converter.domain.models.movimiento import Movimiento

__all__ = [
    "Contraparte",
    "Documento",
    "Iban",
    "Monto",
    "Movimiento",
    "OutputFormat",
]
